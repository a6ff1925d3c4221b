import pytest

from aoc2025.io.cli import main


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_prints_both_variants(tmp_path, capsys):
    document = _write(tmp_path, "day1.txt", "R10\nL20\nR95\n")
    assert main(["1", document]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "# Day 1"
    assert lines[2] == "**Easy**"
    assert lines[3] == "  0"
    assert lines[4].endswith(" μs")
    assert lines[6] == "**Hard**"
    assert lines[7] == "  1"
    assert lines[8].endswith(" μs")


def test_day_is_clamped(tmp_path, capsys):
    document = _write(tmp_path, "day2.txt", "11-22\n")
    assert main(["7", document]) == 0
    out = capsys.readouterr().out
    assert out.startswith("# Day 2\n")
    assert "  33\n" in out

    assert main(["0", _write(tmp_path, "day1.txt", "L50\n")]) == 0
    assert capsys.readouterr().out.startswith("# Day 1\n")


def test_config_reorders_calendar(tmp_path, capsys):
    config = _write(tmp_path, "aoc.yaml", "calendar: [gift shop, secret entrance]\n")
    document = _write(tmp_path, "day2.txt", "11-22")
    assert main(["1", document, "--config", config]) == 0
    assert "  33\n" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["1"], ["one", "input.txt"], ["-1", "input.txt"], ["1.5", "input.txt"]])
def test_bad_arguments_exit_with_one(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage:" in captured.err


def test_missing_document(tmp_path, capsys):
    assert main(["1", str(tmp_path / "missing.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_unknown_location_in_config(tmp_path, capsys):
    config = _write(tmp_path, "aoc.yaml", "calendar: [north pole]\n")
    document = _write(tmp_path, "day1.txt", "R1")
    assert main(["1", document, "--config", config]) == 1
    assert "north pole" in capsys.readouterr().err


def test_day_with_plus_sign(tmp_path, capsys):
    document = _write(tmp_path, "day2.txt", "11-22")
    assert main(["+2", document]) == 0
    assert capsys.readouterr().out.startswith("# Day 2\n")
