from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

import yaml

from ..core.model import Direction, Instruction, ProductRange

log = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")


def parse_instruction(line: str) -> Optional[Instruction]:
    """Parse ``R<digits>`` / ``L<digits>``; anything else gives ``None``."""
    if not line:
        return None
    try:
        direction = Direction(line[0])
    except ValueError:
        return None
    rest = line[1:]
    if not _DIGITS.fullmatch(rest):
        return None
    return Instruction(direction, int(rest))


def parse_instructions(document: str) -> Iterator[Instruction]:
    for lineno, line in enumerate(document.split("\n"), 1):
        instruction = parse_instruction(line)
        if instruction is None:
            if line:
                log.debug("skipping line %d: %r", lineno, line)
            continue
        yield instruction


def parse_range(token: str) -> Optional[ProductRange]:
    """Parse ``start-end`` with unsigned endpoints (a leading ``+`` is allowed);
    fields past the second are ignored."""
    fields = token.split("-")
    if len(fields) < 2:
        return None
    start, end = fields[0], fields[1]
    if not (_UNSIGNED.fullmatch(start) and _UNSIGNED.fullmatch(end)):
        return None
    return ProductRange(int(start), int(end))


def parse_ranges(document: str) -> Iterator[ProductRange]:
    for token in document.strip().split(","):
        product_range = parse_range(token)
        if product_range is None:
            if token:
                log.debug("skipping range token %r", token)
            continue
        yield product_range


def read_document(path: str | Path) -> str:
    """Read a puzzle document as UTF-8 text."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


@dataclass
class Config:
    calendar: Optional[List[str]] = None


def load_config(path: str | Path) -> Config:
    """Load a YAML run configuration."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    calendar = data.get("calendar")
    if calendar is not None:
        if not isinstance(calendar, list) or not calendar:
            raise ValueError(f"{path}: 'calendar' must be a non-empty list of location names")
        calendar = [str(name).lower() for name in calendar]

    return Config(calendar=calendar)
