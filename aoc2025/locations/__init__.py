"""Location registry and base class."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type


class Location:
    """Base puzzle adapter.

    Subclasses solve both variants of one day and keep the last answers in
    ``easy`` and ``hard`` so they can be reported afterwards.
    """
    name: str = "location"
    day: int = 0

    def __init__(self) -> None:
        self.easy: Optional[int] = None
        self.hard: Optional[int] = None

    def solve_easy(self, document: str) -> int:  # pragma: no cover - abstract
        raise NotImplementedError

    def solve_hard(self, document: str) -> int:  # pragma: no cover - abstract
        raise NotImplementedError

    def report(self) -> str:
        easy = "-" if self.easy is None else self.easy
        hard = "-" if self.hard is None else self.hard
        return f"{self.name}: easy={easy} hard={hard}"


LOCATION_REGISTRY: Dict[str, Type[Location]] = {}


def register_location(cls: Type[Location]) -> Type[Location]:
    LOCATION_REGISTRY[cls.name] = cls
    return cls


def calendar(names: Iterable[str] | None = None) -> List[Type[Location]]:
    """Locations in day order, or in the order given by ``names``."""
    if names is None:
        return sorted(LOCATION_REGISTRY.values(), key=lambda cls: cls.day)
    result = []
    for name in names:
        try:
            result.append(LOCATION_REGISTRY[name])
        except KeyError:
            raise KeyError(f"unknown location: {name!r}") from None
    return result


# registration happens on import
from . import gift_shop, secret_entrance  # noqa: E402,F401
