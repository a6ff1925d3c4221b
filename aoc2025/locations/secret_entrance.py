from __future__ import annotations

import logging

from . import Location, register_location
from ..core.dial import Dial
from ..io.parser import parse_instructions

log = logging.getLogger(__name__)


@register_location
class SecretEntrance(Location):
    """Dial simulator: count how often the dial reaches zero."""
    name = "secret entrance"
    day = 1

    def solve_easy(self, document: str) -> int:
        dial = Dial()
        zeros = 0
        for instruction in parse_instructions(document):
            dial.rotate(instruction)
            if dial.tick == 0:
                zeros += 1
        log.debug("dial stopped at %d, landed on zero %d times", dial.tick, zeros)
        self.easy = zeros
        return zeros

    def solve_hard(self, document: str) -> int:
        dial = Dial()
        zeros = 0
        for instruction in parse_instructions(document):
            zeros += dial.rotate(instruction)
        log.debug("dial stopped at %d, passed zero %d times", dial.tick, zeros)
        self.hard = zeros
        return zeros
