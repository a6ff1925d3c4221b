from __future__ import annotations

from .model import Direction, Instruction

DIAL_MAX = 99
DIAL_MOD = DIAL_MAX + 1
DIAL_START = 50


class Dial:
    """Circular counter over ``0..DIAL_MAX``.

    Each rotation returns how many times the dial passed the zero mark on the
    way. Turning right, landing on zero counts. Turning left, landing on zero
    counts as well but leaving zero does not.
    """

    def __init__(self, tick: int = DIAL_START):
        self.tick = tick % DIAL_MOD

    def __repr__(self) -> str:
        return f"Dial(tick={self.tick})"

    def rotate_right(self, distance: int) -> int:
        dist_from_zero = self.tick + distance
        self.tick = dist_from_zero % DIAL_MOD
        return dist_from_zero // DIAL_MOD

    def rotate_left(self, distance: int) -> int:
        was_tick_zero = self.tick == 0
        dist_from_max = (DIAL_MOD - self.tick) + distance
        self.tick = (self.tick - distance) % DIAL_MOD
        zeros = dist_from_max // DIAL_MOD
        return zeros - 1 if was_tick_zero else zeros

    def rotate(self, instruction: Instruction) -> int:
        if instruction.direction is Direction.RIGHT:
            return self.rotate_right(instruction.distance)
        return self.rotate_left(instruction.distance)
