from __future__ import annotations

import logging
from typing import Callable

from . import Location, register_location
from ..core.digits import halves_match, is_repeated_pattern
from ..core.model import ProductId
from ..io.parser import parse_ranges

log = logging.getLogger(__name__)


def invalid_id_sum(document: str, is_invalid: Callable[[ProductId], bool]) -> int:
    total = 0
    for product_range in parse_ranges(document):
        for product_id in product_range:
            if is_invalid(product_id):
                total += product_id
    return total


@register_location
class GiftShop(Location):
    """Repeated pattern scanner: sum product IDs made of a repeated block."""
    name = "gift shop"
    day = 2

    def solve_easy(self, document: str) -> int:
        self.easy = invalid_id_sum(document, halves_match)
        log.debug("sum of doubled IDs: %d", self.easy)
        return self.easy

    def solve_hard(self, document: str) -> int:
        self.hard = invalid_id_sum(document, is_repeated_pattern)
        log.debug("sum of repeated-pattern IDs: %d", self.hard)
        return self.hard
