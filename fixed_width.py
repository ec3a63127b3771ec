"""
Two's complement integer types.

Python integers never overflow.  A FixedWidth describes a signed
machine integer of a given bit width so a calculator can reproduce what
that type would compute, wrap-around included.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixedWidth:
    """A signed two's complement integer type, e.g. ``FixedWidth(32)``."""

    bits: int

    def __post_init__(self):
        if self.bits < 1:
            raise ValueError(f"bits must be positive, got {self.bits}")

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def wrap(self, raw: int) -> int:
        """Truncate ``raw`` to ``bits`` bits and reinterpret it as signed."""
        value = raw & ((1 << self.bits) - 1)
        if value > self.max:
            value -= 1 << self.bits
        if value != raw:
            logger.debug("int%d overflow: %d -> %d", self.bits, raw, value)
        return value


INT8 = FixedWidth(8)
INT16 = FixedWidth(16)
INT32 = FixedWidth(32)    # Java / C int
INT64 = FixedWidth(64)
