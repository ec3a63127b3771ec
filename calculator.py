"""
Operand calculator.

A Calculator holds two integer operands fixed at construction and
derives results from them on demand.  Every operation is pure: it reads
the frozen operands and returns a new value, so a single instance can be
shared freely, including across threads.

By default the arithmetic is Python's own arbitrary-precision integer
arithmetic.  Pass a FixedWidth (e.g. ``fixed_width.INT32``) to get the
wrap-around results of a machine integer instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from fixed_width import FixedWidth


@dataclass(frozen=True)
class Calculator:
    """Two immutable operands and the arithmetic derived from them."""

    a: int
    b: int
    width: FixedWidth | None = None

    def _result(self, raw: int) -> int:
        if self.width is None:
            return raw
        return self.width.wrap(raw)

    def add(self) -> int:
        return self._result(self.a + self.b)

    def subtract(self) -> int:
        return self._result(self.a - self.b)

    def multiply(self) -> int:
        return self._result(self.a * self.b)
