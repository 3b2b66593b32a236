"""Host arithmetic helpers: 32-bit truncation and non-raising IEEE division.

Python raises on ``x / 0`` and ``x % 0`` where IEEE-754 hardware yields an
infinity or NaN.  These helpers reproduce the IEEE behaviour so that the
integer operations in :mod:`ringops.arith.euclidean` never fault.
"""

from __future__ import annotations

import math
from typing import Union

from ringops.config import INT32_MAX, UINT32_MOD

Number = Union[int, float]


def to_int32(value: Number) -> int:
    """Truncate toward zero and wrap into the signed 32-bit range.

    NaN and infinities map to 0.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    n = int(value) % UINT32_MOD
    if n > INT32_MAX:
        n -= UINT32_MOD
    return n


def ieee_div(a: Number, b: Number) -> float:
    """IEEE-754 division ``a / b``; a zero divisor gives ±inf or NaN."""
    a = float(a)
    b = float(b)
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, math.copysign(1.0, a) * math.copysign(1.0, b))
    return a / b
