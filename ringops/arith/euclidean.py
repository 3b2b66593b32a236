"""Euclidean-ring arithmetic over 32-bit integers and IEEE-754 doubles.

Integer operands are Python ints assumed to lie in the signed 32-bit range.
Two division/remainder pairs are provided:

- ``euclidean_div`` / ``modulo``   -- Euclidean: ``0 <= modulo(x, y) < |y|``
- ``quotient``      / ``remainder`` -- truncating: rounds toward zero,
  remainder takes the sign of the dividend

Both pairs satisfy ``x == div(x, y) * y + mod(x, y)`` for ``y != 0``.

A zero divisor never raises.  The integer result for ``y == 0`` is
unspecified (currently the truncated IEEE intermediate, i.e. 0); callers
must not rely on it.
"""

from __future__ import annotations

from ringops.arith.int32 import ieee_div, to_int32
from ringops.config import INT32_MAX


def degree(x: int) -> int:
    """Euclidean size of *x*, saturating at ``INT32_MAX``."""
    return min(abs(x), INT32_MAX)


def euclidean_div(x: int, y: int) -> int:
    """Euclidean division: ``floor(x / y)`` for ``y > 0``, else ``-floor(x / -y)``."""
    if y == 0:
        return to_int32(ieee_div(x, y))
    if y > 0:
        return x // y
    return -(x // -y)


def quotient(x: int, y: int) -> int:
    """Truncating division (round toward zero), wrapped to 32 bits."""
    if y == 0:
        return to_int32(ieee_div(x, y))
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        q = -q
    return to_int32(q)


def modulo(x: int, y: int) -> int:
    """Euclidean remainder in ``[0, |y|)``."""
    yy = abs(y)
    if yy == 0:
        return 0
    # truncating remainder first, then shift into range
    r = abs(x) % yy
    if x < 0:
        r = -r
    return (r + yy) % yy


def remainder(x: int, y: int) -> int:
    """Truncating remainder; zero or the same sign as *x*."""
    if y == 0:
        return 0
    r = abs(x) % abs(y)
    return -r if x < 0 else r


def real_divide(a: float, b: float) -> float:
    """Plain IEEE-754 division.  ``1/0 == inf``, ``0/0`` is NaN."""
    return ieee_div(a, b)


# ---------------------------------------------------------------------------
# Derived operations
# ---------------------------------------------------------------------------


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm over ``modulo``.

    The sign is not normalised: ``gcd(a, 0) == a``.
    """
    while b != 0:
        a, b = b, modulo(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 if either operand is 0."""
    if a == 0 or b == 0:
        return 0
    return euclidean_div(a * b, gcd(a, b))


def real_degree(a: float) -> int:
    """Every non-zero real has Euclidean degree 1."""
    return 1


def real_modulo(a: float, b: float) -> float:
    """Real division is exact, so the Euclidean remainder is always zero."""
    return 0.0
