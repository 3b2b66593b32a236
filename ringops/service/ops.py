"""Operation tables shared by the service routes and audit replay.

Each table maps the URL op name to ``(function, operand names)``; the
number of names is the arity.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from ringops.arith import euclidean

OpSpec = Tuple[Callable[..., Any], Tuple[str, ...]]
Real = Union[int, float, str]

INT_OPS: Dict[str, OpSpec] = {
    "degree": (euclidean.degree, ("x",)),
    "div": (euclidean.euclidean_div, ("x", "y")),
    "quot": (euclidean.quotient, ("x", "y")),
    "mod": (euclidean.modulo, ("x", "y")),
    "rem": (euclidean.remainder, ("x", "y")),
    "gcd": (euclidean.gcd, ("x", "y")),
    "lcm": (euclidean.lcm, ("x", "y")),
}

REAL_OPS: Dict[str, OpSpec] = {
    "degree": (euclidean.real_degree, ("a",)),
    "div": (euclidean.real_divide, ("a", "b")),
    "mod": (euclidean.real_modulo, ("a", "b")),
}

TABLES: Dict[str, Dict[str, OpSpec]] = {"int": INT_OPS, "real": REAL_OPS}


def encode_real(value: Union[int, float]) -> Real:
    """Map non-finite floats to their JSON-safe string names."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    return value


def lookup(kind: str, op: str) -> Optional[OpSpec]:
    return TABLES.get(kind, {}).get(op)


def evaluate(kind: str, op: str, args: Sequence[Union[int, float]]) -> Real:
    """Run *op* on *args*; real results come back encoded."""
    spec = lookup(kind, op)
    if spec is None:
        raise KeyError(f"Unknown {kind} operation: {op}")
    fn, _ = spec
    result = fn(*args)
    return encode_real(result) if kind == "real" else result
