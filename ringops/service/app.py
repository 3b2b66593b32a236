"""RingOps evaluation service (FastAPI).

Endpoints:
- GET  /health        – liveness
- POST /int/{op}      – integer operation on {x, y}
- POST /real/{op}     – real operation on {a, b}
- GET  /audit         – evaluation records, oldest first
- GET  /audit/verify  – check hash links and replay every record

Non-finite real results are sent as the strings "Infinity", "-Infinity"
and "NaN" since they have no JSON number encoding.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ringops.config import AUDIT_ENABLED, INT32_MAX, INT32_MIN
from ringops.service.audit import AuditLog, Operand
from ringops.service.ops import OpSpec, Real, encode_real, evaluate, lookup

logger = logging.getLogger(__name__)

Number = Union[int, float]


# ------ request models ------


class IntOperands(BaseModel):
    x: int = Field(ge=INT32_MIN, le=INT32_MAX)
    y: Optional[int] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)


class RealOperands(BaseModel):
    a: float
    b: Optional[float] = None


class ServiceState:
    """Per-app mutable state."""

    def __init__(self, audit_enabled: bool = AUDIT_ENABLED, audit: AuditLog | None = None) -> None:
        self.audit_enabled = audit_enabled
        self.audit = audit if audit is not None else AuditLog()


def _lookup(kind: str, op: str) -> OpSpec:
    spec = lookup(kind, op)
    if spec is None:
        logger.info("rejected unknown %s operation %r", kind, op)
        raise HTTPException(404, f"Unknown {kind} operation: {op}")
    return spec


def _operands(op: str, names: Tuple[str, ...], values: Dict[str, Optional[Number]]) -> List[Number]:
    args: List[Number] = []
    for name in names:
        value = values[name]
        if value is None:
            logger.info("rejected %s: missing operand %r", op, name)
            raise HTTPException(422, f"Operation '{op}' requires operand '{name}'")
        args.append(value)
    return args


def create_app(state: ServiceState | None = None) -> FastAPI:
    """Factory that creates the evaluation app.

    If *state* is not provided a fresh ``ServiceState`` is created with
    auditing taken from ``RINGOPS_AUDIT``.
    """
    if state is None:
        state = ServiceState()

    app = FastAPI(title="RingOps")

    def _record(kind: str, op: str, operands: Dict[str, Operand], result: Real) -> None:
        logger.debug("%s.%s %s -> %s", kind, op, operands, result)
        if state.audit_enabled:
            state.audit.append_eval(kind, op, operands, result)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/int/{op}")
    async def eval_int(op: str, req: IntOperands):
        _, names = _lookup("int", op)
        args = _operands(op, names, {"x": req.x, "y": req.y})
        result = evaluate("int", op, args)
        _record("int", op, {"x": req.x, "y": req.y}, result)
        return {"op": op, "result": result}

    @app.post("/real/{op}")
    async def eval_real(op: str, req: RealOperands):
        _, names = _lookup("real", op)
        args = _operands(op, names, {"a": req.a, "b": req.b})
        result = evaluate("real", op, args)
        operands = {"a": encode_real(req.a), "b": None if req.b is None else encode_real(req.b)}
        _record("real", op, operands, result)
        return {"op": op, "result": result}

    @app.get("/audit")
    async def audit():
        return {"entries": state.audit.entries()}

    @app.get("/audit/verify")
    async def audit_verify():
        first_invalid = state.audit.first_invalid()
        return {
            "valid": first_invalid is None,
            "length": len(state.audit),
            "first_invalid": first_invalid,
        }

    return app


app = create_app()
