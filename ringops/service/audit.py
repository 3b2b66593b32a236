"""Replayable log of service evaluations.

Every evaluation is stored as an ``EvalRecord`` (kind, op, operands,
result) sealed with a SHA-256 link to the record before it.  Because the
operations are pure, ``verify_chain`` can re-run each one and compare
against the stored result, so a forged result is caught even when its
hashes were recomputed.

Records live in memory.  The log keeps at most ``max_records`` of them
(``RINGOPS_AUDIT_MAX``, 0 for unbounded); evicted records leave their
hash behind as the anchor the retained chain starts from.
"""

from __future__ import annotations

import hashlib
import json
import time
from collections import deque
from dataclasses import asdict, dataclass, replace
from typing import Any, Deque, Dict, List, Optional, Union

from ringops.config import AUDIT_MAX_RECORDS
from ringops.service.ops import Real, evaluate, lookup

GENESIS_HASH = "0" * 64

Operand = Union[int, float, str, None]


@dataclass(frozen=True)
class EvalRecord:
    seq: int
    timestamp: float
    kind: str
    op: str
    operands: Dict[str, Operand]
    result: Real
    prev_hash: str
    entry_hash: str = ""

    def compute_hash(self) -> str:
        body = asdict(self)
        del body["entry_hash"]
        payload = json.dumps(body, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode()).hexdigest()

    def replay(self) -> Optional[Real]:
        """Recompute the result from the stored operands (None if op unknown)."""
        spec = lookup(self.kind, self.op)
        if spec is None:
            return None
        _, names = spec
        args = [self.operands.get(n) for n in names]
        if any(a is None for a in args):
            return None
        if self.kind == "real":
            args = [float(a) for a in args]
        return evaluate(self.kind, self.op, args)


class AuditLog:
    """Append-only, hash-linked, replayable evaluation log."""

    def __init__(self, max_records: int = AUDIT_MAX_RECORDS) -> None:
        self._records: Deque[EvalRecord] = deque()
        self._max_records = max_records
        self._anchor = GENESIS_HASH
        self._prev_hash = GENESIS_HASH
        self._seq = 0

    def __len__(self) -> int:
        return len(self._records)

    def append_eval(self, kind: str, op: str, operands: Dict[str, Operand], result: Real) -> EvalRecord:
        record = EvalRecord(
            seq=self._seq,
            timestamp=time.time(),
            kind=kind,
            op=op,
            operands=dict(operands),
            result=result,
            prev_hash=self._prev_hash,
        )
        record = replace(record, entry_hash=record.compute_hash())
        if self._max_records and len(self._records) >= self._max_records:
            self._anchor = self._records.popleft().entry_hash
        self._records.append(record)
        self._prev_hash = record.entry_hash
        self._seq += 1
        return record

    def entries(self) -> List[Dict[str, Any]]:
        return [asdict(r) for r in self._records]

    def first_invalid(self) -> Optional[int]:
        """Sequence number of the first broken or misreporting record."""
        prev = self._anchor
        for r in self._records:
            if r.prev_hash != prev or r.entry_hash != r.compute_hash():
                return r.seq
            if r.replay() != r.result:
                return r.seq
            prev = r.entry_hash
        return None

    def verify_chain(self) -> bool:
        """Check every hash link and re-run every recorded evaluation."""
        return self.first_invalid() is None
