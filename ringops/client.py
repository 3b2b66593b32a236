"""HTTP client for the RingOps evaluation service."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import httpx

from ringops.config import HTTP_TIMEOUT, SERVICE_URL

_NON_FINITE = {"Infinity", "-Infinity", "NaN"}


def decode_real(value: Union[int, float, str]) -> float:
    """Inverse of the service's non-finite string encoding."""
    if isinstance(value, str):
        if value not in _NON_FINITE:
            raise ValueError(f"Unexpected real encoding: {value!r}")
        return float(value)
    return float(value)


class RingOpsClient:
    """Thin wrapper over ``httpx.Client``.

    Pass *http* to reuse an existing client (e.g. a ``TestClient``);
    otherwise one is created for *base_url*.
    """

    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None) -> None:
        self._owns_http = http is None
        if http is None:
            http = httpx.Client(base_url=base_url or SERVICE_URL, timeout=HTTP_TIMEOUT)
        self._http = http

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "RingOpsClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ---- transport ----

    def _get(self, path: str) -> Dict[str, Any]:
        resp = self._http.get(path)
        resp.raise_for_status()
        return resp.json()

    def _post(self, path: str, body: Dict[str, Any]) -> Any:
        resp = self._http.post(path, json=body)
        resp.raise_for_status()
        return resp.json()["result"]

    def _int(self, op: str, x: int, y: Optional[int] = None) -> int:
        return int(self._post(f"/int/{op}", {"x": x, "y": y}))

    def _real(self, op: str, a: float, b: Optional[float] = None) -> Any:
        return self._post(f"/real/{op}", {"a": a, "b": b})

    # ---- integer operations ----

    def degree(self, x: int) -> int:
        return self._int("degree", x)

    def euclidean_div(self, x: int, y: int) -> int:
        return self._int("div", x, y)

    def quotient(self, x: int, y: int) -> int:
        return self._int("quot", x, y)

    def modulo(self, x: int, y: int) -> int:
        return self._int("mod", x, y)

    def remainder(self, x: int, y: int) -> int:
        return self._int("rem", x, y)

    def gcd(self, a: int, b: int) -> int:
        return self._int("gcd", a, b)

    def lcm(self, a: int, b: int) -> int:
        return self._int("lcm", a, b)

    # ---- real operations ----

    def real_divide(self, a: float, b: float) -> float:
        return decode_real(self._real("div", a, b))

    def real_degree(self, a: float) -> int:
        return int(self._real("degree", a))

    def real_modulo(self, a: float, b: float) -> float:
        return decode_real(self._real("mod", a, b))

    # ---- service ----

    def health(self) -> Dict[str, Any]:
        return self._get("/health")

    def audit(self) -> List[Dict[str, Any]]:
        return self._get("/audit")["entries"]

    def verify_audit(self) -> bool:
        return bool(self._get("/audit/verify")["valid"])
