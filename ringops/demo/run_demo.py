#!/usr/bin/env python3
"""RingOps demo against a running evaluation service.

Usage (with the service listening on RINGOPS_SERVICE_URL):
    python -m ringops.demo.run_demo

The script:
1. Checks the service is up.
2. Prints the four integer division variants for every sign combination.
3. Shows gcd / lcm.
4. Shows IEEE-754 zero-divisor behaviour of real division.
5. Dumps the tail of the audit log and verifies its chain.
"""

from __future__ import annotations

import logging
import sys

import httpx

from ringops.client import RingOpsClient
from ringops.config import SERVICE_URL, setup_logging

logger = logging.getLogger(__name__)

SIGN_CASES = [(7, 2), (-7, 2), (7, -2), (-7, -2), (6, -3)]
REAL_CASES = [(1.0, 0.0), (-1.0, 0.0), (0.0, 0.0), (1.0, 4.0)]


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main() -> None:
    setup_logging()
    url = SERVICE_URL
    with RingOpsClient(base_url=url) as ops:
        banner(f"1) Health check ({url})")
        try:
            print(f"   {ops.health()}")
        except httpx.HTTPError as exc:
            logger.error("service unreachable at %s: %s", url, exc)
            sys.exit(1)

        banner("2) Euclidean vs truncating division")
        print(f"   {'x':>4} {'y':>4} | {'div':>4} {'mod':>4} | {'quot':>4} {'rem':>4}")
        for x, y in SIGN_CASES:
            print(
                f"   {x:>4} {y:>4} | {ops.euclidean_div(x, y):>4} {ops.modulo(x, y):>4}"
                f" | {ops.quotient(x, y):>4} {ops.remainder(x, y):>4}"
            )
        print(f"   degree(-2147483648) = {ops.degree(-2147483648)}")

        banner("3) gcd / lcm")
        for a, b in [(12, 18), (-4, 6), (21, 0)]:
            print(f"   gcd({a}, {b}) = {ops.gcd(a, b)}   lcm({a}, {b}) = {ops.lcm(a, b)}")

        banner("4) Real division (IEEE-754)")
        for a, b in REAL_CASES:
            print(f"   {a} / {b} = {ops.real_divide(a, b)}")

        banner("5) Audit log")
        entries = ops.audit()
        print(f"   Entries: {len(entries)}")
        valid = ops.verify_audit()
        print(f"   Chain valid: {valid}")
        if not valid:
            logger.warning("audit log failed verification (%d records)", len(entries))
        for e in entries[-5:]:
            print(f"     [{e['kind']}.{e['op']}] {e['entry_hash'][:12]}… ← {e['prev_hash'][:12]}…")

    banner("DEMO COMPLETE")


if __name__ == "__main__":
    main()
