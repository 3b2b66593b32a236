"""Global configuration for RingOps."""

import logging
import os

# ---------- 32-bit signed integer range ----------
# Integer operands are assumed to fit; degree saturates at INT32_MAX.
INT32_MAX = 2147483647
INT32_MIN = -2147483648
UINT32_MOD = 2**32

# ---------- Evaluation service ----------
# Env var RINGOPS_SERVICE_URL points the client/demo at a running service.
SERVICE_URL = os.environ.get("RINGOPS_SERVICE_URL", "http://localhost:8000")
HTTP_TIMEOUT = float(os.environ.get("RINGOPS_HTTP_TIMEOUT", "15.0"))

# ---------- Audit log ----------
AUDIT_ENABLED = os.environ.get("RINGOPS_AUDIT", "1") != "0"
# Oldest records are evicted past this many; 0 keeps everything.
AUDIT_MAX_RECORDS = int(os.environ.get("RINGOPS_AUDIT_MAX", "10000"))

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("RINGOPS_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure basic logging for the service and scripts."""
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")
