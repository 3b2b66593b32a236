"""Tests for the demo script, wired to an in-process service."""

from __future__ import annotations

import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from ringops.client import RingOpsClient
from ringops.demo import run_demo
from ringops.service.app import ServiceState, create_app


def test_demo_runs_against_service(monkeypatch, capsys):
    http = TestClient(create_app(ServiceState(audit_enabled=True)))
    monkeypatch.setattr(run_demo, "RingOpsClient", lambda base_url=None: RingOpsClient(http=http))

    run_demo.main()

    out = capsys.readouterr().out
    assert "  -7    2 |   -4    1 |   -3   -1" in out
    assert "degree(-2147483648) = 2147483647" in out
    assert "1.0 / 0.0 = inf" in out
    assert "Chain valid: True" in out
    assert "DEMO COMPLETE" in out


def test_demo_logs_unreachable_service(monkeypatch, caplog):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(base_url="http://ringops.invalid", transport=httpx.MockTransport(refuse))
    monkeypatch.setattr(run_demo, "RingOpsClient", lambda base_url=None: RingOpsClient(http=http))

    with caplog.at_level(logging.ERROR, logger="ringops.demo.run_demo"):
        with pytest.raises(SystemExit):
            run_demo.main()
    assert "service unreachable" in caplog.text
