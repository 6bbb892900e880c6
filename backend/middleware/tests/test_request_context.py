"""
Tests for RequestContextMiddleware
"""
import logging
import uuid

from fastapi.testclient import TestClient

from backend.main import create_app
from backend.middleware.request_context import RUN_ID_HEADER


def test_run_id_header_is_uuid():
    client = TestClient(create_app())

    res = client.get("/health")

    uuid.UUID(res.headers[RUN_ID_HEADER])


def test_run_id_differs_per_request():
    client = TestClient(create_app())

    first = client.get("/health").headers[RUN_ID_HEADER]
    second = client.get("/health").headers[RUN_ID_HEADER]

    assert first != second


def test_request_is_logged(caplog):
    client = TestClient(create_app())

    with caplog.at_level(logging.INFO, logger="reviewbot"):
        res = client.get("/health")

    run_id = res.headers[RUN_ID_HEADER]
    lines = [r.getMessage() for r in caplog.records if r.getMessage().startswith("REQ ")]
    assert any(run_id in line and "/health" in line and "status=200" in line for line in lines)


def test_incoming_run_id_is_kept():
    client = TestClient(create_app())

    res = client.get("/health", headers={RUN_ID_HEADER: "caller-123"})

    assert res.headers[RUN_ID_HEADER] == "caller-123"


def test_malformed_incoming_run_id_is_replaced():
    client = TestClient(create_app())

    res = client.get("/health", headers={RUN_ID_HEADER: "bad id with spaces"})

    uuid.UUID(res.headers[RUN_ID_HEADER])
