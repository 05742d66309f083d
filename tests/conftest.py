"""
Pytest Configuration and Fixtures

This module provides:
- A mocked requests.Session that records every request
- A fixture for queueing canned HTTP responses
- Shared fixtures for all tests
- Test category markers
"""

import json
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Optional
from unittest.mock import Mock

import pytest
import requests

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.helpers import build_response
from tests.test_data import CONFIG, EXPECTED, PAYLOADS
from warehouse_client.api.client import Client


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def mock_session():
    """A requests.Session stand-in that answers 200 with an empty object."""
    session = Mock(spec=requests.Session)
    session.request.return_value = build_response(200, {})
    return session


@pytest.fixture
def client(mock_session):
    """A Client wired to the mocked session."""
    return Client(CONFIG["base_url"], CONFIG["api_key"], session=mock_session)


@pytest.fixture
def respond(mock_session):
    """
    Configure the next response of the mocked session.

    Usage: respond(200, {"article": {...}}) or respond(500, text="boom").
    """
    def _respond(status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        mock_session.request.return_value = build_response(status_code, payload, text)
        return mock_session

    return _respond


@pytest.fixture
def payloads():
    """Provide access to canned response bodies."""
    return PAYLOADS


@pytest.fixture
def expected_values():
    """Provide access to expected values."""
    return EXPECTED


@pytest.fixture
def local_server():
    """
    A real HTTP server on 127.0.0.1 that records the headers of every request.

    Answers 200 with a health body and a Set-Cookie header. Yields an object
    with .url and .requests (one header dict per request, in order).
    """
    received = []

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            received.append(dict(self.headers))
            body = json.dumps(PAYLOADS["health"]).encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.send_header("Set-Cookie", "sid=abc123; Path=/")
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    class Server:
        url = f"http://127.0.0.1:{server.server_address[1]}"
        requests = received

    yield Server
    server.shutdown()
    server.server_close()


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "transport: Request building, headers and status handling tests"
    )
    config.addinivalue_line(
        "markers", "error_propagation: Error class and context propagation tests"
    )
