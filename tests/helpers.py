"""
Helpers for faking the HTTP transport in tests.
"""

import json
from typing import Any, Optional
from unittest.mock import Mock

import requests


def build_response(
    status_code: int = 200,
    payload: Any = None,
    text: Optional[str] = None,
    encoding: Optional[str] = "utf-8",
) -> requests.Response:
    """
    Build a real requests.Response without touching the network.

    Args:
        status_code: HTTP status code.
        payload: Value to JSON-encode as the body (ignored when text is given).
        text: Raw body text, for malformed or non-JSON bodies.
        encoding: Declared charset; None mimics a response without one.
    """
    response = requests.Response()
    response.status_code = status_code
    body = text if text is not None else json.dumps(payload if payload is not None else {})
    response._content = body.encode("utf-8")
    response.encoding = encoding
    return response


def sent_request(session: Mock, index: int = -1) -> dict:
    """
    Return method, url, headers and body of a recorded session.request call.

    Headers include the Authorization header the call's auth object would add.
    """
    call = session.request.call_args_list[index]
    args, kwargs = call
    headers = dict(kwargs.get("headers") or {})
    auth = kwargs.get("auth")
    if auth is not None:
        prepared = auth(requests.Request(args[0], args[1]).prepare())
        headers["Authorization"] = prepared.headers["Authorization"]
    return {
        "method": args[0],
        "url": args[1],
        "headers": headers,
        "auth": auth,
        "data": kwargs.get("data"),
        "timeout": kwargs.get("timeout"),
    }
