"""Shared fixtures: a fake HTTP session and canned responses."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from college_rag.api.client import ApiClient

CORE_URL = "http://core.test"


def build_response(
    status: int = 200, payload: Any = None, body: bytes | None = None
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = CORE_URL
    if body is None:
        body = json.dumps(payload).encode("utf-8") if payload is not None else b""
    response._content = body
    response._content_consumed = True
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def core_client(session: MagicMock) -> ApiClient:
    return ApiClient(CORE_URL, access_token="token-123", session=session)
