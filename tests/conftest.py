from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest
import requests

from content_studio.config import Config

_NO_BODY = object()


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload: Any = _NO_BODY, status_code: int = 200, reason: str = "OK"):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._payload is _NO_BODY:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def routed_session(routes: dict[str, Any]) -> Mock:
    """Session whose request() answers by URL; exceptions in routes are raised."""
    session = Mock(spec=requests.Session)

    def _request(method: str, url: str, **kwargs):
        answer = routes[url]
        if isinstance(answer, BaseException):
            raise answer
        return answer

    session.request.side_effect = _request
    return session


@pytest.fixture
def config() -> Config:
    return Config(service_url="https://svc.test", listing_url="https://svc.test/api", request_timeout=5)


@pytest.fixture
def long_text() -> str:
    return "Paragraf pertama tentang cuaca ekstrem di akhir tahun.\n" * 5
