"""Shared fixtures: a fake HTTP session so no test touches the network."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from models import AppConfig


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Records every POST and answers with a canned response or error."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeResponse(payload={"content": []})
        self.error = error
        self.calls: list[dict] = []

    def post(self, **kwargs: Any) -> FakeResponse:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def text_body(*texts: str) -> dict:
    return {"content": [{"type": "text", "text": t} for t in texts]}


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(api_key="sk-ant-test-key")


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession(FakeResponse(payload=text_body("A", "B")))


@pytest.fixture
def failing_session() -> FakeSession:
    return FakeSession(error=requests.ConnectionError("connection refused"))
