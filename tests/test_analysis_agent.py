"""Tests for agents.analysis_agent — the outbound request to the completion service."""

from __future__ import annotations

import json

import pytest
import requests

from agents.analysis_agent import build_request, join_segments, request_analysis, text_segments
from agents.strings import analysis_template, render_prompt
from models import AnalysisFailed, FailureKind

from conftest import FakeResponse, FakeSession, text_body


# ── build_request ───────────────────────────────────────────────────


class TestBuildRequest:
    def test_posts_to_messages_endpoint(self, config) -> None:
        req = build_request("Sugar, Salt", config)
        assert req["url"] == "https://api.anthropic.com/v1/messages"

    def test_headers(self, config) -> None:
        headers = build_request("Sugar", config)["headers"]
        assert headers == {
            "Content-Type": "application/json",
            "x-api-key": "sk-ant-test-key",
            "anthropic-version": "2023-06-01",
        }

    def test_body_shape(self, config) -> None:
        body = build_request("Sugar", config)["json"]
        assert body["model"] == "claude-sonnet-4-20250514"
        assert body["max_tokens"] == 1000
        assert len(body["messages"]) == 1
        assert body["messages"][0]["role"] == "user"

    def test_text_embedded_verbatim(self, config) -> None:
        raw = 'Water, "Natural" Flavors {x}\n  Red 40 <b>\\'
        content = build_request(raw, config)["json"]["messages"][0]["content"]
        assert content == analysis_template.replace("{ingredients}", raw)
        assert raw in content

    def test_body_is_json_serializable(self, config) -> None:
        body = build_request("Milk, Sugar ✓", config)["json"]
        assert json.loads(json.dumps(body)) == body

    def test_no_timeout_by_default(self, config) -> None:
        assert build_request("Sugar", config)["timeout"] is None


class TestRenderPrompt:
    def test_template_surrounds_text(self) -> None:
        prompt = render_prompt("Oats, Honey")
        assert prompt.startswith("You are an AI health co-pilot")
        assert "Analyze these ingredients:\nOats, Honey\n\nProvide a clear" in prompt

    def test_braces_are_not_format_fields(self) -> None:
        assert "{0} {name}" in render_prompt("{0} {name}")


# ── request_analysis ────────────────────────────────────────────────


class TestRequestAnalysis:
    def test_returns_body_and_sends_once(self, config, fake_session) -> None:
        body = request_analysis("Sugar", config, session=fake_session)
        assert body == text_body("A", "B")
        assert len(fake_session.calls) == 1
        assert fake_session.calls[0]["json"]["messages"][0]["content"] == render_prompt("Sugar")

    def test_transport_error(self, config, failing_session) -> None:
        with pytest.raises(AnalysisFailed) as exc:
            request_analysis("Sugar", config, session=failing_session)
        assert exc.value.failure.kind == FailureKind.TRANSPORT
        assert "connection refused" in exc.value.failure.detail

    def test_timeout_is_transport_error(self, config) -> None:
        session = FakeSession(error=requests.Timeout("read timed out"))
        with pytest.raises(AnalysisFailed) as exc:
            request_analysis("Sugar", config, session=session)
        assert exc.value.failure.kind == FailureKind.TRANSPORT

    def test_header_encoding_error_is_transport(self, config) -> None:
        error = UnicodeEncodeError("latin-1", "sk-ant-’key", 7, 8, "ordinal not in range(256)")
        with pytest.raises(AnalysisFailed) as exc:
            request_analysis("Sugar", config, session=FakeSession(error=error))
        assert exc.value.failure.kind == FailureKind.TRANSPORT
        assert "UnicodeEncodeError" in exc.value.failure.detail

    def test_invalid_header_value_is_transport(self, config) -> None:
        session = FakeSession(error=ValueError("Invalid header value"))
        with pytest.raises(AnalysisFailed) as exc:
            request_analysis("Sugar", config, session=session)
        assert exc.value.failure.kind == FailureKind.TRANSPORT

    @pytest.mark.parametrize("status", [400, 401, 429, 500, 529])
    def test_non_success_status(self, config, status) -> None:
        session = FakeSession(FakeResponse(status_code=status, text='{"type":"error"}'))
        with pytest.raises(AnalysisFailed) as exc:
            request_analysis("Sugar", config, session=session)
        assert exc.value.failure.kind == FailureKind.SERVICE_STATUS
        assert exc.value.failure.status_code == status

    def test_body_not_json(self, config) -> None:
        session = FakeSession(FakeResponse(payload=ValueError("Expecting value")))
        with pytest.raises(AnalysisFailed) as exc:
            request_analysis("Sugar", config, session=session)
        assert exc.value.failure.kind == FailureKind.MALFORMED_RESPONSE

    def test_body_without_content(self, config) -> None:
        session = FakeSession(FakeResponse(payload={"id": "msg_1"}))
        with pytest.raises(AnalysisFailed) as exc:
            request_analysis("Sugar", config, session=session)
        assert exc.value.failure.kind == FailureKind.MALFORMED_RESPONSE


# ── segments ────────────────────────────────────────────────────────


class TestSegments:
    def test_joined_with_blank_line(self) -> None:
        assert join_segments(text_body("A", "B")) == "A\n\nB"

    def test_empty_content(self) -> None:
        assert join_segments({"content": []}) == ""

    def test_non_text_segments_dropped(self) -> None:
        body = {"content": [
            {"type": "text", "text": "A"},
            {"type": "tool_use", "id": "t1", "name": "x", "input": {}},
            {"type": "text", "text": "B"},
        ]}
        assert text_segments(body) == ["A", "B"]
        assert join_segments(body) == "A\n\nB"

    def test_empty_text_dropped(self) -> None:
        assert join_segments(text_body("A", "", "C")) == "A\n\nC"

    def test_non_string_text_dropped(self) -> None:
        body = {"content": [{"type": "text", "text": 5}, {"type": "text", "text": None}, {"type": "text", "text": "A"}]}
        assert text_segments(body) == ["A"]
        assert join_segments(body) == "A"
