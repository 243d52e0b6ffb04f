import requests
from typing import Any, Dict, List

from agents.strings import render_prompt
from models import AppConfig, AnalysisFailure, AnalysisFailed

SEGMENT_SEPARATOR = "\n\n"


def build_request(ingredients: str, config: AppConfig) -> Dict[str, Any]:
    """Return the keyword arguments for the single POST to the completion service."""
    return {
        "url": config.api_url,
        "headers": {
            "Content-Type": "application/json",
            "x-api-key": config.api_key,
            "anthropic-version": config.api_version,
        },
        "json": {
            "model": config.model,
            "max_tokens": config.max_tokens,
            "messages": [
                {"role": "user", "content": render_prompt(ingredients)},
            ],
        },
        "timeout": config.timeout,
    }


def request_analysis(ingredients: str, config: AppConfig, session=None) -> Dict[str, Any]:
    """Send the ingredient text to the completion service and return its response body.

    Every failure (network error, non-success status, unreadable body) is raised as
    AnalysisFailed; the attached AnalysisFailure says which one it was.
    """
    http = session if session is not None else requests

    try:
        response = http.post(**build_request(ingredients, config))
    except (requests.RequestException, UnicodeError, ValueError) as e:
        # header encoding and URL errors surface before any bytes are sent
        raise AnalysisFailed(AnalysisFailure.transport(e)) from e

    if not response.ok:
        raise AnalysisFailed(AnalysisFailure.service_status(response.status_code, response.text))

    try:
        body = response.json()
    except ValueError as e:
        raise AnalysisFailed(AnalysisFailure.malformed(f"response is not JSON: {e}")) from e

    if not isinstance(body, dict) or not isinstance(body.get("content"), list):
        raise AnalysisFailed(AnalysisFailure.malformed("response has no content list"))

    return body


def text_segments(body: Dict[str, Any]) -> List[str]:
    """Textual segments of a response, in order. Other segment types, empty and non-string text are dropped."""
    segments = []
    for item in body.get("content", []):
        if isinstance(item, dict) and item.get("type") == "text" and isinstance(item.get("text"), str) and item["text"]:
            segments.append(item["text"])
    return segments


def join_segments(body: Dict[str, Any]) -> str:
    return SEGMENT_SEPARATOR.join(text_segments(body))
