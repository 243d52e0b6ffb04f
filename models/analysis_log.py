"""Per-session logging of analysis attempts."""

from pydantic import Field
from pydantic.dataclasses import dataclass
from typing import Optional, Any, Dict, List
from datetime import datetime
from dataclasses import asdict
import json
import yaml

from models.core import AnalysisFailure
from models.model_config import pricing_for


@dataclass
class AnalysisRecord:
    """A single call to the completion service."""
    ticket: int = Field(..., description="Request sequence number of this attempt")
    model: str = Field(..., description="Model the request was sent to")
    input_chars: int = Field(..., description="Length of the submitted ingredient text")
    started_at: datetime = Field(default_factory=datetime.now, description="When the request was sent")
    duration_ms: Optional[float] = Field(default=None, description="How long the call took in milliseconds")
    outcome: str = Field(default="pending", description="pending, success, failure or stale")
    segments: int = Field(default=0, description="Number of textual segments in the response")
    input_tokens: int = Field(default=0, description="Prompt tokens reported by the service")
    output_tokens: int = Field(default=0, description="Completion tokens reported by the service")
    cost: float = Field(default=0.0, description="Estimated cost of the call in USD")
    error: Optional[str] = Field(default=None, description="Failure cause, if the call failed")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        if isinstance(result['started_at'], datetime):
            result['started_at'] = result['started_at'].isoformat()
        return result


@dataclass
class AnalysisSessionLog:
    """All attempts made during one browser session."""
    session_id: str = Field(..., description="Identifier for this session")
    records: List[AnalysisRecord] = Field(default_factory=list, description="Attempts in the order they were sent")

    def last_success(self) -> Optional[AnalysisRecord]:
        """Most recent attempt that completed successfully."""
        for record in reversed(self.records):
            if record.outcome == "success":
                return record
        return None

    def get_usage_statistics(self) -> Dict[str, Any]:
        finished = [r for r in self.records if r.outcome == "success"]
        total_input = sum(r.input_tokens for r in finished)
        total_output = sum(r.output_tokens for r in finished)
        total_cost = sum(r.cost for r in finished)
        return {
            "total_requests": len(self.records),
            "successful_requests": len(finished),
            "failed_requests": sum(1 for r in self.records if r.outcome == "failure"),
            "total_input_tokens": total_input,
            "total_output_tokens": total_output,
            "total_tokens": total_input + total_output,
            "total_cost": total_cost,
            "avg_cost_per_request": total_cost / len(finished) if finished else 0.0,
        }

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "records": [r.to_dict() for r in self.records],
            "usage": self.get_usage_statistics(),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_yaml(self) -> str:
        """Convert to YAML string representation."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)


class AnalysisLogger:
    """Tracks timing, usage and outcome of each analysis attempt."""

    def __init__(self, session_id: str):
        self.log = AnalysisSessionLog(session_id=session_id)
        self._records: Dict[int, AnalysisRecord] = {}

    def start(self, ticket: int, model: str, text: str) -> AnalysisRecord:
        record = AnalysisRecord(ticket=ticket, model=model, input_chars=len(text))
        self._records[ticket] = record
        self.log.records.append(record)
        return record

    def _finish(self, ticket: int, outcome: str) -> Optional[AnalysisRecord]:
        record = self._records.pop(ticket, None)
        if record is None:
            return None
        record.outcome = outcome
        record.duration_ms = (datetime.now() - record.started_at).total_seconds() * 1000
        return record

    def record_success(self, ticket: int, body: Dict[str, Any], segments: int) -> Optional[AnalysisRecord]:
        record = self._finish(ticket, "success")
        if record is None:
            return None
        usage = body.get("usage") or {}
        record.segments = segments
        record.input_tokens = int(usage.get("input_tokens", 0) or 0)
        record.output_tokens = int(usage.get("output_tokens", 0) or 0)
        record.cost = pricing_for(record.model).cost(record.input_tokens, record.output_tokens)
        return record

    def record_failure(self, ticket: int, failure: AnalysisFailure) -> Optional[AnalysisRecord]:
        record = self._finish(ticket, "failure")
        if record is not None:
            record.error = failure.describe()
        return record

    def record_stale(self, ticket: int) -> Optional[AnalysisRecord]:
        return self._finish(ticket, "stale")

    def get_log(self) -> AnalysisSessionLog:
        """Get the current log."""
        return self.log
