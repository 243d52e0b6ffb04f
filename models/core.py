"""Core domain models for the ingredient co-pilot."""

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class ExampleEntry:
    """A built-in ingredient list used to prefill the input."""
    label: str = Field(..., description="The name shown on the preset control.")
    text: str = Field(..., description="The ingredient list loaded into the input.")


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    SERVICE_STATUS = "service_status"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class AnalysisFailure:
    """Why a call to the completion service failed. Only ever logged, never shown."""
    kind: FailureKind = Field(..., description="Which layer the failure came from.")
    status_code: Optional[int] = Field(default=None, description="HTTP status for service failures.")
    detail: str = Field(default="", description="Underlying error text.")

    @classmethod
    def transport(cls, error: Exception) -> "AnalysisFailure":
        return cls(kind=FailureKind.TRANSPORT, detail=f"{type(error).__name__}: {error}")

    @classmethod
    def service_status(cls, status_code: int, body: str = "") -> "AnalysisFailure":
        return cls(kind=FailureKind.SERVICE_STATUS, status_code=status_code, detail=body[:500])

    @classmethod
    def malformed(cls, detail: str) -> "AnalysisFailure":
        return cls(kind=FailureKind.MALFORMED_RESPONSE, detail=detail)

    def describe(self) -> str:
        """One-line description for the diagnostic log."""
        if self.kind == FailureKind.SERVICE_STATUS:
            return f"service returned HTTP {self.status_code}: {self.detail}"
        return f"{self.kind.value}: {self.detail}"


class AnalysisFailed(Exception):
    """Raised by the request builder for every kind of failed analysis call."""

    def __init__(self, failure: AnalysisFailure):
        super().__init__(failure.describe())
        self.failure = failure
