"""UI-related models for the ingredient co-pilot."""

from dataclasses import dataclass
from enum import Enum


class RequestState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class ViewState:
    """Everything the analyzer page renders. Exactly one request state holds."""
    ingredients: str = ""
    state: RequestState = RequestState.IDLE
    analysis: str = ""
    error: str = ""

    @property
    def is_loading(self) -> bool:
        return self.state == RequestState.LOADING

    @property
    def can_analyze(self) -> bool:
        """Whether the analyze control should be enabled."""
        return not self.is_loading and bool(self.ingredients.strip())
