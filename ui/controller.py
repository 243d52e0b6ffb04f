"""View state controller for the analyzer page.

Drives the Idle -> Loading -> Success | Failure cycle. Streamlit-free so it can be
exercised directly; ``ui.state`` keeps one instance per browser session.
"""

from typing import Any, Callable, Dict, Optional

from agents.analysis_agent import join_segments, request_analysis, text_segments
from models import AppConfig, AnalysisFailure, AnalysisFailed, AnalysisLogger, ExampleEntry, RequestState, ViewState
from resources.st_resources import logger
from ui.examples import get_example

VALIDATION_MESSAGE = "Please paste some ingredients to analyze"
FAILURE_MESSAGE = "Unable to analyze ingredients. Please check your API key configuration."

Sender = Callable[[str, AppConfig], Dict[str, Any]]


class AnalysisController:
    """Owns the ingredient text and request state for one session.

    Every sent request gets a ticket from a monotonically increasing sequence. A
    completion is only applied if its ticket is still the one in flight, so a
    response that arrives after an example load or a newer request is dropped.
    """

    def __init__(self, config: AppConfig, send: Sender = request_analysis,
                 analysis_logger: Optional[AnalysisLogger] = None):
        self.config = config
        self.view = ViewState()
        self.analysis_logger = analysis_logger
        self._send = send
        self._sequence = 0
        self._in_flight: Optional[int] = None
        self._pending_text = ""

    @property
    def state(self) -> RequestState:
        return self.view.state

    def _show(self, state: RequestState, analysis: str = "", error: str = ""):
        self.view.state = state
        self.view.analysis = analysis
        self.view.error = error

    def _drop_in_flight(self):
        if self._in_flight is not None:
            logger.info(f"Discarding in-flight analysis request #{self._in_flight}")
            if self.analysis_logger:
                self.analysis_logger.record_stale(self._in_flight)
        self._in_flight = None

    def edit(self, text: str):
        """Replace the ingredient text. Clears the displayed result unless a request is running."""
        self.view.ingredients = text
        if not self.view.is_loading:
            self._show(RequestState.IDLE)

    def load_example(self, name: str) -> Optional[ExampleEntry]:
        """Prefill the input with a built-in example and return to Idle from any state."""
        entry = get_example(name)
        if entry is None:
            return None
        self._sequence += 1
        self._drop_in_flight()
        self.view.ingredients = entry.text
        self._show(RequestState.IDLE)
        return entry

    def begin(self) -> Optional[int]:
        """Move to Loading and return the new request's ticket, or None if the guard fails."""
        if self.view.is_loading:
            return None
        if not self.view.ingredients.strip():
            self._show(RequestState.FAILURE, error=VALIDATION_MESSAGE)
            return None

        self._sequence += 1
        self._in_flight = self._sequence
        self._pending_text = self.view.ingredients
        self._show(RequestState.LOADING)
        if self.analysis_logger:
            self.analysis_logger.start(self._in_flight, self.config.model, self.view.ingredients)
        return self._in_flight

    def complete(self, ticket: int, body: Dict[str, Any]) -> bool:
        """Apply a successful response. Returns False if the ticket is stale."""
        if ticket != self._in_flight:
            logger.info(f"Ignoring stale analysis response #{ticket}")
            return False
        segments = text_segments(body)
        analysis = join_segments(body)
        if self.analysis_logger:
            self.analysis_logger.record_success(ticket, body, len(segments))
        self._in_flight = None
        self._show(RequestState.SUCCESS, analysis=analysis)
        return True

    def fail(self, ticket: int, failure: AnalysisFailure) -> bool:
        """Apply a failed request. The cause is logged, the user sees one generic message."""
        if ticket != self._in_flight:
            logger.info(f"Ignoring stale analysis failure #{ticket}: {failure.describe()}")
            return False
        self._in_flight = None
        logger.error(f"Analysis error: {failure.describe()}")
        if self.analysis_logger:
            self.analysis_logger.record_failure(ticket, failure)
        self._show(RequestState.FAILURE, error=FAILURE_MESSAGE)
        return True

    def is_in_flight(self, ticket: int) -> bool:
        return ticket == self._in_flight

    def run(self, ticket: int) -> RequestState:
        """Send the request started by ``begin`` and apply its outcome.

        A ticket that is no longer in flight is not sent again.
        """
        if not self.is_in_flight(ticket):
            return self.view.state
        try:
            body = self._send(self._pending_text, self.config)
            self.complete(ticket, body)
        except AnalysisFailed as e:
            self.fail(ticket, e.failure)
        except Exception as e:
            logger.exception(f"Unexpected error in analysis request #{ticket}")
            self.fail(ticket, AnalysisFailure.transport(e))
        return self.view.state

    def analyze(self) -> RequestState:
        """Run one full analysis cycle synchronously and return the resulting state."""
        ticket = self.begin()
        if ticket is None:
            return self.view.state
        return self.run(ticket)
