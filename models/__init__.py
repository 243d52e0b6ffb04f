# Consolidated models module for the ingredient co-pilot
from .core import (
    ExampleEntry,
    FailureKind,
    AnalysisFailure,
    AnalysisFailed,
)
from .ui import RequestState, ViewState
from .config import AppConfig
from .analysis_log import (
    AnalysisRecord,
    AnalysisSessionLog,
    AnalysisLogger,
)

__all__ = [
    "ExampleEntry",
    "FailureKind",
    "AnalysisFailure",
    "AnalysisFailed",
    "RequestState",
    "ViewState",
    "AppConfig",
    "AnalysisRecord",
    "AnalysisSessionLog",
    "AnalysisLogger",
]
