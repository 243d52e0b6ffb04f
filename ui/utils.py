import io
from typing import List

import pandas as pd

from models.analysis_log import AnalysisSessionLog

LOG_COLUMNS = [
    "ticket",
    "started_at",
    "outcome",
    "input_chars",
    "segments",
    "input_tokens",
    "output_tokens",
    "cost",
    "duration_ms",
    "error",
]


def split_paragraphs(text: str) -> List[str]:
    """Paragraphs of an analysis, split on blank lines."""
    return [p.strip() for p in text.split("\n\n") if p.strip()]


def log_to_df(log: AnalysisSessionLog) -> pd.DataFrame:
    rows = [record.to_dict() for record in log.records]
    return pd.DataFrame(rows, columns=LOG_COLUMNS)


def csv_text(df: pd.DataFrame) -> str:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue()
