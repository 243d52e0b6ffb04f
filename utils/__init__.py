# Utils module for the ingredient co-pilot
from .report_generator import generate_markdown_report, generate_summary_stats

__all__ = [
    "generate_markdown_report",
    "generate_summary_stats",
]
