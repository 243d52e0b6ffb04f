"""Generate markdown reports from analyses and session logs."""

from datetime import datetime
from typing import Any, Dict, Optional

from models.analysis_log import AnalysisRecord, AnalysisSessionLog
from models.model_config import format_cost
from ui.components.disclaimer import AI_DISCLAIMER


def _format_duration(duration_ms: Optional[float]) -> str:
    """Format duration in a human-readable way."""
    if duration_ms is None:
        return "n/a"
    if duration_ms < 1000:
        return f"{duration_ms:.0f}ms"
    elif duration_ms < 60000:
        return f"{duration_ms/1000:.2f}s"
    else:
        minutes = duration_ms / 60000
        return f"{minutes:.2f}m"


def generate_markdown_report(ingredients: str, analysis: str,
                             record: Optional[AnalysisRecord] = None) -> str:
    """Markdown document with the submitted ingredients and the returned analysis."""
    lines = [
        "# Ingredient Analysis",
        "",
        f"*Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}*",
        "",
        "## Ingredients",
        "",
        ingredients.strip(),
        "",
        "## Analysis",
        "",
        analysis.strip() if analysis.strip() else "_The service returned no text._",
        "",
    ]

    if record is not None:
        lines += [
            "## Details",
            "",
            f"- **Model**: {record.model}",
            f"- **Duration**: {_format_duration(record.duration_ms)}",
            f"- **Tokens**: {record.input_tokens:,} in / {record.output_tokens:,} out",
            f"- **Estimated cost**: {format_cost(record.cost)}",
            "",
        ]

    lines += ["---", "", f"_{AI_DISCLAIMER}_", ""]
    return "\n".join(lines)


def generate_summary_stats(log: AnalysisSessionLog) -> Dict[str, Any]:
    """Display-ready summary of a session's attempts."""
    usage = log.get_usage_statistics()
    durations = [r.duration_ms for r in log.records if r.duration_ms is not None]
    return {
        "requests": usage["total_requests"],
        "succeeded": usage["successful_requests"],
        "failed": usage["failed_requests"],
        "total_tokens": f"{usage['total_tokens']:,}",
        "total_cost": format_cost(usage["total_cost"]),
        "avg_cost": format_cost(usage["avg_cost_per_request"]),
        "avg_duration": _format_duration(sum(durations) / len(durations)) if durations else "n/a",
    }
