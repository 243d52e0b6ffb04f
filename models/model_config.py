"""Model defaults and pricing used for cost estimates."""

from dataclasses import dataclass
from typing import Dict

DEFAULT_MODEL = "claude-sonnet-4-20250514"

# Output budget for a single analysis
DEFAULT_MAX_TOKENS = 1000


@dataclass(frozen=True)
class ModelPricing:
    """USD per million tokens."""
    input_per_million: float
    output_per_million: float

    def cost(self, input_tokens: int, output_tokens: int) -> float:
        return (input_tokens * self.input_per_million + output_tokens * self.output_per_million) / 1_000_000


PRICING: Dict[str, ModelPricing] = {
    DEFAULT_MODEL: ModelPricing(input_per_million=3.00, output_per_million=15.00),
}


def pricing_for(model: str) -> ModelPricing:
    # models set through ANALYSIS_MODEL without an entry are estimated at the default rate
    return PRICING.get(model, PRICING[DEFAULT_MODEL])


def format_cost(cost: float) -> str:
    """Format cost for display."""
    if cost < 0.001:
        return f"${cost:.6f}"
    elif cost < 0.01:
        return f"${cost:.4f}"
    elif cost < 1.0:
        return f"${cost:.3f}"
    return f"${cost:.2f}"
