from dataclasses import dataclass


@dataclass(frozen=True)
class LLMCallResult:
    """Token usage and cost of one completed LLM call."""
    model: str
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    estimated_cost: float
    provider: str | None = None
