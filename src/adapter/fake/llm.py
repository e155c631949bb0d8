"""In-memory implementation of LLMPort for testing."""

from domain.model.llm_call import LLMCallResult
from port.llm import LLMError


class FakeLLMAdapter:
    """Fake LLM adapter that returns a preconfigured response or raises."""

    def __init__(
        self,
        response: str = "Analysis",
        stats: LLMCallResult | None = None,
        error: LLMError | None = None,
    ):
        self.response = response
        self._stats = stats
        self.error = error
        self.calls: list[dict] = []

    async def call(
        self,
        messages: list[dict[str, str]],
        model: str = "openai/gpt-4o",
        timeout: float = 30.0,
        **kwargs,
    ) -> tuple[str, LLMCallResult]:
        self.calls.append({
            "messages": messages,
            "model": model,
            "timeout": timeout,
            **kwargs,
        })
        if self.error:
            raise self.error
        stats = self._stats or LLMCallResult(
            model=model,
            prompt_tokens=10,
            completion_tokens=5,
            total_tokens=15,
            estimated_cost=0.0001,
        )
        return self.response, stats
