"""LiteLLM adapter: LLMPort over any provider LiteLLM can reach."""

import logging

import litellm
from litellm import acompletion, completion_cost

from domain.model.llm_call import LLMCallResult
from port.llm import LLMAuthError, LLMError, LLMRateLimitError, LLMTimeoutError

litellm.suppress_debug_info = True

logger = logging.getLogger(__name__)

# Checked in order, most specific first
_ERROR_MAP = (
    (litellm.Timeout, LLMTimeoutError),
    (litellm.AuthenticationError, LLMAuthError),
    (litellm.RateLimitError, LLMRateLimitError),
    (litellm.BadRequestError, LLMError),
    (litellm.APIConnectionError, LLMError),
    (litellm.APIError, LLMError),
)


def _extract_provider_from_model(model: str) -> str | None:
    """Provider prefix of a model id, e.g. openai for openai/gpt-4o."""
    if "/" in model:
        return model.split("/", 1)[0]
    if model.startswith(("gpt-", "o1", "o3")):
        return "openai"
    return None


def _first_message_text(response) -> str:
    if not response.choices:
        return ""
    message = response.choices[0].message
    return (message.content or "").strip() if message else ""


def _usage_stats(response, model: str) -> LLMCallResult:
    usage = getattr(response, "usage", None)
    try:
        cost = completion_cost(completion_response=response)
    except Exception as e:
        # Pricing is unknown for some models; usage is still reported
        logger.debug("Cost unavailable", extra={"model": model, "error": str(e)})
        cost = 0.0
    return LLMCallResult(
        model=model,
        prompt_tokens=usage.prompt_tokens if usage else 0,
        completion_tokens=usage.completion_tokens if usage else 0,
        total_tokens=usage.total_tokens if usage else 0,
        estimated_cost=cost,
        provider=_extract_provider_from_model(model),
    )


class LiteLLMAdapter:
    """LLMPort implementation backed by ``litellm.acompletion``.

    The API key is taken from Settings and passed per call, so LiteLLM never
    needs to read provider keys from the process environment.
    """

    def __init__(self, api_key: str | None = None):
        self._api_key = api_key

    async def call(
        self,
        messages: list[dict[str, str]],
        model: str = "openai/gpt-4o",
        timeout: float = 30.0,
        **kwargs,
    ) -> tuple[str, LLMCallResult]:
        """Return the trimmed completion text and its usage stats.

        Raises:
            ValueError: messages is empty
            LLMError (or a subclass): provider failure, or an empty completion
        """
        if not messages:
            raise ValueError("messages list cannot be empty")
        if self._api_key:
            kwargs.setdefault("api_key", self._api_key)

        try:
            response = await acompletion(model=model, messages=messages, timeout=timeout, **kwargs)
        except Exception as e:
            for source, target in _ERROR_MAP:
                if isinstance(e, source):
                    raise target(str(e)) from e
            raise

        content = _first_message_text(response)
        if not content:
            logger.error("No content in LLM response", extra={
                "model": model, "response_id": getattr(response, "id", None),
            })
            raise LLMError("No content returned from LLM")

        stats = _usage_stats(response, model)
        logger.debug("LLM call completed", extra={
            "model": model,
            "provider": stats.provider,
            "total_tokens": stats.total_tokens,
            "estimated_cost": stats.estimated_cost,
        })
        return content, stats
