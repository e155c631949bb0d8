"""Property analysis service: LLM summaries of listing and location data.

Input records are trimmed before they are embedded in a prompt so the prompt
size stays bounded regardless of what the client sends.
"""

import logging
import time
from typing import Any

from domain.model.analysis import AnalysisResult
from port.llm import LLMError, LLMPort
from utils.prompts import SYSTEM_PROMPT, build_location_trends_prompt, build_property_analysis_prompt

logger = logging.getLogger(__name__)

MAX_PROPERTIES = 3
MAX_LOCATIONS = 5
MAX_AMENITIES = 5
MAX_DESCRIPTION_CHARS = 150

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 800
TOP_P = 1

PROPERTY_FIELDS = (
    "building_name",
    "property_type",
    "location_address",
    "price",
    "area_sqft",
)


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class PropertyAnalysisService:
    """Builds analysis prompts and sends them to the LLM."""

    def __init__(self, llm: LLMPort, model: str = "openai/gpt-4o", timeout: float = 60.0):
        self.llm = llm
        self.model = model
        self.timeout = timeout

    @staticmethod
    def prepare_property_data(
        properties: list[dict[str, Any]],
        max_properties: int = MAX_PROPERTIES,
    ) -> list[dict[str, Any]]:
        """Keep the first ``max_properties`` records and only the fields the
        prompt needs; cap amenities and description length."""
        prepared = []
        for prop in properties[:max_properties]:
            record = {key: prop.get(key) for key in PROPERTY_FIELDS}

            amenities = prop.get("amenities")
            record["amenities"] = list(amenities[:MAX_AMENITIES]) if isinstance(amenities, list) else []

            description = prop.get("description")
            record["description"] = (
                _truncate(str(description), MAX_DESCRIPTION_CHARS) if description else ""
            )
            prepared.append(record)
        return prepared

    @staticmethod
    def prepare_location_data(
        locations: list[dict[str, Any]],
        max_locations: int = MAX_LOCATIONS,
    ) -> list[dict[str, Any]]:
        return list(locations[:max_locations])

    async def generate_text(self, prompt: str) -> AnalysisResult:
        """Send ``prompt`` to the LLM.

        LLM failures do not raise: the result carries ``"Error: <message>"``
        with ``failed=True``.
        """
        started = time.monotonic()
        try:
            content, stats = await self.llm.call(
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                model=self.model,
                timeout=self.timeout,
                temperature=TEMPERATURE,
                max_tokens=MAX_OUTPUT_TOKENS,
                top_p=TOP_P,
            )
        except LLMError as e:
            logger.error("Error generating analysis", extra={"model": self.model, "error": str(e)})
            return AnalysisResult(text=f"Error: {e}", failed=True)

        logger.info("Analysis generated", extra={
            "model": stats.model,
            "total_tokens": stats.total_tokens,
            "elapsed_seconds": round(time.monotonic() - started, 2),
        })
        return AnalysisResult(text=content)

    async def analyze_properties(
        self,
        properties: list[dict[str, Any]],
        city: str,
        max_price: str,
        property_category: str,
        property_type: str,
    ) -> AnalysisResult:
        prompt = build_property_analysis_prompt(
            properties=self.prepare_property_data(properties),
            city=city,
            max_price=max_price,
            property_category=property_category,
            property_type=property_type,
        )
        return await self.generate_text(prompt)

    async def analyze_location_trends(
        self,
        locations: list[dict[str, Any]],
        city: str,
    ) -> AnalysisResult:
        prompt = build_location_trends_prompt(self.prepare_location_data(locations), city)
        return await self.generate_text(prompt)
