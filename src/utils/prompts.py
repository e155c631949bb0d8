"""Prompt templates for LLM interactions."""

import json
from typing import Any

SYSTEM_PROMPT = (
    "You are an AI real estate expert assistant that provides concise, "
    "accurate analysis of property data."
)


def build_property_analysis_prompt(
    properties: list[dict[str, Any]],
    city: str,
    max_price: str,
    property_category: str,
    property_type: str,
) -> str:
    """Prompt asking for an overview, value comparison and recommendations."""
    return f"""As a real estate expert, analyze these properties:

Properties Found in {city}:
{json.dumps(properties, indent=2, ensure_ascii=False, default=str)}

INSTRUCTIONS:
1. Focus ONLY on these properties that match:
   - Property Category: {property_category}
   - Property Type: {property_type}
   - Maximum Price: {max_price} crores
2. Provide a brief analysis with these sections:
   - Property Overview (basic facts about each)
   - Best Value Analysis (which offers the best value)
   - Quick Recommendations

Keep your response concise and focused on these properties only.
"""


def build_location_trends_prompt(locations: list[dict[str, Any]], city: str) -> str:
    """Prompt asking for price trend, appreciation and rental yield analysis."""
    return f"""As a real estate expert, analyze these location price trends for {city}:

{json.dumps(locations, indent=2, ensure_ascii=False, default=str)}

Please provide:
1. A brief summary of price trends for each location
2. Which areas are showing the highest appreciation
3. Which areas offer the best rental yield
4. Quick investment recommendations based on this data

Keep your response concise (maximum 300 words).
"""
