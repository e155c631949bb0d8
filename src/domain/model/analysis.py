"""Domain models for LLM-backed listing analysis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """Text produced by an analysis request.

    When the LLM call fails, ``text`` holds an ``"Error: ..."`` string and
    ``failed`` is True.
    """
    text: str
    failed: bool = False
