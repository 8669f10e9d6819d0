"""Google Gemini Adapters."""

from ecosort.infrastructure.llm.gemini.classifier import GeminiClassifierAdapter

__all__ = ["GeminiClassifierAdapter"]
