"""GPT Adapters."""

from ecosort.infrastructure.llm.gpt.classifier import GPTClassifierAdapter

__all__ = ["GPTClassifierAdapter"]
