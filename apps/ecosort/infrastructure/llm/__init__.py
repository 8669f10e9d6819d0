"""LLM Infrastructure Adapters.

모델 패밀리별 분류 모델 구현체:
- gemini/: Gemini 모델 (gemini-3-flash-preview, 검색 그라운딩: googleSearch)
- gpt/: GPT 모델 (gpt-5.1, 검색 그라운딩: web_search)
"""

from ecosort.infrastructure.llm.gemini import GeminiClassifierAdapter
from ecosort.infrastructure.llm.gpt import GPTClassifierAdapter

__all__ = [
    "GPTClassifierAdapter",
    "GeminiClassifierAdapter",
]
