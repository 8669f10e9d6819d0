"""Gemini 공통 설정."""

MAX_OUTPUT_TOKENS = 2048
TEMPERATURE = 0.2
