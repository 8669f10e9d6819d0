"""EcoSort Service Configuration.

외부화 원칙:
- 자주 바뀌는 정책(모델 목록, CORS) → env/ConfigMap
- 저장소 위치 → env (로컬은 파일, 다중 인스턴스는 Redis)
- API Key → SecretStr (로깅 마스킹)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# ==========================================
# 모델 → Provider 명시적 매핑 (추론 없음)
# ==========================================

MODEL_PROVIDER_MAP: dict[str, str] = {
    # === Gemini 계열 (Google) ===
    "gemini-3-flash-preview": "gemini",
    "gemini-3-pro-preview": "gemini",
    "gemini-2.5-flash": "gemini",
    "gemini-2.5-pro": "gemini",
    # === GPT 계열 (OpenAI) ===
    "gpt-5.1": "gpt",
    "gpt-5": "gpt",
    "gpt-5-mini": "gpt",
}

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


class Settings(BaseSettings):
    """EcoSort 설정.

    운영 환경에서는 반드시 env로 주입할 것.
    """

    # === Service Identity ===
    service_name: str = Field("ecosort-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("dev", description="Environment (dev, staging, prod)")
    log_level: str = Field("INFO", description="Root log level")
    log_format: Literal["json", "text"] = Field(
        "json",
        description="로그 포맷 (json: ECS, text: 로컬 개발용)",
    )

    # === LLM API Keys (SecretStr로 로깅 마스킹) ===
    gemini_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "ECOSORT_GEMINI_API_KEY"),
        description="Google Gemini API key",
    )
    openai_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "ECOSORT_OPENAI_API_KEY"),
        description="OpenAI API key",
    )

    # === LLM 모델 정책 ===
    llm_default_model: str = Field(
        "gemini-3-flash-preview",
        description="분류 모델명",
    )

    # === Local State ===
    storage_backend: Literal["file", "redis"] = Field(
        "file",
        description="상태 저장소 (file: 로컬 디렉터리, redis: 공유 저장소)",
    )
    storage_dir: str = Field(
        ".ecosort",
        description="file 저장소 디렉터리",
    )
    redis_url: str = Field(
        "redis://localhost:6379/0",
        description="redis 저장소 URL. prod에서는 env 필수.",
    )
    history_limit: int = Field(50, ge=1, le=500, description="스캔 이력 최대 건수")

    # === CORS (env 외부화) ===
    cors_origins_str: str = Field(
        DEFAULT_CORS_ORIGINS,
        description="Allowed CORS origins (콤마 구분)",
    )

    model_config = SettingsConfigDict(
        env_prefix="ECOSORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    # === Resources ===
    @property
    def assets_path(self) -> str:
        """정적 에셋 경로 (지역 목록, 미니게임 항목)."""
        return str(Path(__file__).parent.parent / "infrastructure" / "assets")

    # ==========================================
    # Public Methods (명시적 매핑 기반)
    # ==========================================

    def resolve_provider(self, model: str) -> str:
        """모델 → provider 매핑 (명시적).

        Args:
            model: LLM 모델명

        Returns:
            provider (gemini, gpt)

        Raises:
            KeyError: 지원하지 않는 모델
        """
        if model not in MODEL_PROVIDER_MAP:
            raise KeyError(
                f"Unknown model: '{model}'. " f"Supported: {list(MODEL_PROVIDER_MAP.keys())}"
            )
        return MODEL_PROVIDER_MAP[model]

    def validate_model(self, model: str) -> bool:
        """모델이 지원되는지 검증."""
        return model in MODEL_PROVIDER_MAP

    def get_supported_models(self, provider: str | None = None) -> list[str]:
        """지원 모델 목록 반환.

        Args:
            provider: 특정 provider만 필터 (None이면 전체)
        """
        if provider:
            return [m for m, p in MODEL_PROVIDER_MAP.items() if p == provider]
        return list(MODEL_PROVIDER_MAP.keys())

    def get_api_key(self, provider: str) -> str | None:
        """Provider별 API Key 반환 (SecretStr unwrap)."""
        secret = self.gemini_api_key if provider == "gemini" else self.openai_api_key
        if secret:
            return secret.get_secret_value()
        return None


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
