"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    OPENAI_API_KEY: str
    REQUEST_TIMEOUT_SECONDS: int = 60
    LLM_TIMEOUT_SECONDS: int = 60
    LOGIN_MAX_ATTEMPTS: int = 5
    LOGIN_BLOCK_SECONDS: int = 300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOGIN_MAX_ATTEMPTS", mode="before")
    @classmethod
    def _clamp_login_max_attempts(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 5
        except (TypeError, ValueError):
            numeric = 5
        return max(1, numeric)

    @field_validator("LOGIN_BLOCK_SECONDS", mode="before")
    @classmethod
    def _clamp_login_block_seconds(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 300
        except (TypeError, ValueError):
            numeric = 300
        return max(0, numeric)


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
