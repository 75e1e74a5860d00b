"""Character Sheet Service Configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Character 서비스 설정.

    모든 값은 ``CHARACTER_`` 접두사 환경 변수로 재정의할 수 있습니다.
    """

    # Service
    service_name: str = "character-api"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "character"
    postgres_password: str = "character"
    postgres_db: str = "character"
    database_echo: bool = False
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # JWT
    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "character-api"
    jwt_audience: str = "character-clients"
    access_token_exp_minutes: int = Field(default=60, ge=1)

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_endpoint: str = "http://localhost:4317"
    otel_sampling_rate: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(env_prefix="CHARACTER_", case_sensitive=False)

    @property
    def database_url(self) -> str:
        """PostgreSQL 연결 URL."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
