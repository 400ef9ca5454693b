"""Service configuration: YAML sections, environment overrides and secrets.

Configuration is organised by domain into nested section models that are
populated from ``config/base/*.yaml`` and overridden per environment from
``config/environments/{APP_ENV}/``. Secrets (API keys, passwords) are only
ever read from the environment or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


# =============================================================================
# Section Models
# =============================================================================


class AppSettings(BaseModel):
    """Name and version reported by health and OpenAPI."""

    name: str = "AI Meals Service"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Bind address for uvicorn."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """Route prefix and allowed browser origins."""

    v1_prefix: str = "/api/v1"
    cors_origins: list[str] = []


class DatabaseSettings(BaseModel):
    """PostgreSQL ingredient store settings."""

    host: str = "localhost"
    port: int = 5432
    name: str = "ai_meals"
    db_schema: str = "public"
    user: str | None = None
    min_pool_size: int = 2
    max_pool_size: int = 10
    command_timeout: float = 30.0  # seconds
    ssl: bool = False


class LoggingSettings(BaseModel):
    """Loguru level and output format (json or text)."""

    level: str = "INFO"
    format: str = "json"


class TracingSettings(BaseModel):
    """OpenTelemetry export settings."""

    enabled: bool = True
    otlp_endpoint: str | None = None


class MetricsSettings(BaseModel):
    """Prometheus endpoint toggle."""

    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Tracing and metrics."""

    tracing: TracingSettings = TracingSettings()
    metrics: MetricsSettings = MetricsSettings()


class OpenAISettings(BaseModel):
    """OpenAI-compatible chat completions endpoint."""

    url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o-mini"
    timeout: float = 60.0
    requests_per_minute: float = 60.0


class LLMSettings(BaseModel):
    """AI generation settings; disabling serves fallback recipes."""

    enabled: bool = True
    openai: OpenAISettings = OpenAISettings()


class RecipesSettings(BaseModel):
    """Limits applied to recipe generation requests."""

    max_ingredients: int = Field(default=10, ge=1)
    max_ingredient_length: int = Field(default=50, ge=1)
    random_min: int = Field(default=4, ge=1)
    random_max: int = Field(default=6, ge=1)


class RateLimitingSettings(BaseModel):
    """Per-client request limit (slowapi syntax, e.g. 60/minute)."""

    enabled: bool = True
    default: str = "60/minute"
    storage_uri: str = "memory://"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """AI Meals service settings.

    Priority (highest to lowest):
    1. Values passed to ``Settings()``
    2. Environment variables (``DATABASE__HOST=db`` overrides database.host)
    3. ``.env`` file
    4. Environment-specific YAML files
    5. Base YAML files
    6. Defaults declared below
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    llm: LLMSettings = LLMSettings()
    recipes: RecipesSettings = RecipesSettings()
    rate_limiting: RateLimitingSettings = RateLimitingSettings()

    # Secrets (from environment / .env only - never in YAML)
    OPENAI_API_KEY: str = ""
    DATABASE_PASSWORD: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below env and .env, above file secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def database_url(self) -> str:
        """PostgreSQL DSN without the password (for logging)."""
        user_part = f"{self.database.user}@" if self.database.user else ""
        return (
            f"postgresql://{user_part}{self.database.host}:"
            f"{self.database.port}/{self.database.name}"
        )

    @property
    def is_development(self) -> bool:
        """Colorized logs and console span export."""
        return self.APP_ENV == "development"

    @property
    def is_non_production(self) -> bool:
        """Local, test and development environments expose API docs."""
        return self.APP_ENV in ("local", "test", "development")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

