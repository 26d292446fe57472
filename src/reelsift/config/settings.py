"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (REELSIFT_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class ProviderSettings(BaseModel):
    """Provider loading and upstream request behaviour.

    Provider lists hold ``"package.module:Factory"`` import paths. Order
    matters: it is the registration order, which breaks ties when several
    providers share a host.
    """

    actor_providers: list[str] = Field(default_factory=list, description="Actor provider import paths")
    movie_providers: list[str] = Field(default_factory=list, description="Movie provider import paths")
    request_timeout: float = Field(default=60.0, gt=0, description="Upstream request timeout in seconds")
    search_timeout: float | None = Field(
        default=90.0,
        gt=0,
        description="Per-provider deadline for fan-out search in seconds (null disables it)",
    )

    @field_validator("actor_providers", "movie_providers", mode="before")
    @classmethod
    def _parse_paths(cls, v: Any) -> list[str]:
        """Parse provider paths from a JSON list or comma-separated string (env var)."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(p) for p in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            return [p.strip() for p in v.split(",") if p.strip()]
        return list(v)


class StoreSettings(BaseModel):
    """Record store configuration."""

    backend: Literal["memory", "redis"] = Field(default="memory", description="Record store backend")
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    key_prefix: str = Field(default="reelsift", description="Namespace for Redis keys")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the REELSIFT_ prefix.
    Nested settings use double underscores: REELSIFT_SERVER__PORT=9090

    Example:
        REELSIFT_SERVER__PORT=9090
        REELSIFT_STORE__BACKEND=redis
        REELSIFT_PROVIDERS__MOVIE_PROVIDERS='["acme.providers:MovieSite"]'
    """

    model_config = {
        "env_prefix": "REELSIFT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    # Application metadata
    app_name: str = Field(default="ReelSift", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    # Component settings
    server: ServerSettings = Field(default_factory=ServerSettings)
    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are passed as init arguments and therefore
        override environment variables for the keys they set.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
