"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = "weatherdesk/0.1.0"


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid"}

    ipinfo_url: str = "https://ipinfo.io"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    archive_url: str = "https://archive-api.open-meteo.com/v1/archive"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class HistoryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_year: int = Field(default=1940, ge=1)
    step_years: int = Field(default=5, ge=1)
    max_workers: int = Field(default=4, ge=1, le=32)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=5000, ge=1, le=65535)
    use_client_ip: bool = True
    cors_origins: list[str] = ["*"]


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    upstream: UpstreamConfig = UpstreamConfig()
    history: HistoryConfig = HistoryConfig()
    server: ServerConfig = ServerConfig()
