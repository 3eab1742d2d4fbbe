"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3004
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./agentdesk.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SecuritySettings(BaseModel):
    secret_key: str = Field(default="change-me", min_length=8)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    session_ttl_hours: int = 24


class ViewSettings(BaseModel):
    page_size: int = Field(default=5, ge=1)
    scroll_page_size: int = Field(default=20, ge=1)


class ReportingSettings(BaseModel):
    default_window_days: int = Field(default=14, ge=1)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: Literal["standard", "json"] = "standard"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "AgentDesk"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    views: ViewSettings = ViewSettings()
    reporting: ReportingSettings = ReportingSettings()
    logging: LoggingSettings = LoggingSettings()

    static_dir: Path = Path("agentdesk/web/static")
    template_dir: Path = Path("agentdesk/web/templates")

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def secret_key(self) -> str:
        return self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm

    @property
    def access_token_expire_minutes(self) -> int:
        return self.security.access_token_expire_minutes


@lru_cache()
def get_settings() -> Settings:
    return Settings()
