from functools import lru_cache
from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.log import DecisionLogger, LogLevel
from .models import ApiVersion

DEFAULT_API_URL = "https://api.precognitive.io"


class Settings(BaseSettings):
    """
    Environment configuration, read from PRECOGNITIVE_* variables or .env.
    """

    api_key: SecretStr
    username: str
    password: SecretStr

    api_url: AnyHttpUrl = Field(default=DEFAULT_API_URL, validate_default=True)
    api_version: ApiVersion = ApiVersion.V1
    log_level: LogLevel = LogLevel.NONE

    model_config = SettingsConfigDict(
        env_prefix="PRECOGNITIVE_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v):
        return LogLevel.parse(v)


@lru_cache
def get_settings() -> Settings:
    return Settings()


class BasicAuth(BaseModel):
    user_name: str = Field(..., min_length=1)
    password: SecretStr

    model_config = ConfigDict(frozen=True)


class ClientConfig(BaseModel):
    """
    Immutable configuration captured by DecisionClient at construction.
    """

    api_key: str = Field(..., min_length=1)
    auth: BasicAuth
    version: ApiVersion = ApiVersion.V1
    api_url: str = DEFAULT_API_URL
    logger: Optional[DecisionLogger] = None
    log_level: LogLevel = LogLevel.NONE

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v):
        return LogLevel.parse(v)

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        return cls(
            api_key=settings.api_key.get_secret_value(),
            auth=BasicAuth(user_name=settings.username, password=settings.password),
            version=settings.api_version,
            api_url=str(settings.api_url),
            log_level=settings.log_level,
        )
