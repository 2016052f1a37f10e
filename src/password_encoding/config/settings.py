"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PositiveInt = Annotated[int, Field(gt=0)]


class Settings(BaseSettings):
    """Environment-driven password encoding settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_ops_limit: PositiveInt | None = Field(
        default=None,
        validation_alias="PASSWORD_OPS_LIMIT",
    )
    password_mem_limit: PositiveInt | None = Field(
        default=None,
        validation_alias="PASSWORD_MEM_LIMIT",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache password encoding settings."""

    return Settings()
