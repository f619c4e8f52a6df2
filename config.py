from typing import List

from pydantic import Field
from pydantic import ValidationError as SettingsError
from pydantic_settings import BaseSettings, SettingsConfigDict

from exceptions import ConfigurationError


class Settings(BaseSettings):
    DATABASE_URL: str = Field(min_length=1)
    DATABASE_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def load_settings(**overrides) -> Settings:
    try:
        return Settings(**overrides)
    except SettingsError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid or missing settings: {', '.join(missing)}", cause=e) from e


settings = load_settings()
