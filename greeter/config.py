"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from greeter.errors import ConfigError


class Settings(BaseSettings):
    # Environment only; PORT is the sole input.
    model_config = SettingsConfigDict(env_ignore_empty=True, extra="ignore")

    port: int = Field(default=3000, ge=1, le=65535)


def load_settings() -> Settings:
    """Read settings from the environment, raising ConfigError if they don't parse."""
    try:
        return Settings()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']).upper()}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
    except SettingsError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings (loaded once)."""
    return load_settings()
