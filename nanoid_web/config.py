from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from nanoid_web.alphabets import DEFAULT_SIZE, SHORT_SIZE


class Settings(BaseSettings):
    # ID shape settings
    NANOID_DEFAULT_SIZE: int = Field(default=DEFAULT_SIZE, ge=1)
    NANOID_SHORT_SIZE: int = Field(default=SHORT_SIZE, ge=1)

    # Random source settings
    NANOID_RANDOM_SOURCE: str = "secure"  # secure is the only backend today

    # Logging settings
    NANOID_LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Read from the environment and an optional .env file; unrelated variables are ignored
    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
