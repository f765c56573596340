"""Settings for notty-imagetest."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utilities.logging import LogLevel
from .utilities.types import DEFAULT_MIME_TYPE


class Settings(BaseSettings):
    """Emitter settings, read from IMAGETEST_* variables and .env."""

    # Input
    image_path: Path = Path("test.png")
    mime_type: str = DEFAULT_MIME_TYPE
    fixture: str = "natty"

    # Terminal gate for the natty fixture
    expected_term: str = "natty"
    term: str | None = Field(
        default=None,
        validation_alias="TERM",
        description="Name of the running terminal, from the unprefixed TERM variable",
    )

    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="IMAGETEST_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
