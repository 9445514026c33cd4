"""Display configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseSettings):
    """Configuration for how values are rendered in failure messages.

    Loads from environment variables automatically:
        DICTEXPECT_MAX_ITEMS, DICTEXPECT_MAX_VALUE_LENGTH, DICTEXPECT_RECORD_RESULTS

    Attributes
    ----------
    max_items
        Maximum number of collection elements rendered before the listing is
        truncated with ``...``.
    max_value_length
        Maximum length of a single rendered scalar before it is truncated.
    record_results
        Whether assertion results are appended to a bound results collector.
    """

    max_items: int = Field(default=32, ge=1)
    max_value_length: int = Field(default=200, ge=4)
    record_results: bool = True

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="DICTEXPECT_",
    )


_settings: DisplaySettings | None = None


def get_display_settings() -> DisplaySettings:
    """Return the process-wide display settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = DisplaySettings()
    return _settings


def reset_display_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    global _settings
    _settings = None
