"""
Core configuration settings for UI Tester using Pydantic Settings.

This module provides type-safe configuration of the engine knobs that are not
part of a run configuration: browser launch options, timeouts, step defaults,
event observers and document handling. Values come from `uitester.toml` (CLI
mode), `UITESTER_*` environment variables or code-based defaults.
"""

from typing import List

from pydantic import Field, NonNegativeInt, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uitester.events.types import EventObserverType


class UITesterSettings(BaseSettings):
    """Main configuration settings for the UI Tester engine.

    This class provides centralized configuration management with:
    - Type-safe configuration with validation
    - TOML file support for project settings
    - Environment variable support (`UITESTER_` prefix)
    - Code-based defaults for missing values
    """

    model_config = SettingsConfigDict(
        env_prefix="UITESTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Timeouts (from TOML)
    element_timeout_ms: PositiveInt = Field(
        default=10000, description="Default timeout for waiting on elements"
    )
    navigation_timeout_ms: PositiveInt = Field(
        default=30000, description="Timeout for loading the target page"
    )
    network_idle_timeout_ms: PositiveInt = Field(
        default=30000, description="Timeout for the post-submit network idle wait"
    )

    # Step defaults (from TOML)
    settle_delay_ms: NonNegativeInt = Field(
        default=500, description="Pause after a file is set on the upload input"
    )
    type_delay_ms: NonNegativeInt = Field(
        default=50, description="Delay between characters of a type step"
    )
    default_wait_ms: NonNegativeInt = Field(
        default=1000, description="Duration of a wait step without explicit duration"
    )
    default_screenshot_path: str = Field(
        default="screenshot.png", description="Path of a screenshot step without explicit path"
    )
    fail_on_unknown_action: bool = Field(
        default=False, description="Raise on unknown step actions instead of skipping them"
    )

    # Browser Configuration (from TOML)
    slow_mo_ms: NonNegativeInt = Field(default=100, description="Delay added to browser operations")
    viewport_width: PositiveInt = Field(default=1280, description="Browser viewport width")
    viewport_height: PositiveInt = Field(default=720, description="Browser viewport height")
    accept_downloads: bool = Field(default=True, description="Accept downloads in the browser")

    # Event Observer Configuration (from TOML)
    event_observers: List[EventObserverType] = Field(
        default=[EventObserverType.RICH_TERMINAL],
        description="List of event observer types to use",
    )

    # Document Configuration (from TOML)
    document_extensions: List[str] = Field(
        default=[".json", ".csv"], description="File extensions picked up by folder scans"
    )
    preview_max_chars: PositiveInt = Field(
        default=5000, description="Maximum number of characters shown by a preview"
    )

    # Logging Configuration (from TOML)
    logging_enabled: bool = Field(
        default=False, description="Mirror run log lines to the UI Tester logger in the CLI"
    )
    log_level: str = Field(default="UITESTER", description="Level of the UI Tester logger")

    @field_validator("document_extensions")
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Lower-case extensions and make sure they start with a dot."""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]
