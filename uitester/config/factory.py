"""
Process-wide access to the UI Tester engine settings.

In CLI mode the settings combine `uitester.toml` with `UITESTER_*` environment
variables; library callers get environment variables and defaults only.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from uitester.automation.errors import ConfigurationError
from uitester.config.settings import UITesterSettings
from uitester.config.toml_loader import TOMLConfigLoader

# Maps flattened `uitester.toml` keys to settings fields
FIELD_MAPPING: Dict[str, str] = {
    # Timeouts
    "timeouts.element_ms": "element_timeout_ms",
    "timeouts.navigation_ms": "navigation_timeout_ms",
    "timeouts.network_idle_ms": "network_idle_timeout_ms",
    # Steps
    "steps.settle_delay_ms": "settle_delay_ms",
    "steps.type_delay_ms": "type_delay_ms",
    "steps.default_wait_ms": "default_wait_ms",
    "steps.default_screenshot_path": "default_screenshot_path",
    "steps.fail_on_unknown_action": "fail_on_unknown_action",
    # Browser
    "browser.slow_mo_ms": "slow_mo_ms",
    "browser.viewport_width": "viewport_width",
    "browser.viewport_height": "viewport_height",
    "browser.accept_downloads": "accept_downloads",
    # Events
    "events.observers": "event_observers",
    # Documents
    "documents.extensions": "document_extensions",
    "documents.preview_max_chars": "preview_max_chars",
    # Logging
    "logging.enabled": "logging_enabled",
    "logging.level": "log_level",
}


class ConfigurationFactory:
    """Builds `UITesterSettings` once and hands out the same instance afterwards."""

    _instance: Optional[UITesterSettings] = None
    _toml_loader: Optional[TOMLConfigLoader] = None

    @classmethod
    def get_settings(cls, cli_mode: bool = False) -> UITesterSettings:
        """Cached settings, built on first call.

        Args:
            cli_mode (bool): Whether to read `uitester.toml` (CLI) or only environment variables (library)

        Returns:
            Configured settings instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if cls._instance is None:
            if cli_mode:
                cls._instance = cls._load_from_toml()
            else:
                cls._instance = cls._load_from_env_only()

        return cls._instance

    @classmethod
    def _load_from_toml(cls) -> UITesterSettings:
        """Load configuration from `uitester.toml` plus environment variables.

        Values from the TOML file win over environment variables. A missing
        TOML file is not an error: environment variables and defaults apply.

        Raises:
            ConfigurationError: If the TOML file or a value in it is invalid
        """
        if cls._toml_loader is None:
            cls._toml_loader = TOMLConfigLoader()

        if not cls._toml_loader.exists():
            return cls._load_from_env_only()

        try:
            toml_config = cls._toml_loader.load_config()
            return UITesterSettings(**cls._convert_toml_to_pydantic(toml_config))
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(f"TOML configuration error: {str(e)}") from e

    @classmethod
    def _load_from_env_only(cls) -> UITesterSettings:
        try:
            return UITesterSettings()
        except ValidationError as e:
            raise ConfigurationError(f"Environment configuration error: {str(e)}") from e

    @classmethod
    def _convert_toml_to_pydantic(cls, toml_config: Dict[str, Any]) -> Dict[str, Any]:
        """Convert flattened TOML configuration to settings keyword arguments.

        Args:
            toml_config: Flattened TOML configuration

        Returns:
            Dictionary compatible with UITesterSettings
        """
        return {
            field_name: toml_config[toml_key]
            for toml_key, field_name in FIELD_MAPPING.items()
            if toml_key in toml_config
        }

    @classmethod
    def reset(cls) -> None:
        """Drop the cached settings and loader so the next call reads configuration again."""
        cls._instance = None
        cls._toml_loader = None
