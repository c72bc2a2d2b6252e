"""
Reader for the `uitester.toml` project file.

Sections of the file are flattened into dotted keys (`[timeouts]` /
`element_ms` becomes `timeouts.element_ms`), which `ConfigurationFactory`
maps onto `UITesterSettings` fields.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import tomli


class TOMLConfigLoader:
    """Reads and caches a `uitester.toml` file.

    Example:
        ```toml
        [timeouts]
        element_ms = 15000

        [events]
        observers = ["rich_terminal"]
        ```
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: File to read, `uitester.toml` in the working directory by default
        """
        self.config_path = config_path or Path("uitester.toml")
        self._config_cache: Optional[Dict[str, Any]] = None

    def exists(self) -> bool:
        return self.config_path.exists()

    def load_config(self) -> Dict[str, Any]:
        """Flattened contents of the file, parsed on first access.

        Returns:
            Dict[str, Any]: Values keyed by dotted section path

        Raises:
            FileNotFoundError: If the file is missing
            ValueError: If the file is not valid TOML
        """
        if self._config_cache is not None:
            return self._config_cache

        if not self.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._config_cache = self._flatten_config(self.load_raw())
        return self._config_cache

    def load_raw(self) -> Dict[str, Any]:
        """Parsed file with its nested sections left as they are.

        Raises:
            ValueError: If the file is not valid TOML
        """
        try:
            with open(self.config_path, "rb") as f:
                return tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {self.config_path}: {e}") from e

    def _flatten_config(self, config: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
        flattened: Dict[str, Any] = {}

        for key, value in config.items():
            dotted_key = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                flattened.update(self._flatten_config(value, dotted_key))
            else:
                flattened[dotted_key] = value

        return flattened

    def get_value(self, key: str, default: Any = None) -> Any:
        """Value at a dotted key such as `timeouts.element_ms`, or `default`."""
        return self.load_config().get(key, default)

    def reload(self) -> None:
        """Forget the cached contents; the next access reads the file again."""
        self._config_cache = None
