"""
Configuration management for UI Tester.

This module provides configuration management with:
- Type-safe engine settings with Pydantic Settings
- TOML-based configuration (`uitester.toml`) in CLI mode
- Environment variable support (`UITESTER_` prefix)
- Run configuration loading from JSON or TOML files

## Key Components

1. **ConfigurationFactory** - Factory for creating and caching the settings instance
2. **UITesterSettings** - Engine settings with validation
3. **TOMLConfigLoader** - TOML file loading and flattening
4. **load_run_config** - Loads a `RunConfig` from an exported configuration file

## Usage Examples

```python
from uitester.config import ConfigurationFactory, load_run_config

settings = ConfigurationFactory.get_settings(cli_mode=True)
config = load_run_config("ui-tester-config.json", headless=True)
```
"""

from .factory import ConfigurationFactory
from .run_config_loader import load_run_config
from .settings import UITesterSettings
from .toml_loader import TOMLConfigLoader

__all__ = [
    "ConfigurationFactory",
    "UITesterSettings",
    "TOMLConfigLoader",
    "load_run_config",
]
