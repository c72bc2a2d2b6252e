"""
Styling utilities for UI Tester CLI.

## Key Components

1. **Palette** - Color palette enumeration for consistent styling
2. **MARKDOWN_CONFIG** - Rich Click markdown configuration
3. **display_logo()** - Prints the UI Tester banner with version information
"""

from enum import Enum
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_package_version
from typing import Tuple

import rich_click as click


class Palette(Tuple[int, int, int], Enum):
    """Color palette for UI Tester CLI styling."""

    MAIN = 37, 99, 235
    ACCENT = 255, 255, 255


MARKDOWN_CONFIG = click.RichHelpConfiguration(text_markup="markdown")

ASCII_ART = r"""
 _   _ ___   _____         _
| | | |_ _| |_   _|__  ___| |_ ___ _ __
| | | || |    | |/ _ \/ __| __/ _ \ '__|
| |_| || |    | |  __/\__ \ ||  __/ |
 \___/|___|   |_|\___||___/\__\___|_|
"""


def get_version() -> str:
    try:
        return get_package_version("uitester")
    except PackageNotFoundError:
        return "version_not_found"


def display_logo() -> None:
    """Display the UI Tester banner followed by the tagline and version."""
    click.secho(ASCII_ART, fg=Palette.MAIN, bold=True)
    click.secho("Bulk document uploads through the browser ", fg=Palette.ACCENT, bold=True, nl=False)
    click.echo("📤")
    click.secho(f"Version {get_version()}", italic=True)
