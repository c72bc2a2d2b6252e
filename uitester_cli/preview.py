"""
Preview command for UI Tester CLI.

## Usage Examples

```bash
uitester preview ./exports/orders.json
uitester preview ./exports/orders.csv --max-chars 500
```
"""

from pathlib import Path
from typing import Optional

import rich_click as click

from uitester.automation.errors import UITesterError
from uitester.config import ConfigurationFactory
from uitester.documents import preview_document
from uitester_cli.utils.result_display import display_error, display_preview
from uitester_cli.utils.style import MARKDOWN_CONFIG


@click.command()
@click.rich_config(help_config=MARKDOWN_CONFIG)
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--max-chars",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of characters to show (default: `preview_max_chars` setting)",
)
@click.pass_context
def preview(ctx: click.Context, file: Path, max_chars: Optional[int]) -> None:
    """Show the beginning of a document, pretty-printing JSON."""
    try:
        settings = ConfigurationFactory.get_settings(cli_mode=True)
        document_preview = preview_document(file, max_chars or settings.preview_max_chars)
    except UITesterError as e:
        display_error("Preview Failed", e.message)
        ctx.exit(1)

    display_preview(file.name, document_preview)
