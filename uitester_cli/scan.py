"""
Scan command for UI Tester CLI.

## Usage Examples

```bash
uitester scan ./exports
uitester scan ./exports --ext .csv
```
"""

from pathlib import Path
from typing import Tuple

import rich_click as click

from uitester.automation.errors import UITesterError
from uitester.config import ConfigurationFactory
from uitester.documents import scan_folder
from uitester_cli.utils.result_display import display_documents, display_error
from uitester_cli.utils.style import MARKDOWN_CONFIG


@click.command()
@click.rich_config(help_config=MARKDOWN_CONFIG)
@click.argument("folder", type=click.Path(path_type=Path))
@click.option(
    "--ext",
    "extensions",
    multiple=True,
    help="File extension to list (repeatable, default: `.json` and `.csv`)",
)
@click.pass_context
def scan(ctx: click.Context, folder: Path, extensions: Tuple[str, ...]) -> None:
    """List the documents in `FOLDER` that a run would upload."""
    try:
        settings = ConfigurationFactory.get_settings(cli_mode=True)
        documents = scan_folder(folder, extensions or settings.document_extensions)
    except UITesterError as e:
        display_error("Scan Failed", e.message)
        ctx.exit(1)

    display_documents(documents, str(folder))
