"""
UI Tester CLI - command-line interface for bulk document uploads.

## Key Components

1. **run** - Upload documents as described by a run configuration
2. **scan** - List the documents in a folder
3. **preview** - Show the beginning of a document

## Usage Examples

```bash
# Upload every JSON/CSV file in ./exports
uitester run ui-tester-config.json --folder ./exports --headless

# See what would be uploaded
uitester scan ./exports

# Look into a document
uitester preview ./exports/orders.json
```

## Architecture

The CLI is built using **Rich Click** for enhanced terminal output; engine
settings are read from `uitester.toml` in the working directory.
"""

import rich_click as click

from uitester_cli.preview import preview
from uitester_cli.run import run
from uitester_cli.scan import scan
from uitester_cli.utils.style import MARKDOWN_CONFIG, display_logo


@click.group(invoke_without_command=True)
@click.rich_config(help_config=MARKDOWN_CONFIG)
@click.pass_context
def uitester(ctx: click.Context) -> None:
    display_logo()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


uitester.add_command(run)
uitester.add_command(scan)
uitester.add_command(preview)

if __name__ == "__main__":
    uitester()
