"""
Run command for UI Tester CLI.

This module provides the **run command** that uploads documents into a web
form as described by a run configuration file.

## Key Features

1. **Configuration Loading** - JSON (exported by the desktop tool) or TOML run configurations
2. **Folder Scanning** - Replace the configured documents with the contents of a folder
3. **Live Output** - Colored log lines and progress through the rich terminal observer
4. **Graceful Stop** - Ctrl+C stops the run and still prints the partial result

## Usage Examples

```bash
# Upload every JSON/CSV file in ./exports
uitester run ui-tester-config.json --folder ./exports

# Only CSV files, without a browser window
uitester run ui-tester-config.json --folder ./exports --ext .csv --headless

# Only run the initial steps
uitester run ui-tester-config.json --ui-only
```
"""

import asyncio
import signal
from pathlib import Path
from typing import Optional, Set, Tuple

import rich_click as click
from rich.console import Console

from uitester.automation.engine import AutomationEngine
from uitester.automation.errors import UITesterError
from uitester.config import ConfigurationFactory, load_run_config
from uitester.documents import scan_folder
from uitester.schemas import RunConfig, RunResult
from uitester.utils import configure_logging
from uitester_cli.utils.result_display import display_error, display_run_summary
from uitester_cli.utils.style import MARKDOWN_CONFIG

console = Console()


@click.command()
@click.rich_config(help_config=MARKDOWN_CONFIG)
@click.argument(
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--folder",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Upload the documents found in this folder instead of the ones in the configuration",
)
@click.option(
    "--ext",
    "extensions",
    multiple=True,
    help="File extension to pick up from `--folder` (repeatable, default: `.json` and `.csv`)",
)
@click.option(
    "--headless/--headed",
    default=None,
    help="Run the browser without a window (default: as configured)",
)
@click.option(
    "--ui-only",
    is_flag=True,
    default=False,
    help="Only run the initial steps, skip all uploads",
)
@click.option(
    "--enable-logging",
    is_flag=True,
    default=False,
    help="Enable UI Tester logging",
)
@click.pass_context
def run(
    ctx: click.Context,
    config_path: Path,
    folder: Optional[Path],
    extensions: Tuple[str, ...],
    headless: Optional[bool],
    ui_only: bool,
    enable_logging: bool,
) -> None:
    """Upload documents into a web form.

    Loads the run configuration from `CONFIG_PATH`, opens the target page,
    runs the initial steps once and uploads every document in order.

    Notes:
        - Engine settings are read from `uitester.toml` and `UITESTER_*` variables
        - Press Ctrl+C to stop; the partial result is still shown
        - Exits with status 1 if any document failed or the run failed
    """
    try:
        settings = ConfigurationFactory.get_settings(cli_mode=True)

        documents = None
        if folder is not None:
            documents = scan_folder(folder, extensions or settings.document_extensions)
            console.print(f"📁 Found {len(documents)} document(s) in {folder}")

        config = load_run_config(
            config_path,
            documents=documents,
            headless=headless,
            ui_automation_only=True if ui_only else None,
        )
    except UITesterError as e:
        display_error("Configuration Error", e.message)
        ctx.exit(1)

    configure_logging(enabled=enable_logging or settings.logging_enabled, level_name=settings.log_level)

    engine = AutomationEngine(settings=settings)

    try:
        result = asyncio.run(_run_until_done(engine, config))
    except UITesterError as e:
        display_error("Automation Failed", e.message)
        ctx.exit(1)

    display_run_summary(result, len(config.documents))

    if result.failed:
        ctx.exit(1)


async def _run_until_done(engine: AutomationEngine, config: RunConfig) -> RunResult:
    """Run the engine, stopping it when SIGINT arrives."""
    loop = asyncio.get_running_loop()
    stop_tasks: Set["asyncio.Task[bool]"] = set()

    def request_stop() -> None:
        console.print("[yellow]⏹️ Stop requested, closing the browser...[/yellow]")
        stop_tasks.add(loop.create_task(engine.stop()))

    try:
        loop.add_signal_handler(signal.SIGINT, request_stop)
        handler_installed = True
    except (NotImplementedError, RuntimeError):
        # e.g. Windows event loops; Ctrl+C then raises KeyboardInterrupt as usual
        handler_installed = False

    try:
        return await engine.start(config)
    finally:
        if handler_installed:
            loop.remove_signal_handler(signal.SIGINT)
        if stop_tasks:
            await asyncio.gather(*stop_tasks, return_exceptions=True)
