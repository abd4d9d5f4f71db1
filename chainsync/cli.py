"""
Main CLI entry point for ChainSync.

This module provides the ``chainsync`` command, which loads configuration,
runs the processor and reports the results.
"""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from chainsync import __version__
from chainsync.config import ChainSyncConfig, load_config
from chainsync.exceptions import ChainSyncError
from chainsync.processor import ChainSync, ProcessResult
from chainsync.utils import get_logger, setup_logging

app = typer.Typer(help="ChainSync - run the asynchronous processor.")

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ChainSync v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """ChainSync command line interface."""


async def run_processor(
    processor: ChainSync, runs: int, concurrent: bool = False
) -> List[ProcessResult]:
    """Execute the processor several times.

    Args:
        processor: Processor to execute
        runs: Number of executions
        concurrent: Run all executions at once instead of one after another

    Returns:
        Results in call order
    """
    if concurrent:
        return list(await asyncio.gather(*(processor.execute() for _ in range(runs))))

    results = []
    for _ in range(runs):
        results.append(await processor.execute())
    return results


def display_results(results: List[ProcessResult], console: Console) -> None:
    """Display results as a table."""
    table = Table(title="ChainSync Results")
    table.add_column("#", style="cyan")
    table.add_column("Success", style="green")
    table.add_column("Processed", style="yellow")
    table.add_column("Message")
    table.add_column("Timestamp", style="dim")

    for i, result in enumerate(results, start=1):
        table.add_row(
            str(i),
            "yes" if result.success else "[red]no[/red]",
            str(result.data.processed) if result.data else "-",
            result.message,
            result.timestamp.isoformat(),
        )

    console.print(table)


def _load(config_path: Optional[Path]) -> ChainSyncConfig:
    return load_config(str(config_path) if config_path else None)


@app.command()
def run(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        help="Path to a TOML or YAML configuration file",
    ),
    verbose: Optional[bool] = typer.Option(
        None,
        "--verbose/--quiet",
        help="Override the configured verbose setting",
    ),
    runs: int = typer.Option(
        1,
        "--runs",
        "-n",
        min=1,
        help="Number of times to execute the processor",
    ),
    concurrent: bool = typer.Option(
        False,
        "--concurrent",
        help="Start all runs at once instead of sequentially",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print one JSON result per line",
    ),
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
) -> None:
    """Execute the processor and report the results."""
    console = Console()

    try:
        # Keep stdout for results when printing JSON
        setup_logging(
            level=log_level,
            structured=json_output,
            stream=sys.stderr if json_output else None,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    try:
        config = _load(config_path).merged(verbose=verbose)
        processor = ChainSync(config)
        logger.debug("Starting runs", runs=runs, concurrent=concurrent)
        results = asyncio.run(run_processor(processor, runs, concurrent))
    except ChainSyncError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=e.exit_code)

    if json_output:
        for result in results:
            typer.echo(result.model_dump_json())
    else:
        display_results(results, console)

    failed = sum(1 for result in results if not result.success)
    if failed:
        logger.warning("Some runs failed", failed=failed, total=len(results))
        raise typer.Exit(code=1)


@app.command("config")
def show_config(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        help="Path to a TOML or YAML configuration file",
    ),
) -> None:
    """Print the effective configuration as JSON."""
    try:
        config = _load(config_path)
    except ChainSyncError as e:
        Console().print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=e.exit_code)

    typer.echo(config.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
