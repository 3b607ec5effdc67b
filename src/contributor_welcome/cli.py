"""CLI interface for Contributor Welcome."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console

from contributor_welcome import __version__
from contributor_welcome.config import get_config
from contributor_welcome.exceptions import ContributorWelcomeError
from contributor_welcome.sdk import ContributorWelcome

app = typer.Typer(
    name="contributor-welcome",
    help="Greet first-time contributors on GitHub",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"contributor-welcome version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_payload(path: Path) -> dict[str, Any]:
    """Read a webhook payload from a JSON file."""
    with path.open(encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError(f"Event payload in {path} is not a JSON object")
    return payload


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Contributor Welcome - Greet first-time contributors on GitHub."""
    pass


@app.command()
def run(
    event_name: str = typer.Option(
        ...,
        "--event-name",
        "-e",
        envvar="GITHUB_EVENT_NAME",
        help="GitHub event name (defaults to $GITHUB_EVENT_NAME)",
    ),
    event_path: Path = typer.Option(
        ...,
        "--event-path",
        "-p",
        envvar="GITHUB_EVENT_PATH",
        exists=True,
        dir_okay=False,
        help="Path to the JSON event payload (defaults to $GITHUB_EVENT_PATH)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
):
    """Run the automations for a webhook event.

    Inside a GitHub Actions workflow both options are picked up from the
    environment.

    Examples:
        contributor-welcome run
        contributor-welcome run --event-name push --event-path event.json
    """
    setup_logging(verbose)

    try:
        payload = load_payload(event_path)
        handled = asyncio.run(_run_event(event_name, payload))
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if handled:
        console.print(f"[green]Handled '{event_name}' event[/green]")
    else:
        console.print(f"[dim]No automations for '{event_name}' event[/dim]")


async def _run_event(event_name: str, payload: dict[str, Any]) -> bool:
    """Run the automations asynchronously."""
    async with ContributorWelcome(config=get_config()) as bot:
        return await bot.handle_event(event_name, payload)


@app.command()
def check_profile(
    username: str = typer.Argument(..., help="GitHub username to look up"),
):
    """Check whether a GitHub user has a linked WordPress.org profile."""

    async def _lookup() -> bool:
        async with ContributorWelcome(config=get_config()) as bot:
            return await bot.has_profile(username)

    try:
        found = asyncio.run(_lookup())
    except ContributorWelcomeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if found:
        console.print(f"[green]@{username} has a linked WordPress.org profile[/green]")
    else:
        console.print(f"[yellow]@{username} has no linked WordPress.org profile[/yellow]")


@app.command()
def check_token():
    """Check GitHub token configuration."""
    config = get_config()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
        console.print(f"Rate limit: {config.effective_rate_limit} requests/hour")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print(f"Rate limit: {config.effective_rate_limit} requests/hour")
        console.print("Labels and comments cannot be written without a token.")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")


if __name__ == "__main__":
    app()
