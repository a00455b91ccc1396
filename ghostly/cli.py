"""
CLI for Ghostly.

Commands:
- capture: Save a command or fix for the current project
- search: Search this project's memories
- show: Show the latest memories for this project
- scope: Print the current project's scope id
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ghostly.config import Config
from ghostly.models import Episode
from ghostly.storage.episode_store import EpisodeStore, StorageError
from ghostly.core.memory_manager import MemoryManager
from ghostly.core.validation import EmptyInputError

console = Console()

logger = logging.getLogger("ghostly")


def get_manager(ctx: click.Context) -> MemoryManager:
    """Build a MemoryManager from the loaded config."""
    config: Config = ctx.obj["config"]
    store = EpisodeStore(config.memory_file)
    return MemoryManager(
        store=store,
        max_results=config.max_results,
        normalize_paths=config.normalize_project_paths,
    )


def fail(error: StorageError) -> None:
    """Report a storage failure and exit."""
    console.print(f"[red]Error: {escape(error.message)}[/red]")
    sys.exit(1)


def render_episodes(episodes: list[Episode], title: str) -> None:
    """Print episodes as a numbered table."""
    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("Summary", style="cyan", width=16)
    table.add_column("Fix", style="green")
    table.add_column("Saved", style="dim", width=16)

    for i, episode in enumerate(episodes, 1):
        table.add_row(
            str(i),
            escape(episode.summary or episode.body[:30]),
            escape(episode.body.replace("\n", " ")),
            episode.created_time.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


@click.group()
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.option(
    "--project-root", "-p",
    type=click.Path(file_okay=False),
    default=None,
    help="Project root (default: current directory)",
)
@click.option("--no-project", is_flag=True, help="Use the shared no-project scope")
@click.option("--verbose", "-v", is_flag=True, help="Enable info logging")
@click.pass_context
def main(
    ctx: click.Context,
    config: Optional[str],
    project_root: Optional[str],
    no_project: bool,
    verbose: bool,
) -> None:
    """Ghostly - Episodic memory for your terminal commands."""
    ctx.ensure_object(dict)

    try:
        ctx.obj["config"] = Config.load(Path(config) if config else None)
    except PydanticValidationError as e:
        console.print(f"[red]Invalid config: {escape(str(e))}[/red]")
        sys.exit(1)

    logging.basicConfig(
        level=logging.INFO if verbose else ctx.obj["config"].log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if no_project:
        ctx.obj["root_path"] = None
    elif project_root:
        ctx.obj["root_path"] = os.path.abspath(project_root)
    else:
        ctx.obj["root_path"] = os.getcwd()

    logger.debug(f"Memory file: {ctx.obj['config'].memory_file}, project root: {ctx.obj['root_path']}")


@main.command()
@click.argument("text", required=False)
@click.pass_context
def capture(ctx: click.Context, text: Optional[str]) -> None:
    """Save TEXT (or stdin) as a memory for this project."""
    if text is None:
        stdin = click.get_text_stream("stdin")
        if not stdin.isatty():
            text = stdin.read()

    manager = get_manager(ctx)
    try:
        episode = manager.capture(text, ctx.obj["root_path"])
    except EmptyInputError as e:
        console.print(f"[yellow]{e.message}[/yellow]")
        return
    except StorageError as e:
        fail(e)

    console.print(f"[green]Saved: {escape(episode.summary)}[/green]")


@main.command()
@click.argument("query", required=False)
@click.option("--limit", "-l", default=None, type=click.IntRange(min=1), help="Maximum number of results")
@click.option("--pick", type=int, default=None, help="Print the Nth result's text only")
@click.pass_context
def search(
    ctx: click.Context,
    query: Optional[str],
    limit: Optional[int],
    pick: Optional[int],
) -> None:
    """Search this project's memories."""
    if query is None:
        query = Prompt.ask("Search memories", default="", show_default=False)

    if not query:
        console.print("[yellow]No query given[/yellow]")
        return

    manager = get_manager(ctx)
    try:
        results = manager.search(query, ctx.obj["root_path"], limit=limit)
    except StorageError as e:
        fail(e)

    if not results:
        console.print("[dim]No memories found[/dim]")
        return

    if pick is not None:
        if not 1 <= pick <= len(results):
            console.print(f"[red]No result #{pick} (found {len(results)})[/red]")
            sys.exit(1)
        click.echo(results[pick - 1].body)
        return

    render_episodes(results, f"Memories matching '{escape(query)}' ({len(results)})")


@main.command()
@click.option("--limit", "-l", default=None, type=click.IntRange(min=1), help="Maximum number of results")
@click.pass_context
def show(ctx: click.Context, limit: Optional[int]) -> None:
    """Show the latest memories for this project."""
    manager = get_manager(ctx)
    root_path = ctx.obj["root_path"]
    try:
        episodes = manager.list_recent(root_path, limit=limit)
    except StorageError as e:
        fail(e)

    if not episodes:
        console.print("[dim]No memories for this project[/dim]")
        return

    console.print(Panel.fit(
        f"[bold blue]Ghostly Memory[/bold blue]\nProject: {manager.scope_for(root_path)}",
        border_style="blue",
    ))
    render_episodes(episodes, f"Recent ({len(episodes)})")


@main.command()
@click.pass_context
def scope(ctx: click.Context) -> None:
    """Print the scope id for the current project."""
    manager = get_manager(ctx)
    click.echo(manager.scope_for(ctx.obj["root_path"]))


if __name__ == "__main__":
    main()
