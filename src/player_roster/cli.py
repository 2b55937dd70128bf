"""
Player Roster CLI - Command-line interface.

Inspect and drive a file-backed roster from the terminal, using the same
router and auto-registration hooks the game host runs.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from player_roster.config import RosterSettings, configure_logging
from player_roster.core.exceptions import ConfigurationError
from player_roster.hooks import RosterApp, install
from player_roster.host.runtime import HostRuntime, Player
from player_roster.host.slots import FileSlotBackend

app = typer.Typer(
    name="player-roster",
    help="Player Roster - chat-driven player registry",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    slot_file: Optional[Path] = typer.Option(
        None, "--slot-file", "-f", help="Slot storage file (overrides PR_SLOT_FILE)"
    ),
):
    """Load settings shared by all commands."""
    try:
        settings = RosterSettings.from_env(slot_file=slot_file)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    configure_logging(settings.log_level)
    ctx.obj = settings


def _open(settings: RosterSettings) -> RosterApp:
    slots = FileSlotBackend(settings.slot_file, max_value_size=settings.max_slot_size)
    return install(HostRuntime(slots), settings)


@app.command("list")
def list_players(ctx: typer.Context):
    """List all registered players."""
    roster = _open(ctx.obj)
    names = roster.store.list()

    if not names:
        console.print("[yellow]No players registered[/yellow]")
        return

    table = Table(title=f"Registered Players ({len(names)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    for i, name in enumerate(names, start=1):
        table.add_row(str(i), name)

    console.print(table)


@app.command()
def chat(
    ctx: typer.Context,
    line: str = typer.Argument(..., help="Chat line, e.g. '+set Alice'"),
    sender: str = typer.Option("Console", "--as", "-a", help="Sending player name"),
):
    """Send one chat line as a player and show the reply."""
    roster = _open(ctx.obj)
    player = roster.runtime.connect(Player(sender))
    event = roster.runtime.send_chat(player, line)

    if not event.cancel:
        console.print(f"[dim]Not a command; delivered to chat as {sender}[/dim]")
        return

    for message in player.messages:
        console.print(Panel.fit(message, title=f"Reply to {sender}"))


@app.command()
def join(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Players joining the world"),
):
    """Simulate players joining for the first time."""
    roster = _open(ctx.obj)

    table = Table(title="Join Results")
    table.add_column("Player", style="cyan")
    table.add_column("Reply")

    for name in names:
        player = Player(name)
        roster.runtime.join(player)
        reply = player.messages[0] if player.messages else "[dim]already registered[/dim]"
        table.add_row(name, reply)

    console.print(table)


@app.command()
def dump(ctx: typer.Context):
    """Print the registry as JSON."""
    roster = _open(ctx.obj)
    console.print_json(roster.store.dump_json())


@app.command()
def version():
    """Show Player Roster version."""
    from player_roster import __version__

    console.print(f"Player Roster v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
