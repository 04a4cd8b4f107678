"""Typer-based CLI for Grab Actions."""

import json
import logging
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .commands import CommandSurface
from .config import GrabConfig
from .errors import GrabError
from .models.settings import AppSettings
from .registry import find_capture
from .session import SessionBridge

app = typer.Typer(
    name="grab",
    help="Grab Actions - browse and act on screenshot and clipboard captures",
    add_completion=False,
)

console = Console()

APP_DIR_HELP = "Application-support directory (default: GRAB_APP_SUPPORT_DIR env or platform default)"


def _load_surface(app_dir: str | None) -> CommandSurface:
    try:
        config = GrabConfig.from_env(cli_app_support_dir=app_dir)
    except (GrabError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    return CommandSurface(config)


def _run(surface: CommandSurface, name: str, **kwargs):
    """Invoke a command and exit with code 1 on failure."""
    result = surface.invoke(name, **kwargs)
    if not result.ok:
        console.print(f"[red]Error: {escape(result.error)}[/red]")
        raise typer.Exit(code=1)
    return result.data


@app.callback()
def main(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
        envvar="GRAB_DEBUG",
    ),
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command("dir")
def captures_dir(
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Print the active captures directory."""
    surface = _load_surface(app_dir)
    console.print(_run(surface, "get_captures_dir"))


@app.command("list")
def list_cmd(
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """List captures, newest first."""
    surface = _load_surface(app_dir)
    captures = _run(surface, "list_captures")

    if as_json:
        console.print_json(json.dumps(captures))
        return

    if not captures:
        console.print("[dim]No captures found[/dim]")
        return

    table = Table(title=f"Captures ({len(captures)})")
    table.add_column("Modified", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Size", justify="right")
    table.add_column("Metadata")

    for capture in captures:
        metadata = capture["metadata"]
        if metadata:
            meta_str = f"{metadata['type']} ({metadata['id']})"
        elif capture["has_metadata"]:
            meta_str = "[yellow]unreadable[/yellow]"
        else:
            meta_str = "[dim]-[/dim]"
        table.add_row(
            datetime.fromtimestamp(capture["modified"]).strftime("%Y-%m-%d %H:%M:%S"),
            capture["capture_type"],
            escape(capture["name"]),
            str(capture["size"]),
            meta_str,
        )

    console.print(table)


@app.command()
def meta(
    filename: str = typer.Argument(..., help="Capture file name"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Show the sidecar metadata of a capture."""
    surface = _load_surface(app_dir)
    console.print_json(json.dumps(_run(surface, "get_capture_metadata", filename=filename)))


@app.command()
def text(
    filename: str = typer.Argument(..., help="Text capture file name"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Print the content of a text capture."""
    surface = _load_surface(app_dir)
    typer.echo(_run(surface, "get_text_content", filename=filename), nl=False)


@app.command()
def image(
    filename: str = typer.Argument(..., help="Image capture file name"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Print an image capture as base64."""
    surface = _load_surface(app_dir)
    typer.echo(_run(surface, "get_image_content", filename=filename))


@app.command()
def copy(
    filename: str = typer.Argument(..., help="Image capture file name"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Copy an image capture to the system clipboard."""
    surface = _load_surface(app_dir)
    _run(surface, "copy_image_to_clipboard", filename=filename)
    console.print(f"[green]Copied to clipboard:[/green] {filename}")


@app.command()
def delete(
    filename: str = typer.Argument(..., help="Capture file name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Delete a capture and its sidecar metadata."""
    if not yes and not typer.confirm(f"Delete {filename}?"):
        raise typer.Exit(code=0)

    surface = _load_surface(app_dir)
    removed = _run(surface, "delete_capture", filename=filename)
    for path in removed:
        console.print(f"[green]-[/green] Removed {path}")


@app.command()
def export(
    filename: str = typer.Argument(..., help="Capture file name"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Copy a capture into the downloads folder."""
    surface = _load_surface(app_dir)
    target = _run(surface, "save_capture_to_downloads", filename=filename)
    console.print(f"[green]Saved:[/green] {target}")


@app.command("clipboard-event")
def clipboard_event(
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Consume and print the pending clipboard event, if any."""
    surface = _load_surface(app_dir)
    payload = _run(surface, "check_clipboard_event")
    if payload is None:
        console.print("[dim]No clipboard event pending[/dim]")
        return
    console.print_json(json.dumps(payload))


@app.command("open")
def open_capture(
    capture_id: str = typer.Option(None, "--capture-id", help="Capture identifier to open"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Resolve a launch-supplied capture id the way the UI does at startup."""
    surface = _load_surface(app_dir)

    def emit(event: str, value: str) -> None:
        console.print(f"[cyan]{event}[/cyan] {value}")

    bridge = SessionBridge(emit, argv=[f"--capture-id={capture_id}"] if capture_id else [])
    value = bridge.on_startup()
    if value is None:
        console.print("[dim]No capture id supplied[/dim]")
        return

    try:
        entry = find_capture(surface.store, value)
    except GrabError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    if entry is None:
        console.print(f"[yellow]Capture not found for id:[/yellow] {value}")
        raise typer.Exit(code=1)
    console.print(f"[green]Capture:[/green] {entry.path}")


settings_app = typer.Typer(help="Settings commands")
app.add_typer(settings_app, name="settings")


@settings_app.command("show")
def settings_show(
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Show the persisted settings."""
    surface = _load_surface(app_dir)
    settings = _run(surface, "get_app_settings")
    console.print(f"[bold]Capture folder:[/bold]         {settings['capture_folder']}")
    console.print(f"[bold]Default capture folder:[/bold] {settings['default_capture_folder']}")
    console.print(f"[dim]Settings file: {surface.paths.settings_file}[/dim]")


@settings_app.command("set")
def settings_set(
    folder: str = typer.Option(..., "--folder", "-f", help="New capture folder"),
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Set the capture folder (created if missing)."""
    surface = _load_surface(app_dir)
    current = _run(surface, "get_app_settings")
    record = AppSettings(
        capture_folder=str(Path(folder).expanduser().resolve()),
        default_capture_folder=current["default_capture_folder"],
    )
    saved = _run(surface, "save_app_settings", settings=record)
    console.print(f"[green]Capture folder set:[/green] {saved['capture_folder']}")


@settings_app.command("reset")
def settings_reset(
    app_dir: str = typer.Option(None, "--app-dir", "-a", help=APP_DIR_HELP),
):
    """Point the capture folder back at the default."""
    surface = _load_surface(app_dir)
    try:
        settings = surface.store.reset()
    except GrabError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Capture folder reset:[/green] {settings.capture_folder}")


if __name__ == "__main__":
    app()
