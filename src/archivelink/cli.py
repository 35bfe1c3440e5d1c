"""archivelink CLI - archive URLs and manage archived links."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from archivelink.adapters.config_env import load_app_config
from archivelink.adapters.selection import StaticSelectionAdapter
from archivelink.adapters.text_output import BufferOutputAdapter
from archivelink.adapters.ui_feedback import UIFeedbackAdapter
from archivelink.archived_links import find_archived_links, open_archived_link
from archivelink.archiver import MonolithArchiver
from archivelink.config import config
from archivelink.core.controller import ArchiveController
from archivelink.exceptions import InvalidOutputPathError
from archivelink.logging_utils import setup_logging
from archivelink.platform_utils import print_platform_info
from archivelink.settings import SettingsStore

app = typer.Typer(help="archivelink - Save web pages with monolith and link the archive")
settings_app = typer.Typer(help="Settings commands")

app.add_typer(settings_app, name="settings")

console = Console()
err_console = Console(stderr=True)


def get_store() -> SettingsStore:
    """Get the settings store for the configured settings file."""
    return SettingsStore(config.SETTINGS_PATH)


def get_archiver() -> MonolithArchiver:
    app_config = load_app_config()
    return MonolithArchiver(binary=app_config.monolith_bin, timeout=app_config.archive_timeout)


@app.callback()
def _main(
    debug: Annotated[bool, typer.Option("--debug", help="Verbose logging")] = False,
):
    # Logs go to stderr, stdout stays clean for filter use
    setup_logging(logging.DEBUG if debug or config.DEBUG else logging.INFO)


# =============================================================================
# Archive
# =============================================================================


@app.command("archive")
def archive(
    url: Annotated[Optional[str], typer.Argument(help="URL to archive; '-' or omitted reads stdin")] = None,
):
    """Archive a URL and print it followed by a link to the saved copy.

    Works as an editor filter: on failure the input is printed unchanged.
    """
    if url is None or url == "-":
        text = sys.stdin.read()
    else:
        text = url

    output = BufferOutputAdapter()
    controller = ArchiveController(
        selection=StaticSelectionAdapter(text),
        archiver=get_archiver(),
        text_output=output,
        ui=UIFeedbackAdapter(),
        settings=get_store().settings,
    )
    success, result = controller.run()

    if not success:
        sys.stdout.write(text)
        if result is None:
            err_console.print("[red]Selection is not a URL.[/red]")
        else:
            err_console.print(f"[red]Archiving failed (exit code {result.returncode}), check the log.[/red]")
        raise typer.Exit(1)

    # Keep whatever trailing newline the selection carried
    trailing = text[len(text.rstrip("\n")) :]
    sys.stdout.write(output.text + trailing)


# =============================================================================
# Settings
# =============================================================================


@settings_app.command("show")
def settings_show():
    """Show the current settings."""
    store = get_store()
    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Flags", store.settings.flags)
    table.add_row("Output folder", store.settings.output_path)
    table.add_row("File", str(store.path), style="dim")
    console.print(table)


@settings_app.command("flags", context_settings={"ignore_unknown_options": True})
def settings_flags(
    value: Annotated[list[str], typer.Argument(help="Flags used when invoking monolith, space separated")],
):
    """Set the flags used when invoking monolith.

    Accepts one quoted string or the flags as separate arguments.
    """
    store = get_store()
    store.set_flags(" ".join(value))
    console.print(f"[green]Flags set to:[/green] {store.settings.flags}")


@settings_app.command("output")
def settings_output(
    path: Annotated[str, typer.Argument(help="Where archived pages will be saved")],
):
    """Set the output folder."""
    store = get_store()
    try:
        store.set_output_path(path)
    except InvalidOutputPathError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Output folder set to:[/green] {store.settings.output_path}")


# =============================================================================
# Archived links
# =============================================================================


def _read_document(file: Path) -> str:
    try:
        return file.read_text(encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Could not read {file}: {e}[/red]")
        raise typer.Exit(1)


@app.command("links")
def links(
    file: Annotated[Path, typer.Argument(help="Document to scan")],
):
    """List the archived links in a document."""
    found = find_archived_links(_read_document(file))
    if not found:
        console.print("[yellow]No archived links found.[/yellow]")
        return

    table = Table(title=f"Archived links in {file.name}")
    table.add_column("#", justify="right")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("URL", style="cyan")
    table.add_column("Archive")
    for index, link in enumerate(found, start=1):
        table.add_row(str(index), str(link.line), link.url or "-", link.href)
    console.print(table)


@app.command("open")
def open_link(
    file: Annotated[Path, typer.Argument(help="Document containing archived links")],
    index: Annotated[int, typer.Option("--index", "-n", help="Which archived link to open (1-based)")] = 1,
):
    """Open an archived link from a document in the browser."""
    found = find_archived_links(_read_document(file))
    if not 1 <= index <= len(found):
        err_console.print(f"[red]No archived link #{index} in {file} ({len(found)} found).[/red]")
        raise typer.Exit(1)

    href = found[index - 1].href
    if not open_archived_link(href):
        err_console.print(f"[red]Could not open {href}[/red]")
        raise typer.Exit(1)
    console.print(f"Opened {href}")


# =============================================================================
# Diagnostics
# =============================================================================


@app.command("info")
def info():
    """Show platform details and the effective configuration."""
    print_platform_info()
    app_config = load_app_config()
    console.print(f"monolith: {app_config.monolith_bin}")
    console.print(f"Timeout: {app_config.archive_timeout or 'none'}")
    console.print(f"Settings file: {app_config.settings_path}")
    console.print(f"Notifications: {'on' if app_config.notifications_enabled else 'off'}")


# =============================================================================
# Daemon
# =============================================================================


@app.command("daemon")
def daemon(ctx: typer.Context):
    """Archive the X11 selection on a global hotkey."""
    from archivelink.main import main

    main(debug=ctx.parent.params.get("debug", False))


if __name__ == "__main__":
    app()
