"""
Command line interface for clipstash.

Running `clipstash` with no subcommand starts the interactive menu. The
subcommands run a single operation against the same store file and exit.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape

from clipstash.app import ClipStashApp
from clipstash.clipboard import PyperclipClipboard
from clipstash.config import StoreSettings, get_settings
from clipstash.errors import ClipStashError, PersistError
from clipstash.logger import setup_logging
from clipstash.render import search_table, store_table
from clipstash.services.codec import ExportFormat
from clipstash.shell import RichShell

console = Console(highlight=False, color_system="auto", soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

app = typer.Typer(
    name="clipstash",
    help="Save clipboard contents under named keys and recall them later.",
    add_completion=False,
)


@contextmanager
def _errors_exit() -> Iterator[None]:
    """Print clipstash errors and exit with status 1."""
    try:
        yield
    except PersistError as e:
        err_console.print(f"[bold red]Not saved:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ClipStashError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _app(ctx: typer.Context) -> ClipStashApp:
    return ctx.obj


def _format(path: Path, fmt: Optional[str]) -> ExportFormat:
    if fmt:
        return ExportFormat.from_name(fmt)
    return ExportFormat.from_path(path)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    store: Optional[Path] = typer.Option(
        None,
        "--store",
        "-s",
        help="Store file to use instead of the configured one.",
    ),
):
    """Start the interactive menu when no command is given."""
    setup_logging()
    settings = get_settings(StoreSettings)
    if store is not None:
        settings = settings.model_copy(update={"store_path": store.expanduser()})
    with _errors_exit():
        ctx.obj = ClipStashApp.open(settings, RichShell(console), PyperclipClipboard())
    if ctx.invoked_subcommand is None:
        raise typer.Exit(ctx.obj.run())


@app.command(name="list", help="Show saved histories and their entries.")
def list_entries(
    ctx: typer.Context,
    history: Optional[str] = typer.Option(
        None, "--history", "-H", help="Only show this history."
    ),
):
    clip = _app(ctx)
    with _errors_exit():
        if history is not None:
            clip.store.get_history(history)
        elif clip.store.is_empty:
            console.print("No clipboard histories saved yet.")
            return
        console.print(store_table(clip.store, history))


@app.command(help="Find entries whose history, key, or value contains TERM.")
def search(ctx: typer.Context, term: str = typer.Argument(...)):
    clip = _app(ctx)
    with _errors_exit():
        result = clip.find(term)
    if result.is_empty:
        console.print(result.message(), markup=False)
        raise typer.Exit(1)
    console.print(search_table(result))


@app.command(help="Save the current clipboard contents under HISTORY and KEY.")
def save(ctx: typer.Context, history: str, key: str):
    clip = _app(ctx)
    with _errors_exit():
        clip.capture(history, key)
    console.print(f"Data saved to clipboard history: {history}", markup=False)


@app.command(help="Copy the value saved under HISTORY and KEY to the clipboard.")
def get(ctx: typer.Context, history: str, key: str):
    clip = _app(ctx)
    with _errors_exit():
        clip.recall(history, key)
    console.print("Data copied to clipboard.")


@app.command(help="Delete KEY from HISTORY.")
def delete(ctx: typer.Context, history: str, key: str):
    clip = _app(ctx)
    with _errors_exit():
        clip.remove(history, key)
    console.print(f"Key deleted from clipboard history: {history}", markup=False)


@app.command(name="export", help="Write every entry to PATH as JSON or CSV.")
def export_(
    ctx: typer.Context,
    path: Path,
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="json or csv (default: from the file extension)."
    ),
):
    clip = _app(ctx)
    with _errors_exit():
        written = clip.export(path, _format(path, fmt))
    console.print(f"Clipboard data exported to {written}.", markup=False)


@app.command(name="import", help="Merge entries from a JSON or CSV export at PATH.")
def import_(
    ctx: typer.Context,
    path: Path,
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="json or csv (default: from the file extension)."
    ),
):
    clip = _app(ctx)
    with _errors_exit():
        report = clip.import_file(path, _format(path, fmt))
    console.print(f"Data imported from {path} ({report.summary()}).", markup=False)


def entry():
    """Console script entry point."""
    try:
        app()
    except Exception as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise e


if __name__ == "__main__":
    entry()
