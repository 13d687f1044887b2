"""Main CLI application entry point.

Defines the single ``rmtrash`` command. Its options follow rm so the
tool can be aliased in place of it.
"""

import logging
import sys
from typing import Annotated

import typer

from rmtrash import __version__
from rmtrash.cli.prompt import ConsoleQuestion
from rmtrash.core.settings import RmtrashSettings, SettingsError, load_settings
from rmtrash.core.trash import Trash
from rmtrash.models.config import InteractiveMode, RemovalConfig
from rmtrash.utils.formatting import (
    PROG_NAME,
    print_cannot_remove,
    print_error,
    print_removed,
    print_warning,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=PROG_NAME,
    help="Move files and directories to the trash, with the options of rm.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{PROG_NAME} version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Files and directories to move to the trash.", show_default=False),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Ignore nonexistent files and arguments, never prompt once.",
        ),
    ] = False,
    prompt_always: Annotated[
        bool,
        typer.Option("-i", help="Prompt before every removal."),
    ] = False,
    prompt_once: Annotated[
        bool,
        typer.Option(
            "-I",
            help="Prompt once before removing more than one argument or recursively.",
        ),
    ] = False,
    interactive: Annotated[
        InteractiveMode | None,
        typer.Option(
            "--interactive",
            help="Prompt according to WHEN: never, once (-I), or always (-i).",
            metavar="WHEN",
            case_sensitive=False,
            show_default=False,
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            "-R",
            help="Remove directories and their contents recursively.",
        ),
    ] = False,
    empty_dirs: Annotated[
        bool,
        typer.Option("--dir", "-d", help="Remove empty directories."),
    ] = False,
    one_file_system: Annotated[
        bool,
        typer.Option(
            "--one-file-system",
            help="When removing recursively, skip directories on a different file system.",
        ),
    ] = False,
    preserve_root: Annotated[
        bool,
        typer.Option("--preserve-root", help="Do not remove '/' (default)."),
    ] = False,
    no_preserve_root: Annotated[
        bool,
        typer.Option("--no-preserve-root", help="Do not treat '/' specially."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Explain what is being done."),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log decisions to stderr.", hidden=True),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Move each PATH to the trash instead of deleting it.

    By default, directories are not removed. Use [bold]-r[/bold] to remove
    a directory and its contents, or [bold]-d[/bold] to remove it only when
    it is empty.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if not paths:
        if force:
            return
        print_error("missing operand")
        typer.echo(f"Try '{PROG_NAME} --help' for more information.", err=True)
        raise typer.Exit(code=1)

    settings = _load_settings()

    if interactive is not None:
        mode = interactive
    elif prompt_always:
        mode = InteractiveMode.ALWAYS
    elif prompt_once:
        mode = InteractiveMode.ONCE
    else:
        mode = settings.interactive

    if no_preserve_root:
        keep_root = False
    elif preserve_root:
        keep_root = True
    else:
        keep_root = settings.preserve_root

    config = RemovalConfig(
        interactive_mode=mode,
        force=force,
        recursive=recursive,
        empty_dirs=empty_dirs,
        preserve_root=keep_root,
        one_file_system=one_file_system or settings.one_file_system,
        verbose=verbose or settings.verbose,
    )
    logger.debug("Effective configuration: %s", config)

    trash = Trash(config, ConsoleQuestion(), echo=print_removed)

    failures = 0
    for outcome in trash.iter_outcomes(paths):
        if outcome.failed:
            failures += 1
            print_cannot_remove(outcome.path, outcome.error or "Unknown error")

    if failures:
        raise typer.Exit(code=1)


def _load_settings() -> RmtrashSettings:
    """Load user settings, falling back to defaults on error."""
    try:
        return load_settings()
    except SettingsError as e:
        print_warning(f"{e} (using defaults)")
        return RmtrashSettings()


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
