"""Typer CLI application."""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

import bbs_art_convert
from bbs_art_convert.cli import help as help_text
from bbs_art_convert.convert import ConsoleReporter, JsonReporter, convert
from bbs_art_convert.core.options import KNOWN_MODES, RawOptions
from bbs_art_convert.errors import ConvertError
from bbs_art_convert.render import RendererRegistry


def _configure_logging(console: Console, verbose: bool) -> None:
    """Send package log records to the stderr console."""
    logger = logging.getLogger("bbs_art_convert")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def create_app(registry: RendererRegistry | None = None) -> typer.Typer:
    """
    Create and configure the CLI application.

    ``registry`` overrides renderer plugin discovery.
    """
    app = typer.Typer(
        name="bbs-art-convert",
        help="Convert ANSI / ASCII art to PNG.",
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    def banner() -> None:
        err_console.print(
            f"bbs-art-convert {bbs_art_convert.__version__} - ANSI / ASCII art to PNG converter"
        )

    def show_examples(value: bool) -> None:
        if value:
            banner()
            for line in help_text.examples():
                err_console.print(escape(line))
            raise typer.Exit()

    def show_version(value: bool) -> None:
        if value:
            banner()
            raise typer.Exit()

    @app.command(epilog=help_text.epilog())
    def main(
        file: Annotated[Optional[str], typer.Argument(help="Input file", show_default=False)] = None,
        bits: Annotated[Optional[str], typer.Option(
            "-b", "--bits", metavar="BITS",
            help="Set to 9 to render 9th column of block characters (default: 8)",
        )] = None,
        columns: Annotated[Optional[str], typer.Option(
            "-c", "--columns", metavar="COLUMNS",
            help="Adjust number of columns for BIN files (default: 160)",
        )] = None,
        examples: Annotated[bool, typer.Option(
            "-e", "--examples", is_eager=True, callback=show_examples,
            help="Print a list of examples",
        )] = False,
        font: Annotated[Optional[str], typer.Option(
            "-f", "--font", metavar="FONT", help="Select font (default: 80x25)",
        )] = None,
        icecolors: Annotated[bool, typer.Option("-i", "--icecolors", help="Enable iCE colors")] = False,
        mode: Annotated[Optional[str], typer.Option(
            "-m", "--mode", metavar="MODE",
            help=f"Rendering mode for ANS files: {', '.join(KNOWN_MODES)}",
        )] = None,
        output: Annotated[Optional[str], typer.Option(
            "-o", "--output", metavar="FILE", help="Output filename/path",
        )] = None,
        retina: Annotated[bool, typer.Option(
            "-r", "--retina", help="Create additional Retina @2x output file",
        )] = False,
        retina_factor: Annotated[Optional[str], typer.Option(
            "-R", "--retina-factor", metavar="FACTOR",
            help="Create additional Retina output file with custom scale factor (2-8)",
        )] = None,
        sauce_only: Annotated[bool, typer.Option(
            "-s", "--sauce", help="Show SAUCE record without generating output",
        )] = False,
        version: Annotated[bool, typer.Option(
            "-v", "--version", is_eager=True, callback=show_version,
            help="Show version information",
        )] = False,
        json_output: Annotated[bool, typer.Option("-j", "--json", help="Print the summary as JSON")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", help="Log probe and render details")] = False,
    ) -> None:
        """Convert ANSI, PCBoard, Binary, Artworx, iCEDraw, Tundra and XBin art to PNG."""
        # No banner in JSON mode.
        if not json_output:
            banner()
        if file is None:
            err_console.print(escape(help_text.SYNOPSIS))
            raise typer.Exit()

        _configure_logging(err_console, verbose)
        raw = RawOptions(
            bits=bits,
            columns=columns,
            font=font,
            mode=mode,
            icecolors=icecolors,
            output=output,
            retina=retina,
            retina_scale=retina_factor,
            display_only=sauce_only,
        )
        reporter = JsonReporter() if json_output else ConsoleReporter(err_console)

        try:
            convert(file, raw, registry=registry, reporter=reporter)
        except ConvertError as e:
            err_console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(int(e.exit_code))

    return app
