"""Command-line interface for tabstijl."""

import io
import logging

import click

from . import __version__
from .config import OPTIONS, OptionSpec, load_config
from .exceptions import ConfigurationError
from .tokenizer import tokenize
from .visualization import ColorMode, render_table

logger = logging.getLogger(__name__)

LOGO = (
    " _____     _   _____ _   _   _ _ \n"
    "|_   _|___| |_|   __| |_|_| |_| |\n"
    "  | | | .'| . |__   |  _| | | | |\n"
    "  |_| |__,|___|_____|_| |_|_| |_|\n"
    "                          |___|  \n"
)


def _option_label(spec: OptionSpec) -> str:
    label = spec.name if spec.is_flag else f"{spec.name}={spec.metavar}"
    return f"{spec.short}, {label}" if spec.short else label


def _option_help(spec: OptionSpec) -> str:
    if spec.choices is None:
        return spec.help
    return f"{spec.help} [{'|'.join(spec.choices)}]"


class TableCommand(click.Command):
    """Click command whose help also lists the table options.

    Table options are order-sensitive (later options overwrite earlier ones)
    and are parsed by ``tabstijl.config``, so click passes them through
    untouched and only documents them here.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write(LOGO)
        formatter.write_paragraph()
        super().format_help(ctx, formatter)

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_options(ctx, formatter)
        with formatter.section("Table options"):
            formatter.write_dl([(_option_label(spec), _option_help(spec)) for spec in OPTIONS])


@click.command(
    "tabstijl",
    cls=TableCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
    epilog="See the GitHub page at <https://github.com/naufalhanif25/tabstijl.git>",
)
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name="tabstijl",
    message="%(prog)s %(version)s",
)
@click.option(
    "--color/--no-color",
    default=None,
    help=(
        "Force or disable ANSI colors. By default colors are stripped unless "
        "standard output is a terminal; pass --color when piping, e.g. into 'less -R'"
    ),
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    envvar="TABSTIJL_LOG_LEVEL",
    show_default=True,
    help="Diagnostic log level (logs go to stderr)",
)
@click.argument("table_options", nargs=-1, type=click.UNPROCESSED)
def main(color: bool | None, log_level: str, table_options: tuple[str, ...]) -> None:
    """Parse tabular data from standard input and display it as a formatted table.

    Table options are applied left to right; when two options set the same
    field, the later one wins.

    \b
    Example:
        ls -l | tabstijl --theme=matrix --text-color=red
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(table_options)
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    stdin = click.get_binary_stream("stdin")
    with io.TextIOWrapper(stdin, encoding="utf-8", errors="replace") as text:
        grid = tokenize(text, config.delimiter, config.skip_first_line)

    color_mode = ColorMode.PLAIN if color is False else ColorMode.ANSI
    lines = render_table(grid, config, color_mode)
    logger.debug("Writing %d line(s) in %s mode", len(lines), color_mode.value)
    for line in lines:
        click.echo(line, color=color)
