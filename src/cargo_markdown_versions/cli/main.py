# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : main.py
#   file_relpath : src/cargo_markdown_versions/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``cargo-markdown-versions`` command.

Key ideas:
- Shared state (verbosity, color, console) is initialized once and placed into ``ctx.obj``.
- The markdown document is the only thing written to stdout; logs and errors go to stderr.
- Domain errors are converted into CLI errors carrying a sysexits-style exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from cargo_markdown_versions.api import generate_markdown
from cargo_markdown_versions.cli.console import ClickConsole
from cargo_markdown_versions.cli.errors import CliUnexpectedError, CliUsageError, as_cli_error
from cargo_markdown_versions.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from cargo_markdown_versions.config.logging import get_logger, resolve_env_log_level, setup_logging
from cargo_markdown_versions.constants import (
    CARGO_SUBCOMMAND,
    MARKDOWN_VERSIONS_VERSION,
    PROJECT_NAME,
)
from cargo_markdown_versions.core.errors import MarkdownVersionsError

if TYPE_CHECKING:
    from cargo_markdown_versions.cli.console import ConsoleLike
    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger

logger: MarkdownVersionsLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    console = ClickConsole()
    ctx.obj["console"] = console

    # The environment overrides the command line for internal logging.
    level: int = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    setup_logging(level=level, enable_color=enable_color)


def validate_cargo_subcommand(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> str | None:
    """Accept the subcommand word cargo passes when run as ``cargo markdown-versions``."""
    if value is not None and value != CARGO_SUBCOMMAND:
        raise CliUsageError(
            f"unexpected argument {value!r} (only {CARGO_SUBCOMMAND!r} is accepted)"
        )
    return value


@click.command(
    name=PROJECT_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Render the version history of a crate as markdown, prepended with its readme, "
        "and write it to stdout."
    ),
)
@click.argument(
    "cargo_subcommand",
    metavar=f"[{CARGO_SUBCOMMAND}]",
    required=False,
    callback=validate_cargo_subcommand,
)
@click.option(
    "--manifest-path",
    "manifest_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to Cargo.toml (default: nearest Cargo.toml from the current directory).",
)
@click.option(
    "-p",
    "--package",
    "package",
    default=None,
    help="Package to render when the workspace has several.",
)
@click.option(
    "-d",
    "--default-configuration",
    "default_configuration",
    is_flag=True,
    default=False,
    help="Use the default configuration if [package.metadata.markdown-versions] is missing.",
)
@common_verbose_options
@common_color_options
@click.version_option(MARKDOWN_VERSIONS_VERSION, "-V", "--version", prog_name=PROJECT_NAME)
@click.pass_context
def cli(
    ctx: click.Context,
    cargo_subcommand: str | None,
    manifest_path: Path | None,
    package: str | None,
    default_configuration: bool,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the cargo-markdown-versions CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]
    logger.debug("Invoked as %r", cargo_subcommand or PROJECT_NAME)

    try:
        document: str = generate_markdown(
            manifest_path=manifest_path,
            package=package,
            default_configuration=default_configuration,
        )
    except MarkdownVersionsError as exc:
        logger.debug("Run failed", exc_info=exc)
        raise as_cli_error(exc) from exc
    except Exception as exc:  # pragma: no cover - last-resort guard
        logger.debug("Unexpected failure", exc_info=exc)
        raise CliUnexpectedError(f"unexpected error: {exc}") from exc

    console.print(document, nl=False)


if __name__ == "__main__":
    cli()
