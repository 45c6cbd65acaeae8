# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : errors.py
#   file_relpath : src/cargo_markdown_versions/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the cargo-markdown-versions CLI.

Usage:
    Commands convert domain errors (see [`cargo_markdown_versions.core.errors`][])
    with [`as_cli_error`][cargo_markdown_versions.cli.errors.as_cli_error]; Click
    then prints the message and exits with the class's exit code.
"""

from __future__ import annotations

import click

from cargo_markdown_versions.core.errors import (
    ConfigError,
    MarkdownVersionsError,
    NetworkError,
    ParseError,
    PatternError,
    ReadmeError,
    RepositoryError,
    ResolutionError,
)
from cargo_markdown_versions.core.exit_codes import ExitCode


class MarkdownVersionsCliError(click.ClickException):
    """Base class for all cargo-markdown-versions CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class CliUsageError(MarkdownVersionsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CliConfigError(MarkdownVersionsCliError):
    """Error for missing/invalid configuration or tags pattern."""

    exit_code = ExitCode.CONFIG_ERROR


class CliDataError(MarkdownVersionsCliError):
    """Error for malformed registry responses."""

    exit_code = ExitCode.DATA_ERROR


class CliNoInputError(MarkdownVersionsCliError):
    """Error when the manifest or target package cannot be found."""

    exit_code = ExitCode.NO_INPUT


class CliUnavailableError(MarkdownVersionsCliError):
    """Error when the registry cannot be reached or refuses the request."""

    exit_code = ExitCode.UNAVAILABLE


class CliIOError(MarkdownVersionsCliError):
    """Error for unreadable git repositories and readme files."""

    exit_code = ExitCode.IO_ERROR


class CliUnexpectedError(MarkdownVersionsCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


_CLI_ERRORS: dict[type[MarkdownVersionsError], type[MarkdownVersionsCliError]] = {
    ConfigError: CliConfigError,
    PatternError: CliConfigError,
    ParseError: CliDataError,
    ResolutionError: CliNoInputError,
    NetworkError: CliUnavailableError,
    RepositoryError: CliIOError,
    ReadmeError: CliIOError,
}


def as_cli_error(exc: MarkdownVersionsError) -> MarkdownVersionsCliError:
    """Wrap a domain error into the CLI error carrying its exit code.

    Args:
        exc (MarkdownVersionsError): The error raised by a pipeline stage.

    Returns:
        MarkdownVersionsCliError: The CLI error to raise.
    """
    for cls in type(exc).__mro__:
        cli_error = _CLI_ERRORS.get(cls)
        if cli_error is not None:
            return cli_error(str(exc))
    return MarkdownVersionsCliError(str(exc))
