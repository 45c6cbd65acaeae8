# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : console.py
#   file_relpath : src/cargo_markdown_versions/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module separates program output (the markdown document on stdout) from
internal logging. Use the console for anything the user is meant to read or
redirect; reserve `logging` for diagnostics. Error messages are printed by Click
when a [`MarkdownVersionsCliError`][cargo_markdown_versions.cli.errors.MarkdownVersionsCliError]
propagates.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
    """

    out: TextIO

    def __init__(self, *, out: TextIO | None = None) -> None:
        self.out = out or sys.stdout

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        The text is written verbatim: ANSI sequences it carries are never stripped,
        so program output does not depend on the terminal.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=True)
