# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : errors.py
#   file_relpath : src/cargo_markdown_versions/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy for cargo-markdown-versions.

Every stage of a run (package resolution, configuration, version gathering,
rendering) signals failure by raising one of the exceptions below. None of them
is retried or recovered internally: a run either produces the whole document or
stops with a single descriptive error.

The CLI maps each class to an exit code (see
[`cargo_markdown_versions.cli.errors`][]); API callers can catch
[`MarkdownVersionsError`][cargo_markdown_versions.core.errors.MarkdownVersionsError]
to handle all of them at once.
"""

from __future__ import annotations


class MarkdownVersionsError(Exception):
    """Base class for all cargo-markdown-versions errors."""


class ConfigError(MarkdownVersionsError):
    """Configuration is missing, malformed, or has a value of the wrong shape."""


class NetworkError(MarkdownVersionsError):
    """The registry request failed at transport level or returned a non-success status."""


class ParseError(MarkdownVersionsError):
    """The registry response does not conform to the expected schema."""


class RepositoryError(MarkdownVersionsError):
    """The git repository is invalid, unreadable, or holds an unresolvable tag target."""


class PatternError(MarkdownVersionsError):
    """The tags pattern does not compile or has no capture group."""


class ResolutionError(MarkdownVersionsError):
    """The target package cannot be located or uniquely determined."""


class ReadmeError(MarkdownVersionsError):
    """The package readme cannot be read as UTF-8 text."""
