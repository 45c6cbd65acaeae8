# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : markdown.py
#   file_relpath : src/cargo_markdown_versions/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering of a crate's version list.

The rendered document is, in order:

1. the existing readme (trailing whitespace trimmed) and one blank line, when a
   readme is supplied and the configuration enables it;
2. the heading (``size`` ``#`` markers, a space, the label) and a blank line;
3. one list item per version, in the order received:
   ``- [1.2.3 - 2023-01-01](https://docs.rs/my-crate/1.2.3/my_crate/)``.

Package names and versions are inserted verbatim: markdown-special characters
are not escaped.

These functions are pure and Click-free: the same inputs always yield the same
text, independent of the current time or locale.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cargo_markdown_versions.config.model import Configuration, TitleConfiguration
    from cargo_markdown_versions.gatherers.records import VersionRecord

HEADING_MARKER: str = "#"


def apply_pattern(doc_pattern: str, crate_name: str, version: str) -> str:
    """Expand the placeholders of a documentation link template.

    Args:
        doc_pattern (str): Template containing ``{crate}``, ``{crate_underscore}``
            and/or ``{version}``.
        crate_name (str): Replaces ``{crate}``; with ``-`` turned into ``_`` it
            replaces ``{crate_underscore}``.
        version (str): Replaces ``{version}``.

    Returns:
        str: The expanded URL.
    """
    return (
        doc_pattern.replace("{crate}", crate_name)
        .replace("{crate_underscore}", crate_name.replace("-", "_"))
        .replace("{version}", version)
    )


def render_heading(title: TitleConfiguration) -> str:
    """Return the heading line (without newline), e.g. ``## Versions``."""
    return f"{HEADING_MARKER * title.size} {title.label}"


def render_version_line(record: VersionRecord, doc_pattern: str, crate_name: str) -> str:
    """Return the list item (without newline) linking one version to its docs.

    The date is the calendar date of ``record.creation`` in its own UTC offset.
    """
    url: str = apply_pattern(doc_pattern, crate_name, record.version)
    return f"- [{record.version} - {record.creation.date().isoformat()}]({url})"


def render(
    existing_readme: str | None,
    configuration: Configuration,
    package_name: str,
    records: Iterable[VersionRecord],
) -> str:
    """Render the final markdown document.

    Args:
        existing_readme (str | None): Current readme content, if any.
        configuration (Configuration): Heading, link template and readme switch.
        package_name (str): Name of the crate.
        records (Iterable[VersionRecord]): Versions, already in display order.

    Returns:
        str: The document; every line, including the last, ends with a newline.
    """
    parts: list[str] = []
    if existing_readme is not None and configuration.readme:
        parts.append(existing_readme.rstrip())
        parts.append("\n\n")

    parts.append(render_heading(configuration.title))
    parts.append("\n\n")
    for record in records:
        parts.append(render_version_line(record, configuration.doc_pattern, package_name))
        parts.append("\n")
    return "".join(parts)
