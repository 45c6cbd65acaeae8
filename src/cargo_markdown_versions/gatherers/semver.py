# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : semver.py
#   file_relpath : src/cargo_markdown_versions/gatherers/semver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic version grammar used to recognize release tags."""

from __future__ import annotations

from typing import Final

# The grammar from https://semver.org, without anchors or named groups so that it
# can be embedded into a larger pattern as a single (non-capturing) unit:
#   MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]
SEMVER_PATTERN: Final[str] = (
    r"(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(?:-(?:(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?:[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)
