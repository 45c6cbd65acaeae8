# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __init__.py
#   file_relpath : src/cargo_markdown_versions/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by every stage: the error taxonomy and exit codes."""

from __future__ import annotations
