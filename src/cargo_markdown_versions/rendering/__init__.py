# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __init__.py
#   file_relpath : src/cargo_markdown_versions/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown rendering of version lists."""

from __future__ import annotations

from cargo_markdown_versions.rendering.markdown import (
    apply_pattern,
    render,
    render_heading,
    render_version_line,
)

__all__ = ["apply_pattern", "render", "render_heading", "render_version_line"]
