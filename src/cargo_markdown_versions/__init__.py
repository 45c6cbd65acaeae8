# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __init__.py
#   file_relpath : src/cargo_markdown_versions/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-markdown-versions package.

Generates a markdown list of the published versions of a Rust crate, gathered
either from a crates.io-compatible registry or from git tags, and prepends the
crate's readme to it. The package exposes both a CLI and a small typed API
(see [`cargo_markdown_versions.api`][]).
"""

from __future__ import annotations
