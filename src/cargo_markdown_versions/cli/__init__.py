# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __init__.py
#   file_relpath : src/cargo_markdown_versions/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface.

The console script ``cargo-markdown-versions`` points at
[`cargo_markdown_versions.cli.main.cli`][]; installed on ``PATH`` it also runs as
``cargo markdown-versions``.
"""

from __future__ import annotations
