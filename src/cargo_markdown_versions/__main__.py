# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __main__.py
#   file_relpath : src/cargo_markdown_versions/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for ``python -m cargo_markdown_versions``.

Delegates to [`cargo_markdown_versions.cli.main.cli`][] so the module and the
``cargo-markdown-versions`` console script behave identically.

Examples:
    Render the version list of the crate in the current directory::

        python -m cargo_markdown_versions --default-configuration > README.generated.md
"""

from __future__ import annotations

from cargo_markdown_versions.cli.main import cli

if __name__ == "__main__":
    cli()
