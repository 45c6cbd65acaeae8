# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : constants.py
#   file_relpath : src/cargo_markdown_versions/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-markdown-versions constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PROJECT_NAME: str = "cargo-markdown-versions"

MARKDOWN_VERSIONS_VERSION: str = get_version(PROJECT_NAME)

# Cargo subcommand word passed as first argument by `cargo markdown-versions`.
CARGO_SUBCOMMAND: str = "markdown-versions"

# Key of the configuration table below `[package.metadata]` in Cargo.toml.
METADATA_KEY: str = "markdown-versions"

CARGO_MANIFEST_NAME: str = "Cargo.toml"

# Candidates cargo picks up when `package.readme` is not set.
DEFAULT_README_NAMES: tuple[str, ...] = ("README.md", "README.txt", "README")

DEFAULT_API_BASE_URL: str = "https://crates.io/api/v1"
DEFAULT_DOC_PATTERN: str = "https://docs.rs/{crate}/{version}/{crate_underscore}/"
DEFAULT_TITLE_LABEL: str = "Versions"
DEFAULT_TITLE_SIZE: int = 2
DEFAULT_README: bool = True

# crates.io rejects requests without an identifying User-Agent.
USER_AGENT: str = f"{PROJECT_NAME}/{MARKDOWN_VERSIONS_VERSION}"

LOG_LEVEL_ENV_VAR: str = "MARKDOWN_VERSIONS_LOG_LEVEL"
