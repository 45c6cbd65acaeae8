# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __init__.py
#   file_relpath : src/cargo_markdown_versions/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model, TOML keys and logging setup."""

from __future__ import annotations

from cargo_markdown_versions.config.model import (
    Configuration,
    GitGatherer,
    RegistryGatherer,
    TitleConfiguration,
    VersionsGatherer,
    configuration_for,
    default,
    load,
)

__all__ = [
    "Configuration",
    "GitGatherer",
    "RegistryGatherer",
    "TitleConfiguration",
    "VersionsGatherer",
    "configuration_for",
    "default",
    "load",
]
