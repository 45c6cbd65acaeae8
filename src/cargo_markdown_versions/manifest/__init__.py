# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __init__.py
#   file_relpath : src/cargo_markdown_versions/manifest/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cargo manifest reading and target package resolution."""

from __future__ import annotations

from cargo_markdown_versions.manifest.loaders import find_manifest, load_manifest
from cargo_markdown_versions.manifest.model import CargoPackage, CargoWorkspace, ResolvedPackage
from cargo_markdown_versions.manifest.resolver import (
    load_workspace,
    resolve_package,
    select_package,
)

__all__ = [
    "CargoPackage",
    "CargoWorkspace",
    "ResolvedPackage",
    "find_manifest",
    "load_manifest",
    "load_workspace",
    "resolve_package",
    "select_package",
]
