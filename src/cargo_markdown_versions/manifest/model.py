# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : model.py
#   file_relpath : src/cargo_markdown_versions/manifest/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types describing Cargo packages and workspaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


@dataclass(frozen=True)
class CargoPackage:
    """A package declared by a ``Cargo.toml`` ``[package]`` table.

    Attributes:
        name (str): Package (crate) name.
        manifest_path (Path): Absolute path of the package's ``Cargo.toml``.
        readme (Path | None): Readme file as cargo resolves it, or ``None``.
        metadata (Mapping[str, Any] | None): The ``[package.metadata]`` table.
    """

    name: str
    manifest_path: Path
    readme: Path | None = None
    metadata: Mapping[str, Any] | None = field(default=None, compare=False, hash=False)


@dataclass(frozen=True)
class CargoWorkspace:
    """The packages visible from a manifest, and the directory that owns them.

    Attributes:
        root (Path): Workspace root directory (the package directory for a
            standalone package). Also the location of the git repository.
        packages (tuple[CargoPackage, ...]): Root package first (if any), then members.
    """

    root: Path
    packages: tuple[CargoPackage, ...]


@dataclass(frozen=True)
class ResolvedPackage:
    """Everything the version pipeline needs to know about its target package.

    Attributes:
        name (str): Package (crate) name.
        readme (Path | None): Readme to prepend, if the package has one.
        metadata (Mapping[str, Any] | None): The ``[package.metadata]`` table.
        repository_root (Path): Directory of the git repository holding the tags.
    """

    name: str
    readme: Path | None
    metadata: Mapping[str, Any] | None
    repository_root: Path
