# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : resolver.py
#   file_relpath : src/cargo_markdown_versions/manifest/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the target package from ``Cargo.toml`` manifests.

The resolver mirrors what ``cargo metadata --no-deps`` reports for the
purposes of this tool:

- the manifest is the explicit ``--manifest-path``, or the nearest
  ``Cargo.toml`` in the working directory or its ancestors;
- the workspace root is the manifest itself when it declares ``[workspace]``,
  otherwise the nearest ancestor manifest with a ``[workspace]`` whose
  ``members`` cover the package, otherwise the package directory;
- the packages are the root package (if any) plus every workspace member.

The target package is then picked by name, by being the only package, or by
owning the manifest the tool was pointed at.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from cargo_markdown_versions.config.guards import is_bool, is_str, is_str_list, is_toml_table
from cargo_markdown_versions.config.logging import get_logger
from cargo_markdown_versions.constants import CARGO_MANIFEST_NAME, DEFAULT_README_NAMES
from cargo_markdown_versions.core.errors import ResolutionError
from cargo_markdown_versions.manifest.loaders import find_manifest, load_manifest
from cargo_markdown_versions.manifest.model import CargoPackage, CargoWorkspace, ResolvedPackage

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cargo_markdown_versions.config.guards import TomlTable
    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger

logger: MarkdownVersionsLogger = get_logger(__name__)

_GLOB_CHARS: frozenset[str] = frozenset("*?[")


def resolve_package(
    manifest_path: Path | None = None,
    package_name: str | None = None,
    *,
    cwd: Path | None = None,
) -> ResolvedPackage:
    """Locate the workspace and select the target package in it.

    Args:
        manifest_path (Path | None): Explicit ``Cargo.toml``; searched from ``cwd`` when omitted.
        package_name (str | None): Name of the package to select.
        cwd (Path | None): Working directory; defaults to the process working directory.

    Returns:
        ResolvedPackage: Name, readme, metadata and repository root of the target.

    Raises:
        ResolutionError: If no manifest is found or the package cannot be determined.
    """
    cwd = cwd or Path.cwd()
    workspace: CargoWorkspace = load_workspace(manifest_path, cwd=cwd)
    package: CargoPackage = select_package(workspace, package_name, manifest_path, cwd=cwd)
    logger.info("Selected package %s (%s)", package.name, package.manifest_path)
    return ResolvedPackage(
        name=package.name,
        readme=package.readme,
        metadata=package.metadata,
        repository_root=workspace.root,
    )


def load_workspace(manifest_path: Path | None = None, *, cwd: Path | None = None) -> CargoWorkspace:
    """Load the workspace that the given (or discovered) manifest belongs to.

    Args:
        manifest_path (Path | None): Explicit path to a ``Cargo.toml`` file.
        cwd (Path | None): Directory to start the manifest search from.

    Returns:
        CargoWorkspace: The workspace root and its packages.

    Raises:
        ResolutionError: If a manifest is missing, unreadable or malformed.
    """
    if manifest_path is not None:
        manifest: Path = (cwd / manifest_path if cwd else manifest_path).resolve()
        if not manifest.is_file():
            raise ResolutionError(f"manifest path `{manifest_path}` does not exist")
    else:
        manifest = find_manifest(cwd or Path.cwd())

    data: TomlTable = load_manifest(manifest)
    root_manifest, root_data = _find_workspace_root(manifest, data)
    root_dir: Path = root_manifest.parent
    workspace_table: Mapping[str, Any] | None = _table(root_data, "workspace")

    packages: list[CargoPackage] = []
    if workspace_table is None:
        package = _package_from_manifest(manifest, data, root_dir, None)
        if package is not None:
            packages.append(package)
    else:
        root_package = _package_from_manifest(root_manifest, root_data, root_dir, workspace_table)
        if root_package is not None:
            packages.append(root_package)
        for member_dir in _member_dirs(root_dir, workspace_table):
            member_manifest: Path = member_dir / CARGO_MANIFEST_NAME
            if member_manifest == root_manifest:
                continue
            member = _package_from_manifest(
                member_manifest, load_manifest(member_manifest), root_dir, workspace_table
            )
            if member is not None:
                packages.append(member)

    logger.debug(
        "Workspace %s has %d package(s): %s",
        root_dir,
        len(packages),
        ", ".join(p.name for p in packages),
    )
    return CargoWorkspace(root=root_dir, packages=tuple(packages))


def select_package(
    workspace: CargoWorkspace,
    package_name: str | None,
    manifest_path: Path | None,
    *,
    cwd: Path | None = None,
) -> CargoPackage:
    """Pick the target package of a workspace.

    Args:
        workspace (CargoWorkspace): The loaded workspace.
        package_name (str | None): Explicit package name (``--package``).
        manifest_path (Path | None): Explicit manifest (``--manifest-path``); when
            omitted, ``cwd/Cargo.toml`` is used to disambiguate.
        cwd (Path | None): Working directory; defaults to the process working directory.

    Returns:
        CargoPackage: The selected package.

    Raises:
        ResolutionError: If the name matches nothing, the workspace is empty, or
            several packages remain and none owns the manifest.
    """
    if package_name is not None:
        for package in workspace.packages:
            if package.name == package_name:
                return package
        raise ResolutionError(
            f"package `{package_name}` not found in workspace {workspace.root} "
            f"(available: {_names(workspace)})"
        )

    if not workspace.packages:
        raise ResolutionError(f"no package found in workspace {workspace.root}")
    if len(workspace.packages) == 1:
        return workspace.packages[0]

    base: Path = cwd or Path.cwd()
    wanted: Path = (
        base / manifest_path if manifest_path is not None else base / CARGO_MANIFEST_NAME
    ).resolve()
    for package in workspace.packages:
        if package.manifest_path == wanted:
            return package
    raise ResolutionError(
        f"cannot determine the target package among {_names(workspace)}; "
        "use `--package` or point `--manifest-path` at a member manifest"
    )


# --- Internals ---------------------------------------------------------------


def _names(workspace: CargoWorkspace) -> str:
    return ", ".join(p.name for p in workspace.packages) or "none"


def _table(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value: object = data.get(key)
    return value if is_toml_table(value) else None


def _find_workspace_root(manifest: Path, data: TomlTable) -> tuple[Path, TomlTable]:
    if _table(data, "workspace") is not None:
        return manifest, data

    package_table = _table(data, "package")
    explicit: object = package_table.get("workspace") if package_table is not None else None
    if is_str(explicit):
        root_manifest: Path = (manifest.parent / explicit / CARGO_MANIFEST_NAME).resolve()
        return root_manifest, load_manifest(root_manifest)

    for directory in manifest.parent.parents:
        candidate: Path = directory / CARGO_MANIFEST_NAME
        if not candidate.is_file():
            continue
        candidate_data: TomlTable = load_manifest(candidate)
        workspace_table = _table(candidate_data, "workspace")
        if workspace_table is None:
            continue
        if manifest.parent in _member_dirs(directory, workspace_table):
            logger.debug("Manifest %s is a member of workspace %s", manifest, directory)
            return candidate, candidate_data
        break
    return manifest, data


def _member_dirs(root_dir: Path, workspace_table: Mapping[str, Any]) -> list[Path]:
    members: object = workspace_table.get("members", [])
    excludes: object = workspace_table.get("exclude", [])
    if not is_str_list(members) or not is_str_list(excludes):
        raise ResolutionError(
            f"`workspace.members` and `workspace.exclude` in {root_dir} must be string arrays"
        )

    excluded: set[Path] = {(root_dir / e).resolve() for e in excludes}
    result: list[Path] = []
    for member in members:
        if _GLOB_CHARS.intersection(member):
            candidates: list[Path] = sorted(root_dir.glob(member))
        else:
            candidates = [root_dir / member]
        for candidate in candidates:
            resolved: Path = candidate.resolve()
            if resolved in excluded or resolved in result:
                continue
            if (resolved / CARGO_MANIFEST_NAME).is_file():
                result.append(resolved)
    return result


def _package_from_manifest(
    manifest: Path,
    data: Mapping[str, Any],
    root_dir: Path,
    workspace_table: Mapping[str, Any] | None,
) -> CargoPackage | None:
    package_table = _table(data, "package")
    if package_table is None:
        return None

    name: object = package_table.get("name")
    if not is_str(name):
        raise ResolutionError(f"`package.name` missing or not a string in {manifest}")

    return CargoPackage(
        name=name,
        manifest_path=manifest,
        readme=_readme_path(manifest, package_table, root_dir, workspace_table),
        metadata=_table(package_table, "metadata"),
    )


def _readme_path(
    manifest: Path,
    package_table: Mapping[str, Any],
    root_dir: Path,
    workspace_table: Mapping[str, Any] | None,
) -> Path | None:
    """Resolve ``package.readme`` the way cargo does."""
    value: object = package_table.get("readme")
    base: Path = manifest.parent

    if is_toml_table(value) and value.get("workspace") is True:
        inherited = _table(workspace_table, "package") if workspace_table is not None else None
        value = inherited.get("readme") if inherited is not None else None
        base = root_dir
        if value is None:
            raise ResolutionError(
                f"{manifest} inherits `readme` but `workspace.package.readme` is not set"
            )

    if value is None:
        for candidate_name in DEFAULT_README_NAMES:
            candidate: Path = base / candidate_name
            if candidate.is_file():
                return candidate
        return None
    if is_bool(value):
        return base / DEFAULT_README_NAMES[0] if value else None
    if is_str(value):
        return base / value
    raise ResolutionError(f"`package.readme` in {manifest} must be a string or a boolean")
