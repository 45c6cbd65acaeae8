# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : api.py
#   file_relpath : src/cargo_markdown_versions/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for cargo-markdown-versions.

A run is a strict sequence of stages, each consuming the previous stage's value:

1. resolve the target package
   ([`resolve_package`][cargo_markdown_versions.manifest.resolve_package]);
2. read its configuration ([`configuration_for`][cargo_markdown_versions.config.configuration_for]);
3. gather the versions ([`gather_versions`][cargo_markdown_versions.gatherers.gather_versions]);
4. read the readme, if enabled;
5. render the document ([`render`][cargo_markdown_versions.rendering.render]).

Any failure raises a
[`MarkdownVersionsError`][cargo_markdown_versions.core.errors.MarkdownVersionsError]
subclass and no partial document is returned.

Examples:
    ```python
    from cargo_markdown_versions.api import generate_markdown

    text = generate_markdown(manifest_path=Path("crates/foo/Cargo.toml"))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargo_markdown_versions.config.logging import get_logger
from cargo_markdown_versions.config.model import configuration_for
from cargo_markdown_versions.core.errors import ReadmeError
from cargo_markdown_versions.gatherers import gather_versions
from cargo_markdown_versions.manifest.resolver import resolve_package
from cargo_markdown_versions.rendering.markdown import render

if TYPE_CHECKING:
    from pathlib import Path

    import httpx

    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger
    from cargo_markdown_versions.config.model import Configuration
    from cargo_markdown_versions.gatherers.git import TagSource
    from cargo_markdown_versions.gatherers.records import VersionRecord
    from cargo_markdown_versions.manifest.model import ResolvedPackage

logger: MarkdownVersionsLogger = get_logger(__name__)


def generate_markdown(
    *,
    manifest_path: Path | None = None,
    package: str | None = None,
    default_configuration: bool = False,
    cwd: Path | None = None,
    http_client: httpx.Client | None = None,
    tag_source: TagSource | None = None,
) -> str:
    """Resolve the target package and render its version document.

    Args:
        manifest_path (Path | None): Explicit ``Cargo.toml``; discovered from ``cwd`` if omitted.
        package (str | None): Name of the package to render, for multi-package workspaces.
        default_configuration (bool): Use the default configuration when the package
            has no ``[package.metadata.markdown-versions]`` table.
        cwd (Path | None): Working directory for manifest discovery.
        http_client (httpx.Client | None): Client for the registry request.
        tag_source (TagSource | None): Tag reader replacing the ``git`` command line.

    Returns:
        str: The rendered markdown document.
    """
    target: ResolvedPackage = resolve_package(manifest_path, package, cwd=cwd)
    return generate_for_package(
        target,
        default_configuration=default_configuration,
        http_client=http_client,
        tag_source=tag_source,
    )


def generate_for_package(
    target: ResolvedPackage,
    *,
    default_configuration: bool = False,
    http_client: httpx.Client | None = None,
    tag_source: TagSource | None = None,
) -> str:
    """Render the version document of an already resolved package.

    The configuration is checked before any network or repository access.

    Args:
        target (ResolvedPackage): The package to render.
        default_configuration (bool): Use the default configuration when the package
            has no ``[package.metadata.markdown-versions]`` table.
        http_client (httpx.Client | None): Client for the registry request.
        tag_source (TagSource | None): Tag reader replacing the ``git`` command line.

    Returns:
        str: The rendered markdown document.
    """
    configuration: Configuration = configuration_for(
        target.metadata, default_configuration=default_configuration
    )
    records: list[VersionRecord] = gather_versions(
        configuration.versions_gatherer,
        target.name,
        target.repository_root,
        http_client=http_client,
        tag_source=tag_source,
    )
    logger.info("Gathered %d version(s) of %s", len(records), target.name)

    readme: str | None = None
    if configuration.readme and target.readme is not None:
        readme = read_readme(target.readme)
    return render(readme, configuration, target.name, records)


def read_readme(path: Path) -> str:
    """Read a readme file as UTF-8 text.

    Raises:
        ReadmeError: If the file cannot be read or decoded.
    """
    logger.debug("Reading readme %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReadmeError(f"cannot read readme {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ReadmeError(f"readme {path} is not valid UTF-8: {exc}") from exc
