# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : __init__.py
#   file_relpath : src/cargo_markdown_versions/gatherers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version gatherers.

Two strategies produce the ordered list of
[`VersionRecord`][cargo_markdown_versions.gatherers.records.VersionRecord] values
that the renderer turns into markdown:

- [`RegistryGatherer`][cargo_markdown_versions.config.model.RegistryGatherer]:
  one request to a crates.io-style API; the service's order is kept as-is.
- [`GitGatherer`][cargo_markdown_versions.config.model.GitGatherer]: one scan
  of the repository tags; records are sorted newest first.

Because the registry path does not re-sort, both strategies can order the same
history differently when the service does not already list newest first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargo_markdown_versions.config.logging import get_logger
from cargo_markdown_versions.config.model import GitGatherer, RegistryGatherer
from cargo_markdown_versions.gatherers.git import (
    GitCliTagSource,
    TagSource,
    compile_tags_pattern,
    gather_git_versions,
)
from cargo_markdown_versions.gatherers.records import VersionRecord
from cargo_markdown_versions.gatherers.registry import RegistryClient

if TYPE_CHECKING:
    from pathlib import Path

    import httpx

    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger
    from cargo_markdown_versions.config.model import VersionsGatherer

logger: MarkdownVersionsLogger = get_logger(__name__)


def gather_versions(
    gatherer: VersionsGatherer,
    package_name: str,
    repository_root: Path,
    *,
    http_client: httpx.Client | None = None,
    tag_source: TagSource | None = None,
) -> list[VersionRecord]:
    """Produce the version records of ``package_name`` with the active strategy.

    Args:
        gatherer (VersionsGatherer): The configured strategy.
        package_name (str): Name of the crate.
        repository_root (Path): Git repository location (git strategy only).
        http_client (httpx.Client | None): Client for the registry request (registry
            strategy only); a short-lived client is used when omitted.
        tag_source (TagSource | None): Tag reader (git strategy only); defaults to
            [`GitCliTagSource`][cargo_markdown_versions.gatherers.git.GitCliTagSource]
            on ``repository_root``.

    Returns:
        list[VersionRecord]: Registry order for the registry strategy, newest first
            for the git strategy.
    """
    match gatherer:
        case RegistryGatherer(api_base_url=api_base_url):
            logger.debug("Using registry gatherer (%s)", api_base_url)
            return RegistryClient(api_base_url, client=http_client).fetch_versions(package_name)
        case GitGatherer(tags_pattern=tags_pattern):
            logger.debug("Using git gatherer (pattern: %r)", tags_pattern)
            # Compile before touching the repository: a bad pattern must fail fast.
            pattern = compile_tags_pattern(tags_pattern, package_name)
            source: TagSource = tag_source or GitCliTagSource(repository_root)
            return gather_git_versions(pattern, source)


__all__ = [
    "GitCliTagSource",
    "RegistryClient",
    "TagSource",
    "VersionRecord",
    "compile_tags_pattern",
    "gather_git_versions",
    "gather_versions",
]
