# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : model.py
#   file_relpath : src/cargo_markdown_versions/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed configuration model for cargo-markdown-versions.

The configuration lives in the ``[package.metadata.markdown-versions]`` table of
a crate's ``Cargo.toml``:

```toml
[package.metadata.markdown-versions]
method = "git"
tags-pattern = 'my-crate-v(\\d+\\.\\d+\\.\\d+)'
readme = true
doc-pattern = "https://docs.rs/{crate}/{version}/{crate_underscore}/"

[package.metadata.markdown-versions.title]
label = "Versions"
size = 2
```

Parsing is strict about shapes (a ``size`` must be an integer, ``readme`` a
boolean, ...) and about the ``title`` sub-table, which rejects unknown keys.
Unknown keys elsewhere are ignored, and keys belonging to the inactive gatherer
(e.g. ``tags-pattern`` with ``method = "registry"``) are ignored as well.

All classes here are frozen dataclasses: a configuration is built once per run
and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from cargo_markdown_versions.config.guards import is_bool, is_int, is_str, is_toml_table
from cargo_markdown_versions.config.keys import Toml
from cargo_markdown_versions.config.logging import get_logger
from cargo_markdown_versions.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_DOC_PATTERN,
    DEFAULT_README,
    DEFAULT_TITLE_LABEL,
    DEFAULT_TITLE_SIZE,
    METADATA_KEY,
)
from cargo_markdown_versions.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger

logger: MarkdownVersionsLogger = get_logger(__name__)


@dataclass(frozen=True)
class RegistryGatherer:
    """Gather versions from a crates.io-compatible registry API.

    Attributes:
        api_base_url (str): Base URL of the registry API, e.g. ``https://crates.io/api/v1``.
            A trailing slash is tolerated.
    """

    api_base_url: str = DEFAULT_API_BASE_URL


@dataclass(frozen=True)
class GitGatherer:
    """Gather versions from the tags of the workspace git repository.

    Attributes:
        tags_pattern (str | None): Regular expression matched against whole tag names.
            Its first capture group yields the version. ``None`` selects the
            ``{crate}-v{semver}`` default.
    """

    tags_pattern: str | None = None


VersionsGatherer: TypeAlias = RegistryGatherer | GitGatherer


@dataclass(frozen=True)
class TitleConfiguration:
    """Heading rendered above the version list.

    Attributes:
        label (str): Heading text.
        size (int): Heading level, rendered as that many ``#`` markers (>= 1).
    """

    label: str = DEFAULT_TITLE_LABEL
    size: int = DEFAULT_TITLE_SIZE


@dataclass(frozen=True)
class Configuration:
    """Complete, validated configuration of one run.

    Attributes:
        versions_gatherer (VersionsGatherer): The active gathering strategy.
        readme (bool): Whether the existing readme is prepended to the output.
        title (TitleConfiguration): Heading of the version list.
        doc_pattern (str): Link template with ``{crate}``, ``{crate_underscore}``
            and ``{version}`` placeholders.
    """

    versions_gatherer: VersionsGatherer = field(default_factory=RegistryGatherer)
    readme: bool = DEFAULT_README
    title: TitleConfiguration = field(default_factory=TitleConfiguration)
    doc_pattern: str = DEFAULT_DOC_PATTERN


def default() -> Configuration:
    """Return the registry-based configuration with every field at its default."""
    return Configuration()


def load(raw: Mapping[str, Any]) -> Configuration:
    """Parse a raw configuration table into a `Configuration`.

    Args:
        raw (Mapping[str, Any]): The ``markdown-versions`` table, as plain Python values.

    Returns:
        Configuration: The validated configuration.

    Raises:
        ConfigError: If ``method`` is missing or unknown, if a key and its alias are
            both given, if a value has the wrong type, or if ``title`` holds an
            unknown key.
    """
    if not is_toml_table(raw):
        raise ConfigError(f"`{METADATA_KEY}` must be a table, got {type(raw).__name__}")

    for key in raw:
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            logger.debug("Ignoring unknown configuration key %r", key)

    gatherer: VersionsGatherer = _load_gatherer(raw)

    readme_value: object = raw.get(Toml.KEY_README, DEFAULT_README)
    if not is_bool(readme_value):
        raise ConfigError(f"`{Toml.KEY_README}` must be a boolean, got {readme_value!r}")

    doc_pattern: str = _get_str(
        raw, Toml.KEY_DOC_PATTERN, Toml.ALIAS_DOC_PATTERN, default=DEFAULT_DOC_PATTERN
    )

    config = Configuration(
        versions_gatherer=gatherer,
        readme=readme_value,
        title=_load_title(raw.get(Toml.SECTION_TITLE)),
        doc_pattern=doc_pattern,
    )
    logger.debug("Loaded configuration: %r", config)
    return config


def configuration_for(
    metadata: Mapping[str, Any] | None,
    *,
    default_configuration: bool,
) -> Configuration:
    """Return the configuration declared in a package's metadata table.

    Args:
        metadata (Mapping[str, Any] | None): The package's ``[package.metadata]`` table,
            or ``None`` when the manifest has none.
        default_configuration (bool): Fall back to
            [`default`][cargo_markdown_versions.config.model.default] when the
            ``markdown-versions`` table is absent.

    Returns:
        Configuration: The parsed (or default) configuration.

    Raises:
        ConfigError: If the table is absent and ``default_configuration`` is False, or
            if the table is malformed.
    """
    raw: object = metadata.get(METADATA_KEY) if metadata is not None else None
    if raw is None:
        if default_configuration:
            logger.info("No `package.metadata.%s` table, using defaults", METADATA_KEY)
            return default()
        raise ConfigError(f"missing `package.metadata.{METADATA_KEY}` field")
    if not is_toml_table(raw):
        raise ConfigError(f"`package.metadata.{METADATA_KEY}` must be a table")
    return load(raw)


# --- Internals ---------------------------------------------------------------


def _load_gatherer(raw: Mapping[str, Any]) -> VersionsGatherer:
    method: object = raw.get(Toml.KEY_METHOD)
    if method is None:
        raise ConfigError(
            f"missing `{Toml.KEY_METHOD}` field (expected one of: {', '.join(Toml.METHODS)})"
        )
    match method:
        case Toml.METHOD_REGISTRY:
            return RegistryGatherer(
                api_base_url=_get_str(
                    raw,
                    Toml.KEY_API_BASE_URL,
                    Toml.ALIAS_API_BASE_URL,
                    default=DEFAULT_API_BASE_URL,
                )
            )
        case Toml.METHOD_GIT:
            return GitGatherer(
                tags_pattern=_get_optional_str(raw, Toml.KEY_TAGS_PATTERN, Toml.ALIAS_TAGS_PATTERN)
            )
        case _:
            raise ConfigError(
                f"unknown `{Toml.KEY_METHOD}` {method!r} "
                f"(expected one of: {', '.join(Toml.METHODS)})"
            )


def _load_title(raw: object) -> TitleConfiguration:
    if raw is None:
        return TitleConfiguration()
    if not is_toml_table(raw):
        raise ConfigError(f"`{Toml.SECTION_TITLE}` must be a table, got {raw!r}")

    unknown: list[str] = sorted(k for k in raw if k not in Toml.ALLOWED_TITLE_KEYS)
    if unknown:
        raise ConfigError(
            f"unknown field(s) in `{Toml.SECTION_TITLE}`: {', '.join(unknown)} "
            f"(expected: {', '.join(sorted(Toml.ALLOWED_TITLE_KEYS))})"
        )

    label: object = raw.get(Toml.KEY_LABEL, DEFAULT_TITLE_LABEL)
    if not is_str(label):
        raise ConfigError(
            f"`{Toml.SECTION_TITLE}.{Toml.KEY_LABEL}` must be a string, got {label!r}"
        )

    size: object = raw.get(Toml.KEY_SIZE, DEFAULT_TITLE_SIZE)
    if not is_int(size):
        raise ConfigError(
            f"`{Toml.SECTION_TITLE}.{Toml.KEY_SIZE}` must be an integer, got {size!r}"
        )
    if size < 1:
        raise ConfigError(f"`{Toml.SECTION_TITLE}.{Toml.KEY_SIZE}` must be at least 1, got {size}")

    return TitleConfiguration(label=label, size=size)


def _get_optional_str(raw: Mapping[str, Any], key: str, alias: str) -> str | None:
    """Return the string under ``key`` or ``alias``; reject duplicates and non-strings."""
    if key in raw and alias in raw:
        raise ConfigError(f"duplicate field `{key}` (also given as `{alias}`)")
    name: str = key if key in raw else alias
    value: object = raw.get(name)
    if value is None:
        return None
    if not is_str(value):
        raise ConfigError(f"`{name}` must be a string, got {value!r}")
    return value


def _get_str(raw: Mapping[str, Any], key: str, alias: str, *, default: str) -> str:
    value: str | None = _get_optional_str(raw, key, alias)
    return default if value is None else value
