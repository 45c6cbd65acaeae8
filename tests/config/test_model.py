# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration parsing: defaults, aliases, strictness of the title table."""

from __future__ import annotations

from typing import Any

import pytest

from cargo_markdown_versions.config import (
    Configuration,
    GitGatherer,
    RegistryGatherer,
    TitleConfiguration,
    configuration_for,
    default,
    load,
)
from cargo_markdown_versions.core.errors import ConfigError


def test_default_configuration_uses_crates_io_and_docs_rs() -> None:
    """The default is the registry strategy with every field at its default."""
    config: Configuration = default()

    assert config.versions_gatherer == RegistryGatherer(api_base_url="https://crates.io/api/v1")
    assert config.readme is True
    assert config.title == TitleConfiguration(label="Versions", size=2)
    assert config.doc_pattern == "https://docs.rs/{crate}/{version}/{crate_underscore}/"


def test_minimal_registry_table_fills_defaults() -> None:
    """Only ``method`` is required; everything else falls back to defaults."""
    assert load({"method": "registry"}) == default()


def test_registry_api_base_url_and_alias() -> None:
    """``api-base-url`` and its alias ``api`` set the registry base URL."""
    by_key = load({"method": "registry", "api-base-url": "https://example.test/api/v1"})
    by_alias = load({"method": "registry", "api": "https://example.test/api/v1"})

    assert by_key.versions_gatherer == RegistryGatherer("https://example.test/api/v1")
    assert by_alias.versions_gatherer == by_key.versions_gatherer


@pytest.mark.parametrize("key", ["tags-pattern", "tags"])
def test_git_tags_pattern_and_alias(key: str) -> None:
    """``tags-pattern`` and its alias ``tags`` set the git pattern."""
    config = load({"method": "git", key: r"v(\d+\.\d+\.\d+)"})

    assert config.versions_gatherer == GitGatherer(tags_pattern=r"v(\d+\.\d+\.\d+)")


def test_git_without_pattern_uses_default_pattern() -> None:
    """An omitted pattern is kept as ``None`` (the ``{crate}-v{semver}`` default)."""
    assert load({"method": "git"}).versions_gatherer == GitGatherer(tags_pattern=None)


def test_full_table() -> None:
    """Every documented field is honored."""
    raw: dict[str, Any] = {
        "method": "git",
        "tags-pattern": "release-(.*)",
        "readme": False,
        "title": {"label": "History", "size": 3},
        "doc-pattern": "https://example.test/{crate}/{version}",
    }

    assert load(raw) == Configuration(
        versions_gatherer=GitGatherer("release-(.*)"),
        readme=False,
        title=TitleConfiguration(label="History", size=3),
        doc_pattern="https://example.test/{crate}/{version}",
    )


def test_doc_pattern_alias() -> None:
    """``pattern`` is accepted for ``doc-pattern``."""
    config = load({"method": "registry", "pattern": "https://example.test/{version}"})

    assert config.doc_pattern == "https://example.test/{version}"


def test_partial_title_keeps_other_default() -> None:
    """A title table may set only one of its fields."""
    assert load({"method": "registry", "title": {"size": 4}}).title == TitleConfiguration(
        label="Versions", size=4
    )


def test_keys_of_inactive_gatherer_are_ignored() -> None:
    """A tags pattern is irrelevant to the registry strategy."""
    config = load({"method": "registry", "tags-pattern": "(", "api": "https://x.test"})

    assert config.versions_gatherer == RegistryGatherer("https://x.test")


def test_unknown_top_level_key_is_ignored() -> None:
    """Unknown keys outside ``title`` do not fail parsing."""
    assert load({"method": "registry", "colour": "blue"}) == default()


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({}, "missing `method`"),
        ({"method": "svn"}, "unknown `method`"),
        ({"method": 1}, "unknown `method`"),
        ({"method": "registry", "api": "a", "api-base-url": "b"}, "duplicate field"),
        ({"method": "git", "tags": "(x)", "tags-pattern": "(y)"}, "duplicate field"),
        ({"method": "registry", "pattern": "a", "doc-pattern": "b"}, "duplicate field"),
        ({"method": "registry", "readme": "yes"}, "`readme` must be a boolean"),
        ({"method": "registry", "doc-pattern": 3}, "must be a string"),
        ({"method": "git", "tags-pattern": ["(x)"]}, "must be a string"),
        ({"method": "registry", "title": "Versions"}, "`title` must be a table"),
        ({"method": "registry", "title": {"label": "V", "colour": "red"}}, "unknown field"),
        ({"method": "registry", "title": {"label": 1}}, "must be a string"),
        ({"method": "registry", "title": {"size": "2"}}, "must be an integer"),
        ({"method": "registry", "title": {"size": True}}, "must be an integer"),
        ({"method": "registry", "title": {"size": 0}}, "at least 1"),
    ],
)
def test_malformed_tables_raise_config_error(raw: dict[str, Any], message: str) -> None:
    """Shape errors are reported as `ConfigError` with a descriptive message."""
    with pytest.raises(ConfigError, match=message):
        load(raw)


def test_configuration_for_reads_metadata_table() -> None:
    """The ``markdown-versions`` sub-table of ``package.metadata`` is parsed."""
    metadata = {"markdown-versions": {"method": "git"}, "docs": {"rs": {}}}

    config = configuration_for(metadata, default_configuration=False)

    assert config.versions_gatherer == GitGatherer()


@pytest.mark.parametrize("metadata", [None, {}, {"other-tool": {"x": 1}}])
def test_configuration_for_missing_table_raises(metadata: dict[str, Any] | None) -> None:
    """Without the table and without the fallback flag, parsing fails."""
    with pytest.raises(ConfigError, match="missing `package.metadata.markdown-versions` field"):
        configuration_for(metadata, default_configuration=False)


@pytest.mark.parametrize("metadata", [None, {}])
def test_configuration_for_missing_table_with_fallback(metadata: dict[str, Any] | None) -> None:
    """With the fallback flag, a missing table yields the default configuration."""
    assert configuration_for(metadata, default_configuration=True) == default()


def test_configuration_for_present_table_ignores_fallback_flag() -> None:
    """The fallback flag never overrides an explicit table."""
    metadata = {"markdown-versions": {"method": "registry", "readme": False}}

    assert configuration_for(metadata, default_configuration=True).readme is False


def test_configuration_for_rejects_non_table() -> None:
    """A scalar in place of the table is a configuration error."""
    with pytest.raises(ConfigError, match="must be a table"):
        configuration_for({"markdown-versions": "git"}, default_configuration=True)
