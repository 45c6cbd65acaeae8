# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : test_git.py
#   file_relpath : tests/gatherers/test_git.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Git strategy: tag pattern compilation, matching and ordering (against fake tag sources)."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cargo_markdown_versions.config.model import GitGatherer
from cargo_markdown_versions.core.errors import PatternError, RepositoryError
from cargo_markdown_versions.gatherers import gather_versions
from cargo_markdown_versions.gatherers.git import compile_tags_pattern, gather_git_versions
from tests.helpers import FakeTagSource, UntouchableTagSource, record, utc

if TYPE_CHECKING:
    import re
    from pathlib import Path


# --- compile_tags_pattern: default pattern -----------------------------------


@pytest.mark.parametrize(
    ("tag", "version"),
    [
        ("foo-v1.2.3", "1.2.3"),
        ("foo-v0.0.0", "0.0.0"),
        ("foo-v10.20.30", "10.20.30"),
        ("foo-v1.0.0-alpha.1", "1.0.0-alpha.1"),
        ("foo-v1.0.0+build.5", "1.0.0+build.5"),
        ("foo-v1.0.0-rc.1+sha.abc", "1.0.0-rc.1+sha.abc"),
        ("foo-v1.2.3-extra", "1.2.3-extra"),
    ],
)
def test_default_pattern_captures_semver(tag: str, version: str) -> None:
    """The default pattern is ``{crate}-v{semver}`` and captures the version."""
    pattern: re.Pattern[str] = compile_tags_pattern(None, "foo")

    match = pattern.fullmatch(tag)

    assert match is not None
    assert match.group(1) == version


@pytest.mark.parametrize(
    "tag",
    [
        "bar-v1.2.3",
        "foo-1.2.3",
        "foo-v1.2",
        "foo-v1.2.3.4",
        "foo-v1.2.3 extra",
        "foo-v1.2.3-",
        "foo-v01.2.3",
        "xfoo-v1.2.3",
        "foo-v1.2.3\n",
        "v1.2.3",
    ],
)
def test_default_pattern_rejects(tag: str) -> None:
    """Anything outside the semver grammar or with another prefix is not a release tag."""
    assert compile_tags_pattern(None, "foo").fullmatch(tag) is None


def test_default_pattern_escapes_package_name() -> None:
    """Regex metacharacters in the package name match only themselves."""
    pattern = compile_tags_pattern(None, "a.b")

    assert pattern.fullmatch("a.b-v1.0.0") is not None
    assert pattern.fullmatch("axb-v1.0.0") is None


def test_default_pattern_handles_hyphenated_names() -> None:
    """Hyphens inside the package name are part of the prefix."""
    match = compile_tags_pattern(None, "my-crate").fullmatch("my-crate-v2.0.0")

    assert match is not None and match.group(1) == "2.0.0"


# --- compile_tags_pattern: user patterns --------------------------------------


def test_user_pattern_is_anchored_at_both_ends() -> None:
    """A user pattern must match the whole tag name."""
    pattern = compile_tags_pattern(r"v(\d+\.\d+\.\d+)", "ignored")

    assert pattern.fullmatch("v1.2.3") is not None
    assert pattern.fullmatch("xv1.2.3") is None
    assert pattern.fullmatch("v1.2.3x") is None


def test_user_pattern_alternation_is_anchored_as_a_whole() -> None:
    """Anchoring wraps the whole pattern, not only its first alternative."""
    pattern = compile_tags_pattern(r"a-(\d+)|b-(\d+)", "ignored")

    assert pattern.fullmatch("b-7") is not None
    assert pattern.fullmatch("a-1 trailing") is None


def test_user_pattern_does_not_inject_package_name() -> None:
    """User patterns are used verbatim."""
    pattern = compile_tags_pattern(r"release-(.+)", "foo")

    assert pattern.fullmatch("release-1.0.0") is not None


def test_pattern_without_group_raises() -> None:
    """A pattern without capture group cannot yield versions."""
    with pytest.raises(PatternError, match="no capture group"):
        compile_tags_pattern(r"v\d+\.\d+\.\d+", "foo")


def test_non_capturing_groups_do_not_count() -> None:
    """Only capturing groups can yield the version."""
    with pytest.raises(PatternError):
        compile_tags_pattern(r"(?:v)\d+", "foo")


@pytest.mark.parametrize("bad", ["(", "v(\\d+", "[a-", "*v(1)"])
def test_invalid_pattern_raises(bad: str) -> None:
    """Syntax errors surface as `PatternError`."""
    with pytest.raises(PatternError, match="invalid tags pattern"):
        compile_tags_pattern(bad, "foo")


# --- gather_git_versions ------------------------------------------------------


def test_gather_keeps_matching_tags_sorted_newest_first() -> None:
    """Only matching tags produce records; the result is sorted by commit time."""
    source = FakeTagSource(
        {
            "refs/tags/foo-v1.0.0": utc(2022),
            "refs/tags/foo-v2.0.0": utc(2023),
            "refs/tags/bar-v9.0.0": utc(2024),
            "refs/tags/foo-v1.5.0": utc(2022, 6),
            "refs/tags/nightly": utc(2025),
        }
    )

    records = gather_git_versions(compile_tags_pattern(None, "foo"), source)

    assert records == [
        record("2.0.0", utc(2023)),
        record("1.5.0", utc(2022, 6)),
        record("1.0.0", utc(2022)),
    ]


def test_gather_resolves_only_matching_tags() -> None:
    """Commit times are read for release tags only."""
    source = FakeTagSource(
        {"foo-v1.0.0": utc(2022), "broken-tag": utc(2023)},
        broken=["broken-tag"],
    )

    records = gather_git_versions(compile_tags_pattern(None, "foo"), source)

    assert records == [record("1.0.0", utc(2022))]
    assert source.resolved == ["foo-v1.0.0"]


def test_gather_accepts_short_tag_names() -> None:
    """Tag sources may list names with or without the ``refs/tags/`` prefix."""
    source = FakeTagSource({"foo-v1.0.0": utc(2022), "refs/tags/foo-v1.1.0": utc(2023)})

    records = gather_git_versions(compile_tags_pattern(None, "foo"), source)

    assert [r.version for r in records] == ["1.1.0", "1.0.0"]


def test_gather_keeps_duplicate_versions() -> None:
    """Two tags capturing the same version yield two records."""
    source = FakeTagSource({"v1.0.0": utc(2022), "release-1.0.0": utc(2022, 2)})

    records = gather_git_versions(compile_tags_pattern(r"(?:v|release-)(.+)", "x"), source)

    assert records == [record("1.0.0", utc(2022, 2)), record("1.0.0", utc(2022))]


def test_gather_skips_tags_whose_first_group_did_not_participate() -> None:
    """A match where group 1 is unset is not a release tag."""
    source = FakeTagSource({"a-1": utc(2022), "b-2": utc(2023)})

    records = gather_git_versions(compile_tags_pattern(r"a-(\d+)|b-(\d+)", "x"), source)

    assert records == [record("1", utc(2022))]


def test_gather_propagates_repository_errors_of_matching_tags() -> None:
    """A release tag that does not resolve to a commit fails the run."""
    source = FakeTagSource({"foo-v1.0.0": utc(2022)}, broken=["foo-v1.0.0"])

    with pytest.raises(RepositoryError):
        gather_git_versions(compile_tags_pattern(None, "foo"), source)


def test_gather_without_tags_is_empty() -> None:
    """A repository without tags yields no records."""
    assert gather_git_versions(compile_tags_pattern(None, "foo"), FakeTagSource({})) == []


@pytest.mark.hypothesis
@given(
    offsets=st.lists(st.integers(min_value=0, max_value=10**8), min_size=0, max_size=30),
)
def test_gather_is_sorted_descending_regardless_of_enumeration_order(offsets: list[int]) -> None:
    """Output order depends on commit times only."""
    tags = {f"foo-v{i}.0.0": utc(2000) + timedelta(seconds=s) for i, s in enumerate(offsets)}

    records = gather_git_versions(compile_tags_pattern(None, "foo"), FakeTagSource(tags))

    creations = [r.creation for r in records]
    assert creations == sorted(creations, reverse=True)
    assert sorted(r.version for r in records) == sorted(v.removeprefix("foo-v") for v in tags)


# --- gather_versions dispatch -------------------------------------------------


def test_gather_versions_dispatches_to_git(tmp_path: Path) -> None:
    """The git gatherer reads the injected tag source."""
    source = FakeTagSource({"foo-v1.0.0": utc(2022)})

    records = gather_versions(GitGatherer(), "foo", tmp_path, tag_source=source)

    assert records == [record("1.0.0", utc(2022))]


def test_invalid_pattern_fails_before_tag_enumeration(tmp_path: Path) -> None:
    """Pattern errors are raised before the repository is touched."""
    with pytest.raises(PatternError):
        gather_versions(
            GitGatherer(tags_pattern="v1.0.0"),
            "foo",
            tmp_path,
            tag_source=UntouchableTagSource(),
        )


def test_missing_repository_fails_with_repository_error(tmp_path: Path) -> None:
    """Without an injected source, a missing repository directory is an error."""
    with pytest.raises(RepositoryError):
        gather_versions(GitGatherer(), "foo", tmp_path / "nowhere")
