# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : git.py
#   file_relpath : src/cargo_markdown_versions/gatherers/git.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Git gatherer: derive the version history of a crate from repository tags.

Every tag of the repository is tested against an anchored pattern whose first
capture group yields the version. Matching tags are resolved to their commit
(through one annotated-tag object if needed) and the committer time becomes the
record's creation time. The result is sorted newest first.

Repository access goes through the narrow
[`TagSource`][cargo_markdown_versions.gatherers.git.TagSource] protocol so the
matching and ordering logic can run against an in-memory fake. The production
implementation,
[`GitCliTagSource`][cargo_markdown_versions.gatherers.git.GitCliTagSource],
reads all tags with a single ``git for-each-ref`` call.
"""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol

from cargo_markdown_versions.config.logging import get_logger
from cargo_markdown_versions.core.errors import PatternError, RepositoryError
from cargo_markdown_versions.gatherers.records import VersionRecord, newest_first
from cargo_markdown_versions.gatherers.semver import SEMVER_PATTERN

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger

logger: MarkdownVersionsLogger = get_logger(__name__)

TAGS_REF_PREFIX: str = "refs/tags/"

# Runs a git command line in a directory and returns its stdout.
GitRunner = Callable[[Sequence[str], Path], str]


class TagSource(Protocol):
    """Read-only view of the tags of a repository."""

    def tag_names(self) -> Iterable[str]:
        """Return the name of every tag (with or without the ``refs/tags/`` prefix).

        Raises:
            RepositoryError: If the repository cannot be read.
        """
        ...

    def commit_time(self, tag_name: str) -> datetime:
        """Return the commit time of the commit ``tag_name`` points at.

        Annotated tags are followed through one level of indirection.

        Raises:
            RepositoryError: If the tag does not resolve to a commit.
        """
        ...


def compile_tags_pattern(tags_pattern: str | None, package_name: str) -> re.Pattern[str]:
    """Compile the anchored pattern used to recognize release tags.

    Args:
        tags_pattern (str | None): User pattern, used verbatim (the package name is
            not injected). ``None`` selects ``{package_name}-v{semver}``.
        package_name (str): Name of the crate, used by the default pattern only.

    Returns:
        re.Pattern[str]: The pattern, anchored at both ends.

    Raises:
        PatternError: If the pattern does not compile or has no capture group.
    """
    if tags_pattern is None:
        return re.compile(rf"^{re.escape(package_name)}-v({SEMVER_PATTERN})$", re.ASCII)

    try:
        compiled = re.compile(rf"^(?:{tags_pattern})$")
    except re.error as exc:
        raise PatternError(f"invalid tags pattern {tags_pattern!r}: {exc}") from exc
    if compiled.groups < 1:
        raise PatternError(
            f"tags pattern {tags_pattern!r} has no capture group to extract the version from"
        )
    return compiled


def gather_git_versions(pattern: re.Pattern[str], tag_source: TagSource) -> list[VersionRecord]:
    """Return one record per tag matching ``pattern``, newest first.

    Non-matching tags are skipped silently. Duplicate versions (several tags
    capturing the same version) are kept.

    Args:
        pattern (re.Pattern[str]): Anchored pattern, as returned by
            [`compile_tags_pattern`][cargo_markdown_versions.gatherers.git.compile_tags_pattern].
        tag_source (TagSource): The repository's tags.

    Returns:
        list[VersionRecord]: Matching versions sorted by commit time, descending.

    Raises:
        RepositoryError: If the tags cannot be listed or a matching tag does not
            resolve to a commit.
    """
    records: list[VersionRecord] = []
    for name in tag_source.tag_names():
        short_name: str = name.removeprefix(TAGS_REF_PREFIX)
        match = pattern.fullmatch(short_name)
        if match is None or match.group(1) is None:
            logger.trace("Skipping tag %s", short_name)
            continue
        creation: datetime = tag_source.commit_time(name)
        logger.debug("Tag %s -> version %s (%s)", short_name, match.group(1), creation)
        records.append(VersionRecord(version=match.group(1), creation=creation))
    return newest_first(records)


# --- git command line implementation -------------------------------------------

_FIELD_SEPARATOR: str = "\x00"

# %00 is expanded to a NUL byte by for-each-ref; `*` fields describe the object an
# annotated tag points at.
_FOR_EACH_REF_FORMAT: str = "%00".join(
    (
        "%(refname)",
        "%(objecttype)",
        "%(committerdate:raw)",
        "%(*objecttype)",
        "%(*committerdate:raw)",
    )
)


@dataclass(frozen=True)
class TagEntry:
    """One line of ``git for-each-ref`` output.

    Attributes:
        name (str): Full ref name (``refs/tags/...``).
        object_type (str): Type of the object the ref points at.
        committer_date (str): Raw committer date when ``object_type`` is a commit.
        peeled_type (str): Type of the object an annotated tag points at.
        peeled_committer_date (str): Raw committer date of that object, if a commit.
    """

    name: str
    object_type: str
    committer_date: str
    peeled_type: str
    peeled_committer_date: str

    @classmethod
    def parse(cls, line: str) -> TagEntry:
        """Build an entry from one NUL-separated output line."""
        fields: list[str] = line.split(_FIELD_SEPARATOR)
        if len(fields) != 5:
            raise RepositoryError(f"unexpected `git for-each-ref` output line: {line!r}")
        return cls(*fields)


class GitCliTagSource:
    """Tag source backed by the ``git`` executable.

    The tag listing is read once, on first use, and cached for the lifetime of the
    instance.

    Args:
        repository_root (Path): Working tree (or bare repository) to read tags from.
        runner (GitRunner | None): Command runner; defaults to ``subprocess.run``.
    """

    def __init__(self, repository_root: Path, *, runner: GitRunner | None = None) -> None:
        self.repository_root = repository_root
        self._runner: GitRunner = runner or self._default_runner
        self._entries: dict[str, TagEntry] | None = None

    def tag_names(self) -> list[str]:
        """Return the full ref name of every tag, in ref-name order."""
        return list(self._load())

    def commit_time(self, tag_name: str) -> datetime:
        """Return the committer time (UTC) of the commit ``tag_name`` resolves to."""
        entries: dict[str, TagEntry] = self._load()
        full_name: str = (
            tag_name if tag_name.startswith(TAGS_REF_PREFIX) else TAGS_REF_PREFIX + tag_name
        )
        entry: TagEntry | None = entries.get(full_name)
        if entry is None:
            raise RepositoryError(f"tag {tag_name!r} not found in {self.repository_root}")

        if entry.object_type == "commit":
            raw_date: str = entry.committer_date
        elif entry.object_type == "tag" and entry.peeled_type == "commit":
            raw_date = entry.peeled_committer_date
        else:
            target = entry.peeled_type if entry.object_type == "tag" else entry.object_type
            raise RepositoryError(
                f"tag {tag_name!r} does not point at a commit "
                f"(target is a {target or 'missing object'})"
            )
        return _parse_raw_date(raw_date, tag_name)

    # ------------------------------------------------------------------
    # Internals

    def _load(self) -> dict[str, TagEntry]:
        if self._entries is None:
            args: list[str] = [
                "git",
                "for-each-ref",
                f"--format={_FOR_EACH_REF_FORMAT}",
                "refs/tags",
            ]
            output: str = self._run(args)
            entries: dict[str, TagEntry] = {}
            for line in output.splitlines():
                if not line:
                    continue
                entry = TagEntry.parse(line)
                if not _is_utf8(entry.name):
                    logger.trace("Skipping tag with non UTF-8 name %r", entry.name)
                    continue
                entries[entry.name] = entry
            logger.debug("Found %d tag(s) in %s", len(entries), self.repository_root)
            self._entries = entries
        return self._entries

    def _run(self, args: Sequence[str]) -> str:
        if not self.repository_root.is_dir():
            raise RepositoryError(f"{self.repository_root} is not a directory")
        try:
            return self._runner(args, self.repository_root)
        except FileNotFoundError as exc:
            raise RepositoryError("the `git` executable was not found") from exc
        except subprocess.CalledProcessError as exc:
            detail: str = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise RepositoryError(
                f"cannot read tags of {self.repository_root}: {detail}"
            ) from exc

    @staticmethod
    def _default_runner(args: Sequence[str], cwd: Path) -> str:
        # Stop discovery at cwd so an enclosing repository is never read.
        env: dict[str, str] = dict(os.environ)
        env["GIT_CEILING_DIRECTORIES"] = str(cwd.resolve().parent)
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            env=env,
            check=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            capture_output=True,
        )
        return completed.stdout


def _is_utf8(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _parse_raw_date(raw_date: str, tag_name: str) -> datetime:
    """Parse a ``%(committerdate:raw)`` value (``<unix seconds> <+hhmm>``) into UTC."""
    try:
        seconds = int(raw_date.split()[0])
    except (IndexError, ValueError) as exc:
        raise RepositoryError(
            f"cannot read commit time of tag {tag_name!r}: {raw_date!r}"
        ) from exc
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
