# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : records.py
#   file_relpath : src/cargo_markdown_versions/gatherers/records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version records produced by the gatherers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime


@dataclass(frozen=True)
class VersionRecord:
    """One published version of a crate.

    Records carry no identity beyond their two fields: two tags pointing at the
    same version yield two equal records, and both are kept.

    Attributes:
        version (str): The version string, expected to be semantic-version shaped.
        creation (datetime): Timezone-aware publication (registry) or commit (git) time.
    """

    version: str
    creation: datetime


def newest_first(records: Iterable[VersionRecord]) -> list[VersionRecord]:
    """Return ``records`` sorted by creation time, newest first.

    The sort is stable, so records sharing a timestamp keep their relative order.
    """
    return sorted(records, key=lambda record: record.creation, reverse=True)
