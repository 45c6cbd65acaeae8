# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : loaders.py
#   file_relpath : src/cargo_markdown_versions/manifest/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load ``Cargo.toml`` manifests.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cargo_markdown_versions.config.logging import get_logger
from cargo_markdown_versions.constants import CARGO_MANIFEST_NAME
from cargo_markdown_versions.core.errors import ResolutionError

if TYPE_CHECKING:
    from pathlib import Path

    from cargo_markdown_versions.config.guards import TomlTable
    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger

logger: MarkdownVersionsLogger = get_logger(__name__)


def load_manifest(path: Path) -> TomlTable:
    """Load and parse a ``Cargo.toml`` file.

    Args:
        path: Path to the manifest.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ResolutionError: If the file cannot be read or is not valid TOML.
    """
    logger.trace("Loading manifest %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ResolutionError(f"cannot read manifest {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ResolutionError(f"manifest {path} is not valid UTF-8: {e}") from e
    except TomlkitParseError as e:
        raise ResolutionError(f"cannot parse manifest {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def find_manifest(start: Path) -> Path:
    """Return the nearest ``Cargo.toml`` in ``start`` or one of its ancestors.

    Raises:
        ResolutionError: If no manifest exists up to the filesystem root.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate: Path = directory / CARGO_MANIFEST_NAME
        if candidate.is_file():
            logger.debug("Found manifest %s", candidate)
            return candidate
    raise ResolutionError(
        f"could not find `{CARGO_MANIFEST_NAME}` in {start} or any parent directory"
    )
