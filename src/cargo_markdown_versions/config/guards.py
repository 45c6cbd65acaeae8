# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : guards.py
#   file_relpath : src/cargo_markdown_versions/config/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for values parsed out of TOML documents.

These `TypeGuard` predicates let Pyright narrow the ``Any`` values produced by
``tomlkit`` (after ``unwrap()``) or by callers passing plain mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

TomlTable = dict[str, Any]


def is_toml_table(obj: object) -> TypeGuard[Mapping[str, Any]]:
    """Type guard for a TOML table-like mapping with string keys.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[Mapping[str, Any]]: True if ``obj`` is a mapping whose keys are strings.
    """
    return isinstance(obj, Mapping) and all(isinstance(k, str) for k in obj)


def is_str(obj: object) -> TypeGuard[str]:
    """Type guard for a string value."""
    return isinstance(obj, str)


def is_bool(obj: object) -> TypeGuard[bool]:
    """Type guard for a boolean value."""
    return isinstance(obj, bool)


def is_int(obj: object) -> TypeGuard[int]:
    """Type guard for an integer value.

    ``bool`` is a subclass of ``int`` in Python; TOML booleans are rejected here.
    """
    return isinstance(obj, int) and not isinstance(obj, bool)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a list of strings."""
    return isinstance(obj, list) and all(isinstance(x, str) for x in obj)
