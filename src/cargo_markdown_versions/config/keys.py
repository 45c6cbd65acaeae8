# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : keys.py
#   file_relpath : src/cargo_markdown_versions/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for the ``[package.metadata.markdown-versions]`` table.

Keys defined here represent the *external configuration API*: renaming or
removing one is a breaking change for every crate that configured the tool.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys and accepted values of the markdown-versions configuration table."""

    # Gatherer discriminant
    KEY_METHOD: Final[str] = "method"
    METHOD_REGISTRY: Final[str] = "registry"
    METHOD_GIT: Final[str] = "git"

    # Registry gatherer
    KEY_API_BASE_URL: Final[str] = "api-base-url"
    ALIAS_API_BASE_URL: Final[str] = "api"

    # Git gatherer
    KEY_TAGS_PATTERN: Final[str] = "tags-pattern"
    ALIAS_TAGS_PATTERN: Final[str] = "tags"

    KEY_README: Final[str] = "readme"

    # [title]
    SECTION_TITLE: Final[str] = "title"
    KEY_LABEL: Final[str] = "label"
    KEY_SIZE: Final[str] = "size"

    KEY_DOC_PATTERN: Final[str] = "doc-pattern"
    ALIAS_DOC_PATTERN: Final[str] = "pattern"

    # ---------------------------- Schema helpers ----------------------------

    METHODS: Final[tuple[str, ...]] = (METHOD_REGISTRY, METHOD_GIT)

    ALLOWED_TITLE_KEYS: Final[frozenset[str]] = frozenset({KEY_LABEL, KEY_SIZE})

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_METHOD,
            KEY_API_BASE_URL,
            ALIAS_API_BASE_URL,
            KEY_TAGS_PATTERN,
            ALIAS_TAGS_PATTERN,
            KEY_README,
            SECTION_TITLE,
            KEY_DOC_PATTERN,
            ALIAS_DOC_PATTERN,
        }
    )
