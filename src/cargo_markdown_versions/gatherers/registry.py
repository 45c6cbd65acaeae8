# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : registry.py
#   file_relpath : src/cargo_markdown_versions/gatherers/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry gatherer: read the version history of a crate from a crates.io-style API.

A single ``GET {api_base_url}/crates/{crate}/versions`` is issued. The response
is expected to look like:

```json
{"versions": [{"num": "1.2.3", "created_at": "2023-01-01T12:00:00.000000+00:00"}]}
```

Entries are returned exactly as the service lists them: no filtering, no
re-sorting and no pagination beyond the first response.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

import httpx

from cargo_markdown_versions.config.logging import get_logger
from cargo_markdown_versions.constants import USER_AGENT
from cargo_markdown_versions.core.errors import NetworkError, ParseError
from cargo_markdown_versions.gatherers.records import VersionRecord

if TYPE_CHECKING:
    from cargo_markdown_versions.config.logging import MarkdownVersionsLogger

logger: MarkdownVersionsLogger = get_logger(__name__)


class RegistryClient:
    """Minimal client for the ``/crates/{crate}/versions`` endpoint.

    Args:
        api_base_url (str): Base URL of the registry API (trailing slashes are trimmed).
        client (httpx.Client | None): Client to issue the request with. It is used
            as-is and left open; when omitted, a client is created for the single
            request and closed right after.
    """

    def __init__(self, api_base_url: str, *, client: httpx.Client | None = None) -> None:
        self.api_base_url = api_base_url.rstrip("/")
        self._client = client

    def versions_url(self, package_name: str) -> str:
        """Return the versions endpoint URL for ``package_name``."""
        return f"{self.api_base_url}/crates/{package_name}/versions"

    def fetch_versions(self, package_name: str) -> list[VersionRecord]:
        """Fetch the version history of ``package_name`` in the registry's order.

        Args:
            package_name (str): Name of the crate.

        Returns:
            list[VersionRecord]: One record per entry of the ``versions`` array.

        Raises:
            NetworkError: On transport failure or a non-success HTTP status.
            ParseError: If the body is not JSON or does not match the expected schema.
        """
        url: str = self.versions_url(package_name)
        logger.info("Fetching versions of %s from %s", package_name, url)

        if self._client is not None:
            response: httpx.Response = self._get(self._client, url)
        else:
            with httpx.Client() as client:
                response = self._get(client, url)

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise ParseError(f"registry response from {url} is not valid JSON: {exc}") from exc

        records: list[VersionRecord] = parse_versions_payload(payload)
        logger.debug("Registry returned %d version(s) for %s", len(records), package_name)
        return records

    @staticmethod
    def _get(client: httpx.Client, url: str) -> httpx.Response:
        try:
            response = client.get(
                url, headers={"User-Agent": USER_AGENT}, follow_redirects=True
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(
                f"registry request to {url} failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"registry request to {url} failed: {exc}") from exc
        return response


def parse_versions_payload(payload: Any) -> list[VersionRecord]:
    """Convert a decoded ``/versions`` response into version records.

    Args:
        payload (Any): The decoded JSON document.

    Returns:
        list[VersionRecord]: The records, in payload order.

    Raises:
        ParseError: If the payload does not have the expected shape.
    """
    if not isinstance(payload, dict) or "versions" not in payload:
        raise ParseError("registry response has no `versions` array")
    entries: Any = payload["versions"]
    if not isinstance(entries, list):
        raise ParseError("registry response field `versions` is not an array")

    records: list[VersionRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ParseError(f"registry version entry #{index} is not an object")
        num: Any = entry.get("num")
        created_at: Any = entry.get("created_at")
        if not isinstance(num, str):
            raise ParseError(f"registry version entry #{index} has no string `num`")
        if not isinstance(created_at, str):
            raise ParseError(f"registry version {num!r} has no string `created_at`")
        records.append(VersionRecord(version=num, creation=parse_timestamp(created_at)))
    return records


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into a timezone-aware datetime.

    Raises:
        ParseError: If ``value`` is not an RFC 3339 date-time with an offset.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ParseError(f"invalid RFC 3339 timestamp {value!r}") from exc
    if parsed.tzinfo is None:
        raise ParseError(f"timestamp {value!r} has no UTC offset")
    return parsed
