# topmark:header:start
#
#   project      : cargo-markdown-versions
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers: fake tag sources, manifest writers, registry transports and CLI runners."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import httpx
from click.testing import CliRunner, Result

from cargo_markdown_versions.cli.main import cli
from cargo_markdown_versions.core.errors import RepositoryError
from cargo_markdown_versions.gatherers.records import VersionRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from pathlib import Path


def utc(year: int, month: int = 1, day: int = 1, hour: int = 0) -> datetime:
    """Return a UTC datetime."""
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


def record(version: str, creation: datetime) -> VersionRecord:
    """Shorthand for a `VersionRecord`."""
    return VersionRecord(version=version, creation=creation)


class FakeTagSource:
    """In-memory `TagSource`.

    Args:
        tags (Mapping[str, datetime]): Tag name to commit time, in enumeration order.
        broken (Iterable[str]): Tags whose commit time cannot be resolved.
    """

    def __init__(self, tags: Mapping[str, datetime], *, broken: Iterable[str] = ()) -> None:
        self.tags = dict(tags)
        self.broken = set(broken)
        self.listed = 0
        self.resolved: list[str] = []

    def tag_names(self) -> list[str]:
        self.listed += 1
        return list(self.tags)

    def commit_time(self, tag_name: str) -> datetime:
        self.resolved.append(tag_name)
        if tag_name in self.broken:
            raise RepositoryError(f"tag {tag_name!r} does not point at a commit")
        return self.tags[tag_name]


class UntouchableTagSource:
    """`TagSource` failing the test on any access."""

    def tag_names(self) -> list[str]:
        raise AssertionError("tags must not be listed")

    def commit_time(self, tag_name: str) -> datetime:
        raise AssertionError(f"commit time of {tag_name!r} must not be read")


def versions_payload(*entries: tuple[str, str]) -> dict[str, Any]:
    """Build a ``/versions`` response body from ``(num, created_at)`` pairs."""
    return {"versions": [{"num": num, "created_at": created_at} for num, created_at in entries]}


def json_transport(
    payload: Any,
    *,
    status_code: int = 200,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Return a transport answering every request with ``payload`` as JSON.

    Args:
        payload (Any): JSON-serializable body.
        status_code (int): HTTP status of the response.
        seen (list[httpx.Request] | None): Receives every request issued.

    Returns:
        httpx.MockTransport: The transport.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

    return httpx.MockTransport(handler)


def failing_transport() -> httpx.MockTransport:
    """Return a transport failing the test on any request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request to {request.url}")

    return httpx.MockTransport(handler)


def write_file(path: Path, text: str) -> Path:
    """Write ``text`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_package(
    directory: Path,
    name: str,
    *,
    extra: str = "",
    package_extra: str = "",
) -> Path:
    """Write a minimal package ``Cargo.toml`` and return its path.

    Args:
        directory (Path): Package directory.
        name (str): Package name.
        extra (str): TOML appended after the ``[package]`` table.
        package_extra (str): Lines appended inside the ``[package]`` table.

    Returns:
        Path: The manifest path.
    """
    text = f'[package]\nname = "{name}"\nversion = "0.1.0"\n{package_extra}\n{extra}'
    return write_file(directory / "Cargo.toml", text)


def run_cli_in(
    cwd: Path,
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Working directory of the command.
        argv (Sequence[str]): CLI argument vector.
        env (Mapping[str, str] | None): Extra environment variables.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, list(argv), env=dict(env or {}))
    finally:
        os.chdir(previous)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, list(argv))

