from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Any

import pytest

from ghclone.core.types import RepositoryDescriptor


class FakeResponse:
    def __init__(self, data: Any, status_code: int = 200, next_url: str | None = None, reason: str = "OK") -> None:
        self._data = data
        self.status_code = status_code
        self.reason = reason
        self.links = {"next": {"url": next_url, "rel": "next"}} if next_url else {}
        self.text = "" if data is None else str(data)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._data is None:
            raise ValueError("no body")
        return self._data


class FakeSession:
    """Serves canned responses keyed by URL and records every GET."""

    def __init__(self, routes: dict[str, FakeResponse | Exception]) -> None:
        self.routes = routes
        self.calls: list[tuple[str, dict[str, Any] | None, dict[str, str]]] = []

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append((url, params, headers or {}))
        resp = self.routes[url]
        if isinstance(resp, Exception):
            raise resp
        return resp


def api_repo(full_name: str, archived: bool = False) -> dict[str, Any]:
    owner, name = full_name.split("/")
    return {
        "name": name,
        "full_name": full_name,
        "clone_url": f"https://github.com/{full_name}.git",
        "ssh_url": f"git@github.com:{full_name}.git",
        "archived": archived,
        "owner": {"login": owner},
    }


def descriptor(full_name: str, clone_url: str | None = None) -> RepositoryDescriptor:
    record = api_repo(full_name)
    if clone_url is not None:
        record["clone_url"] = clone_url
    return RepositoryDescriptor.from_api(record)


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", "-c", "commit.gpgsign=false", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
    )


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture
def origin_repo(tmp_path: Path) -> Path:
    """A local repository with one commit, usable as a clone URL."""
    origin = tmp_path / "origin" / "acme" / "alpha"
    origin.mkdir(parents=True)
    _git("init", "-q", cwd=origin)
    (origin / "README.md").write_text("alpha\n")
    _git("add", "README.md", cwd=origin)
    _git("commit", "-q", "-m", "init", cwd=origin)
    return origin


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    d = tmp_path / "dest"
    d.mkdir()
    return d
