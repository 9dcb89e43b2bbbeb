"""GitHub API operations: who am I, which orgs, which repositories."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any
from urllib.parse import urlparse, urlunparse

import requests

from .constants import API_BASE, GITHUB_API_ACCEPT, HTTP_TIMEOUT_SEC, PER_PAGE, USER_AGENT
from .errors import AuthorizationError, GitHubError, TransportError
from .types import RepositoryDescriptor, RepositoryType, SortType

log = logging.getLogger("ghclone")


class GitHubClient:
    def __init__(
        self,
        token: str | None = None,
        *,
        api_base: str = API_BASE,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.log = logger or log

    # ---------- low-level HTTP ----------
    def _headers(self) -> dict[str, str]:
        headers = {"Accept": GITHUB_API_ACCEPT, "User-Agent": USER_AGENT}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get(self, url: str, params: dict[str, Any] | None = None) -> requests.Response:
        self.log.debug("GET %s %s", url, params or "")
        try:
            resp = self.session.get(url, headers=self._headers(), params=params, timeout=HTTP_TIMEOUT_SEC)
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if resp.status_code in (401, 403):
            raise AuthorizationError(_api_message(resp), status_code=resp.status_code)
        if not resp.ok:
            raise GitHubError(f"GET {url} returned {resp.status_code}: {_api_message(resp)}", resp.status_code)
        return resp

    def _paginate(self, path: str, params: dict[str, Any]) -> Iterator[dict[str, Any]]:
        """Yield every record of a list endpoint, following the `next` link until there is none."""
        url: str | None = f"{self.api_base}{path}"
        query: dict[str, Any] | None = {**params, "per_page": PER_PAGE}
        page = 0
        while url:
            resp = self._get(url, params=query)
            page += 1
            data = _json(resp, url)
            if not isinstance(data, list):
                raise GitHubError(f"Unexpected response from {url}: expected a list")
            self.log.debug("page %d of %s: %d record(s)", page, path, len(data))
            yield from data
            # the next link already carries the query string
            url = resp.links.get("next", {}).get("url")
            query = None

    # ---------- public API ----------
    @staticmethod
    def inject_token_into_https(clone_url: str, token: str) -> str:
        """https://github.com/owner/repo.git -> https://x-access-token:<token>@github.com/owner/repo.git"""
        u = urlparse(clone_url)
        netloc = f"x-access-token:{token}@{u.netloc}"
        return urlunparse((u.scheme, netloc, u.path, u.params, u.query, u.fragment))

    def authenticated_login(self) -> str:
        url = f"{self.api_base}/user"
        body = _json(self._get(url), url)
        if not isinstance(body, dict) or not body.get("login"):
            raise GitHubError(f"Unexpected response from {url}: no login")
        return str(body["login"])

    def list_organizations(self) -> Iterator[str]:
        for org in self._paginate("/user/orgs", {}):
            yield org["login"]

    def list_repositories(self, account: str, is_self: bool) -> Iterator[RepositoryDescriptor]:
        """Yield the non-archived repositories of `account`, sorted by full name.

        `is_self` selects the authenticated user's own repositories (`/user/repos`,
        owner type only) instead of the organization listing; the two endpoints
        need different token scopes.
        """
        if is_self:
            records = self._paginate(
                "/user/repos", {"type": RepositoryType.owner.value, "sort": SortType.full_name.value}
            )
        else:
            records = self._paginate(f"/orgs/{account}/repos", {"sort": SortType.full_name.value})

        for r in records:
            if r.get("archived"):
                self.log.debug("skip archived %s", r.get("full_name"))
                continue
            yield RepositoryDescriptor.from_api(r)


def _json(resp: requests.Response, url: str) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise GitHubError(f"Unexpected response from {url}: body is not JSON", resp.status_code) from e


def _api_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text.strip() or resp.reason or str(resp.status_code)
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return resp.text.strip()
