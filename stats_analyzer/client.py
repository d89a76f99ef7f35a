"""Read-only GitHub REST client.

Reads are issued one after the other and awaited; a failing read raises
straight away and nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .errors import NotFound, RateLimited, UpstreamFailure
from .github_base import API_URL, HEADERS, TIMEOUT

logger = logging.getLogger(__name__)

PER_PAGE = 100


def _segment(value: str) -> str:
    # one path segment, never a query or fragment
    return quote(value, safe="")


class GitHubClient:
    """Async wrapper over the four GitHub endpoints the analyzer reads."""

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: float = TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=HEADERS,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, not_found: str, failure: str, expect: type, params: Optional[dict] = None) -> Any:
        try:
            resp = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("GET %s failed: %s", path, exc)
            raise UpstreamFailure(failure) from exc

        if resp.status_code == 404:
            raise NotFound(not_found)
        if resp.status_code == 403:
            logger.warning("GET %s rate limited", path)
            raise RateLimited()
        if resp.is_error:
            logger.warning("GET %s returned %s", path, resp.status_code)
            raise UpstreamFailure(failure)

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("GET %s returned a non-JSON body", path)
            raise UpstreamFailure(failure) from exc
        if not isinstance(data, expect):
            logger.warning("GET %s returned %s, expected %s", path, type(data).__name__, expect.__name__)
            raise UpstreamFailure(failure)
        return data

    async def get_user(self, login: str) -> dict:
        return await self._get(f"/users/{_segment(login)}", "User not found", "Failed to fetch profile", dict)

    async def get_user_repos(self, login: str) -> list:
        return await self._get(
            f"/users/{_segment(login)}/repos",
            "User not found",
            "Failed to fetch repositories",
            list,
            params={"per_page": PER_PAGE, "sort": "updated"},
        )

    async def get_repo(self, owner: str, name: str) -> dict:
        return await self._get(
            f"/repos/{_segment(owner)}/{_segment(name)}", "Repository not found", "Failed to fetch repository", dict
        )

    async def get_repo_languages(self, owner: str, name: str) -> dict:
        return await self._get(
            f"/repos/{_segment(owner)}/{_segment(name)}/languages",
            "Repository not found",
            "Failed to fetch languages",
            dict,
        )


__all__ = ["PER_PAGE", "GitHubClient"]
