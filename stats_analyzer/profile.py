"""Normalize GitHub user and repository records into one display shape."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Optional, Tuple

from .github_base import GITHUB_HOST

ProfileKind = Literal["user", "repo"]

# Shown by presenters when bio/description is missing
NO_DESCRIPTION = "No description available."


@dataclass(frozen=True)
class Metric:
    label: str
    value: int


@dataclass(frozen=True)
class DisplayProfile:
    kind: ProfileKind
    login: str
    display_name: str
    avatar_url: str
    bio: Optional[str]
    external_url: str
    secondary_metric: Metric
    extra_metrics: Tuple[Metric, ...] = ()

    @property
    def is_repo(self) -> bool:
        return self.kind == "repo"


def _normalize_user(raw: Mapping) -> DisplayProfile:
    login = raw["login"]
    return DisplayProfile(
        kind="user",
        login=login,
        display_name=raw.get("name") or login,
        avatar_url=raw.get("avatar_url", ""),
        bio=raw.get("bio") or None,
        external_url=f"https://{GITHUB_HOST}/{login}",
        secondary_metric=Metric("Repos", raw.get("public_repos") or 0),
        extra_metrics=(Metric("Followers", raw.get("followers") or 0),),
    )


def _normalize_repo(raw: Mapping) -> DisplayProfile:
    owner = raw.get("owner") or {}
    return DisplayProfile(
        kind="repo",
        login=owner.get("login", ""),
        display_name=raw["name"],
        avatar_url=owner.get("avatar_url", ""),
        bio=raw.get("description") or None,
        external_url=raw.get("html_url", ""),
        secondary_metric=Metric("Stars", raw.get("stargazers_count") or 0),
        extra_metrics=(Metric("Forks", raw.get("forks_count") or 0),),
    )


def normalize(kind: str, raw: Mapping) -> DisplayProfile:
    """
    Build a :class:`DisplayProfile` from a raw GitHub API record.

    Args:
        kind: ``"user"`` for ``/users/{login}`` records, ``"repo"`` for
            ``/repos/{owner}/{name}`` records
        raw: Decoded JSON record

    Returns:
        The normalized profile; ``bio`` is ``None`` when GitHub has none
    """
    if kind == "user":
        return _normalize_user(raw)
    if kind == "repo":
        return _normalize_repo(raw)
    raise ValueError(f"Unknown profile kind: {kind!r}")


__all__ = ["NO_DESCRIPTION", "Metric", "DisplayProfile", "normalize"]
