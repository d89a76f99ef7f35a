"""Analyze a GitHub user or repository into chart-ready language stats."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import List, Optional

from .aggregate import (
    LanguageObservation,
    LanguageStat,
    aggregate,
    observations_from_languages,
    observations_from_repos,
    to_kilobytes,
    total_value,
)
from .client import GitHubClient
from .errors import MalformedInput
from .geometry import ChartSegment, build_segments, ring_radius
from .profile import NO_DESCRIPTION, DisplayProfile, normalize

logger = logging.getLogger(__name__)

# 140px card donut with a 16px stroke
DEFAULT_RADIUS = ring_radius(140, 16)

# Whitespace, query and fragment characters never appear in logins or repo names
UNSAFE_SEARCH = re.compile(r"[\s?#]")

BASIS = {
    "user": "Based on repository size & primary language",
    "repo": "Based on exact byte counts",
}


@dataclass(frozen=True)
class SearchQuery:
    kind: str
    login: str
    repo: Optional[str] = None


def parse_search(text: str) -> SearchQuery:
    """
    Work out what a search string asks for.

    ``"octocat"`` selects user mode, ``"octocat/hello-world"`` selects repo
    mode. Anything after a second ``/`` is ignored.
    """
    text = (text or "").strip()
    if not text:
        raise MalformedInput("Enter a username or owner/repo")
    if UNSAFE_SEARCH.search(text):
        raise MalformedInput("Search may not contain spaces, '?' or '#'")
    if "/" not in text:
        return SearchQuery("user", text)

    owner, name = (part.strip() for part in text.split("/")[:2])
    if not owner or not name:
        raise MalformedInput("Invalid repository format. Use owner/repo")
    return SearchQuery("repo", owner, name)


@dataclass(frozen=True)
class AnalysisResult:
    kind: str
    profile: DisplayProfile
    stats: List[LanguageStat]
    segments: List[ChartSegment]
    demo: bool = False

    @property
    def total_value(self) -> float:
        return total_value(self.stats)

    def to_dict(self) -> dict:
        """JSON shape served to the interactive page; percents rounded here."""
        return {
            "kind": self.kind,
            "demo": self.demo,
            "basis": BASIS[self.kind],
            "profile": asdict(self.profile),
            "bio_display": self.profile.bio or NO_DESCRIPTION,
            "avatar_shape": "square" if self.profile.is_repo else "round",
            "stats": [
                {"name": s.name, "value": s.value, "color": s.color, "percent": round(s.percent, 1)}
                for s in self.stats
            ],
            "segments": [
                {
                    "name": seg.name,
                    "color": seg.color,
                    "arc_length": seg.arc_length,
                    "arc_offset": seg.arc_offset,
                    "dash_array": seg.dash_array,
                }
                for seg in self.segments
            ],
            "circumference": self.segments[0].circumference if self.segments else None,
            "total_value": self.total_value,
        }


async def _analyze_user(client: GitHubClient, login: str):
    raw_profile = await client.get_user(login)
    repos = await client.get_user_repos(login)
    stats = aggregate(observations_from_repos(repos))
    return normalize("user", raw_profile), stats


async def _analyze_repo(client: GitHubClient, owner: str, name: str):
    raw_repo = await client.get_repo(owner, name)
    languages = await client.get_repo_languages(owner, name)
    # Percent comes from exact bytes; values are shown in KB
    stats = to_kilobytes(aggregate(observations_from_languages(languages)))
    return normalize("repo", raw_repo), stats


async def analyze(search: str, client: Optional[GitHubClient] = None, radius: float = DEFAULT_RADIUS) -> AnalysisResult:
    """
    Fetch, aggregate and lay out the language breakdown for a search.

    Args:
        search: ``login`` or ``owner/name``
        client: Client to read with; a fresh one is opened and closed if omitted
        radius: Donut radius the segments are laid out for

    Raises:
        MalformedInput, NotFound, RateLimited, UpstreamFailure
    """
    query = parse_search(search)

    if client is None:
        async with GitHubClient() as owned:
            return await analyze(search, owned, radius)

    logger.info("analyzing %s %s", query.kind, search)
    if query.kind == "repo":
        profile, stats = await _analyze_repo(client, query.login, query.repo)
    else:
        profile, stats = await _analyze_user(client, query.login)

    return AnalysisResult(query.kind, profile, stats, build_segments(stats, radius))


# Shown instead of an error when GitHub rate limits the caller
DEMO_PROFILE = {
    "login": "demo-user",
    "name": "Demo Developer",
    "avatar_url": "https://github.githubassets.com/images/modules/logos_page/GitHub-Mark.png",
    "bio": "This is mock data to show how the app looks when the API rate limit is hit.",
    "public_repos": 42,
    "followers": 128,
}
DEMO_OBSERVATIONS = [
    LanguageObservation("JavaScript", 45000),
    LanguageObservation("Python", 32000),
    LanguageObservation("TypeScript", 28000),
    LanguageObservation("HTML", 12000),
    LanguageObservation("CSS", 8000),
    LanguageObservation("Java", 3000),
    LanguageObservation("Go", 1800),
]


def demo_analysis(radius: float = DEFAULT_RADIUS) -> AnalysisResult:
    stats = aggregate(DEMO_OBSERVATIONS)
    return AnalysisResult("user", normalize("user", DEMO_PROFILE), stats, build_segments(stats, radius), demo=True)


__all__ = [
    "DEFAULT_RADIUS",
    "SearchQuery",
    "parse_search",
    "AnalysisResult",
    "analyze",
    "demo_analysis",
]
