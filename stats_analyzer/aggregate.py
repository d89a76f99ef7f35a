"""Language statistics aggregation.

Both the image card and the JSON endpoint go through :func:`aggregate`; the
two modes only differ in how observations are prepared:

- heuristic mode (users): one observation per non-fork repository, sized by
  the repository's reported size (KB) and tagged with its primary language.
- exact mode (repositories): one observation per language returned by the
  languages endpoint, sized in bytes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable, List, Mapping

from .colors import OTHER_COLOR, resolve_color

TOP_N = 5
OTHER_NAME = "Other"


@dataclass(frozen=True)
class LanguageObservation:
    language: str
    size: int


@dataclass(frozen=True)
class LanguageStat:
    name: str
    value: float
    color: str
    percent: float
    # Size in the unit it was observed in (KB for repos, bytes for languages)
    raw_size: int = 0


def observations_from_repos(repos: Iterable[Mapping]) -> List[LanguageObservation]:
    """Heuristic mode: drop forks and repositories without a primary language."""
    return [
        LanguageObservation(repo["language"], int(repo.get("size") or 0))
        for repo in repos
        if repo.get("language") and not repo.get("fork")
    ]


def observations_from_languages(languages: Mapping[str, int]) -> List[LanguageObservation]:
    """Exact mode: one observation per language byte count."""
    return [LanguageObservation(name, int(size)) for name, size in languages.items()]


def aggregate(observations: Iterable[LanguageObservation], top_n: int = TOP_N) -> List[LanguageStat]:
    """
    Group observations by language and rank them.

    Args:
        observations: (language, size) pairs
        top_n: Number of languages kept before the rest is folded into "Other"

    Returns:
        Stats sorted by descending value, at most ``top_n`` entries plus an
        "Other" entry when more languages were seen. Percentages are not
        rounded.
    """
    totals: dict[str, int] = {}
    total_size = 0
    for obs in observations:
        totals[obs.language] = totals.get(obs.language, 0) + obs.size
        total_size += obs.size

    def percent_of(value):
        return value / total_size * 100 if total_size > 0 else 0

    # sorted() is stable, so ties keep encounter order
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)

    stats = [
        LanguageStat(name, value, resolve_color(name), percent_of(value), value)
        for name, value in ranked[:top_n]
    ]

    rest = ranked[top_n:]
    if rest:
        other_value = sum(value for _, value in rest)
        stats.append(LanguageStat(OTHER_NAME, other_value, OTHER_COLOR, percent_of(other_value), other_value))

    return stats


def to_kilobytes(stats: Iterable[LanguageStat]) -> List[LanguageStat]:
    """Rescale byte-valued stats to whole KB, keeping percent and raw size."""
    # Half rounds up
    return [replace(stat, value=math.floor(stat.raw_size / 1024 + 0.5)) for stat in stats]


def total_value(stats: Iterable[LanguageStat]) -> float:
    return sum(stat.value for stat in stats)


__all__ = [
    "TOP_N",
    "OTHER_NAME",
    "LanguageObservation",
    "LanguageStat",
    "observations_from_repos",
    "observations_from_languages",
    "aggregate",
    "to_kilobytes",
    "total_value",
]
