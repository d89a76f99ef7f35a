"""GitHub language statistics: aggregation, donut geometry and cards."""

from .aggregate import LanguageObservation, LanguageStat, aggregate
from .analysis import AnalysisResult, analyze, demo_analysis, parse_search
from .colors import resolve_color
from .errors import AnalysisError, MalformedInput, NotFound, RateLimited, UpstreamFailure
from .geometry import ChartSegment, build_segments
from .profile import DisplayProfile, normalize

__all__ = [
    "LanguageObservation",
    "LanguageStat",
    "aggregate",
    "AnalysisResult",
    "analyze",
    "demo_analysis",
    "parse_search",
    "resolve_color",
    "AnalysisError",
    "MalformedInput",
    "NotFound",
    "RateLimited",
    "UpstreamFailure",
    "ChartSegment",
    "build_segments",
    "DisplayProfile",
    "normalize",
]
