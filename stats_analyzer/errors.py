"""Failures surfaced while analyzing a user or repository."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class; ``status`` is the HTTP status a JSON endpoint answers with."""

    status = 500
    kind = "error"


class NotFound(AnalysisError):
    status = 404
    kind = "not_found"


class RateLimited(AnalysisError):
    """GitHub refused the read because the request quota is spent."""

    status = 429
    kind = "rate_limited"

    def __init__(self, message: str = "GitHub API rate limit exceeded"):
        super().__init__(message)


class UpstreamFailure(AnalysisError):
    status = 502
    kind = "upstream_failure"


class MalformedInput(AnalysisError):
    status = 400
    kind = "malformed_input"


__all__ = ["AnalysisError", "NotFound", "RateLimited", "UpstreamFailure", "MalformedInput"]
