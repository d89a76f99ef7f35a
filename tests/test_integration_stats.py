"""Integration tests against the live GitHub API."""

import asyncio

import pytest

from stats_analyzer.analysis import analyze
from stats_analyzer.errors import RateLimited

TEST_SEARCHES = ["octocat", "octocat/Hello-World"]


@pytest.mark.integration
class TestRealGitHubData:
    def test_analyze_searches(self):
        for search in TEST_SEARCHES:
            try:
                result = asyncio.run(analyze(search))
            except RateLimited:
                pytest.skip("GitHub rate limit hit")

            assert result.profile.login == "octocat"
            assert len(result.stats) <= 6
            assert len(result.segments) == len(result.stats)
            if result.stats:
                assert sum(s.percent for s in result.stats) == pytest.approx(100, abs=0.1)
            print(f"✓ {search}: {[s.name for s in result.stats]}")
