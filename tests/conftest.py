import os
import sys

import httpx
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stats_analyzer.client import GitHubClient  # noqa: E402


USER = {
    "login": "octocat",
    "name": "The Octocat",
    "avatar_url": "https://avatars.githubusercontent.com/u/583231",
    "bio": None,
    "public_repos": 8,
    "followers": 9000,
}

REPOS = [
    {"name": "a", "language": "Python", "size": 300, "fork": False},
    {"name": "b", "language": "Go", "size": 100, "fork": False},
    {"name": "c", "language": None, "size": 5000, "fork": False},
    {"name": "d", "language": "Rust", "size": 9000, "fork": True},
    {"name": "e", "language": "Python", "size": 100, "fork": False},
]

REPO = {
    "name": "Hello-World",
    "description": "My first repository on GitHub!",
    "html_url": "https://github.com/octocat/Hello-World",
    "owner": {"login": "octocat", "avatar_url": "https://avatars.githubusercontent.com/u/583231"},
    "stargazers_count": 2500,
    "forks_count": 2100,
}

LANGUAGES = {"TypeScript": 102400, "CSS": 5120}


def make_routes(overrides=None):
    routes = {
        "/users/octocat": (200, USER),
        "/users/octocat/repos": (200, REPOS),
        "/repos/octocat/Hello-World": (200, REPO),
        "/repos/octocat/Hello-World/languages": (200, LANGUAGES),
    }
    routes.update(overrides or {})
    return routes


class FakeGitHub:
    """Serves canned GitHub responses and records the paths requested."""

    def __init__(self, overrides=None):
        self.routes = make_routes(overrides)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"message": "Not Found"}))
        return httpx.Response(status, json=body)

    def client(self):
        return GitHubClient(base_url="https://api.github.com", transport=httpx.MockTransport(self))


@pytest.fixture
def github():
    return FakeGitHub()
