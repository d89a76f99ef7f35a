"""Response helpers shared by the Vercel handlers under ``api/``."""

from __future__ import annotations

import asyncio
import json
import logging
from urllib.parse import parse_qs, urlparse

from .analysis import analyze, demo_analysis
from .card import LanguageDonutCard
from .errors import AnalysisError
from .geometry import ring_radius
from .github_base import CACHE_SECONDS

logger = logging.getLogger(__name__)

# Interactive page donut: 240px with a 20px stroke
INTERACTIVE_RADIUS = ring_radius(240, 20)

CACHE_OK = f"s-maxage={CACHE_SECONDS}, stale-while-revalidate"
CACHE_NONE = "no-cache, max-age=0"


def parse_query(path):
    return parse_qs(urlparse(path).query) if "?" in path else {}


def search_param(query):
    """``?search=`` wins; ``?username=`` is kept for older embeds."""
    return query.get("search", query.get("username", [""]))[0]


def _send(handler, status, content_type, body, cache_control):
    handler.send_response(status)
    handler.send_header("Content-Type", content_type)
    handler.send_header("Cache-Control", cache_control)
    handler.end_headers()
    handler.wfile.write(body.encode())


def respond_with_card(handler, client=None):
    """Render the donut SVG card. Errors are drawn as a card with status 200."""
    query = parse_query(handler.path)
    theme = query.get("theme", ["dark"])[0].lower()
    card = LanguageDonutCard(search_param(query), query, theme=theme, client=client)
    svg, ok = asyncio.run(card.process())
    _send(handler, 200, "image/svg+xml; charset=utf-8", svg, CACHE_OK if ok else CACHE_NONE)


async def _analysis_payload(query, client):
    if query.get("demo", [""])[0] in ("1", "true"):
        return demo_analysis(INTERACTIVE_RADIUS).to_dict()
    result = await analyze(search_param(query), client, INTERACTIVE_RADIUS)
    return result.to_dict()


def respond_with_json(handler, client=None):
    """Serve the analysis as JSON for the interactive page."""
    query = parse_query(handler.path)
    try:
        payload = asyncio.run(_analysis_payload(query, client))
    except AnalysisError as exc:
        logger.warning("analysis failed: %s", exc)
        body = json.dumps({"error": str(exc), "kind": exc.kind})
        _send(handler, exc.status, "application/json", body, CACHE_NONE)
        return
    except Exception:
        logger.exception("unexpected error while analyzing")
        body = json.dumps({"error": "Internal server error", "kind": "error"})
        _send(handler, 500, "application/json", body, CACHE_NONE)
        return
    _send(handler, 200, "application/json", json.dumps(payload), CACHE_OK)


__all__ = ["INTERACTIVE_RADIUS", "parse_query", "search_param", "respond_with_card", "respond_with_json"]
