# github_base.py

from __future__ import annotations

import logging
import os
import traceback

from .errors import AnalysisError

# --- SHARED CONFIG ---
API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_HOST = os.environ.get("GITHUB_HOST", "github.com")
TIMEOUT = float(os.environ.get("GITHUB_TIMEOUT", "10"))
CACHE_SECONDS = int(os.environ.get("STATS_CACHE_SECONDS", "14400"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
HEADERS = {"Accept": "application/vnd.github.v3+json", "User-Agent": "github-stats-card"}

logger = logging.getLogger(__name__)


def configure_logging():
    """Set up root logging once per process (handlers call this on import)."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# --- UTILITIES ---
def escape_xml(text):
    """Sanitize text for SVG output."""
    return (
        str(text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def format_percent(percent):
    """Percentages are kept unrounded until they are displayed."""
    return f"{percent:.1f}"


# --- THEMES ---
THEMES = {
    "dark": {"bg": "#0d1117", "border": "#30363d", "text": "#e6edf3", "text_secondary": "#8b949e"},
    "light": {"bg": "#ffffff", "border": "#d0d7de", "text": "#1f2328", "text_secondary": "#656d76"},
}
DEFAULT_THEME = "dark"


def resolve_theme(name):
    return name if name in THEMES else DEFAULT_THEME


# ==========================================
# THE ABSTRACT BASE CLASS
# ==========================================
class GitHubCardBase:
    def __init__(self, search, query_params, theme=DEFAULT_THEME):
        self.search = search
        self.params = query_params
        self.theme = resolve_theme(theme)
        self.colors = THEMES[self.theme]
        # Default styling constants
        self.card_width = 400
        self.padding = 20
        self.header_height = 40

    def _render_error(self, error_msg):
        """Standardized error card."""
        lines = str(error_msg).splitlines()[:5]
        height = 60 + (len(lines) * 20)
        return f"""
        <svg width="400" height="{height}" xmlns="http://www.w3.org/2000/svg">
            <style>.header {{ font: 600 14px "Segoe UI", Ubuntu, Sans-Serif; fill: #ff5555; }} .text {{ font: 400 12px monospace; fill: #f85149; }}</style>
            <rect width="400" height="{height}" fill="{self.colors['bg']}" rx="6" stroke="{self.colors['border']}"/>
            <text x="20" y="30" class="header">Error: {escape_xml(self.search)}</text>
            {''.join([f'<text x="20" y="{60 + i*20}" class="text">{escape_xml(line)}</text>' for i, line in enumerate(lines)])}
        </svg>
        """

    def _render_frame(self, body_content, content_height):
        """Wraps specific content in the standard card background."""
        total_height = content_height + self.padding
        return f"""
<svg width="{self.card_width}" height="{total_height}" viewBox="0 0 {self.card_width} {total_height}" fill="none" xmlns="http://www.w3.org/2000/svg">
  <rect width="{self.card_width}" height="{total_height}" rx="10" fill="{self.colors['bg']}" stroke="{self.colors['border']}" stroke-width="1"/>
  {body_content}
</svg>
        """.strip()

    async def fetch_data(self):
        """Override this method to fetch data from GitHub."""
        raise NotImplementedError

    def render_body(self, data):
        """Override this method to generate SVG body content. Returns (svg_str, height_int)."""
        raise NotImplementedError

    async def process(self):
        """Main execution flow. Returns (svg, ok) so callers can pick cache headers."""
        if not self.search:
            return self._render_error("Missing ?search= parameter"), False
        try:
            data = await self.fetch_data()
            body, height = self.render_body(data)
            return self._render_frame(body, height), True
        except AnalysisError as exc:
            logger.warning("analysis of %r failed: %s", self.search, exc)
            return self._render_error(exc), False
        except Exception:
            logger.exception("unexpected error rendering card for %r", self.search)
            return self._render_error(traceback.format_exc()), False
