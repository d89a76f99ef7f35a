# card.py

from __future__ import annotations

import logging

from .analysis import analyze, demo_analysis
from .errors import RateLimited
from .geometry import ring_radius
from .github_base import GitHubCardBase, escape_xml, format_percent

logger = logging.getLogger(__name__)

FONT = "Segoe UI, Ubuntu, sans-serif"


class LanguageDonutCard(GitHubCardBase):
    SIZE = 140
    STROKE_WIDTH = 16
    LEGEND_ROWS = 6

    def __init__(self, search, query_params, theme="dark", client=None):
        super().__init__(search, query_params, theme)
        self.client = client
        self.radius = ring_radius(self.SIZE, self.STROKE_WIDTH)
        self.allow_demo = query_params.get("fallback", [""])[0].lower() == "demo"

    async def fetch_data(self):
        try:
            return await analyze(self.search, self.client, self.radius)
        except RateLimited:
            if not self.allow_demo:
                raise
            logger.info("rate limited, rendering demo data for %r", self.search)
            return demo_analysis(self.radius)

    def _render_donut(self, result):
        center = self.SIZE / 2
        circles = []
        for seg in result.segments:
            # nothing to draw
            if seg.arc_length <= 0:
                continue
            circles.append(f'''
    <circle cx="{center}" cy="{center}" r="{self.radius}" fill="transparent" stroke="{seg.color}" stroke-width="{self.STROKE_WIDTH}" stroke-dasharray="{seg.dash_array}" stroke-dashoffset="{seg.arc_offset}" stroke-linecap="butt">
      <title>{escape_xml(seg.name)}</title>
    </circle>''')

        return f'''
  <g transform="translate(15, 15) rotate(-90, {center}, {center})">
    <circle cx="{center}" cy="{center}" r="{self.radius}" fill="transparent" stroke="{self.colors['border']}" stroke-width="{self.STROKE_WIDTH}"/>{''.join(circles)}
  </g>
  <text x="85" y="82" font-size="24" font-weight="bold" fill="{self.colors['text']}" font-family="{FONT}" text-anchor="middle">{len(result.stats)}</text>
  <text x="85" y="100" font-size="10" fill="{self.colors['text_secondary']}" font-family="{FONT}" text-anchor="middle">LANGS</text>'''

    def _render_legend(self, stats):
        items = []
        for index, stat in enumerate(stats[: self.LEGEND_ROWS]):
            items.append(f'''
    <g transform="translate(0, {index * 24})">
      <circle cx="6" cy="8" r="6" fill="{stat.color}"/>
      <text x="20" y="12" font-size="13" fill="{self.colors['text']}" font-family="{FONT}">{escape_xml(stat.name)}</text>
      <text x="220" y="12" font-size="13" fill="{self.colors['text_secondary']}" font-family="{FONT}" text-anchor="end">{format_percent(stat.percent)}%</text>
    </g>''')

        if not items:
            items.append(
                f'\n    <text x="0" y="12" font-size="13" fill="{self.colors["text_secondary"]}" font-family="{FONT}">No language data found.</text>'
            )
        return f'''
  <g transform="translate(170, 15)">{''.join(items)}
  </g>'''

    def render_body(self, result):
        body = self._render_donut(result) + self._render_legend(result.stats)
        if result.demo:
            body += (
                f'\n  <text x="385" y="160" font-size="9" fill="{self.colors["text_secondary"]}" '
                f'font-family="{FONT}" text-anchor="end">demo data</text>'
            )
        return body, self.SIZE + 10


__all__ = ["LanguageDonutCard"]
