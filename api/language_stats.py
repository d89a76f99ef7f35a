# api/language_stats.py

from http.server import BaseHTTPRequestHandler

from stats_analyzer.github_base import configure_logging
from stats_analyzer.server import respond_with_card

configure_logging()


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        respond_with_card(self)
