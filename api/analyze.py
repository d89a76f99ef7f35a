# api/analyze.py

from http.server import BaseHTTPRequestHandler

from stats_analyzer.github_base import configure_logging
from stats_analyzer.server import respond_with_json

configure_logging()


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        respond_with_json(self)
