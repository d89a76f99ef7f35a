from http.server import BaseHTTPRequestHandler
from urllib.parse import urlparse


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        query = urlparse(self.path).query
        self.send_response(302)
        self.send_header("Location", f"/api/?{query}" if query else "/api/")
        self.end_headers()
