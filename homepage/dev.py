#!/usr/bin/env python3
from __future__ import annotations

import argparse
import functools
import http.server
import subprocess
import sys
from pathlib import Path

from homepage.config import PREFIX, SITE_DIR
from homepage.routing import NOT_FOUND_OUTPUT

PORT = 8787


class SiteRequestHandler(http.server.SimpleHTTPRequestHandler):
    """Static handler that answers unknown routes with the built 404 page."""

    def send_error(self, code: int, message: str | None = None, explain: str | None = None) -> None:
        not_found = Path(self.directory) / NOT_FOUND_OUTPUT
        if code != 404 or not not_found.exists():
            super().send_error(code, message, explain)
            return
        body = not_found.read_bytes()
        self.send_response(404, message)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)


def run_build(site_dir: Path = SITE_DIR) -> None:
    subprocess.run([sys.executable, "-m", "homepage.build", "--out", str(site_dir)], check=True)


def serve(site_dir: Path = SITE_DIR, port: int = PORT) -> None:
    handler = functools.partial(SiteRequestHandler, directory=str(site_dir))
    httpd = http.server.ThreadingHTTPServer(("localhost", port), handler)
    url = f"http://localhost:{port}/"
    print(f"{PREFIX} Serving {url} (site dir: {site_dir})")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print(f"{PREFIX} Shutting down server.")
    finally:
        httpd.server_close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Build and serve the homepage locally.")
    parser.add_argument("--once", action="store_true", help="Build once and exit without serving.")
    parser.add_argument("--port", type=int, default=PORT, help=f"Port to serve on (default: {PORT}).")
    args = parser.parse_args()

    run_build()
    url = f"http://localhost:{args.port}/"
    print(f"{PREFIX} Build complete. Preview at {url}")
    if args.once:
        return 0
    if not SITE_DIR.exists():
        print(f"{PREFIX} site/ directory missing after build.")
        return 1
    serve(port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
