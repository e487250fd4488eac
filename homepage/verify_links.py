#!/usr/bin/env python3
from __future__ import annotations

import re
import urllib.parse
from pathlib import Path

from homepage.config import BASE_DIR, PREFIX, SITE_DIR

FORBIDDEN_TARGETS = [
    "localhost:",
    "127.0.0.1",
]

HREF_PATTERN = re.compile(r'(?:href|src)=["\']([^"\']+)["\']', re.IGNORECASE)


def _matches_forbidden(url: str) -> str | None:
    lowered = url.lower()
    for forbidden in FORBIDDEN_TARGETS:
        if forbidden.lower() in lowered:
            return forbidden
    return None


def _is_internal_link(url: str) -> bool:
    """Checks if the URL is an internal link that should be verified."""
    if url.startswith(("http://", "https://", "mailto:", "#", "tel:")):
        return False
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme:
        return False
    return True


def _check_target_exists(site_dir: Path, source_file: Path, url: str) -> bool:
    """
    Checks if the target file exists.
    Handles relative paths and absolute paths (relative to site root).
    Ignores query parameters and fragments.
    """
    url_clean = url.split("?")[0].split("#")[0]
    if not url_clean:
        return True

    if url_clean.startswith("/"):
        target_path = site_dir / url_clean.lstrip("/")
    else:
        target_path = source_file.parent / url_clean

    # Directory routes are served through their index.html
    if target_path.is_dir():
        return (target_path / "index.html").exists()
    return target_path.exists()


def check_site(site_dir: Path = SITE_DIR) -> tuple[list[tuple[Path, str, str]], list[tuple[Path, str]]]:
    forbidden_hits: list[tuple[Path, str, str]] = []
    broken_links: list[tuple[Path, str]] = []

    for path in sorted(site_dir.rglob("*.html")):
        try:
            text = path.read_text(encoding="utf-8", errors="ignore")
        except OSError:
            continue

        for url in HREF_PATTERN.findall(text):
            url = url.strip()

            match = _matches_forbidden(url)
            if match:
                forbidden_hits.append((path, url, match))
                continue

            if _is_internal_link(url) and not _check_target_exists(site_dir, path, url):
                broken_links.append((path, url))

    return forbidden_hits, broken_links


def _display(path: Path) -> str:
    try:
        return path.relative_to(BASE_DIR).as_posix()
    except ValueError:
        return path.as_posix()


def main() -> int:
    if not SITE_DIR.exists():
        print(f"{PREFIX} site/ directory not found. Run python3 -m homepage.build first.")
        return 1

    forbidden_hits, broken_links = check_site(SITE_DIR)
    exit_code = 0

    if forbidden_hits:
        print(f"{PREFIX} Forbidden targets found:")
        for path, url, match in forbidden_hits:
            print(f"  {_display(path)}: {url} (matches {match})")
        exit_code = 1

    if broken_links:
        print(f"{PREFIX} Broken internal links found:")
        for path, url in broken_links:
            print(f"  {_display(path)}: {url}")
        exit_code = 1

    if exit_code == 0:
        print(f"{PREFIX} Link verification passed. No forbidden targets or broken internal links found.")

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
