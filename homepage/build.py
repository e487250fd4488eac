#!/usr/bin/env python3
from __future__ import annotations

import argparse
import shutil
from pathlib import Path
from typing import Any

from homepage.assets import write_site_assets
from homepage.components import parse_locale
from homepage.config import PREFIX, SITE_DIR, SITE_JSON, STATIC_SRC_DIR, read_site_config
from homepage.content import check_content
from homepage.pages import NOT_FOUND_PAGE, build_registry
from homepage.routing import RouteState, Router
from homepage.shell import render_document, render_route


def _write(output_path: Path, doc: str) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(doc, encoding="utf-8")


def _is_previous_build(site_dir: Path) -> bool:
    has_page = (site_dir / "index.html").is_file() or (site_dir / "404.html").is_file()
    return has_page and (site_dir / "static").is_dir()


def build_site(
    site_dir: Path = SITE_DIR,
    site: dict[str, Any] | None = None,
    static_src: Path | None = STATIC_SRC_DIR,
) -> list[Path]:
    site = site if site is not None else read_site_config(SITE_JSON)
    router = Router(build_registry(), NOT_FOUND_PAGE)

    problems = check_content(router.routes)
    if problems:
        listing = "\n".join(f"  {problem}" for problem in problems)
        raise SystemExit(f"{PREFIX} Content check failed:\n{listing}")

    try:
        parse_locale(str(site.get("locale") or ""))
    except ValueError:
        raise SystemExit(f"{PREFIX} Unknown locale {site.get('locale')!r} in site config")

    if site_dir.exists():
        if any(site_dir.iterdir()) and not _is_previous_build(site_dir):
            raise SystemExit(f"{PREFIX} Refusing to clear {site_dir}: not a previous build")
        shutil.rmtree(site_dir)
    site_dir.mkdir(parents=True, exist_ok=True)
    write_site_assets(site, site_dir / "static", static_src)

    written: list[Path] = []
    for route, page in router.registry.items():
        output_path = site_dir / page.output_path
        _write(output_path, render_route(router, route, site))
        written.append(output_path)

    not_found = router.not_found
    output_path = site_dir / not_found.output_path
    _write(output_path, render_document(not_found, RouteState(path="", matched=False), site))
    written.append(output_path)
    return written


def main() -> int:
    parser = argparse.ArgumentParser(description="Build the static homepage into site/.")
    parser.add_argument("--out", type=Path, default=SITE_DIR, help="Output directory (default: site/).")
    args = parser.parse_args()

    written = build_site(site_dir=args.out)
    print(f"{PREFIX} Wrote {len(written)} pages to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
