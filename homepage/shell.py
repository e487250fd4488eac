from __future__ import annotations

import html
from pathlib import Path
from typing import Any

from homepage.components import render_footer, render_header
from homepage.content import NAV_ITEMS
from homepage.routing import Page, RouteState, Router, rel_asset_link
from homepage.styles import hoist_styles

STYLESHEET = "static/css/style.css"
SCRIPT = "static/js/main.js"
FAVICON = "static/favicon.svg"
MANIFEST = "static/manifest.webmanifest"


def _escape(text: str) -> str:
    return html.escape(text or "", quote=True)


def _render_head(
    title: str,
    current_path: Path,
    site: dict[str, Any],
    scoped_styles: list[str],
    base_href: str = "",
) -> str:
    base = f"\n  <base href=\"{_escape(base_href)}\" />" if base_href else ""
    font_url = str(site.get("font_url") or "").strip()
    font = f"\n  <link rel=\"stylesheet\" href=\"{_escape(font_url)}\" />" if font_url else ""
    styles = "\n  ".join(scoped_styles)
    return f"""
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="initial-scale=1.0, width=device-width" />{base}
  <title>{_escape(title)}</title>
  <meta name="description" content="{_escape(site.get('meta_description', ''))}" />
  <link rel="icon" href="{_escape(rel_asset_link(current_path, FAVICON))}" type="image/svg+xml" />
  <link rel="manifest" href="{_escape(rel_asset_link(current_path, MANIFEST))}" />{font}
  <link rel="stylesheet" href="{_escape(rel_asset_link(current_path, STYLESHEET))}" />
  {styles}
</head>
"""


def render_document(page: Page, state: RouteState, site: dict[str, Any]) -> str:
    """Wrap a page body with the head, header, footer and client script.

    The header is rendered against ``state.path``; the not-found page is
    written once and served for any path, so it pins relative links with
    a ``<base>`` element.
    """
    current_path = page.output_path
    current_route = state.path if state.matched else ""
    header = render_header(NAV_ITEMS, current_route, current_path, site)
    body = page.compose(current_path, site)
    footer = render_footer(str(site.get("footer_text") or ""))
    markup, scoped_styles = hoist_styles(f"{header}\n<main>{body}</main>\n{footer}")
    base_href = "" if state.matched else str(site.get("base_path") or "/")
    return f"""<!doctype html>
<html lang="en">
{_render_head(page.title, current_path, site, scoped_styles, base_href=base_href)}
<body data-route="{_escape(current_route)}">
  <div class="page-shell custom-container">
    {markup}
  </div>
  <script src="{_escape(rel_asset_link(current_path, SCRIPT))}"></script>
</body>
</html>
"""


def render_route(router: Router, path: str, site: dict[str, Any]) -> str:
    page = router.navigate(path)
    return render_document(page, router.state, site)
