from __future__ import annotations

import html
import re
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping

from babel import Locale
from babel.core import UnknownLocaleError
from babel.dates import format_date

from homepage.colors import hex_to_rgba
from homepage.content import AnchorEntry, NavEntry, SocialLinkEntry, TimelineEntry, WorkEntry
from homepage.routing import ACTIVE, link_state, rel_asset_link, rel_route_link
from homepage.styles import (
    ANCHOR_CSS,
    FOOTER_CSS,
    HEADER_CSS,
    NAV_CSS,
    SOCIAL_CSS,
    TIMELINE_CSS,
    WORK_CSS,
    scoped_style,
)

HOVER_OPACITY = 80
SOCIAL_MARGIN = "1.5rem"
GITHUB_ICON = "static/icons/github.svg"
LINK_ICON = "static/icons/link.svg"

LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def _escape(text: str) -> str:
    return html.escape(text or "", quote=True)


def _render_emphasis(text: str) -> str:
    escaped = _escape(text or "")
    if not escaped:
        return ""
    escaped = re.sub(r"\*\*([^*]+)\*\*", r"<b>\1</b>", escaped)
    escaped = re.sub(r"\*([^*]+)\*", r"<em>\1</em>", escaped)
    return escaped


def render_inline_text(text: str, anchors: Iterable[AnchorEntry] = ()) -> str:
    """Render ``**bold**`` and ``[label](url)``; known urls become coloured anchors."""
    by_url = {anchor.url: anchor for anchor in anchors}
    raw = text or ""
    parts: list[str] = []
    last = 0
    for match in LINK_PATTERN.finditer(raw):
        parts.append(_render_emphasis(raw[last:match.start()]))
        label, url = match.group(1), match.group(2)
        anchor = by_url.get(url)
        if anchor is not None:
            parts.append(render_anchor(anchor, _render_emphasis(label)))
        else:
            parts.append(f"<a href=\"{_escape(url)}\">{_render_emphasis(label)}</a>")
        last = match.end()
    parts.append(_render_emphasis(raw[last:]))
    return "".join(parts)


def render_anchor(anchor: AnchorEntry, children: str) -> str:
    """``children`` is already-escaped markup."""
    scope, style = scoped_style(ANCHOR_CSS.format(color=anchor.color, background=anchor.background))
    return f"<a class=\"{scope}\" href=\"{_escape(anchor.url)}\">{children}</a>{style}"


def render_nav_link(entry: NavEntry, current_route: str, current_path: Path, site: Mapping[str, Any]) -> str:
    theme = site.get("theme", {})
    scope, style = scoped_style(
        NAV_CSS.format(active=theme.get("accent", "#ef5350"), inactive=theme.get("text_main", "#353535"))
    )
    state = link_state(current_route, entry.route)
    href = rel_route_link(current_path, entry.route)
    current = " aria-current=\"page\"" if state == ACTIVE else ""
    return (
        f"<a class=\"{scope} nav-link {state}\" href=\"{_escape(href)}\" "
        f"data-route=\"{_escape(entry.route)}\"{current}>{_escape(entry.title)}</a>{style}"
    )


def render_header(items: Iterable[NavEntry], current_route: str, current_path: Path, site: Mapping[str, Any]) -> str:
    entries = list(items)
    groups = []
    for position in ("left", "right"):
        links = "".join(
            render_nav_link(entry, current_route, current_path, site)
            for entry in entries
            if entry.position == position
        )
        groups.append(f"<div class=\"nav-group-{position}\">{links}</div>")
    scope, style = scoped_style(HEADER_CSS)
    return f"""
<header class="{scope} header">
  <nav class="nav">{''.join(groups)}</nav>
</header>
{style}
"""


def render_footer(title: str) -> str:
    if not title:
        return ""
    scope, style = scoped_style(FOOTER_CSS)
    return f"<footer class=\"{scope} footer\"><span>{_escape(title)}</span></footer>{style}"


def render_social_link(entry: SocialLinkEntry) -> str:
    scope, style = scoped_style(
        SOCIAL_CSS.format(
            margin="0" if entry.index == 0 else SOCIAL_MARGIN,
            hover=hex_to_rgba(entry.hover_color, HOVER_OPACITY),
        )
    )
    return (
        f"<a class=\"{scope} media-link\" href=\"{_escape(entry.url)}\" rel=\"noopener\">"
        f"{_escape(entry.name)}</a>{style}"
    )


def _render_icon(url: str, icon: str, alt: str, current_path: Path) -> str:
    src = rel_asset_link(current_path, icon)
    return (
        f"<a class=\"icon-container\" href=\"{_escape(url)}\" rel=\"noopener\">"
        f"<img src=\"{_escape(src)}\" alt=\"{alt}\" /></a>"
    )


def render_work_card(entry: WorkEntry, current_path: Path) -> str:
    icons = []
    if entry.github:
        icons.append(_render_icon(entry.github, GITHUB_ICON, "github", current_path))
    if entry.website:
        icons.append(_render_icon(entry.website, LINK_ICON, "link", current_path))
    scope, style = scoped_style(WORK_CSS)
    return f"""
<article class="{scope} work-card">
  <div class="work-month-year-col">
    <div class="work-month-year">
      <span class="work-month">{_escape(entry.month)}</span>
      <div>{entry.year}</div>
    </div>
  </div>
  <div class="title-description-col">
    <span class="work-title">{_escape(entry.title)}</span>
    <span class="work-icons">{''.join(icons)}</span>
    <p class="work-description">{_escape(entry.description)}</p>
  </div>
</article>
{style}
"""


def parse_locale(tag: str) -> Locale:
    """Accepts ``en-US`` and ``en_US``. Raises ValueError for unknown tags."""
    try:
        return Locale.parse((tag or "").replace("_", "-"), sep="-")
    except (ValueError, UnknownLocaleError) as exc:
        raise ValueError(f"Unknown locale: {tag!r}") from exc


def format_pitstop_date(day: date, locale: str = "en-US") -> str:
    """Long form date, e.g. ``Sunday, March 15, 2020`` for ``en-US``."""
    return format_date(day, format="full", locale=parse_locale(locale))


def render_timeline_entry(entry: TimelineEntry, locale: str = "en-US") -> str:
    item_class = "timeline-item pinned" if entry.pinned else "timeline-item"
    return f"""
<li class="{item_class}">
  <div class="timeline-info"><time datetime="{entry.date.isoformat()}">{_escape(format_pitstop_date(entry.date, locale))}</time></div>
  <div class="timeline-marker"></div>
  <div class="timeline-content">
    <h3 class="timeline-title">{_escape(entry.short_title)}</h3>
    <p>{_escape(entry.description)}</p>
  </div>
</li>"""


def render_timeline(items: Iterable[TimelineEntry], locale: str = "en-US") -> str:
    # Insertion order; pinned only changes the styling
    entries = "".join(render_timeline_entry(item, locale) for item in items)
    scope, style = scoped_style(TIMELINE_CSS)
    return f"""
<div class="{scope} timeline-container">
  <ul class="timeline">{entries}
  </ul>
</div>
{style}
"""
