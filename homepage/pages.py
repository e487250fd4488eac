from __future__ import annotations

import html
from pathlib import Path
from typing import Any

from homepage.components import (
    render_anchor,
    render_inline_text,
    render_social_link,
    render_timeline,
    render_work_card,
)
from homepage.config import as_bool
from homepage.content import (
    MY_EMAIL,
    PROFILE_ANCHORS,
    PROFILE_PARAGRAPHS,
    RESUME_ANCHOR_COLORS,
    SOCIAL_ITEMS,
    TIMELINE_ITEMS,
    WORK_ITEMS,
    AnchorEntry,
)
from homepage.routing import Page, rel_asset_link, rel_route_link

EMAIL_TOKEN = "[at]"
PROFILE_IMAGE = "static/images/profile-icon.svg"


def _escape(text: str) -> str:
    return html.escape(text or "", quote=True)


def mailto_uri(email: str, token: str = EMAIL_TOKEN) -> str:
    if not token:
        raise ValueError("Email token must not be empty")
    return "mailto:" + (email or "").replace(token, "@")


def _render_resume_line(site: dict[str, Any]) -> str:
    resume_url = str(site.get("resume_url") or "").strip()
    if not resume_url:
        return ""
    color, background = RESUME_ANCHOR_COLORS
    link = render_anchor(AnchorEntry("resume", resume_url, color, background), "resume")
    return f"<p class=\"main-text\">Please see my {link} if you want to learn more about me.</p>"


def compose_home(current_path: Path, site: dict[str, Any]) -> str:
    paragraphs = "\n".join(
        f"<p class=\"main-text\">{render_inline_text(text, PROFILE_ANCHORS)}</p>" for text in PROFILE_PARAGRAPHS
    )
    socials = "".join(render_social_link(item) for item in SOCIAL_ITEMS)
    timeline = ""
    if as_bool(site.get("show_timeline")):
        timeline = f"""
<section class="layout-body">
  <div class="timeline-col">{render_timeline(TIMELINE_ITEMS, site.get('locale', 'en-US'))}</div>
</section>"""
    image_src = rel_asset_link(current_path, PROFILE_IMAGE)
    return f"""
<div class="layout-header">
  <div class="layout-content">
    <div class="wrapper">
      <div class="layout-container">
        <div class="center-layout-container">
          <div class="center-layout-image">
            <img src="{_escape(image_src)}" alt="icon" class="profile-icon" />
          </div>
          <div class="center-layout-text">
            {paragraphs}
            {_render_resume_line(site)}
          </div>
          <div class="center-layout-link-container">{socials}</div>
        </div>
      </div>
    </div>
  </div>
</div>
{timeline}
"""


def compose_work(current_path: Path, site: dict[str, Any]) -> str:
    cards = "".join(render_work_card(item, current_path) for item in WORK_ITEMS)
    return f"<div class=\"work-container\">{cards}</div>"


def compose_blogs(current_path: Path, site: dict[str, Any]) -> str:
    return """
<div class="wrapper">
  <h1>Blogs</h1>
  <p>This is the blogs page</p>
</div>
"""


def compose_contact(current_path: Path, site: dict[str, Any]) -> str:
    return f"""
<div class="wrapper">
  <h1>Contact</h1>
  <p class="main-text">The quickest way to reach me is email.</p>
  <button class="button copy-email" type="button" data-email="{_escape(MY_EMAIL)}" data-token="{_escape(EMAIL_TOKEN)}">
    {_escape(MY_EMAIL)}
  </button>
</div>
"""


def compose_not_found(current_path: Path, site: dict[str, Any]) -> str:
    home = rel_route_link(current_path, "/")
    return f"""
<div class="wrapper">
  <h1>404</h1>
  <p>This page could not be found.</p>
  <a class="button ghost" href="{_escape(home)}" data-route="/">Back home</a>
</div>
"""


NOT_FOUND_PAGE = Page(route="", title="Not Found | JoelHanson", compose=compose_not_found)


def build_registry() -> dict[str, Page]:
    pages = [
        Page(route="/", title="JoelHanson | Home", compose=compose_home),
        Page(route="/work", title="Work | JoelHanson", compose=compose_work),
        Page(route="/blogs", title="Blogs | JoelHanson", compose=compose_blogs),
        Page(route="/contact", title="Contact | JoelHanson", compose=compose_contact),
    ]
    return {page.route: page for page in pages}
