from __future__ import annotations

import html
import json
import shutil
from pathlib import Path
from typing import Any


def _escape(text: str) -> str:
    return html.escape(text or "", quote=True)


def build_css(site: dict[str, Any]) -> str:
    theme = site.get("theme", {})
    if not isinstance(theme, dict):
        theme = {}

    accent = theme.get("accent", "#ef5350")
    accent_soft = theme.get("accent_soft", "#fee0e0")
    text_main = theme.get("text_main", "#353535")
    text_muted = theme.get("text_muted", "#484d4e")
    background = theme.get("background", "#ffffff")

    return f"""
:root {{
  --accent: {accent};
  --accent-soft: {accent_soft};
  --text-primary: {text_main};
  --text-muted: {text_muted};
  --text-underline: {accent_soft};
  --bg-primary-hex: {background};
  --font-m: 1.25rem;
  --font-xs: 1rem;
}}

@keyframes slideInFromLeft {{
  0% {{
    transform: translateY(-50%);
    opacity: 0;
  }}
  100% {{
    transform: translateY(0);
    opacity: 1;
  }}
}}

body {{
  margin: 0;
  padding: 0;
  font-family: "Mulish", "Muli", sans-serif;
  color: var(--text-primary);
  background: var(--bg-primary-hex);
}}

.custom-container {{
  max-width: 1140px;
  margin: auto !important;
  padding: 0 15px;
}}

.main-text {{
  font-size: var(--font-m);
  animation: .8s ease-in-out 0s 1 slideInFromLeft;
}}

.wrapper {{
  max-width: 656px;
  padding: 0 5% 0 5%;
  margin: 0 auto;
}}

.layout-body {{
  margin: 25px 0 100px 0;
}}

.layout-header {{
  display: flex;
  flex-direction: column;
}}

.layout-content {{
  flex-grow: 1;
}}

.layout-container {{
  margin-top: 1rem;
  display: grid;
  min-height: 80vh;
  align-items: center;
  justify-content: center;
}}

.center-layout-container {{
  display: grid;
  align-items: start;
}}

.center-layout-text {{
  margin-top: 1rem;
  max-width: 538px;
  justify-self: end;
}}

.center-layout-link-container {{
  display: flex;
  flex-direction: row;
  max-width: 100%;
  margin-top: 0.5rem;
  justify-content: start;
}}

.media-link {{
  color: var(--text-primary);
  font-size: var(--font-xs);
  font-weight: 400;
  background-image: linear-gradient(var(--text-underline), var(--text-underline));
  background-size: 100% 1px;
  background-position: left 1.15em;
  background-repeat: no-repeat;
  text-shadow: .1em 0 var(--bg-primary-hex), -.1em 0 var(--bg-primary-hex);
  text-decoration: none;
  animation: .8s ease-in-out 0s 1 slideInFromLeft;
}}

.profile-icon {{
  border-radius: 50%;
  width: 15%;
  height: auto;
  animation: .8s ease-in-out 0s 1 slideInFromLeft;
}}

.work-container {{
  margin-top: 15%;
}}

.button {{
  font: inherit;
  color: var(--accent);
  background: var(--accent-soft);
  border: 1px solid var(--accent);
  border-radius: 6px;
  padding: 0.5rem 1rem;
  cursor: pointer;
  text-decoration: none;
}}

.button.ghost {{
  background: transparent;
}}
"""


def build_js() -> str:
    return """
const ACTIVE = 'active';
const INACTIVE = 'inactive';

function linkState(currentRoute, targetRoute) {
  if (!targetRoute || !currentRoute) return INACTIVE;
  return currentRoute === targetRoute ? ACTIVE : INACTIVE;
}

function highlightLinks(currentRoute) {
  document.querySelectorAll('a.nav-link[data-route]').forEach((link) => {
    const state = linkState(currentRoute, link.dataset.route);
    link.classList.remove(ACTIVE, INACTIVE);
    link.classList.add(state);
    if (state === ACTIVE) {
      link.setAttribute('aria-current', 'page');
    } else {
      link.removeAttribute('aria-current');
    }
  });
}

function swapScopedStyles(doc) {
  document.head.querySelectorAll('style[data-scope]').forEach((node) => node.remove());
  doc.head.querySelectorAll('style[data-scope]').forEach((node) => {
    document.head.appendChild(node.cloneNode(true));
  });
}

async function navigate(href, push) {
  let doc;
  try {
    const response = await fetch(href);
    if (!response.ok) throw new Error(`HTTP ${response.status}`);
    doc = new DOMParser().parseFromString(await response.text(), 'text/html');
  } catch (error) {
    window.location.assign(href);
    return;
  }
  const shell = doc.querySelector('.page-shell');
  if (!shell) {
    window.location.assign(href);
    return;
  }
  if (push) history.pushState({ href }, '', href);
  document.title = doc.title;
  swapScopedStyles(doc);
  document.querySelector('.page-shell').innerHTML = shell.innerHTML;
  const route = doc.body.dataset.route || '';
  document.body.dataset.route = route;
  highlightLinks(route);
  window.scrollTo(0, 0);
}

function interceptRouteLinks() {
  document.addEventListener('click', (event) => {
    if (event.defaultPrevented || event.button !== 0) return;
    if (event.metaKey || event.ctrlKey || event.shiftKey || event.altKey) return;
    const link = event.target.closest('a[data-route]');
    if (!link) return;
    event.preventDefault();
    navigate(link.href, true);
  });
  window.addEventListener('popstate', () => navigate(window.location.href, false));
}

function setupCopyEmail() {
  document.addEventListener('click', (event) => {
    const button = event.target.closest('.copy-email');
    if (!button) return;
    const email = button.dataset.email || '';
    const token = button.dataset.token || '[at]';
    window.location.href = 'mailto:' + email.split(token).join('@');
  });
}

interceptRouteLinks();
setupCopyEmail();
highlightLinks(document.body.dataset.route || '');
"""


def _build_placeholder_svg(label: str) -> str:
    safe_label = _escape(label)
    return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200" role="img" aria-label="{safe_label}">
  <rect width="200" height="200" fill="#fee0e0" />
  <circle cx="100" cy="80" r="40" fill="#ef5350" fill-opacity="0.6" />
  <rect x="40" y="135" width="120" height="50" rx="25" fill="#ef5350" fill-opacity="0.4" />
</svg>
"""


GITHUB_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16" role="img" aria-label="GitHub">
  <path fill="#24292e" d="M8 0C3.58 0 0 3.58 0 8c0 3.54 2.29 6.53 5.47 7.59.4.07.55-.17.55-.38 0-.19-.01-.82-.01-1.49-2.01.37-2.53-.49-2.69-.94-.09-.23-.48-.94-.82-1.13-.28-.15-.68-.52-.01-.53.63-.01 1.08.58 1.23.82.72 1.21 1.87.87 2.33.66.07-.52.28-.87.51-1.07-1.78-.2-3.64-.89-3.64-3.95 0-.87.31-1.59.82-2.15-.08-.2-.36-1.02.08-2.12 0 0 .67-.21 2.2.82.64-.18 1.32-.27 2-.27.68 0 1.36.09 2 .27 1.53-1.04 2.2-.82 2.2-.82.44 1.1.16 1.92.08 2.12.51.56.82 1.27.82 2.15 0 3.07-1.87 3.75-3.65 3.95.29.25.54.73.54 1.48 0 1.07-.01 1.93-.01 2.2 0 .21.15.46.55.38A8.013 8.013 0 0016 8c0-4.42-3.58-8-8-8z"/>
</svg>
"""

LINK_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" role="img" aria-label="Website">
  <path fill="none" stroke="#484d4e" stroke-width="2" stroke-linecap="round" d="M10 14a5 5 0 0 0 7.07 0l3-3a5 5 0 0 0-7.07-7.07l-1 1"/>
  <path fill="none" stroke="#484d4e" stroke-width="2" stroke-linecap="round" d="M14 10a5 5 0 0 0-7.07 0l-3 3a5 5 0 0 0 7.07 7.07l1-1"/>
</svg>
"""

FAVICON_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <rect width="32" height="32" rx="6" fill="#ef5350" />
  <text x="16" y="22" text-anchor="middle" font-family="sans-serif" font-size="14" fill="#ffffff">JH</text>
</svg>
"""


def build_manifest(site: dict[str, Any]) -> str:
    theme = site.get("theme", {})
    manifest = {
        "name": site.get("site_name", ""),
        "short_name": "JH",
        "start_url": site.get("base_path") or "/",
        "display": "browser",
        "theme_color": theme.get("accent", "#ef5350"),
        "background_color": theme.get("background", "#ffffff"),
        "icons": [{"src": "favicon.svg", "sizes": "any", "type": "image/svg+xml"}],
    }
    return json.dumps(manifest, indent=2) + "\n"


GENERATED_FILES = {
    "icons/github.svg": lambda site: GITHUB_SVG,
    "icons/link.svg": lambda site: LINK_SVG,
    "images/profile-icon.svg": lambda site: _build_placeholder_svg("Profile icon"),
    "favicon.svg": lambda site: FAVICON_SVG,
    "manifest.webmanifest": build_manifest,
    "css/style.css": build_css,
    "js/main.js": lambda site: build_js(),
}


def write_site_assets(site: dict[str, Any], static_dir: Path, static_src: Path | None = None) -> list[Path]:
    """Write generated assets, then copy hand-made files over them."""
    written: list[Path] = []
    for name, builder in GENERATED_FILES.items():
        target = static_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(builder(site), encoding="utf-8")
        written.append(target)

    # Real photos, fonts or a resume in content/static replace the generated files
    if static_src is not None and static_src.exists():
        for path in static_src.rglob("*"):
            if path.is_dir():
                continue
            target = static_dir / path.relative_to(static_src)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, target)
            written.append(target)
    return written
