"""Scoped style blocks.

A component writes plain CSS next to its markup. ``scoped_style`` rewrites
every selector so it only matches inside the element that carries the
scope class: ``:scope`` stands for that element itself, any other selector
is nested under it. The scope class is derived from the CSS text, so equal
styles share one class and the shell can emit each block once.
"""
from __future__ import annotations

import hashlib
import re

STYLE_TAG_PATTERN = re.compile(r'<style data-scope="([^"]+)">(.*?)</style>', re.DOTALL)
COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
NESTED_AT_RULES = ("@media", "@supports")


def scope_name(css: str) -> str:
    digest = hashlib.sha1(css.encode("utf-8")).hexdigest()
    return f"jsx-{digest[:10]}"


def _matching_brace(css: str, start: int) -> int:
    depth = 0
    for index in range(start, len(css)):
        char = css[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    raise ValueError(f"Unbalanced braces in CSS near: {css[start:start + 40]!r}")


def _scope_selector(selector: str, scope: str) -> str:
    if selector.startswith(":scope"):
        return f".{scope}{selector[len(':scope'):]}"
    return f".{scope} {selector}"


def scope_css(css: str, scope: str) -> str:
    text = COMMENT_PATTERN.sub("", css)
    rules: list[str] = []
    pos = 0
    while True:
        brace = text.find("{", pos)
        if brace == -1:
            if text[pos:].strip():
                raise ValueError(f"Dangling CSS without a block: {text[pos:].strip()!r}")
            break
        prelude = " ".join(text[pos:brace].split())
        end = _matching_brace(text, brace)
        body = text[brace + 1:end]
        if prelude.startswith(NESTED_AT_RULES):
            rules.append(f"{prelude} {{\n{scope_css(body, scope)}\n}}")
        elif prelude.startswith("@"):
            # keyframes and friends are global by nature
            rules.append(f"{prelude} {{{body}}}")
        else:
            selectors = ", ".join(
                _scope_selector(part.strip(), scope) for part in prelude.split(",") if part.strip()
            )
            declarations = " ".join(line.strip() for line in body.strip().splitlines() if line.strip())
            rules.append(f"{selectors} {{ {declarations} }}")
        pos = end + 1
    return "\n".join(rules)


def scoped_style(css: str) -> tuple[str, str]:
    """Return ``(scope_class, style_tag)`` for a component stylesheet."""
    scope = scope_name(css)
    return scope, f'<style data-scope="{scope}">\n{scope_css(css, scope)}\n</style>'


def hoist_styles(markup: str) -> tuple[str, list[str]]:
    """Pull scoped style tags out of ``markup``, keeping the first of each scope."""
    seen: set[str] = set()
    styles: list[str] = []
    for match in STYLE_TAG_PATTERN.finditer(markup):
        scope = match.group(1)
        if scope in seen:
            continue
        seen.add(scope)
        styles.append(match.group(0))
    return STYLE_TAG_PATTERN.sub("", markup), styles


ANCHOR_CSS = """
:scope {{
  color: {color};
  background: {background};
  text-decoration: underline;
}}
"""

NAV_CSS = """
:scope {{
  margin: 12px;
  text-decoration: none;
}}
:scope.inactive {{
  color: {inactive};
}}
:scope.active {{
  color: {active};
}}
"""

HEADER_CSS = """
:scope {
  width: 100%;
  height: 30px;
}
.nav {
  display: flex;
  padding: 16px;
}
.nav-group-left {
  margin-right: auto;
}
"""

FOOTER_CSS = """
:scope {
  text-align: left;
  height: 30px;
  width: 100%;
  font-size: 10px;
  margin: 0 12px;
}
"""

SOCIAL_CSS = """
:scope {{
  margin-left: {margin};
}}
:scope:hover {{
  color: {hover};
}}
"""

WORK_CSS = """
:scope {
  display: flex;
  margin: 10% 0;
  box-shadow: 0px 2px 14px 0px rgba(0, 0, 0, 0.05);
  transition: box-shadow 0.1s ease, transform 0.1s ease;
  border-radius: 10px;
  border: 1px solid #f3f3f3;
  border-top: 1px solid #ffb5b3;
}
.work-month-year-col {
  padding: 15px;
}
.work-month-year {
  text-align: center;
  height: 100%;
  display: flex;
  align-items: center;
  justify-content: center;
  flex-direction: column;
  background: var(--accent-soft);
  color: var(--accent);
  padding: 0 12px;
}
.work-month {
  font-size: 35px;
}
.title-description-col {
  flex: 1;
  padding: 16px;
  color: var(--text-muted);
}
.work-title {
  font-size: 32px;
  font-weight: 300;
}
.work-description {
  line-height: 1.6;
  overflow-wrap: break-word;
  hyphens: auto;
}
.work-icons {
  float: right;
}
.icon-container {
  margin: 0 6px;
  display: inline-block;
}
.icon-container img {
  height: 16px;
}
@media (max-width: 640px) {
  :scope {
    flex-direction: column;
  }
}
"""

TIMELINE_CSS = """
:scope {
  position: relative;
  display: inline-block;
  height: inherit;
  overflow: auto;
}
.timeline {
  line-height: 1.4em;
  list-style: none;
  margin: 0;
  padding: 0;
  width: 100%;
}
.timeline-item {
  padding-left: 40px;
  position: relative;
}
.timeline-info {
  font-size: 12px;
  font-weight: 700;
  letter-spacing: 3px;
  margin: 0 0 0.5em 0;
  text-transform: uppercase;
  white-space: nowrap;
}
.timeline-marker {
  position: absolute;
  top: 0;
  bottom: 0;
  left: 0;
  width: 15px;
}
.timeline-marker:before {
  background: #ff6b6b;
  border: 3px solid transparent;
  border-radius: 100%;
  content: "";
  display: block;
  position: absolute;
  top: 4px;
  left: 0;
  height: 10px;
  width: 10px;
  transition: background 0.3s ease-in-out, border 0.3s ease-in-out;
}
.timeline-marker:after {
  content: "";
  width: 3px;
  background: #ccd5db;
  display: block;
  position: absolute;
  top: 24px;
  bottom: 0;
  left: 7px;
}
.timeline-item:hover .timeline-marker:before {
  background: transparent;
  border: 3px solid #ff6b6b;
}
.timeline-item.pinned .timeline-title {
  color: var(--accent);
}
.timeline-content {
  padding-bottom: 40px;
}
"""
