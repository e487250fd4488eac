from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

ACTIVE = "active"
INACTIVE = "inactive"

NOT_FOUND_OUTPUT = Path("404.html")


def link_state(current_route: str | None, target_route: str | None) -> str:
    """Return ``ACTIVE`` when the link points at the current route.

    Plain string equality. An empty or missing target never matches,
    otherwise an unset current route would light up the home link.
    """
    if not target_route or not current_route:
        return INACTIVE
    return ACTIVE if current_route == target_route else INACTIVE


def normalize_route(path: str | None) -> str:
    raw = (path or "").split("?", 1)[0].split("#", 1)[0].strip()
    raw = re.sub(r"/{2,}", "/", raw)
    if raw == "index.html" or raw.endswith("/index.html"):
        raw = raw[: -len("index.html")]
    raw = raw.strip("/")
    return "/" + raw if raw else "/"


def route_output_path(route: str) -> Path:
    slug = route.strip("/")
    if not slug:
        return Path("index.html")
    return Path(slug) / "index.html"


def _rel_link(current_path: Path, target_path: Path) -> str:
    current_dir = current_path.parent.as_posix()
    target = target_path.as_posix()
    return os.path.relpath(target, start=current_dir)


def _rel_dir_link(current_path: Path, target_dir: Path) -> str:
    current_dir = current_path.parent.as_posix() or "."
    target_dir_str = target_dir.as_posix() or "."
    rel = os.path.relpath(target_dir_str, start=current_dir)
    if rel == ".":
        return "./"
    return rel.rstrip("/") + "/"


def rel_asset_link(current_path: Path, asset: str) -> str:
    return _rel_link(current_path, Path(asset))


def rel_route_link(current_path: Path, route: str) -> str:
    slug = route.strip("/")
    return _rel_dir_link(current_path, Path(slug) if slug else Path("."))


@dataclass(frozen=True)
class Page:
    route: str
    title: str
    compose: Callable[[Path, dict[str, Any]], str]

    @property
    def output_path(self) -> Path:
        # Pages without a route are fallbacks, served for any unknown path
        if not self.route:
            return NOT_FOUND_OUTPUT
        return route_output_path(self.route)


@dataclass(frozen=True)
class RouteState:
    path: str
    matched: bool


class Router:
    """Owns the current route; pages only ever read it."""

    def __init__(self, registry: Mapping[str, Page], not_found: Page) -> None:
        self.registry = dict(registry)
        self.not_found = not_found
        self.state = RouteState(path="/", matched="/" in self.registry)

    @property
    def routes(self) -> list[str]:
        return list(self.registry)

    def resolve(self, path: str | None) -> RouteState:
        route = normalize_route(path)
        if route in self.registry:
            return RouteState(path=route, matched=True)
        return RouteState(path=route, matched=False)

    def page_for(self, state: RouteState) -> Page:
        if state.matched:
            return self.registry[state.path]
        return self.not_found

    def navigate(self, path: str | None) -> Page:
        self.state = self.resolve(path)
        return self.page_for(self.state)
