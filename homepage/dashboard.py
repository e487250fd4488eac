#!/usr/bin/env python3
from __future__ import annotations

from homepage.config import PREFIX
from homepage.content import NAV_ITEMS, SOCIAL_ITEMS, TIMELINE_ITEMS, WORK_ITEMS, check_content
from homepage.pages import NOT_FOUND_PAGE, build_registry
from homepage.routing import Page


def _display_route(route: str) -> str:
    if route == "/":
        return "/"
    return f"{route}/"


def format_dashboard(registry: dict[str, Page]) -> str:
    lines: list[str] = [f"{PREFIX} Dashboard"]
    for index, (route, page) in enumerate(registry.items(), start=1):
        lines.append(f"{PREFIX} {index}. {_display_route(route)} ({page.title}) -> site/{page.output_path.as_posix()}")
    lines.append(f"{PREFIX} fallback ({NOT_FOUND_PAGE.title}) -> site/{NOT_FOUND_PAGE.output_path.as_posix()}")
    lines.append(
        f"{PREFIX} content: {len(NAV_ITEMS)} nav, {len(WORK_ITEMS)} work, "
        f"{len(TIMELINE_ITEMS)} timeline, {len(SOCIAL_ITEMS)} social"
    )
    problems = check_content(registry)
    if problems:
        for problem in problems:
            lines.append(f"{PREFIX} Warning: {problem}")
    else:
        lines.append(f"{PREFIX} content check passed")
    return "\n".join(lines)


def main() -> int:
    print(format_dashboard(build_registry()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
