"""Hard-coded content records rendered by the site.

Every record is a frozen dataclass and every collection is a tuple, so the
content is fixed once this module is imported. Changing the site means
editing this file and rebuilding.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from homepage.colors import is_hex_color

NAV_POSITIONS = ("left", "right")


@dataclass(frozen=True)
class NavEntry:
    title: str
    route: str
    position: str = "right"


@dataclass(frozen=True)
class TimelineEntry:
    date: date
    short_title: str
    description: str
    pinned: bool = False


@dataclass(frozen=True)
class WorkEntry:
    month: str
    year: int
    title: str
    description: str
    github: str = ""
    website: str = ""


@dataclass(frozen=True)
class SocialLinkEntry:
    name: str
    url: str
    hover_color: str
    index: int


@dataclass(frozen=True)
class AnchorEntry:
    label: str
    url: str
    color: str
    background: str


NAV_ITEMS: tuple[NavEntry, ...] = (
    NavEntry("Joel Hanson", "/", "left"),
    NavEntry("Work", "/work", "right"),
    NavEntry("Blogs", "/blogs", "right"),
    NavEntry("Email", "/contact", "right"),
)

TIMELINE_ITEMS: tuple[TimelineEntry, ...] = (
    TimelineEntry(
        date(2021, 6, 1),
        "Joined IBM as a Software Engineer.",
        "Working on event streaming connectors and the tooling around them.",
        pinned=True,
    ),
    TimelineEntry(
        date(2020, 3, 15),
        "Shipped the candidate screening assistant at impress.ai.",
        "Conversational screening flows backed by NLP models, served from Django.",
    ),
    TimelineEntry(
        date(2019, 8, 20),
        "Started contributing to open source Django packages.",
        "Small fixes and documentation, then maintenance of a couple of plugins.",
    ),
    TimelineEntry(
        date(2018, 7, 2),
        "Joined impress.ai as an AI Engineer.",
        "Backend services for recruitment chatbots.",
    ),
)

_WORK_BLURB = (
    "Designed and built end to end, from the data model to deployment. "
    "The project grew out of a weekend experiment and kept growing as people "
    "started to use it, so most of the work went into making it reliable and "
    "easy to run for someone who is not me."
)

WORK_ITEMS: tuple[WorkEntry, ...] = (
    WorkEntry(
        "March",
        2020,
        "Personal homepage",
        _WORK_BLURB,
        github="https://github.com/joel-hanson",
        website="https://joel-hanson.github.io",
    ),
    WorkEntry("January", 2020, "Screening assistant", _WORK_BLURB),
    WorkEntry(
        "October",
        2019,
        "Django admin plugins",
        _WORK_BLURB,
        github="https://github.com/joel-hanson",
    ),
    WorkEntry(
        "June",
        2019,
        "Writing on Medium",
        _WORK_BLURB,
        website="https://joel-hanson.medium.com/",
    ),
)


def _social(items: Iterable[tuple[str, str, str]]) -> tuple[SocialLinkEntry, ...]:
    return tuple(
        SocialLinkEntry(name, url, hover_color, index)
        for index, (name, url, hover_color) in enumerate(items)
    )


SOCIAL_ITEMS: tuple[SocialLinkEntry, ...] = _social(
    [
        ("GitHub", "https://github.com/joel-hanson", "#24292e"),
        ("Twitter", "https://twitter.com/joelhanson25", "#1DA1F2"),
        ("Medium", "https://joel-hanson.medium.com/", "#24292e"),
        ("LinkedIn", "https://linkedin.com/in/joel-hanson/", "#2867B2"),
    ]
)

# Inline links in the profile text get these colours
PROFILE_ANCHORS: tuple[AnchorEntry, ...] = (
    AnchorEntry("IBM", "https://ibm.com", "#0f62fe", "#82cfff"),
    AnchorEntry("impress.ai", "https://impress.ai", "#ff9502", "#ffeac2"),
)

PROFILE_PARAGRAPHS: tuple[str, ...] = (
    "My name is Joel Hanson, and I'm a **Software Engineer** at [IBM](https://ibm.com) right now. "
    "I formerly worked at [impress.ai](https://impress.ai) as an **AI Engineer**. "
    "I'm now working on ways to make artificial intelligence (AI) more accessible "
    "to the general population.",
)

RESUME_ANCHOR_COLORS = ("#E53935", "#FFCDD2")

# Stored obfuscated; the contact page swaps the token back on click
MY_EMAIL = "joel" + "hanson025" + "[at]" + "gmail.com"


def check_content(routes: Iterable[str]) -> list[str]:
    """Return the content defects that should stop a build."""
    known = set(routes)
    problems: list[str] = []
    for entry in NAV_ITEMS:
        if not entry.title.strip():
            problems.append(f"Nav entry for {entry.route!r} has no title")
        if entry.route not in known:
            problems.append(f"Nav entry {entry.title!r} targets unknown route {entry.route!r}")
        if entry.position not in NAV_POSITIONS:
            problems.append(f"Nav entry {entry.title!r} has invalid position {entry.position!r}")
    for position, link in enumerate(SOCIAL_ITEMS):
        if not is_hex_color(link.hover_color):
            problems.append(f"Social link {link.name!r} has malformed hover colour {link.hover_color!r}")
        if link.index != position:
            problems.append(f"Social link {link.name!r} has index {link.index}, expected {position}")
    for anchor in PROFILE_ANCHORS:
        for colour in (anchor.color, anchor.background):
            if not is_hex_color(colour):
                problems.append(f"Anchor {anchor.label!r} has malformed colour {colour!r}")
    for work in WORK_ITEMS:
        if not work.title.strip():
            problems.append(f"Work entry from {work.month} {work.year} has no title")
    for item in TIMELINE_ITEMS:
        if not isinstance(item.date, date):
            problems.append(f"Timeline entry {item.short_title!r} has no valid date")
    if "[at]" not in MY_EMAIL:
        problems.append("Contact email must be stored with the [at] token")
    return problems
