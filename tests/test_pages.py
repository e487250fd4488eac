"""Tests for page composition and the document shell."""

from pathlib import Path

import pytest

from homepage.config import read_site_config
from homepage.content import MY_EMAIL, SOCIAL_ITEMS, TIMELINE_ITEMS, WORK_ITEMS
from homepage.pages import (
    NOT_FOUND_PAGE,
    build_registry,
    compose_blogs,
    compose_contact,
    compose_home,
    compose_work,
    mailto_uri,
)
from homepage.routing import NOT_FOUND_OUTPUT, RouteState, Router
from homepage.shell import render_document, render_route

HOME = Path("index.html")


@pytest.fixture
def site(tmp_path):
    return read_site_config(tmp_path / "site.json")


class TestMailto:
    def test_literal_address(self):
        assert mailto_uri("joelhanson025[at]gmail.com") == "mailto:joelhanson025@gmail.com"

    def test_stored_email(self):
        assert mailto_uri(MY_EMAIL) == "mailto:joelhanson025@gmail.com"

    def test_custom_token(self):
        assert mailto_uri("me(at)example.org", token="(at)") == "mailto:me@example.org"

    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            mailto_uri(MY_EMAIL, token="")


class TestRegistry:
    def test_titles(self):
        titles = {route: page.title for route, page in build_registry().items()}
        assert titles == {
            "/": "JoelHanson | Home",
            "/work": "Work | JoelHanson",
            "/blogs": "Blogs | JoelHanson",
            "/contact": "Contact | JoelHanson",
        }


class TestComposers:
    """Each page renders its fixed composition."""

    def test_home_social_links_in_order(self, site):
        markup = compose_home(HOME, site)
        positions = [markup.index(item.url) for item in SOCIAL_ITEMS]
        assert positions == sorted(positions)
        assert "<b>Software Engineer</b>" in markup
        assert 'src="static/images/profile-icon.svg"' in markup

    def test_home_timeline_off_by_default(self, site):
        assert "timeline-container" not in compose_home(HOME, site)

    def test_home_timeline_toggle(self, site):
        site["show_timeline"] = "true"
        markup = compose_home(HOME, site)
        assert "timeline-container" in markup
        positions = [markup.index(item.short_title) for item in TIMELINE_ITEMS]
        assert positions == sorted(positions)

    def test_home_resume_line(self, site):
        assert "resume" not in compose_home(HOME, site)
        site["resume_url"] = "static/files/Profile.pdf"
        assert 'href="static/files/Profile.pdf">resume</a>' in compose_home(HOME, site)

    def test_work_maps_every_entry(self, site):
        markup = compose_work(Path("work") / "index.html", site)
        assert markup.count("work-card") == len(WORK_ITEMS)
        assert markup.count("github.svg") == sum(1 for item in WORK_ITEMS if item.github)
        assert markup.count("link.svg") == sum(1 for item in WORK_ITEMS if item.website)

    def test_blogs_placeholder(self, site):
        assert "<h1>Blogs</h1>" in compose_blogs(Path("blogs") / "index.html", site)

    def test_contact_copy_email(self, site):
        markup = compose_contact(Path("contact") / "index.html", site)
        assert 'data-email="joelhanson025[at]gmail.com"' in markup
        assert 'data-token="[at]"' in markup
        assert "@gmail" not in markup


class TestShell:
    """The shell wraps every page."""

    def test_document_structure(self, site):
        router = Router(build_registry(), NOT_FOUND_PAGE)
        doc = render_route(router, "/work/", site)
        assert doc.startswith("<!doctype html>")
        assert "<title>Work | JoelHanson</title>" in doc
        assert '<body data-route="/work">' in doc
        assert 'href="../static/css/style.css"' in doc
        assert 'src="../static/js/main.js"' in doc
        assert "<base" not in doc

    def test_active_nav_link(self, site):
        router = Router(build_registry(), NOT_FOUND_PAGE)
        doc = render_route(router, "/contact", site)
        assert doc.count("nav-link active") == 1
        assert 'nav-link active" href="./" data-route="/contact"' in doc

    def test_styles_hoisted_into_head(self, site):
        router = Router(build_registry(), NOT_FOUND_PAGE)
        doc = render_route(router, "/work", site)
        head, body = doc.split("</head>", 1)
        assert "<style data-scope" in head
        assert "<style" not in body
        # four cards share one stylesheet
        assert head.count(".work-month-year-col") == 1

    def test_not_found_document(self, site):
        doc = render_document(NOT_FOUND_PAGE, RouteState("/missing", False), site)
        assert '<base href="/" />' in doc
        assert '<body data-route="">' in doc
        assert "nav-link active" not in doc
        assert NOT_FOUND_PAGE.output_path == NOT_FOUND_OUTPUT

    def test_footer_from_config(self, site):
        router = Router(build_registry(), NOT_FOUND_PAGE)
        assert "<footer" not in render_route(router, "/", site)
        site["footer_text"] = "Built with Python"
        assert "<span>Built with Python</span>" in render_route(router, "/", site)
