"""Tests for the site build, link checker, dashboard and dev server."""

import functools
import http.server
import threading
import urllib.error
import urllib.request

import pytest

from homepage import content
from homepage.build import build_site
from homepage.config import read_site_config
from homepage.dashboard import format_dashboard
from homepage.dev import SiteRequestHandler
from homepage.pages import build_registry
from homepage.verify_links import check_site


@pytest.fixture
def site(tmp_path):
    return read_site_config(tmp_path / "site.json")


@pytest.fixture
def built(tmp_path, site):
    site_dir = tmp_path / "site"
    build_site(site_dir=site_dir, site=site, static_src=None)
    return site_dir


class TestBuildSite:
    """Test the static export."""

    def test_writes_every_route(self, built):
        for name in ("index.html", "work/index.html", "blogs/index.html", "contact/index.html", "404.html"):
            assert (built / name).exists(), name

    def test_writes_assets(self, built):
        for name in ("css/style.css", "js/main.js", "icons/github.svg", "icons/link.svg", "favicon.svg"):
            assert (built / "static" / name).exists(), name
        assert "--accent: #ef5350;" in (built / "static/css/style.css").read_text(encoding="utf-8")

    def test_rebuild_clears_stale_files(self, tmp_path, site, built):
        stale = built / "old" / "index.html"
        stale.parent.mkdir()
        stale.write_text("old", encoding="utf-8")
        build_site(site_dir=built, site=site, static_src=None)
        assert not stale.exists()

    def test_refuses_to_clear_unrelated_directory(self, tmp_path, site):
        out = tmp_path / "project"
        out.mkdir()
        notes = out / "notes.txt"
        notes.write_text("keep me", encoding="utf-8")
        with pytest.raises(SystemExit, match=r"^\[JH\] Refusing to clear"):
            build_site(site_dir=out, site=site, static_src=None)
        assert notes.read_text(encoding="utf-8") == "keep me"

    def test_builds_into_empty_directory(self, tmp_path, site):
        out = tmp_path / "empty"
        out.mkdir()
        build_site(site_dir=out, site=site, static_src=None)
        assert (out / "index.html").exists()

    def test_unknown_locale_stops_build(self, tmp_path, site, built):
        site["locale"] = "english"
        site["show_timeline"] = "true"
        before = sorted(path.relative_to(built) for path in built.rglob("*"))
        with pytest.raises(SystemExit, match=r"^\[JH\] Unknown locale 'english'"):
            build_site(site_dir=built, site=site, static_src=None)
        assert sorted(path.relative_to(built) for path in built.rglob("*")) == before

    def test_script_intercepts_route_clicks(self, built):
        script = (built / "static/js/main.js").read_text(encoding="utf-8")
        assert "event.preventDefault()" in script
        assert "history.pushState" in script
        assert "if (!targetRoute || !currentRoute) return INACTIVE;" in script

    def test_static_files_override_generated(self, tmp_path, site):
        static_src = tmp_path / "static-src"
        (static_src / "images").mkdir(parents=True)
        (static_src / "images" / "profile-icon.svg").write_text("<svg>me</svg>", encoding="utf-8")
        (static_src / "files").mkdir()
        (static_src / "files" / "Profile.pdf").write_bytes(b"%PDF-1.4")
        site_dir = tmp_path / "site"
        build_site(site_dir=site_dir, site=site, static_src=static_src)
        assert (site_dir / "static/images/profile-icon.svg").read_text(encoding="utf-8") == "<svg>me</svg>"
        assert (site_dir / "static/files/Profile.pdf").exists()

    def test_content_defect_stops_build(self, tmp_path, site, monkeypatch):
        monkeypatch.setattr(content, "NAV_ITEMS", (content.NavEntry("Old", "/old", "right"),))
        with pytest.raises(SystemExit, match="unknown route '/old'"):
            build_site(site_dir=tmp_path / "site", site=site, static_src=None)
        assert not (tmp_path / "site").exists()

    def test_links_resolve(self, built):
        forbidden, broken = check_site(built)
        assert forbidden == []
        assert broken == []

    def test_resume_link_checked(self, tmp_path, site):
        site["resume_url"] = "static/files/Profile.pdf"
        site_dir = tmp_path / "site"
        build_site(site_dir=site_dir, site=site, static_src=None)
        _, broken = check_site(site_dir)
        assert broken == [(site_dir / "index.html", "static/files/Profile.pdf")]


class TestDashboard:
    def test_lists_routes(self):
        text = format_dashboard(build_registry())
        assert "[JH] 2. /work/ (Work | JoelHanson) -> site/work/index.html" in text
        assert "[JH] fallback (Not Found | JoelHanson) -> site/404.html" in text
        assert "[JH] content check passed" in text


class TestDevServer:
    """Unknown paths get the built 404 page."""

    @pytest.fixture
    def base_url(self, built):
        handler = functools.partial(SiteRequestHandler, directory=str(built))
        httpd = http.server.ThreadingHTTPServer(("localhost", 0), handler)
        thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        thread.start()
        yield f"http://localhost:{httpd.server_address[1]}"
        httpd.shutdown()
        httpd.server_close()

    def test_known_route(self, base_url):
        with urllib.request.urlopen(f"{base_url}/work/") as resp:
            assert resp.status == 200
            assert "Work | JoelHanson" in resp.read().decode("utf-8")

    def test_unknown_route(self, base_url):
        with pytest.raises(urllib.error.HTTPError) as excinfo:
            urllib.request.urlopen(f"{base_url}/nowhere/")
        assert excinfo.value.code == 404
        assert "Not Found | JoelHanson" in excinfo.value.read().decode("utf-8")
