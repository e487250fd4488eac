from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Robust Path Detection
PACKAGE_DIR = Path(__file__).resolve().parent
if (PACKAGE_DIR.parent / "content").exists():
    BASE_DIR = PACKAGE_DIR.parent
elif (Path.cwd() / "content").exists():
    BASE_DIR = Path.cwd()
else:
    BASE_DIR = PACKAGE_DIR.parent

CONTENT_DIR = BASE_DIR / "content"
STATIC_SRC_DIR = CONTENT_DIR / "static"
SITE_DIR = BASE_DIR / "site"
SITE_JSON = CONTENT_DIR / "site.json"

PREFIX = "[JH]"
TRUTHY = {"1", "true", "yes", "on"}

DEFAULTS: dict[str, Any] = {
    "site_name": "Joel Hanson",
    "meta_description": "Joel Hanson, software engineer. Work, writing and contact.",
    "locale": "en-US",
    "show_timeline": "false",
    "resume_url": "",
    "footer_text": "",
    "base_path": "/",
    "font_url": "https://fonts.googleapis.com/css2?family=Muli:wght@300;400;700&display=swap",
    "theme": {
        "accent": "#ef5350",
        "accent_soft": "#fee0e0",
        "text_main": "#353535",
        "text_muted": "#484d4e",
        "background": "#ffffff",
    },
}


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in TRUTHY


def read_site_config(path: Path | None = None) -> dict[str, Any]:
    site_json = path or SITE_JSON
    if site_json.exists():
        try:
            config = json.loads(site_json.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Malformed site config {site_json}: {exc}") from exc
        if not isinstance(config, dict):
            raise SystemExit(f"Malformed site config {site_json}: expected an object")
    else:
        config = {}

    for key, val in DEFAULTS.items():
        if key not in config:
            config[key] = val

    # Partial theme overrides keep the remaining default colours
    theme = config.get("theme")
    if not isinstance(theme, dict):
        theme = {}
    config["theme"] = {**DEFAULTS["theme"], **theme}
    return config
