from __future__ import annotations

import string

HEX_DIGITS = set(string.hexdigits)


def _expand_hex(raw: str) -> str:
    value = (raw or "").strip()
    if value.startswith("#"):
        value = value[1:]
    if len(value) not in (3, 6) or not all(ch in HEX_DIGITS for ch in value):
        raise ValueError(f"Malformed hex colour: {raw!r}")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return value.lower()


def is_hex_color(raw: str) -> bool:
    try:
        _expand_hex(raw)
    except ValueError:
        return False
    return True


def hex_to_rgb(raw: str) -> tuple[int, int, int]:
    value = _expand_hex(raw)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def hex_to_rgba(raw: str, opacity: int | float) -> str:
    """Convert a 3- or 6-digit hex colour to an ``rgba()`` string.

    ``opacity`` is a percentage in 0..100. Shorthand digits are doubled
    before parsing, so ``"f00"`` and ``"ff0000"`` give the same triple.
    Malformed input raises ``ValueError`` instead of falling back to black.
    """
    if isinstance(opacity, bool) or not 0 <= opacity <= 100:
        raise ValueError(f"Opacity must be a percentage between 0 and 100: {opacity!r}")
    red, green, blue = hex_to_rgb(raw)
    return f"rgba({red},{green},{blue},{opacity / 100:g})"
