"""KML colour conversion.

KML packs colours as ``aabbggrr`` hex strings (alpha first, then blue,
green, red). Renderers expect ``#rrggbb``.
"""

from __future__ import annotations

import re

_HEX8_RE = re.compile(r"[0-9a-fA-F]{8}")


def kml_color_to_rgb(abgr: str) -> str | None:
    """Convert a KML ``aabbggrr`` colour to an RGB hex string.

    The alpha pair is discarded. Letter case is preserved.

    Returns:
        ``"#rrggbb"``, or ``None`` if the value is shorter than 8 characters
        or does not start with 8 hex digits.
    """
    value = abgr.strip()
    if len(value) < 8 or not _HEX8_RE.match(value):
        return None
    blue = value[2:4]
    green = value[4:6]
    red = value[6:8]
    return f"#{red}{green}{blue}"
