"""Style registry built from ``<Style>`` and ``<StyleMap>`` declarations.

The registry is built once per conversion run, over the whole document,
and is read-only afterwards. It is handed explicitly to the placemark
translator; nothing is kept at module level.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from kml_geojson.convert._colors import kml_color_to_rgb
from kml_geojson.convert._document import NodeKind
from kml_geojson.core.constants import DEFAULT_LINE_WIDTH
from kml_geojson.models.feature import StyleDef

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lxml.etree import _Element

    from kml_geojson.convert._document import KmlDocument

logger = logging.getLogger("kml_geojson.convert")

NORMAL_STYLE_KEY = "normal"


def strip_fragment(style_url: str) -> str:
    """Turn a ``#id`` style reference into a bare id."""
    return style_url.strip().lstrip("#")


class StyleRegistry:
    """Mapping of style id to ``StyleDef`` for one conversion run.

    Built in two passes:

    1. Every ``<Style id=...>`` in document order. A later declaration with
       the same id replaces the earlier one.
    2. Every ``<StyleMap id=...>``: the first ``<Pair>`` keyed ``normal``
       decides. If its ``styleUrl`` names a style from pass 1, the map id is
       aliased to that style. Maps pointing at other maps are not followed.
    """

    def __init__(self, styles: dict[str, StyleDef] | None = None) -> None:
        self._styles: dict[str, StyleDef] = dict(styles or {})

    @classmethod
    def from_document(cls, doc: KmlDocument) -> StyleRegistry:
        declared: dict[str, StyleDef] = {}
        for style_elem in doc.iter(NodeKind.STYLE):
            style_id = style_elem.get("id", "")
            if not style_id:
                continue
            if style_id in declared:
                logger.debug("Style redeclared, later declaration wins | id=%s", style_id)
            declared[style_id] = _parse_style(doc, style_elem)

        styles = dict(declared)
        for map_elem in doc.iter(NodeKind.STYLE_MAP):
            map_id = map_elem.get("id", "")
            if not map_id:
                continue
            target = _normal_style_id(doc, map_elem)
            if target is None:
                logger.debug("StyleMap has no normal pair | id=%s", map_id)
                continue
            if target not in declared:
                logger.debug(
                    "StyleMap normal pair references unknown style | id=%s | target=%s",
                    map_id,
                    target,
                )
                continue
            styles[map_id] = declared[target]

        logger.debug(
            "Style registry built | styles=%d | entries=%d",
            len(declared),
            len(styles),
        )
        return cls(styles)

    def get(self, style_id: str) -> StyleDef | None:
        return self._styles.get(style_id)

    def resolve(self, style_url: str) -> StyleDef | None:
        """Look up a placemark's ``styleUrl`` (``#id`` or bare id)."""
        style_id = strip_fragment(style_url)
        if not style_id:
            return None
        return self._styles.get(style_id)

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_style(doc: KmlDocument, style_elem: _Element) -> StyleDef:
    line_style = doc.find(style_elem, "LineStyle")
    if line_style is None:
        return StyleDef(color=None, width=DEFAULT_LINE_WIDTH)

    color_text = doc.text(line_style, "color")
    color = kml_color_to_rgb(color_text) if color_text.strip() else None
    return StyleDef(color=color, width=_parse_width(doc.text(line_style, "width")))


def _parse_width(text: str) -> int | float:
    """Parse a line width; missing, unparseable or zero falls back to the default.

    Integral declarations stay ``int`` so they are written back as ``3``,
    not ``3.0``.
    """
    width: int | float
    try:
        width = int(text)
    except ValueError:
        try:
            width = float(text)
        except ValueError:
            return DEFAULT_LINE_WIDTH
    if not math.isfinite(width):
        return DEFAULT_LINE_WIDTH
    return width or DEFAULT_LINE_WIDTH


def _normal_style_id(doc: KmlDocument, map_elem: _Element) -> str | None:
    for pair in doc.findall(map_elem, "Pair"):
        if doc.text(pair, "key").strip() == NORMAL_STYLE_KEY:
            return strip_fragment(doc.text(pair, "styleUrl"))
    return None
