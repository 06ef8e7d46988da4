"""Tests for the style registry.

Covers:
- LineStyle colour/width extraction and width fallbacks
- Last-write-wins for duplicate style ids
- StyleMap ``normal`` pair aliasing (first pair only, one level only)
- Soft failure for unresolved references
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kml_geojson.convert import StyleRegistry, load_kml_document, strip_fragment
from kml_geojson.models.feature import StyleDef

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from kml_geojson.convert import KmlDocument


@pytest.fixture()
def registry(styles_kml: Path) -> StyleRegistry:
    return StyleRegistry.from_document(load_kml_document(styles_kml))


class TestStyleDeclarations:
    """Pass 1: ``<Style>`` elements."""

    def test_duplicate_id_last_declaration_wins(self, registry: StyleRegistry) -> None:
        assert registry.get("a") == StyleDef(color="#00ff00", width=6.0)

    def test_style_without_line_style(self, registry: StyleRegistry) -> None:
        assert registry.get("no-line") == StyleDef(color=None, width=2.0)

    def test_zero_width_defaults(self, registry: StyleRegistry) -> None:
        assert registry.get("zero-width") == StyleDef(color="#ff0000", width=2.0)

    def test_short_colour_is_absent(self, registry: StyleRegistry) -> None:
        assert registry.get("short-color") == StyleDef(color=None, width=1.5)

    def test_style_without_id_not_registered(self, registry: StyleRegistry) -> None:
        assert "" not in registry
        assert all(style_id for style_id in registry)

    def test_missing_width_defaults(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        doc = make_kml_doc(
            "<Style id='s'><LineStyle><color>ffff0000</color></LineStyle></Style>"
        )
        assert StyleRegistry.from_document(doc).get("s") == StyleDef(color="#0000ff", width=2.0)

    def test_unparseable_width_defaults(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        doc = make_kml_doc("<Style id='s'><LineStyle><width>thick</width></LineStyle></Style>")
        assert StyleRegistry.from_document(doc).get("s") == StyleDef(color=None, width=2.0)

    def test_nested_styles_are_registered(
        self, make_kml_doc: Callable[[str], KmlDocument]
    ) -> None:
        doc = make_kml_doc(
            "<Folder><Style id='deep'><LineStyle><width>7</width></LineStyle></Style></Folder>"
        )
        assert StyleRegistry.from_document(doc).get("deep") == StyleDef(color=None, width=7.0)

    @pytest.mark.parametrize(
        ("declared", "expected_type"),
        [("3", int), (" 4 ", int), ("2.5", float), ("3.0", float)],
    )
    def test_width_keeps_declared_number_type(
        self,
        make_kml_doc: Callable[[str], KmlDocument],
        declared: str,
        expected_type: type,
    ) -> None:
        doc = make_kml_doc(
            f"<Style id='s'><LineStyle><width>{declared}</width></LineStyle></Style>"
        )
        style = StyleRegistry.from_document(doc).get("s")
        assert style is not None
        assert type(style.width) is expected_type


class TestStyleMaps:
    """Pass 2: ``<StyleMap>`` elements."""

    def test_normal_pair_aliases_style(self, registry: StyleRegistry) -> None:
        assert registry.get("map-a") == registry.get("a")

    def test_first_normal_pair_wins(self, registry: StyleRegistry) -> None:
        assert registry.get("map-a") != registry.get("zero-width")

    def test_unknown_target_leaves_no_entry(self, registry: StyleRegistry) -> None:
        assert "map-missing" not in registry
        assert registry.resolve("#map-missing") is None

    def test_no_normal_pair_leaves_no_entry(self, registry: StyleRegistry) -> None:
        assert "map-no-normal" not in registry

    def test_map_of_map_not_followed(self, registry: StyleRegistry) -> None:
        assert "map-of-map" not in registry

    def test_map_declared_before_style(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        doc = make_kml_doc(
            "<StyleMap id='m'><Pair><key>normal</key><styleUrl>#s</styleUrl></Pair></StyleMap>"
            "<Style id='s'><LineStyle><width>9</width></LineStyle></Style>"
        )
        assert StyleRegistry.from_document(doc).get("m") == StyleDef(color=None, width=9.0)


class TestResolve:
    """Lookups by ``styleUrl``."""

    def test_resolve_with_fragment(self, registry: StyleRegistry) -> None:
        assert registry.resolve("#a") == StyleDef(color="#00ff00", width=6.0)

    def test_resolve_bare_id(self, registry: StyleRegistry) -> None:
        assert registry.resolve("a") == registry.resolve("#a")

    def test_resolve_unknown_or_empty(self, registry: StyleRegistry) -> None:
        assert registry.resolve("#nope") is None
        assert registry.resolve("") is None
        assert registry.resolve("#") is None

    def test_len_counts_styles_and_maps(self, registry: StyleRegistry) -> None:
        # a, no-line, zero-width, short-color, highlight, map-a
        assert len(registry) == 6

    def test_registries_are_independent(self) -> None:
        first = StyleRegistry({"x": StyleDef(color="#010203", width=1.0)})
        second = StyleRegistry()
        assert "x" in first
        assert "x" not in second

    def test_strip_fragment(self) -> None:
        assert strip_fragment("#abc") == "abc"
        assert strip_fragment("  #abc ") == "abc"
        assert strip_fragment("abc") == "abc"
