"""Tests for placemark → feature translation.

Covers:
- Name, raw description and folder propagation
- ExtendedData (Data/value and SchemaData/SimpleData), later keys overwrite
- ``<img src>`` extraction from description text
- Style attachment and soft failure for unresolved references
- Placemarks without geometry dropped
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kml_geojson.convert import (
    StyleRegistry,
    extract_extended_data,
    extract_images,
    translate_placemark,
)
from kml_geojson.models.feature import LineStringGeometry, PointGeometry, StyleDef

if TYPE_CHECKING:
    from collections.abc import Callable

    from kml_geojson.convert import KmlDocument
    from kml_geojson.models.feature import Feature

_REGISTRY = StyleRegistry({"blue": StyleDef(color="#0000ff", width=3.0)})


def _translate(
    make_kml_doc: Callable[[str], KmlDocument],
    placemark_body: str,
    *,
    folder: str = "Links",
    registry: StyleRegistry = _REGISTRY,
) -> Feature | None:
    doc = make_kml_doc(f"<Placemark>{placemark_body}</Placemark>")
    placemark = doc.find(doc.traversal_root, "Placemark")
    assert placemark is not None
    return translate_placemark(doc, placemark, folder, registry)


class TestTranslatePlacemark:
    def test_full_feature(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        feature = _translate(
            make_kml_doc,
            "<name> Link A </name>"
            "<description><![CDATA[<b>bold</b> <img src=\"a.png\">]]></description>"
            "<styleUrl>#blue</styleUrl>"
            "<ExtendedData><Data name='capacity'><value>10G</value></Data></ExtendedData>"
            "<LineString><coordinates>1,2 3,4</coordinates></LineString>",
        )
        assert feature is not None
        assert feature.name == "Link A"
        assert feature.description == '<b>bold</b> <img src="a.png">'
        assert feature.folder == "Links"
        assert feature.images == ["a.png"]
        assert feature.meta == {"capacity": "10G"}
        assert feature.style == StyleDef(color="#0000ff", width=3.0)
        assert feature.geometry == LineStringGeometry(points=((1.0, 2.0), (3.0, 4.0)))

    def test_inline_markup_description_kept_whole(
        self, make_kml_doc: Callable[[str], KmlDocument]
    ) -> None:
        feature = _translate(
            make_kml_doc,
            '<description>Mast <b>north</b> see <img src="x.png"/> end</description>'
            "<Point><coordinates>1,2</coordinates></Point>",
        )
        assert feature is not None
        assert feature.description.startswith("Mast <b")
        assert "north</b> see <img" in feature.description
        assert feature.description.endswith(" end")
        assert feature.images == ["x.png"]

    def test_missing_text_fields_default_to_empty(
        self, make_kml_doc: Callable[[str], KmlDocument]
    ) -> None:
        feature = _translate(make_kml_doc, "<Point><coordinates>1,2</coordinates></Point>")
        assert feature is not None
        assert feature.name == ""
        assert feature.description == ""
        assert feature.images == []
        assert feature.meta == {}
        assert feature.style is None
        assert feature.geometry == PointGeometry(lng=1.0, lat=2.0)

    def test_unresolved_style_is_absent(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        feature = _translate(
            make_kml_doc,
            "<styleUrl>#red</styleUrl><Point><coordinates>1,2</coordinates></Point>",
        )
        assert feature is not None
        assert feature.style is None

    def test_no_geometry_dropped(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        assert _translate(make_kml_doc, "<name>Ghost</name><styleUrl>#blue</styleUrl>") is None

    def test_empty_coordinates_dropped(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        assert (
            _translate(make_kml_doc, "<LineString><coordinates></coordinates></LineString>")
            is None
        )


class TestExtractExtendedData:
    def test_data_and_simple_data(self, make_kml_doc: Callable[[str], KmlDocument]) -> None:
        doc = make_kml_doc(
            "<Placemark><ExtendedData>"
            "<Data name='owner'><value>ACME</value></Data>"
            "<Data name='owner'><value>Globex</value></Data>"
            "<Data name='empty'/>"
            "<SchemaData schemaUrl='#s'><SimpleData name='site_id'>N-17</SimpleData></SchemaData>"
            "</ExtendedData></Placemark>"
        )
        placemark = doc.find(doc.traversal_root, "Placemark")
        assert placemark is not None
        assert extract_extended_data(doc, placemark) == {
            "owner": "Globex",
            "empty": "",
            "site_id": "N-17",
        }


class TestExtractImages:
    def test_multiple_images_in_order(self) -> None:
        text = '<img src="one.jpg"><p>x</p><img alt="two" src="two.jpg" />'
        assert extract_images(text) == ["one.jpg", "two.jpg"]

    def test_tag_name_case_insensitive(self) -> None:
        assert extract_images('<IMG SRC="x.jpg"><Img src="y.jpg">') == ["y.jpg"]

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "no markup at all",
            "<img src='single-quoted.jpg'>",
            "<img>",
            '<a href="page.html">link</a>',
        ],
    )
    def test_no_match(self, text: str) -> None:
        assert extract_images(text) == []
