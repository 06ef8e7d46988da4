"""KML document loading and typed node access.

Responsibilities:
- Read and parse the KML file with a hardened lxml parser
- Validate that the root element is KML
- Classify elements into ``NodeKind`` values for exhaustive dispatch
- Namespace-aware lookups of child elements and their text

The namespace is taken from the root element, so documents in the KML 2.2
namespace and un-namespaced documents are handled the same way.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lxml import etree

from kml_geojson.core.constants import KML_NAMESPACE
from kml_geojson.core.exceptions import KmlInputMissingError, KmlParseError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lxml.etree import _Element

logger = logging.getLogger("kml_geojson.convert")


class NodeKind(enum.Enum):
    """Element kinds the converter distinguishes."""

    DOCUMENT = "Document"
    FOLDER = "Folder"
    PLACEMARK = "Placemark"
    STYLE = "Style"
    STYLE_MAP = "StyleMap"
    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    OTHER = ""


_KINDS_BY_NAME = {kind.value: kind for kind in NodeKind if kind is not NodeKind.OTHER}


@dataclass(frozen=True, slots=True)
class KmlDocument:
    """A parsed KML element tree plus the namespace its elements use.

    Attributes:
        root: The root ``<kml>`` element.
        namespace: Namespace URI of the root element (``""`` if none).
    """

    root: _Element
    namespace: str = KML_NAMESPACE

    # -- element names --------------------------------------------------------

    def qname(self, local_name: str) -> str:
        """Return the fully-qualified tag for a KML element name."""
        if self.namespace:
            return f"{{{self.namespace}}}{local_name}"
        return local_name

    def path(self, *steps: str) -> str:
        """Build an ElementPath expression from KML element names."""
        return "/".join(self.qname(step) for step in steps)

    def kind(self, elem: _Element) -> NodeKind:
        """Classify an element. Comments and foreign elements are ``OTHER``."""
        if not isinstance(elem.tag, str):
            return NodeKind.OTHER
        qname = etree.QName(elem)
        if (qname.namespace or "") != self.namespace:
            return NodeKind.OTHER
        return _KINDS_BY_NAME.get(qname.localname, NodeKind.OTHER)

    # -- lookups ---------------------------------------------------------------

    def find(self, elem: _Element, *steps: str) -> _Element | None:
        return elem.find(self.path(*steps))

    def findall(self, elem: _Element, *steps: str) -> list[_Element]:
        return elem.findall(self.path(*steps))

    def text(self, elem: _Element, *steps: str) -> str:
        """Return the text of the first matching child, or ``""``."""
        found = self.find(elem, *steps)
        if found is None or found.text is None:
            return ""
        return found.text

    def inner_markup(self, elem: _Element, *steps: str) -> str:
        """Return the full content of the first matching child, or ``""``.

        Unlike ``text``, child elements are serialised back to markup and
        the text between them is kept as-is, so inline markup that is not
        wrapped in CDATA survives.
        """
        found = self.find(elem, *steps)
        if found is None:
            return ""
        parts = [found.text or ""]
        for child in found:
            parts.append(etree.tostring(child, encoding="unicode", with_tail=False))
            parts.append(child.tail or "")
        return "".join(parts)

    def iter(self, kind: NodeKind) -> Iterator[_Element]:
        """Iterate over every element of ``kind`` in document order."""
        return self.root.iter(self.qname(kind.value))

    @property
    def traversal_root(self) -> _Element:
        """The ``<Document>`` child of ``<kml>`` if present, else the root itself."""
        document = self.find(self.root, NodeKind.DOCUMENT.value)
        return document if document is not None else self.root


def load_kml_document(kml_path: Path | str) -> KmlDocument:
    """Read and parse a KML file.

    Raises:
        KmlInputMissingError: If the file does not exist.
        KmlParseError: If the file cannot be read, is empty, is not
            well-formed XML, or its root element is not KML.
    """
    kml_path = Path(kml_path)
    if not kml_path.is_file():
        msg = f"KML file not found at {kml_path}"
        raise KmlInputMissingError(msg)

    try:
        content = kml_path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read KML file {kml_path}: {exc}"
        raise KmlParseError(msg) from exc

    return parse_kml_bytes(content, source=str(kml_path))


def parse_kml_bytes(content: bytes, *, source: str = "<bytes>") -> KmlDocument:
    """Parse KML content held in memory.

    Raises:
        KmlParseError: If the content is empty, not well-formed XML, or its
            root element is not KML.
    """
    if not content.strip():
        msg = f"KML file is empty: {source}"
        raise KmlParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML ({source}): {exc}"
        raise KmlParseError(msg) from exc

    qname = etree.QName(root)
    namespace = qname.namespace or ""
    if namespace != KML_NAMESPACE and qname.localname.lower() != "kml":
        msg = f"Not a KML file ({source}): root element is <{root.tag}>"
        raise KmlParseError(msg)

    if namespace and namespace != KML_NAMESPACE:
        logger.warning(
            "Unexpected KML namespace | source=%s | namespace=%s",
            source,
            namespace,
        )

    return KmlDocument(root=root, namespace=namespace)
