"""Conversion pipeline orchestrator.

Coordinates one synchronous conversion run:

1. Load KML with a hardened lxml parser; nothing is written if this fails
2. Build the style registry over the whole document
3. Walk folders from the traversal root, collecting features in order
4. Wrap the features as a GeoJSON FeatureCollection
5. Write the document, creating parent directories as needed

``convert_if_stale`` adds the triggering policy used by the CLI: the run
only happens when the output is missing or older than the input, and a
parse failure is reported instead of raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from kml_geojson.convert import StyleRegistry, load_kml_document, walk_folder
from kml_geojson.core.constants import DEFAULT_GEOJSON_INDENT, ROOT_FOLDER_NAME
from kml_geojson.core.exceptions import KmlInputMissingError, KmlParseError, OutputWriteError
from kml_geojson.models.geojson import FeatureCollectionDocument
from kml_geojson.utils.freshness import is_output_stale

if TYPE_CHECKING:
    from kml_geojson.convert import KmlDocument
    from kml_geojson.core.config import ConverterConfig

logger = logging.getLogger("kml_geojson.orchestrators.conversion")

STATUS_CONVERTED = "converted"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a ``convert_if_stale`` call.

    Attributes:
        status: ``"converted"``, ``"skipped"`` or ``"failed"``.
        output_path: The GeoJSON path that was (or would have been) written.
        feature_count: Number of features written (0 unless converted).
        error: Structured error payload when the run failed.
    """

    status: str
    output_path: str
    feature_count: int = 0
    error: dict[str, object] | None = None


def build_feature_collection(
    doc: KmlDocument,
    *,
    root_folder_name: str = ROOT_FOLDER_NAME,
) -> FeatureCollectionDocument:
    """Translate a parsed KML document into a FeatureCollection (no I/O)."""
    registry = StyleRegistry.from_document(doc)
    features = walk_folder(doc, doc.traversal_root, registry, root_folder_name)

    pins = sum(1 for feature in features if feature.is_pin)
    logger.info(
        "Features collected | styles=%d | pins=%d | paths=%d",
        len(registry),
        pins,
        len(features) - pins,
    )
    return FeatureCollectionDocument.from_features(features)


def convert_kml_to_geojson(
    kml_path: Path | str,
    geojson_path: Path | str,
    *,
    root_folder_name: str = ROOT_FOLDER_NAME,
    indent: int = DEFAULT_GEOJSON_INDENT,
) -> FeatureCollectionDocument:
    """Convert a KML file to a GeoJSON FeatureCollection file.

    Args:
        kml_path: Path of the source KML document.
        geojson_path: Path of the GeoJSON document to write.
        root_folder_name: Folder label for features outside any named folder.
        indent: JSON indentation; ``0`` writes compact JSON.

    Returns:
        The document that was written.

    Raises:
        KmlInputMissingError: If ``kml_path`` does not exist.
        KmlParseError: If the KML cannot be parsed. The output is untouched.
        OutputWriteError: If the output directory or file cannot be written.
    """
    kml_path = Path(kml_path)
    geojson_path = Path(geojson_path)

    logger.info("Conversion started | input=%s | output=%s", kml_path, geojson_path)

    # -----------------------------------------------------------------------
    # Phase 1: Load KML
    # -----------------------------------------------------------------------
    doc = load_kml_document(kml_path)

    # -----------------------------------------------------------------------
    # Phase 2-4: Styles, folder walk, collection
    # -----------------------------------------------------------------------
    collection = build_feature_collection(doc, root_folder_name=root_folder_name)

    logger.info(
        "KML converted | input=%s | features=%d",
        kml_path.name,
        collection.feature_count,
    )

    # -----------------------------------------------------------------------
    # Phase 5: Write GeoJSON
    # -----------------------------------------------------------------------
    _write_document(geojson_path, collection.to_json(indent=indent or None))

    logger.info("GeoJSON written | path=%s", geojson_path)
    return collection


def convert_if_stale(
    config: ConverterConfig,
    *,
    force: bool = False,
) -> ConversionResult:
    """Regenerate the GeoJSON output when it is missing or older than the KML.

    Args:
        config: Input/output locations and conversion options.
        force: Convert even if the output is up to date.

    Returns:
        A ``ConversionResult``. Parse failures are reported with
        ``status="failed"`` and leave any previous output in place.

    Raises:
        KmlInputMissingError: If the KML input does not exist.
        OutputWriteError: If the output cannot be written.
    """
    kml_path = Path(config.kml_input_path)
    geojson_path = Path(config.geojson_output_path)

    if not kml_path.is_file():
        msg = f"KML file not found at {kml_path}"
        raise KmlInputMissingError(msg)

    if not force and not is_output_stale(kml_path, geojson_path):
        logger.info("GeoJSON up to date, skipping | output=%s", geojson_path)
        return ConversionResult(status=STATUS_SKIPPED, output_path=str(geojson_path))

    try:
        collection = convert_kml_to_geojson(
            kml_path,
            geojson_path,
            root_folder_name=config.root_folder_name,
            indent=config.geojson_indent,
        )
    except KmlParseError as exc:
        logger.warning(
            "Conversion aborted, output left untouched | input=%s | code=%s | error=%s",
            kml_path,
            exc.code,
            exc,
        )
        return ConversionResult(
            status=STATUS_FAILED,
            output_path=str(geojson_path),
            error=exc.to_error_dict(),
        )

    return ConversionResult(
        status=STATUS_CONVERTED,
        output_path=str(geojson_path),
        feature_count=collection.feature_count,
    )


def _write_document(geojson_path: Path, payload: str) -> None:
    """Write the serialised document, creating parent directories.

    Raises:
        OutputWriteError: If the directory or file cannot be written.
    """
    try:
        geojson_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Cannot create output directory {geojson_path.parent}: {exc}"
        raise OutputWriteError(msg) from exc

    try:
        geojson_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        msg = f"Failed to write GeoJSON to {geojson_path}: {exc}"
        raise OutputWriteError(msg) from exc
