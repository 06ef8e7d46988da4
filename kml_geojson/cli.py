"""Command-line entry point for the KML → GeoJSON converter.

This module is purely the wiring layer between the shell and the
``kml_geojson`` package: it loads configuration, applies option
overrides, configures logging and maps pipeline errors to exit codes.

Exit codes:
    0  converted, or output already up to date
    1  the KML document could not be parsed (previous output kept)
    2  input missing, invalid configuration, or output not writable
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import typer

from kml_geojson.core.config import ConverterConfig, validate_config
from kml_geojson.core.exceptions import PipelineError
from kml_geojson.orchestrators.conversion import (
    STATUS_FAILED,
    STATUS_SKIPPED,
    convert_if_stale,
)

app = typer.Typer(
    help="Convert a KML document into a style-resolved GeoJSON FeatureCollection",
    add_completion=False,
)

EXIT_PARSE_FAILED = 1
EXIT_FATAL = 2


@app.command()
def convert(
    kml_input: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="KML document to convert (default: $KML_INPUT_PATH or kml/source.kml)",
    ),
    geojson_output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="GeoJSON file to write (default: $GEOJSON_OUTPUT_PATH or geojson/source.geojson)",
    ),
    root_name: Optional[str] = typer.Option(
        None,
        "--root-name",
        help="Folder label for placemarks outside any named folder",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Convert even if output is fresh"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Regenerate the GeoJSON output if it is missing or older than the KML input.

    Example:
        kml-geojson --input kml/source.kml --output geojson/source.geojson
        kml-geojson --force -v
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load_config(kml_input, geojson_output, root_name)
        result = convert_if_stale(config, force=force)
    except PipelineError as exc:
        typer.echo(f"Error [{exc.code}]: {exc.message}", err=True)
        raise typer.Exit(EXIT_FATAL) from exc
    except ValueError as exc:
        typer.echo(f"Error: invalid configuration: {exc}", err=True)
        raise typer.Exit(EXIT_FATAL) from exc

    if result.status == STATUS_FAILED:
        message = (result.error or {}).get("message", "conversion failed")
        typer.echo(f"Conversion failed: {message}", err=True)
        raise typer.Exit(EXIT_PARSE_FAILED)

    if result.status == STATUS_SKIPPED:
        typer.echo(f"skipped: {result.output_path} is up to date")
        return
    typer.echo(f"converted: {result.output_path} ({result.feature_count} features)")


def _load_config(
    kml_input: Optional[Path],
    geojson_output: Optional[Path],
    root_name: Optional[str],
) -> ConverterConfig:
    config = ConverterConfig.from_env()
    overrides: dict[str, object] = {}
    if kml_input is not None:
        overrides["kml_input_path"] = str(kml_input)
    if geojson_output is not None:
        overrides["geojson_output_path"] = str(geojson_output)
    if root_name is not None:
        overrides["root_folder_name"] = root_name
    if overrides:
        config = dataclasses.replace(config, **overrides)
        validate_config(config)
    return config


if __name__ == "__main__":
    app()
