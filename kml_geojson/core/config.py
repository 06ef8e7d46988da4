"""Converter configuration loaded from environment variables.

All configuration values have sensible defaults matching the classic
``kml/source.kml`` → ``geojson/source.geojson`` layout.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so bad configuration is caught before a conversion
    run touches the filesystem.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_geojson.core.constants import (
    DEFAULT_GEOJSON_INDENT,
    DEFAULT_GEOJSON_OUTPUT_PATH,
    DEFAULT_KML_INPUT_PATH,
    ROOT_FOLDER_NAME,
)
from kml_geojson.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable converter configuration.

    Attributes:
        kml_input_path: Path of the source KML document.
        geojson_output_path: Path of the GeoJSON document to (re)generate.
        root_folder_name: Folder label for features outside any named folder.
        geojson_indent: Indentation used when writing the GeoJSON document.
    """

    kml_input_path: str = DEFAULT_KML_INPUT_PATH
    geojson_output_path: str = DEFAULT_GEOJSON_OUTPUT_PATH
    root_folder_name: str = ROOT_FOLDER_NAME
    geojson_indent: int = DEFAULT_GEOJSON_INDENT

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                required string value is empty.
            ValueError: If ``GEOJSON_INDENT`` is not an integer.
        """
        config = cls(
            kml_input_path=os.getenv("KML_INPUT_PATH", DEFAULT_KML_INPUT_PATH),
            geojson_output_path=os.getenv("GEOJSON_OUTPUT_PATH", DEFAULT_GEOJSON_OUTPUT_PATH),
            root_folder_name=os.getenv("ROOT_FOLDER_NAME", ROOT_FOLDER_NAME),
            geojson_indent=int(os.getenv("GEOJSON_INDENT", str(DEFAULT_GEOJSON_INDENT))),
        )
        validate_config(config)
        return config


def validate_config(config: ConverterConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.kml_input_path:
        raise ConfigValidationError(
            "KML_INPUT_PATH",
            config.kml_input_path,
            "must not be empty",
        )

    if not config.geojson_output_path:
        raise ConfigValidationError(
            "GEOJSON_OUTPUT_PATH",
            config.geojson_output_path,
            "must not be empty",
        )

    if not config.root_folder_name.strip():
        raise ConfigValidationError(
            "ROOT_FOLDER_NAME",
            config.root_folder_name,
            "must not be empty",
        )

    if config.geojson_indent < 0:
        raise ConfigValidationError(
            "GEOJSON_INDENT",
            config.geojson_indent,
            "must be >= 0 (spaces)",
        )
