"""Unified exception taxonomy for the conversion pipeline.

Every domain exception inherits from ``PipelineError`` and carries
structured context fields so the command-line shell and library callers
can report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``: the input document or configuration is unusable.
- ``PermanentError``: an environment failure (missing input, unwritable
  output) that a re-run will not fix by itself.

Nothing in the pipeline is retried: all operations are local and
deterministic.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all pipeline-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"load_kml"``, ``"write_geojson"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PipelineError):
    """Input document or configuration failed validation."""


class PermanentError(PipelineError):
    """Unrecoverable environment failure (filesystem, missing input)."""


# ---------------------------------------------------------------------------
# Pipeline errors
# ---------------------------------------------------------------------------


class KmlInputMissingError(PermanentError):
    """Raised when the input KML document does not exist."""

    default_stage = "load_kml"
    default_code = "KML_INPUT_MISSING"


class KmlParseError(ValidationError):
    """Raised when the input KML document cannot be parsed."""

    default_stage = "load_kml"
    default_code = "KML_PARSE_FAILED"


class OutputWriteError(PermanentError):
    """Raised when the GeoJSON output (or its directory) cannot be written."""

    default_stage = "write_geojson"
    default_code = "GEOJSON_WRITE_FAILED"
