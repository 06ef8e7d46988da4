"""Output freshness check for regenerable artifacts.

The GeoJSON document is derived entirely from the KML input, so it only
needs rebuilding when it is missing or older than its source.
"""

from __future__ import annotations

from pathlib import Path


def is_output_stale(input_path: Path | str, output_path: Path | str) -> bool:
    """Return ``True`` if ``output_path`` is missing or strictly older than ``input_path``.

    Raises:
        FileNotFoundError: If ``input_path`` does not exist.
    """
    input_mtime = Path(input_path).stat().st_mtime
    output_path = Path(output_path)
    if not output_path.exists():
        return True
    return output_path.stat().st_mtime < input_mtime
