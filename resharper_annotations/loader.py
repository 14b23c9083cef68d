"""Report file loading.

Usage:
    text = read_report_text("inspectcode.xml")   # raises ReportReadError
"""

from pathlib import Path

from resharper_annotations import ReportError


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ReportReadError(ReportError):
    """Raised when the report file cannot be read as UTF-8 text."""


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def read_report_text(report_path: str) -> str:
    """Return the whole report as text.

    InspectCode writes UTF-8 with a byte-order mark; the mark is dropped.

    Raises:
        ReportReadError: missing file, permission problem or invalid UTF-8.
    """
    path = Path(report_path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportReadError(f"Failed to read file: '{report_path}' -- {exc}") from exc
