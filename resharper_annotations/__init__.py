"""Turn ReSharper InspectCode XML reports into GitHub Actions annotations."""

__version__ = "0.1.0"


class ReportError(Exception):
    """Base exception for every failure while producing annotations."""
