"""GitHub Actions annotations for a parsed report.

Functions:
    classify_issue_types(issue_types)   -> (warning_ids, error_ids)
    select_issues(report, type_ids)     -> list[Issue]
    build_annotations(report)           -> AnnotationRun
    emit(run, echo)                     -> None
    check_errors(run)                   -> None   (raises ErrorsFoundError)
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable

from resharper_annotations import ReportError
from resharper_annotations.models import Issue, IssueType, Report

WARNING_SEVERITY = "WARNING"
ERROR_SEVERITY = "ERROR"

# Each issue is emitted twice: {file}=raw path with the normalized path as
# body, then {file}=normalized path with the message as body.
_WARNING_TEMPLATE = (
    "::warning file={0},line={1},endLine={1},col=1,endColumn=1,title={2}::{3}"
)
_ERROR_TEMPLATE = "::error file={0},line={1},title={2}::{3}"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ErrorsFoundError(ReportError):
    """Raised after emission when at least one error-severity issue exists."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Found {count} errors")
        self.count = count


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass
class AnnotationRun:
    warnings: list[Issue] = field(default_factory=list)
    errors: list[Issue] = field(default_factory=list)

    def lines(self) -> list[str]:
        """All annotation lines: every warning pair, then every error pair."""
        out: list[str] = []
        for issue in self.warnings:
            out.extend(format_warning(issue))
        for issue in self.errors:
            out.extend(format_error(issue))
        return out


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify_issue_types(
    issue_types: Iterable[IssueType],
) -> tuple[frozenset[str], frozenset[str]]:
    """Split the catalog into warning ids and error ids.

    Severity is compared case-sensitively with no trimming. A duplicated id
    declared once per severity ends up in both sets.
    """
    issue_types = list(issue_types)
    warning_ids = frozenset(t.id for t in issue_types if t.severity == WARNING_SEVERITY)
    error_ids = frozenset(t.id for t in issue_types if t.severity == ERROR_SEVERITY)
    return warning_ids, error_ids


def select_issues(report: Report, type_ids: frozenset[str]) -> list[Issue]:
    """Issues whose type id is in *type_ids*, in report order."""
    return [issue for issue in report.all_issues() if issue.type_id in type_ids]


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")


def format_warning(issue: Issue) -> tuple[str, str]:
    return _format_pair(_WARNING_TEMPLATE, issue)


def format_error(issue: Issue) -> tuple[str, str]:
    return _format_pair(_ERROR_TEMPLATE, issue)


def build_annotations(report: Report) -> AnnotationRun:
    warning_ids, error_ids = classify_issue_types(report.issue_types)
    return AnnotationRun(
        warnings=select_issues(report, warning_ids),
        errors=select_issues(report, error_ids),
    )


def emit(run: AnnotationRun, echo: Callable[[str], None]) -> None:
    for line in run.lines():
        echo(line)


def check_errors(run: AnnotationRun) -> None:
    """Raise ErrorsFoundError if the run holds any error-severity issue."""
    if run.errors:
        raise ErrorsFoundError(len(run.errors))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _format_pair(template: str, issue: Issue) -> tuple[str, str]:
    filename = normalize_path(issue.file)
    return (
        template.format(issue.file, issue.line, issue.type_id, filename),
        template.format(filename, issue.line, issue.type_id, issue.message),
    )
