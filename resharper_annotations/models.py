"""Data model for InspectCode reports.

Every field names the XML attribute or element it is bound from in its
``metadata``; ``parser.parse_report`` walks that table to build the records:

    xml    - attribute / child element name
    kind   - "text", "uint", "record" or "items"
    cls    - record class for "record" and "items" fields

An "items" field without an ``xml`` name collects the children of the
record's own element (the issue list of a ``<Project>``).
"""

from dataclasses import dataclass, field


def _text(name: str):
    return field(metadata={"xml": name, "kind": "text"})


def _uint(name: str):
    return field(metadata={"xml": name, "kind": "uint"})


def _record(name: str, cls: type):
    return field(metadata={"xml": name, "kind": "record", "cls": cls})


def _items(cls: type, name: str | None = None):
    return field(default=(), metadata={"xml": name, "kind": "items", "cls": cls})


@dataclass(frozen=True)
class InspectionScope:
    element: str = _text("Element")


@dataclass(frozen=True)
class Information:
    solution: str = _text("Solution")
    inspection_scope: InspectionScope = _record("InspectionScope", InspectionScope)


@dataclass(frozen=True)
class IssueType:
    id: str = _text("Id")
    category: str = _text("Category")
    category_id: str = _text("CategoryId")
    description: str = _text("Description")
    severity: str = _text("Severity")


@dataclass(frozen=True)
class Issue:
    type_id: str = _text("TypeId")
    file: str = _text("File")
    offset: str = _text("Offset")
    line: int = _uint("Line")
    message: str = _text("Message")


@dataclass(frozen=True)
class Project:
    name: str = _text("Name")
    issues: tuple[Issue, ...] = _items(Issue)


@dataclass(frozen=True)
class Report:
    information: Information = _record("Information", Information)
    issue_types: tuple[IssueType, ...] = _items(IssueType, "IssueTypes")
    projects: tuple[Project, ...] = _items(Project, "Issues")

    def all_issues(self) -> list[Issue]:
        """Every issue, in project order then within-project order."""
        return [issue for project in self.projects for issue in project.issues]
