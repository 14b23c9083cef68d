"""InspectCode XML → ``Report``.

Usage:
    report = parse_report(text)     # raises ReportParseError on bad input

Binding is driven by the field metadata declared in ``models``; this module
only knows how to read each kind of field from an element.
"""

import re
from dataclasses import fields
from typing import Any
from xml.etree.ElementTree import Element

from defusedxml import ElementTree as SafeET
from defusedxml.common import DefusedXmlException

from resharper_annotations import ReportError
from resharper_annotations.models import Report

UINT_MAX = 2**32 - 1

_UNSIGNED = re.compile(r"\+?[0-9]+")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ReportParseError(ReportError):
    """Raised when the report is not well-formed or lacks a required field."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_report(text: str) -> Report:
    """Parse a whole InspectCode report.

    Raises:
        ReportParseError: malformed XML, DTD/entity declarations, a missing
                          required field or a ``Line`` that is not an
                          unsigned 32-bit integer.
    """
    try:
        root = SafeET.fromstring(text)
    except DefusedXmlException as exc:
        raise ReportParseError(f"Forbidden XML construct: {exc}") from exc
    except SafeET.ParseError as exc:
        raise ReportParseError(f"Malformed XML: {exc}") from exc

    return _bind(Report, root)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _bind(cls: type, element: Element) -> Any:
    values = {}
    own_names = {f.metadata["xml"] for f in fields(cls) if f.metadata.get("xml")}

    for f in fields(cls):
        name = f.metadata.get("xml")
        kind = f.metadata["kind"]

        if kind == "text":
            values[f.name] = _scalar(element, name)
        elif kind == "uint":
            values[f.name] = _uint(element, name, _scalar(element, name))
        elif kind == "record":
            values[f.name] = _bind(f.metadata["cls"], _child(element, name))
        elif kind == "items":
            item_cls = f.metadata["cls"]
            if name:
                entries = list(_child(element, name))
            else:
                # Value list inside the record's own element
                entries = [child for child in element if child.tag not in own_names]
            values[f.name] = tuple(_bind(item_cls, entry) for entry in entries)
        else:
            raise ValueError(f"Unknown binding kind '{kind}' on {cls.__name__}.{f.name}")

    return cls(**values)


def _scalar(element: Element, name: str) -> str:
    """Attribute first, then the text of a child element."""
    value = element.get(name)
    if value is not None:
        return value
    return (_child(element, name).text or "").strip()


def _child(element: Element, name: str) -> Element:
    child = element.find(name)
    if child is None:
        raise ReportParseError(f"<{element.tag}> is missing required field '{name}'")
    return child


def _uint(element: Element, name: str, raw: str) -> int:
    raw = raw.strip()
    if not _UNSIGNED.fullmatch(raw) or int(raw) > UINT_MAX:
        raise ReportParseError(
            f"<{element.tag}> field '{name}' must be an unsigned 32-bit integer, got '{raw}'"
        )
    return int(raw)
