"""Detection of the FLEX schema version and statement type of an XML document."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "FlexParseError",
    "FlexSchemaVersion",
    "StatementType",
    "detect_statement_type",
    "detect_version",
]

_VERSION_MARKER = 'version="'
_XML_DECLARATION = "<?xml"
_SNIPPET_LENGTH = 100


class FlexParseError(Exception):
    """Raised when a FLEX XML document cannot be understood."""

    def __init__(self, message: str, location: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        if self.location is None:
            return f"XML parse error: {self.message}"
        return f"XML parse error at {self.location}: {self.message}"


class FlexSchemaVersion(Enum):
    """FLEX schema versions this package recognises."""

    V3 = "3"
    UNKNOWN = "unknown"


class StatementType(Enum):
    """Kinds of FLEX statement."""

    ACTIVITY = "activity"
    TRADE_CONFIRMATION = "trade_confirmation"


def detect_version(xml: str) -> FlexSchemaVersion:
    """Return the schema version named by the first ``version`` attribute.

    A document without a (terminated) version attribute is taken to be V3.
    """
    start = xml.find(_VERSION_MARKER)
    if start != -1:
        value_start = start + len(_VERSION_MARKER)
        value_end = xml.find('"', value_start)
        if value_end != -1:
            value = xml[value_start:value_end]
            return FlexSchemaVersion.V3 if value == "3" else FlexSchemaVersion.UNKNOWN
    return FlexSchemaVersion.V3


def _strip_prefix_repeatedly(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def detect_statement_type(xml: str) -> StatementType:
    """Return the statement type implied by the document's root element.

    Raises FlexParseError when the root element is not one of the known ones.
    """
    body = _strip_prefix_repeatedly(xml.lstrip(), _XML_DECLARATION).lstrip()
    lt = body.find("<")
    body = body[lt:] if lt != -1 else ""

    if body.startswith("<FlexQueryResponse"):
        return StatementType.ACTIVITY
    if body.startswith("<TradeConfirmationStatement"):
        return StatementType.TRADE_CONFIRMATION
    if body.startswith("<FlexStatement"):
        return StatementType.ACTIVITY
    raise FlexParseError(
        "Cannot detect statement type from XML root element: "
        + body[:_SNIPPET_LENGTH]
    )