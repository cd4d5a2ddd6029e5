"""Shared constants for mailman."""

from enum import Enum


class CardName(str, Enum):
    """Names of the input cards used to build a merge template."""

    TITLE = "title"
    SHEET = "sheet"
    ROW = "row"
    TO = "to"
    SUBJECT = "subject"
    DOCUMENT_SELECTOR = "documentSelector"
    CONDITIONAL = "conditional"
    SEND_NOW = "sendNow"


# mergeData.type written by the document flow
DOCUMENT_TYPE = "document"

KNOWN_TEMPLATE_TYPES = {DOCUMENT_TYPE, "email"}
