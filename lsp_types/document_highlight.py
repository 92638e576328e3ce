from enum import Enum, unique
from typing import Optional

from attrs import frozen

from .basic import (
    DynamicRegistrationClientCapabilities,
    ProgressToken,
    Range,
    TextDocumentPositionParams,
)
from .schema import since_field

__all__ = [
    "DocumentHighlightClientCapabilities",
    "DocumentHighlightParams",
    "DocumentHighlightKind",
    "DocumentHighlight",
    "DocumentHighlightOptions",
]


DocumentHighlightClientCapabilities = DynamicRegistrationClientCapabilities


@frozen(kw_only=True)
class DocumentHighlightParams(TextDocumentPositionParams):
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


@unique
class DocumentHighlightKind(Enum):
    TEXT = 1
    READ = 2
    WRITE = 3


@frozen
class DocumentHighlight:
    range: Range
    kind: Optional[DocumentHighlightKind] = None


@frozen
class DocumentHighlightOptions:
    workDoneProgress: Optional[bool] = since_field("3.15.0")
