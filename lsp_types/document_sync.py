from enum import Enum, unique
from typing import List, Optional, Union

from attrs import frozen

from .basic import (
    Diagnostic,
    DiagnosticTag,
    DocumentSelector,
    Range,
    TextDocumentIdentifier,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)
from .schema import Open, since, since_field
from .uri import DocumentUri

__all__ = [
    "TextDocumentSyncKind",
    "TextDocumentSaveReason",
    "SaveOptions",
    "TextDocumentSyncOptions",
    "TextDocumentSyncClientCapabilities",
    "DidOpenTextDocumentParams",
    "TextDocumentContentChangeEvent",
    "DidChangeTextDocumentParams",
    "TextDocumentChangeRegistrationOptions",
    "WillSaveTextDocumentParams",
    "DidSaveTextDocumentParams",
    "TextDocumentSaveRegistrationOptions",
    "DidCloseTextDocumentParams",
    "DiagnosticTagSupport",
    "PublishDiagnosticsClientCapabilities",
    "PublishDiagnosticsParams",
]


@unique
class TextDocumentSyncKind(Enum):
    NONE = 0
    FULL = 1
    INCREMENTAL = 2


@unique
class TextDocumentSaveReason(Enum):
    MANUAL = 1
    AFTER_DELAY = 2
    FOCUS_OUT = 3


@frozen
class SaveOptions:
    includeText: Optional[bool] = None


@frozen
class TextDocumentSyncOptions:
    openClose: Optional[bool] = None
    change: Optional[TextDocumentSyncKind] = None
    willSave: Optional[bool] = None
    willSaveWaitUntil: Optional[bool] = None
    save: Optional[Union[bool, SaveOptions]] = None


@frozen
class TextDocumentSyncClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    willSave: Optional[bool] = None
    willSaveWaitUntil: Optional[bool] = None
    didSave: Optional[bool] = None


@frozen
class DidOpenTextDocumentParams:
    textDocument: TextDocumentItem


@frozen
class TextDocumentContentChangeEvent:
    """
    A change to a text document.

    Without ``range`` the event replaces the full content of the document.
    """

    text: str
    range: Optional[Range] = None
    rangeLength: Optional[int] = None


@frozen
class DidChangeTextDocumentParams:
    textDocument: VersionedTextDocumentIdentifier
    contentChanges: List[TextDocumentContentChangeEvent]


@frozen
class TextDocumentChangeRegistrationOptions:
    documentSelector: Optional[DocumentSelector]
    syncKind: TextDocumentSyncKind


@frozen
class WillSaveTextDocumentParams:
    textDocument: TextDocumentIdentifier
    reason: TextDocumentSaveReason


@frozen
class DidSaveTextDocumentParams:
    textDocument: TextDocumentIdentifier
    text: Optional[str] = None


@frozen
class TextDocumentSaveRegistrationOptions:
    documentSelector: Optional[DocumentSelector]
    includeText: Optional[bool] = None


@frozen
class DidCloseTextDocumentParams:
    textDocument: TextDocumentIdentifier


@since("3.15.0")
@frozen
class DiagnosticTagSupport:
    valueSet: List[Open[DiagnosticTag]]


@frozen
class PublishDiagnosticsClientCapabilities:
    relatedInformation: Optional[bool] = None
    tagSupport: Optional[DiagnosticTagSupport] = since_field("3.15.0")
    versionSupport: Optional[bool] = since_field("3.15.0")
    codeDescriptionSupport: Optional[bool] = since_field("3.16.0")
    dataSupport: Optional[bool] = since_field("3.16.0")


@frozen
class PublishDiagnosticsParams:
    uri: DocumentUri
    diagnostics: List[Diagnostic]
    version: Optional[int] = since_field("3.15.0")
