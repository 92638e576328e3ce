from enum import Enum, unique
from functools import total_ordering
from typing import Any, Dict, List, Literal, Optional, Union

from attrs import frozen
from typing_extensions import Self

from .schema import Open, since, since_field
from .uri import URI, DocumentUri

__all__ = [
    "LSPAny",
    "LSPObject",
    "ProgressToken",
    "Position",
    "Range",
    "Location",
    "LocationLink",
    "DiagnosticSeverity",
    "DiagnosticTag",
    "CodeDescription",
    "DiagnosticRelatedInformation",
    "Diagnostic",
    "Command",
    "TextEdit",
    "ChangeAnnotation",
    "AnnotatedTextEdit",
    "TextDocumentIdentifier",
    "VersionedTextDocumentIdentifier",
    "OptionalVersionedTextDocumentIdentifier",
    "TextDocumentItem",
    "TextDocumentPositionParams",
    "DocumentFilter",
    "DocumentSelector",
    "MarkupKind",
    "MarkupContent",
    "LanguageString",
    "MarkedString",
    "Documentation",
    "CreateFileOptions",
    "CreateFile",
    "RenameFileOptions",
    "RenameFile",
    "DeleteFileOptions",
    "DeleteFile",
    "TextDocumentEdit",
    "DocumentChange",
    "WorkspaceEdit",
    "WorkDoneProgressParams",
    "WorkDoneProgressOptions",
    "TextDocumentRegistrationOptions",
    "StaticRegistrationOptions",
    "DynamicRegistrationClientCapabilities",
    "GenericCapability",
]


LSPAny = Any
LSPObject = Dict[str, Any]
ProgressToken = Union[int, str]


@frozen
class Position:
    line: int
    """
    Zero-based line number
    """

    character: int
    """
    Zero-based character offset on the line, counted in UTF-16 code units
    unless another position encoding was negotiated
    """


@frozen
class Range:
    start: Position
    end: Position
    """
    Exclusive end position
    """


@frozen
class Location:
    uri: DocumentUri
    range: Range


@since("3.14.0")
@frozen
class LocationLink:
    targetUri: DocumentUri
    targetRange: Range
    targetSelectionRange: Range
    originSelectionRange: Optional[Range] = None


@unique
@total_ordering
class DiagnosticSeverity(Enum):
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4

    def __lt__(self, other: Self) -> bool:
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented


@since("3.15.0")
@unique
class DiagnosticTag(Enum):
    UNNECESSARY = 1
    DEPRECATED = 2


@since("3.16.0")
@frozen
class CodeDescription:
    href: URI


@frozen
class DiagnosticRelatedInformation:
    location: Location
    message: str


@frozen
class Diagnostic:
    range: Range
    message: str
    severity: Optional[DiagnosticSeverity] = None
    code: Optional[Union[int, str]] = None
    codeDescription: Optional[CodeDescription] = since_field("3.16.0")
    source: Optional[str] = None
    tags: Optional[List[Open[DiagnosticTag]]] = since_field("3.15.0")
    relatedInformation: Optional[List[DiagnosticRelatedInformation]] = None
    data: LSPAny = since_field("3.16.0")


@frozen
class Command:
    title: str
    command: str
    arguments: Optional[List[LSPAny]] = None


@frozen
class TextEdit:
    range: Range
    newText: str


@since("3.16.0")
@frozen
class ChangeAnnotation:
    label: str
    needsConfirmation: Optional[bool] = None
    description: Optional[str] = None


@since("3.16.0")
@frozen
class AnnotatedTextEdit:
    range: Range
    newText: str
    annotationId: str


@frozen
class TextDocumentIdentifier:
    uri: DocumentUri


@frozen
class VersionedTextDocumentIdentifier:
    uri: DocumentUri
    version: int


@frozen
class OptionalVersionedTextDocumentIdentifier:
    uri: DocumentUri
    version: Optional[int]
    """
    ``null`` when the client does not track versions of the document
    """


@frozen
class TextDocumentItem:
    uri: DocumentUri
    languageId: str
    version: int
    text: str


@frozen
class TextDocumentPositionParams:
    textDocument: TextDocumentIdentifier
    position: Position


@frozen
class DocumentFilter:
    language: Optional[str] = None
    scheme: Optional[str] = None
    pattern: Optional[str] = None


DocumentSelector = List[DocumentFilter]


@unique
class MarkupKind(Enum):
    PLAIN_TEXT = "plaintext"
    MARKDOWN = "markdown"


@frozen
class MarkupContent:
    kind: MarkupKind
    value: str


@frozen
class LanguageString:
    language: str
    value: str


MarkedString = Union[str, LanguageString]

Documentation = Union[str, MarkupContent]


@frozen
class CreateFileOptions:
    overwrite: Optional[bool] = None
    ignoreIfExists: Optional[bool] = None


@frozen
class CreateFile:
    uri: DocumentUri
    options: Optional[CreateFileOptions] = None
    annotationId: Optional[str] = since_field("3.16.0")
    kind: Literal["create"] = "create"


@frozen
class RenameFileOptions:
    overwrite: Optional[bool] = None
    ignoreIfExists: Optional[bool] = None


@frozen
class RenameFile:
    oldUri: DocumentUri
    newUri: DocumentUri
    options: Optional[RenameFileOptions] = None
    annotationId: Optional[str] = since_field("3.16.0")
    kind: Literal["rename"] = "rename"


@frozen
class DeleteFileOptions:
    recursive: Optional[bool] = None
    ignoreIfNotExists: Optional[bool] = None


@frozen
class DeleteFile:
    uri: DocumentUri
    options: Optional[DeleteFileOptions] = None
    annotationId: Optional[str] = since_field("3.16.0")
    kind: Literal["delete"] = "delete"


@frozen
class TextDocumentEdit:
    textDocument: OptionalVersionedTextDocumentIdentifier
    edits: List[Union[TextEdit, AnnotatedTextEdit]]


DocumentChange = Union[TextDocumentEdit, CreateFile, RenameFile, DeleteFile]


@frozen
class WorkspaceEdit:
    changes: Optional[Dict[DocumentUri, List[TextEdit]]] = None
    documentChanges: Optional[List[DocumentChange]] = None
    changeAnnotations: Optional[Dict[str, ChangeAnnotation]] = since_field("3.16.0")


@frozen
class WorkDoneProgressParams:
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")


@frozen
class WorkDoneProgressOptions:
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@frozen
class TextDocumentRegistrationOptions:
    documentSelector: Optional[DocumentSelector]
    """
    ``null`` selects the document selector provided on the client side
    """


@frozen
class StaticRegistrationOptions:
    id: Optional[str] = None


@frozen
class DynamicRegistrationClientCapabilities:
    dynamicRegistration: Optional[bool] = None


GenericCapability = DynamicRegistrationClientCapabilities
