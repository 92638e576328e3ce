"""
Notebook documents (LSP 3.17).

Every type here belongs to the proposed surface.
"""

from enum import Enum, unique
from typing import List, Optional, Union

from attrs import frozen

from .basic import (
    LSPObject,
    TextDocumentIdentifier,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)
from .document_sync import TextDocumentContentChangeEvent
from .schema import since
from .uri import URI

__all__ = [
    "NotebookCellKind",
    "ExecutionSummary",
    "NotebookCell",
    "NotebookDocument",
    "NotebookDocumentSyncClientCapabilities",
    "NotebookDocumentClientCapabilities",
    "NotebookDocumentFilterByType",
    "NotebookDocumentFilterByScheme",
    "NotebookDocumentFilterByPattern",
    "NotebookDocumentFilter",
    "Notebook",
    "NotebookCellSelector",
    "NotebookSelectorByNotebook",
    "NotebookSelectorByCells",
    "NotebookSelector",
    "NotebookCellTextDocumentFilter",
    "NotebookDocumentSyncOptions",
    "NotebookDocumentSyncRegistrationOptions",
    "NotebookDocumentIdentifier",
    "VersionedNotebookDocumentIdentifier",
    "NotebookCellArrayChange",
    "NotebookDocumentCellChangeStructure",
    "NotebookDocumentChangeTextContent",
    "NotebookDocumentCellChange",
    "NotebookDocumentChangeEvent",
    "DidOpenNotebookDocumentParams",
    "DidChangeNotebookDocumentParams",
    "DidSaveNotebookDocumentParams",
    "DidCloseNotebookDocumentParams",
]


@since("3.17.0")
@unique
class NotebookCellKind(Enum):
    MARKUP = 1
    CODE = 2


@since("3.17.0")
@frozen
class ExecutionSummary:
    executionOrder: int
    success: Optional[bool] = None


@since("3.17.0")
@frozen
class NotebookCell:
    kind: NotebookCellKind
    document: URI
    """
    URI of the text document holding the cell content
    """

    metadata: Optional[LSPObject] = None
    executionSummary: Optional[ExecutionSummary] = None


@since("3.17.0")
@frozen
class NotebookDocument:
    uri: URI
    notebookType: str
    version: int
    cells: List[NotebookCell]
    metadata: Optional[LSPObject] = None


@since("3.17.0")
@frozen
class NotebookDocumentSyncClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    executionSummarySupport: Optional[bool] = None


@since("3.17.0")
@frozen
class NotebookDocumentClientCapabilities:
    synchronization: NotebookDocumentSyncClientCapabilities


@since("3.17.0")
@frozen
class NotebookDocumentFilterByType:
    notebookType: str
    scheme: Optional[str] = None
    pattern: Optional[str] = None


@since("3.17.0")
@frozen
class NotebookDocumentFilterByScheme:
    scheme: str
    notebookType: Optional[str] = None
    pattern: Optional[str] = None


@since("3.17.0")
@frozen
class NotebookDocumentFilterByPattern:
    pattern: str
    notebookType: Optional[str] = None
    scheme: Optional[str] = None


NotebookDocumentFilter = Union[
    NotebookDocumentFilterByType,
    NotebookDocumentFilterByScheme,
    NotebookDocumentFilterByPattern,
]

Notebook = Union[str, NotebookDocumentFilter]
"""
A notebook type name, or a filter matching notebook documents
"""


@since("3.17.0")
@frozen
class NotebookCellSelector:
    language: str


@since("3.17.0")
@frozen
class NotebookSelectorByNotebook:
    notebook: Notebook
    cells: Optional[List[NotebookCellSelector]] = None


@since("3.17.0")
@frozen
class NotebookSelectorByCells:
    cells: List[NotebookCellSelector]
    notebook: Optional[Notebook] = None


NotebookSelector = Union[NotebookSelectorByNotebook, NotebookSelectorByCells]


@since("3.17.0")
@frozen
class NotebookCellTextDocumentFilter:
    notebook: Notebook
    language: Optional[str] = None


@since("3.17.0")
@frozen
class NotebookDocumentSyncOptions:
    notebookSelector: List[NotebookSelector]
    save: Optional[bool] = None


@since("3.17.0")
@frozen
class NotebookDocumentSyncRegistrationOptions:
    notebookSelector: List[NotebookSelector]
    save: Optional[bool] = None
    id: Optional[str] = None


@since("3.17.0")
@frozen
class NotebookDocumentIdentifier:
    uri: URI


@since("3.17.0")
@frozen
class VersionedNotebookDocumentIdentifier:
    version: int
    uri: URI


@since("3.17.0")
@frozen
class NotebookCellArrayChange:
    start: int
    deleteCount: int
    cells: Optional[List[NotebookCell]] = None


@since("3.17.0")
@frozen
class NotebookDocumentCellChangeStructure:
    array: NotebookCellArrayChange
    didOpen: Optional[List[TextDocumentItem]] = None
    didClose: Optional[List[TextDocumentIdentifier]] = None


@since("3.17.0")
@frozen
class NotebookDocumentChangeTextContent:
    document: VersionedTextDocumentIdentifier
    changes: List[TextDocumentContentChangeEvent]


@since("3.17.0")
@frozen
class NotebookDocumentCellChange:
    structure: Optional[NotebookDocumentCellChangeStructure] = None
    data: Optional[List[NotebookCell]] = None
    textContent: Optional[List[NotebookDocumentChangeTextContent]] = None


@since("3.17.0")
@frozen
class NotebookDocumentChangeEvent:
    metadata: Optional[LSPObject] = None
    cells: Optional[NotebookDocumentCellChange] = None


@since("3.17.0")
@frozen
class DidOpenNotebookDocumentParams:
    notebookDocument: NotebookDocument
    cellTextDocuments: List[TextDocumentItem]


@since("3.17.0")
@frozen
class DidChangeNotebookDocumentParams:
    notebookDocument: VersionedNotebookDocumentIdentifier
    change: NotebookDocumentChangeEvent


@since("3.17.0")
@frozen
class DidSaveNotebookDocumentParams:
    notebookDocument: NotebookDocumentIdentifier


@since("3.17.0")
@frozen
class DidCloseNotebookDocumentParams:
    notebookDocument: NotebookDocumentIdentifier
    cellTextDocuments: List[TextDocumentIdentifier]
