from enum import Enum, unique
from typing import List, Optional, Union

from attrs import frozen

from .basic import GenericCapability, LSPAny, WorkDoneProgressOptions
from .code_lens import (
    CodeLensClientCapabilities,
    CodeLensOptions,
    CodeLensWorkspaceClientCapabilities,
)
from .completion import CompletionClientCapabilities, CompletionOptions
from .document_highlight import (
    DocumentHighlightClientCapabilities,
    DocumentHighlightOptions,
)
from .document_sync import (
    PublishDiagnosticsClientCapabilities,
    TextDocumentSyncClientCapabilities,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
)
from .language_features import (
    CodeActionClientCapabilities,
    CodeActionOptions,
    DocumentLinkClientCapabilities,
    DocumentLinkOptions,
    DocumentOnTypeFormattingOptions,
    DocumentSymbolClientCapabilities,
    DocumentSymbolOptions,
    GotoCapability,
    HoverClientCapabilities,
    HoverOptions,
    SignatureHelpClientCapabilities,
    SignatureHelpOptions,
    WorkspaceSymbolClientCapabilities,
)
from .notebook import (
    NotebookDocumentClientCapabilities,
    NotebookDocumentSyncOptions,
    NotebookDocumentSyncRegistrationOptions,
)
from .on_type_rename import OnTypeRenameClientCapabilities, OnTypeRenameServerCapabilities
from .rename import RenameClientCapabilities, RenameOptions
from .schema import Open, since, since_field
from .semantic_highlighting import (
    SemanticHighlightingClientCapability,
    SemanticHighlightingServerCapability,
)
from .window import WindowClientCapabilities
from .workspace import (
    DidChangeConfigurationClientCapabilities,
    DidChangeWatchedFilesClientCapabilities,
    ExecuteCommandClientCapabilities,
    ExecuteCommandOptions,
    WorkspaceEditClientCapabilities,
    WorkspaceServerCapabilities,
)

__all__ = [
    "PositionEncodingKind",
    "TextDocumentClientCapabilities",
    "WorkspaceClientCapabilities",
    "RegularExpressionsClientCapabilities",
    "MarkdownClientCapabilities",
    "GeneralClientCapabilities",
    "ClientCapabilities",
    "ServerCapabilities",
]


@since("3.17.0")
@unique
class PositionEncodingKind(Enum):
    UTF8 = "utf-8"
    UTF16 = "utf-16"
    """
    The default, and the only encoding every server must support
    """

    UTF32 = "utf-32"


@frozen
class TextDocumentClientCapabilities:
    synchronization: Optional[TextDocumentSyncClientCapabilities] = None
    completion: Optional[CompletionClientCapabilities] = None
    hover: Optional[HoverClientCapabilities] = None
    signatureHelp: Optional[SignatureHelpClientCapabilities] = None
    declaration: Optional[GotoCapability] = since_field("3.14.0")
    definition: Optional[GotoCapability] = None
    typeDefinition: Optional[GotoCapability] = None
    implementation: Optional[GotoCapability] = None
    references: Optional[GenericCapability] = None
    documentHighlight: Optional[DocumentHighlightClientCapabilities] = None
    documentSymbol: Optional[DocumentSymbolClientCapabilities] = None
    codeAction: Optional[CodeActionClientCapabilities] = None
    codeLens: Optional[CodeLensClientCapabilities] = None
    documentLink: Optional[DocumentLinkClientCapabilities] = None
    formatting: Optional[GenericCapability] = None
    rangeFormatting: Optional[GenericCapability] = None
    onTypeFormatting: Optional[GenericCapability] = None
    rename: Optional[RenameClientCapabilities] = None
    publishDiagnostics: Optional[PublishDiagnosticsClientCapabilities] = None
    semanticHighlightingCapabilities: Optional[SemanticHighlightingClientCapability] = None
    onTypeRename: Optional[OnTypeRenameClientCapabilities] = since_field(
        "3.16.0", proposed=True
    )


@frozen
class WorkspaceClientCapabilities:
    applyEdit: Optional[bool] = None
    workspaceEdit: Optional[WorkspaceEditClientCapabilities] = None
    didChangeConfiguration: Optional[DidChangeConfigurationClientCapabilities] = None
    didChangeWatchedFiles: Optional[DidChangeWatchedFilesClientCapabilities] = None
    symbol: Optional[WorkspaceSymbolClientCapabilities] = None
    executeCommand: Optional[ExecuteCommandClientCapabilities] = None
    workspaceFolders: Optional[bool] = since_field("3.6.0")
    configuration: Optional[bool] = since_field("3.6.0")
    codeLens: Optional[CodeLensWorkspaceClientCapabilities] = since_field("3.16.0")


@since("3.16.0")
@frozen
class RegularExpressionsClientCapabilities:
    engine: str
    version: Optional[str] = None


@since("3.16.0")
@frozen
class MarkdownClientCapabilities:
    parser: str
    version: Optional[str] = None


@since("3.16.0")
@frozen
class GeneralClientCapabilities:
    regularExpressions: Optional[RegularExpressionsClientCapabilities] = None
    markdown: Optional[MarkdownClientCapabilities] = None
    positionEncodings: Optional[List[Open[PositionEncodingKind]]] = since_field(
        "3.17.0"
    )
    """
    Position encodings the client supports, in decreasing order of preference
    """


@frozen
class ClientCapabilities:
    workspace: Optional[WorkspaceClientCapabilities] = None
    textDocument: Optional[TextDocumentClientCapabilities] = None
    window: Optional[WindowClientCapabilities] = None
    general: Optional[GeneralClientCapabilities] = since_field("3.16.0")
    notebookDocument: Optional[NotebookDocumentClientCapabilities] = since_field(
        "3.17.0"
    )
    experimental: LSPAny = None


@frozen
class ServerCapabilities:
    positionEncoding: Optional[Open[PositionEncodingKind]] = since_field("3.17.0")
    textDocumentSync: Optional[Union[TextDocumentSyncOptions, TextDocumentSyncKind]] = None
    notebookDocumentSync: Optional[
        Union[NotebookDocumentSyncOptions, NotebookDocumentSyncRegistrationOptions]
    ] = since_field("3.17.0")
    completionProvider: Optional[CompletionOptions] = None
    hoverProvider: Optional[Union[bool, HoverOptions]] = None
    signatureHelpProvider: Optional[SignatureHelpOptions] = None
    declarationProvider: Optional[Union[bool, WorkDoneProgressOptions]] = since_field(
        "3.14.0"
    )
    definitionProvider: Optional[Union[bool, WorkDoneProgressOptions]] = None
    typeDefinitionProvider: Optional[Union[bool, WorkDoneProgressOptions]] = None
    implementationProvider: Optional[Union[bool, WorkDoneProgressOptions]] = None
    referencesProvider: Optional[Union[bool, WorkDoneProgressOptions]] = None
    documentHighlightProvider: Optional[Union[bool, DocumentHighlightOptions]] = None
    documentSymbolProvider: Optional[Union[bool, DocumentSymbolOptions]] = None
    workspaceSymbolProvider: Optional[Union[bool, WorkDoneProgressOptions]] = None
    codeActionProvider: Optional[Union[bool, CodeActionOptions]] = None
    codeLensProvider: Optional[CodeLensOptions] = None
    documentFormattingProvider: Optional[Union[bool, WorkDoneProgressOptions]] = None
    documentRangeFormattingProvider: Optional[Union[bool, WorkDoneProgressOptions]] = None
    documentOnTypeFormattingProvider: Optional[DocumentOnTypeFormattingOptions] = None
    renameProvider: Optional[Union[bool, RenameOptions]] = None
    documentLinkProvider: Optional[DocumentLinkOptions] = None
    executeCommandProvider: Optional[ExecuteCommandOptions] = None
    workspace: Optional[WorkspaceServerCapabilities] = None
    semanticHighlighting: Optional[SemanticHighlightingServerCapability] = None
    onTypeRenameProvider: Optional[OnTypeRenameServerCapabilities] = since_field(
        "3.16.0", proposed=True
    )
    experimental: LSPAny = None
