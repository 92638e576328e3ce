"""
Requests of the protocol, by method name.

Each :class:`RequestType` pairs a method with the types of its params and
result::

    >>> from lsp_types.requests import lsp_request
    >>> hover = lsp_request("textDocument/hover")
    >>> params = hover.decode_params(data)
    >>> message = hover.request(1, params)
"""

from typing import Any, Dict, List, Optional

from attrs import frozen

from .basic import LSPAny, Location, TextEdit, WorkspaceEdit
from .code_lens import CodeLens, CodeLensParams
from .completion import CompletionItem, CompletionParams, CompletionResponse
from .converter import decode, encode, type_name
from .document_highlight import DocumentHighlight, DocumentHighlightParams
from .document_sync import WillSaveTextDocumentParams
from .errors import ProposedFeatureDisabled, SchemaMismatch, UnknownName
from .features import proposed_enabled
from .language_features import (
    CodeAction,
    CodeActionParams,
    CodeActionResponse,
    DefinitionParams,
    DocumentFormattingParams,
    DocumentLink,
    DocumentLinkParams,
    DocumentOnTypeFormattingParams,
    DocumentRangeFormattingParams,
    DocumentSymbolParams,
    DocumentSymbolResponse,
    GotoDefinitionResponse,
    GotoImplementationResponse,
    GotoTypeDefinitionResponse,
    Hover,
    HoverParams,
    ImplementationParams,
    ReferenceParams,
    SignatureHelp,
    SignatureHelpParams,
    SymbolInformation,
    TypeDefinitionParams,
    WorkspaceSymbolParams,
)
from .lifecycle import (
    InitializeParams,
    InitializeResult,
    RegistrationParams,
    UnregistrationParams,
)
from .messages import RequestId, RequestMessage, WorkDoneProgressCreateParams
from .on_type_rename import OnTypeRenameParams, OnTypeRenameRanges
from .rename import PrepareRenameParams, PrepareRenameResponse, RenameParams
from .schema import SpecVersion, parse_version
from .window import (
    MessageActionItem,
    ShowDocumentParams,
    ShowDocumentResult,
    ShowMessageRequestParams,
)
from .workspace import (
    ApplyWorkspaceEditParams,
    ApplyWorkspaceEditResponse,
    ConfigurationParams,
    ExecuteCommandParams,
    WorkspaceFolder,
)

__all__ = [
    "MethodType",
    "RequestType",
    "REQUESTS",
    "lsp_request",
]


@frozen
class MethodType:
    method: str
    params: Any
    """
    Type of the params, ``None`` for methods without params
    """

    since: Optional[str] = None
    proposed: bool = False

    def available_in(self, version: SpecVersion) -> bool:
        return self.since is None or parse_version(self.since) <= version.ceiling

    def check_enabled(self) -> None:
        if self.proposed and not proposed_enabled():
            raise ProposedFeatureDisabled(self.method)

    def decode_params(self, data: Any, version: Optional[SpecVersion] = None) -> Any:
        self.check_enabled()
        if self.params is None:
            if data is not None:
                raise SchemaMismatch(f"{self.method} takes no params", target=self.method)
            return None
        return decode(data, self.params, version)

    def encode_params(self, params: Any) -> Any:
        if self.params is None:
            return None
        return encode(params, self.params)

    def describe(self) -> str:
        params = "-" if self.params is None else type_name(self.params)
        return f"{self.method}({params})"


@frozen
class RequestType(MethodType):
    result: Any = None
    """
    Type of the result, ``None`` for requests answered with ``null``
    """

    def decode_result(self, data: Any, version: Optional[SpecVersion] = None) -> Any:
        self.check_enabled()
        if self.result is None:
            if data is not None:
                raise SchemaMismatch(f"{self.method} has no result", target=self.method)
            return None
        return decode(data, self.result, version)

    def encode_result(self, result: Any) -> Any:
        if self.result is None:
            return None
        return encode(result, self.result)

    def request(self, id: RequestId, params: Any = None) -> RequestMessage:
        self.check_enabled()
        return RequestMessage(
            id=id, method=self.method, params=self.encode_params(params)
        )

    def describe(self) -> str:
        result = "null" if self.result is None else type_name(self.result)
        return f"{super().describe()} -> {result}"


INITIALIZE = RequestType("initialize", InitializeParams, result=InitializeResult)
SHUTDOWN = RequestType("shutdown", None)
SHOW_MESSAGE_REQUEST = RequestType(
    "window/showMessageRequest",
    ShowMessageRequestParams,
    result=Optional[MessageActionItem],
)
SHOW_DOCUMENT = RequestType(
    "window/showDocument", ShowDocumentParams, "3.16.0", result=ShowDocumentResult
)
WORK_DONE_PROGRESS_CREATE = RequestType(
    "window/workDoneProgress/create", WorkDoneProgressCreateParams, "3.15.0"
)
REGISTER_CAPABILITY = RequestType("client/registerCapability", RegistrationParams)
UNREGISTER_CAPABILITY = RequestType("client/unregisterCapability", UnregistrationParams)
WORKSPACE_FOLDERS = RequestType(
    "workspace/workspaceFolders",
    None,
    "3.6.0",
    result=Optional[List[WorkspaceFolder]],
)
WORKSPACE_CONFIGURATION = RequestType(
    "workspace/configuration", ConfigurationParams, "3.6.0", result=List[LSPAny]
)
WORKSPACE_SYMBOL = RequestType(
    "workspace/symbol",
    WorkspaceSymbolParams,
    result=Optional[List[SymbolInformation]],
)
EXECUTE_COMMAND = RequestType(
    "workspace/executeCommand", ExecuteCommandParams, result=LSPAny
)
APPLY_WORKSPACE_EDIT = RequestType(
    "workspace/applyEdit", ApplyWorkspaceEditParams, result=ApplyWorkspaceEditResponse
)
CODE_LENS_REFRESH = RequestType("workspace/codeLens/refresh", None, "3.16.0")
WILL_SAVE_WAIT_UNTIL = RequestType(
    "textDocument/willSaveWaitUntil",
    WillSaveTextDocumentParams,
    result=Optional[List[TextEdit]],
)
COMPLETION = RequestType(
    "textDocument/completion", CompletionParams, result=Optional[CompletionResponse]
)
RESOLVE_COMPLETION_ITEM = RequestType(
    "completionItem/resolve", CompletionItem, result=CompletionItem
)
HOVER = RequestType("textDocument/hover", HoverParams, result=Optional[Hover])
SIGNATURE_HELP = RequestType(
    "textDocument/signatureHelp", SignatureHelpParams, result=Optional[SignatureHelp]
)
GOTO_DECLARATION = RequestType(
    "textDocument/declaration",
    DefinitionParams,
    "3.14.0",
    result=Optional[GotoDefinitionResponse],
)
GOTO_DEFINITION = RequestType(
    "textDocument/definition", DefinitionParams, result=Optional[GotoDefinitionResponse]
)
GOTO_TYPE_DEFINITION = RequestType(
    "textDocument/typeDefinition",
    TypeDefinitionParams,
    result=Optional[GotoTypeDefinitionResponse],
)
GOTO_IMPLEMENTATION = RequestType(
    "textDocument/implementation",
    ImplementationParams,
    result=Optional[GotoImplementationResponse],
)
REFERENCES = RequestType(
    "textDocument/references", ReferenceParams, result=Optional[List[Location]]
)
DOCUMENT_HIGHLIGHT = RequestType(
    "textDocument/documentHighlight",
    DocumentHighlightParams,
    result=Optional[List[DocumentHighlight]],
)
DOCUMENT_SYMBOL = RequestType(
    "textDocument/documentSymbol",
    DocumentSymbolParams,
    result=Optional[DocumentSymbolResponse],
)
CODE_ACTION = RequestType(
    "textDocument/codeAction", CodeActionParams, result=Optional[CodeActionResponse]
)
CODE_ACTION_RESOLVE = RequestType(
    "codeAction/resolve", CodeAction, "3.16.0", result=CodeAction
)
CODE_LENS = RequestType(
    "textDocument/codeLens", CodeLensParams, result=Optional[List[CodeLens]]
)
CODE_LENS_RESOLVE = RequestType("codeLens/resolve", CodeLens, result=CodeLens)
DOCUMENT_LINK = RequestType(
    "textDocument/documentLink", DocumentLinkParams, result=Optional[List[DocumentLink]]
)
DOCUMENT_LINK_RESOLVE = RequestType(
    "documentLink/resolve", DocumentLink, result=DocumentLink
)
FORMATTING = RequestType(
    "textDocument/formatting",
    DocumentFormattingParams,
    result=Optional[List[TextEdit]],
)
RANGE_FORMATTING = RequestType(
    "textDocument/rangeFormatting",
    DocumentRangeFormattingParams,
    result=Optional[List[TextEdit]],
)
ON_TYPE_FORMATTING = RequestType(
    "textDocument/onTypeFormatting",
    DocumentOnTypeFormattingParams,
    result=Optional[List[TextEdit]],
)
RENAME = RequestType("textDocument/rename", RenameParams, result=Optional[WorkspaceEdit])
PREPARE_RENAME = RequestType(
    "textDocument/prepareRename",
    PrepareRenameParams,
    "3.12.0",
    result=Optional[PrepareRenameResponse],
)
ON_TYPE_RENAME = RequestType(
    "textDocument/onTypeRename",
    OnTypeRenameParams,
    "3.16.0",
    proposed=True,
    result=Optional[OnTypeRenameRanges],
)


REQUESTS: Dict[str, RequestType] = {
    request.method: request
    for request in (
        INITIALIZE,
        SHUTDOWN,
        SHOW_MESSAGE_REQUEST,
        SHOW_DOCUMENT,
        WORK_DONE_PROGRESS_CREATE,
        REGISTER_CAPABILITY,
        UNREGISTER_CAPABILITY,
        WORKSPACE_FOLDERS,
        WORKSPACE_CONFIGURATION,
        WORKSPACE_SYMBOL,
        EXECUTE_COMMAND,
        APPLY_WORKSPACE_EDIT,
        CODE_LENS_REFRESH,
        WILL_SAVE_WAIT_UNTIL,
        COMPLETION,
        RESOLVE_COMPLETION_ITEM,
        HOVER,
        SIGNATURE_HELP,
        GOTO_DECLARATION,
        GOTO_DEFINITION,
        GOTO_TYPE_DEFINITION,
        GOTO_IMPLEMENTATION,
        REFERENCES,
        DOCUMENT_HIGHLIGHT,
        DOCUMENT_SYMBOL,
        CODE_ACTION,
        CODE_ACTION_RESOLVE,
        CODE_LENS,
        CODE_LENS_RESOLVE,
        DOCUMENT_LINK,
        DOCUMENT_LINK_RESOLVE,
        FORMATTING,
        RANGE_FORMATTING,
        ON_TYPE_FORMATTING,
        RENAME,
        PREPARE_RENAME,
        ON_TYPE_RENAME,
    )
}


def lsp_request(method: str) -> RequestType:
    try:
        request = REQUESTS[method]
    except KeyError:
        raise UnknownName("request", method) from None
    request.check_enabled()
    return request
