from enum import Enum, unique
from typing import List, Optional, Union

from attrs import frozen

from .basic import (
    Command,
    Diagnostic,
    Documentation,
    LSPAny,
    Location,
    LocationLink,
    MarkedString,
    MarkupContent,
    MarkupKind,
    ProgressToken,
    Range,
    TextDocumentIdentifier,
    TextDocumentPositionParams,
    WorkDoneProgressParams,
    WorkspaceEdit,
)
from .schema import Open, since, since_field
from .uri import DocumentUri

__all__ = [
    "HoverParams",
    "Hover",
    "HoverClientCapabilities",
    "HoverOptions",
    "SignatureHelpTriggerKind",
    "ParameterInformation",
    "SignatureInformation",
    "SignatureHelp",
    "SignatureHelpContext",
    "SignatureHelpParams",
    "SignatureHelpOptions",
    "ParameterInformationCapability",
    "SignatureInformationCapability",
    "SignatureHelpClientCapabilities",
    "DefinitionParams",
    "TypeDefinitionParams",
    "ImplementationParams",
    "GotoDefinitionResponse",
    "GotoTypeDefinitionResponse",
    "GotoImplementationResponse",
    "GotoCapability",
    "ReferenceContext",
    "ReferenceParams",
    "SymbolKind",
    "SymbolTag",
    "DocumentSymbol",
    "SymbolInformation",
    "DocumentSymbolParams",
    "DocumentSymbolResponse",
    "DocumentSymbolOptions",
    "SymbolKindCapability",
    "SymbolTagSupport",
    "DocumentSymbolClientCapabilities",
    "WorkspaceSymbolParams",
    "WorkspaceSymbolClientCapabilities",
    "CodeActionKind",
    "CodeActionContext",
    "CodeActionParams",
    "CodeActionDisabled",
    "CodeAction",
    "CodeActionResponse",
    "CodeActionOptions",
    "CodeActionKindLiteralSupport",
    "CodeActionLiteralSupport",
    "CodeActionResolveSupport",
    "CodeActionClientCapabilities",
    "DocumentLinkParams",
    "DocumentLink",
    "DocumentLinkOptions",
    "DocumentLinkClientCapabilities",
    "FormattingOptions",
    "DocumentFormattingParams",
    "DocumentRangeFormattingParams",
    "DocumentOnTypeFormattingParams",
    "DocumentOnTypeFormattingOptions",
]


@frozen(kw_only=True)
class HoverParams(TextDocumentPositionParams):
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")


@frozen
class Hover:
    contents: Union[MarkupContent, MarkedString, List[MarkedString]]
    range: Optional[Range] = None


@frozen
class HoverClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    contentFormat: Optional[List[MarkupKind]] = None


@frozen
class HoverOptions:
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@since("3.15.0")
@unique
class SignatureHelpTriggerKind(Enum):
    INVOKED = 1
    TRIGGER_CHARACTER = 2
    CONTENT_CHANGE = 3


@frozen
class ParameterInformation:
    label: Union[str, List[int]]
    """
    The parameter label, or an inclusive start and exclusive end offset
    into the signature label
    """

    documentation: Optional[Documentation] = None


@frozen
class SignatureInformation:
    label: str
    documentation: Optional[Documentation] = None
    parameters: Optional[List[ParameterInformation]] = None
    activeParameter: Optional[int] = since_field("3.16.0")


@frozen
class SignatureHelp:
    signatures: List[SignatureInformation]
    activeSignature: Optional[int] = None
    activeParameter: Optional[int] = None


@since("3.15.0")
@frozen
class SignatureHelpContext:
    triggerKind: SignatureHelpTriggerKind
    isRetrigger: bool
    triggerCharacter: Optional[str] = None
    activeSignatureHelp: Optional[SignatureHelp] = None


@frozen(kw_only=True)
class SignatureHelpParams(TextDocumentPositionParams):
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")
    context: Optional[SignatureHelpContext] = since_field("3.15.0")


@frozen
class SignatureHelpOptions:
    triggerCharacters: Optional[List[str]] = None
    retriggerCharacters: Optional[List[str]] = since_field("3.15.0")
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@frozen
class ParameterInformationCapability:
    labelOffsetSupport: Optional[bool] = None


@frozen
class SignatureInformationCapability:
    documentationFormat: Optional[List[MarkupKind]] = None
    parameterInformation: Optional[ParameterInformationCapability] = None
    activeParameterSupport: Optional[bool] = since_field("3.16.0")


@frozen
class SignatureHelpClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    signatureInformation: Optional[SignatureInformationCapability] = None
    contextSupport: Optional[bool] = since_field("3.15.0")


@frozen(kw_only=True)
class DefinitionParams(TextDocumentPositionParams):
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


@frozen(kw_only=True)
class TypeDefinitionParams(DefinitionParams):
    pass


@frozen(kw_only=True)
class ImplementationParams(DefinitionParams):
    pass


GotoDefinitionResponse = Union[Location, List[Location], List[LocationLink]]
GotoTypeDefinitionResponse = GotoDefinitionResponse
GotoImplementationResponse = GotoDefinitionResponse


@frozen
class GotoCapability:
    dynamicRegistration: Optional[bool] = None
    linkSupport: Optional[bool] = since_field("3.14.0")


@frozen
class ReferenceContext:
    includeDeclaration: bool


@frozen(kw_only=True)
class ReferenceParams(TextDocumentPositionParams):
    context: ReferenceContext
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


@unique
class SymbolKind(Enum):
    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26


@since("3.16.0")
@unique
class SymbolTag(Enum):
    DEPRECATED = 1


@frozen
class DocumentSymbol:
    name: str
    kind: Open[SymbolKind]
    range: Range
    selectionRange: Range
    detail: Optional[str] = None
    tags: Optional[List[Open[SymbolTag]]] = since_field("3.16.0")
    deprecated: Optional[bool] = None
    children: Optional[List["DocumentSymbol"]] = None


@frozen
class SymbolInformation:
    name: str
    kind: Open[SymbolKind]
    location: Location
    tags: Optional[List[Open[SymbolTag]]] = since_field("3.16.0")
    deprecated: Optional[bool] = None
    containerName: Optional[str] = None


@frozen(kw_only=True)
class DocumentSymbolParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


DocumentSymbolResponse = Union[List[DocumentSymbol], List[SymbolInformation]]


@frozen
class DocumentSymbolOptions:
    label: Optional[str] = since_field("3.16.0")
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@frozen
class SymbolKindCapability:
    valueSet: Optional[List[Open[SymbolKind]]] = None


@since("3.16.0")
@frozen
class SymbolTagSupport:
    valueSet: List[Open[SymbolTag]]


@frozen
class DocumentSymbolClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    symbolKind: Optional[SymbolKindCapability] = None
    hierarchicalDocumentSymbolSupport: Optional[bool] = None
    tagSupport: Optional[SymbolTagSupport] = since_field("3.16.0")
    labelSupport: Optional[bool] = since_field("3.16.0")


@frozen(kw_only=True)
class WorkspaceSymbolParams(WorkDoneProgressParams):
    query: str
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


@frozen
class WorkspaceSymbolClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    symbolKind: Optional[SymbolKindCapability] = None
    tagSupport: Optional[SymbolTagSupport] = since_field("3.16.0")


@unique
class CodeActionKind(Enum):
    EMPTY = ""
    QUICK_FIX = "quickfix"
    REFACTOR = "refactor"
    REFACTOR_EXTRACT = "refactor.extract"
    REFACTOR_INLINE = "refactor.inline"
    REFACTOR_REWRITE = "refactor.rewrite"
    SOURCE = "source"
    SOURCE_ORGANIZE_IMPORTS = "source.organizeImports"
    SOURCE_FIX_ALL = "source.fixAll"


@frozen
class CodeActionContext:
    diagnostics: List[Diagnostic]
    only: Optional[List[Open[CodeActionKind]]] = None


@frozen(kw_only=True)
class CodeActionParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    range: Range
    context: CodeActionContext
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


@since("3.16.0")
@frozen
class CodeActionDisabled:
    reason: str


@frozen
class CodeAction:
    title: str
    kind: Optional[Open[CodeActionKind]] = None
    diagnostics: Optional[List[Diagnostic]] = None
    isPreferred: Optional[bool] = since_field("3.15.0")
    disabled: Optional[CodeActionDisabled] = since_field("3.16.0")
    edit: Optional[WorkspaceEdit] = None
    command: Optional[Command] = None
    data: LSPAny = since_field("3.16.0")


CodeActionResponse = List[Union[Command, CodeAction]]


@frozen
class CodeActionOptions:
    codeActionKinds: Optional[List[Open[CodeActionKind]]] = None
    resolveProvider: Optional[bool] = since_field("3.16.0")
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@frozen
class CodeActionKindLiteralSupport:
    valueSet: List[Open[CodeActionKind]]


@frozen
class CodeActionLiteralSupport:
    codeActionKind: CodeActionKindLiteralSupport


@since("3.16.0")
@frozen
class CodeActionResolveSupport:
    properties: List[str]


@frozen
class CodeActionClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    codeActionLiteralSupport: Optional[CodeActionLiteralSupport] = None
    isPreferredSupport: Optional[bool] = since_field("3.15.0")
    disabledSupport: Optional[bool] = since_field("3.16.0")
    dataSupport: Optional[bool] = since_field("3.16.0")
    resolveSupport: Optional[CodeActionResolveSupport] = since_field("3.16.0")
    honorsChangeAnnotations: Optional[bool] = since_field("3.16.0")


@frozen(kw_only=True)
class DocumentLinkParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


@frozen
class DocumentLink:
    range: Range
    target: Optional[DocumentUri] = None
    tooltip: Optional[str] = since_field("3.15.0")
    data: LSPAny = None


@frozen
class DocumentLinkOptions:
    resolveProvider: Optional[bool] = None
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@frozen
class DocumentLinkClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    tooltipSupport: Optional[bool] = since_field("3.15.0")


@frozen
class FormattingOptions:
    tabSize: int
    insertSpaces: bool
    trimTrailingWhitespace: Optional[bool] = since_field("3.15.0")
    insertFinalNewline: Optional[bool] = since_field("3.15.0")
    trimFinalNewlines: Optional[bool] = since_field("3.15.0")


@frozen(kw_only=True)
class DocumentFormattingParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    options: FormattingOptions


@frozen(kw_only=True)
class DocumentRangeFormattingParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    range: Range
    options: FormattingOptions


@frozen(kw_only=True)
class DocumentOnTypeFormattingParams(TextDocumentPositionParams):
    ch: str
    options: FormattingOptions


@frozen
class DocumentOnTypeFormattingOptions:
    firstTriggerCharacter: str
    moreTriggerCharacter: Optional[List[str]] = None
