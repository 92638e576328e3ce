from enum import Enum, unique
from typing import Any, List, Optional, Union

from attrs import frozen
from typing_extensions import Self

from .basic import (
    Command,
    Documentation,
    DocumentSelector,
    LSPAny,
    MarkupKind,
    ProgressToken,
    Range,
    TextDocumentPositionParams,
    TextEdit,
)
from .converter import converter
from .errors import SchemaMismatch
from .schema import Open, codec, since, since_field

__all__ = [
    "InsertTextFormat",
    "CompletionItemKind",
    "InsertTextMode",
    "CompletionItemTag",
    "CompletionItemTagSupport",
    "CompletionItemCapabilityResolveSupport",
    "InsertTextModeSupport",
    "CompletionItemCapability",
    "CompletionItemKindCapability",
    "CompletionClientCapabilities",
    "InsertReplaceEdit",
    "CompletionTextEdit",
    "CompletionOptions",
    "CompletionRegistrationOptions",
    "CompletionTriggerKind",
    "CompletionContext",
    "CompletionParams",
    "CompletionItem",
    "CompletionList",
    "CompletionResponse",
]


@unique
class InsertTextFormat(Enum):
    PLAIN_TEXT = 1
    SNIPPET = 2


@unique
class CompletionItemKind(Enum):
    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    INTERFACE = 8
    MODULE = 9
    PROPERTY = 10
    UNIT = 11
    VALUE = 12
    ENUM = 13
    KEYWORD = 14
    SNIPPET = 15
    COLOR = 16
    FILE = 17
    REFERENCE = 18
    FOLDER = 19
    ENUM_MEMBER = 20
    CONSTANT = 21
    STRUCT = 22
    EVENT = 23
    OPERATOR = 24
    TYPE_PARAMETER = 25


@since("3.16.0")
@unique
class InsertTextMode(Enum):
    """
    How whitespace and indentation is handled when a completion item is inserted.
    """

    AS_IS = 1
    """
    The insert text is taken as it is
    """

    ADJUST_INDENTATION = 2
    """
    Leading whitespace of new lines is adjusted to the indentation of the line
    the item is accepted on
    """


@since("3.15.0")
@unique
class CompletionItemTag(Enum):
    DEPRECATED = 1


@since("3.15.0")
@frozen
class CompletionItemTagSupport:
    valueSet: List[Open[CompletionItemTag]]


def _decode_tag_support(val: Any) -> Optional[CompletionItemTagSupport]:
    # clients published before 3.15 send a plain boolean
    if val is None or val is False:
        return None
    if val is True:
        return CompletionItemTagSupport(valueSet=[])
    if not isinstance(val, dict):
        raise SchemaMismatch(f"expected bool or object for tagSupport, got {type(val).__name__}")
    return converter.structure(val, CompletionItemTagSupport)


def _encode_tag_support(value: Optional[CompletionItemTagSupport]) -> Any:
    return converter.unstructure(value)


@since("3.16.0")
@frozen
class CompletionItemCapabilityResolveSupport:
    properties: List[str]


@since("3.16.0")
@frozen
class InsertTextModeSupport:
    valueSet: List[Open[InsertTextMode]]


@frozen
class CompletionItemCapability:
    snippetSupport: Optional[bool] = None
    commitCharactersSupport: Optional[bool] = None
    documentationFormat: Optional[List[MarkupKind]] = None
    deprecatedSupport: Optional[bool] = None
    preselectSupport: Optional[bool] = None
    tagSupport: Optional[CompletionItemTagSupport] = since_field(
        "3.15.0", metadata=codec(_encode_tag_support, _decode_tag_support)
    )
    insertReplaceSupport: Optional[bool] = since_field("3.16.0")
    resolveSupport: Optional[CompletionItemCapabilityResolveSupport] = since_field(
        "3.16.0"
    )
    insertTextModeSupport: Optional[InsertTextModeSupport] = since_field("3.16.0")


@frozen
class CompletionItemKindCapability:
    valueSet: Optional[List[Open[CompletionItemKind]]] = None
    """
    Kinds the client supports. Without it the client only knows ``TEXT``
    through ``REFERENCE``
    """


@frozen
class CompletionClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    completionItem: Optional[CompletionItemCapability] = None
    completionItemKind: Optional[CompletionItemKindCapability] = None
    contextSupport: Optional[bool] = None


@since("3.16.0")
@frozen
class InsertReplaceEdit:
    newText: str
    insert: Range
    replace: Range


CompletionTextEdit = Union[TextEdit, InsertReplaceEdit]


@frozen
class CompletionOptions:
    resolveProvider: Optional[bool] = None
    triggerCharacters: Optional[List[str]] = None
    allCommitCharacters: Optional[List[str]] = since_field("3.2.0")
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@frozen(kw_only=True)
class CompletionRegistrationOptions(CompletionOptions):
    documentSelector: Optional[DocumentSelector]


@unique
class CompletionTriggerKind(Enum):
    INVOKED = 1
    TRIGGER_CHARACTER = 2
    TRIGGER_FOR_INCOMPLETE_COMPLETIONS = 3


@frozen
class CompletionContext:
    triggerKind: CompletionTriggerKind
    triggerCharacter: Optional[str] = None
    """
    Only set when ``triggerKind`` is ``TRIGGER_CHARACTER``
    """


@frozen(kw_only=True)
class CompletionParams(TextDocumentPositionParams):
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")
    context: Optional[CompletionContext] = None


@frozen(kw_only=True)
class CompletionItem:
    label: str
    kind: Optional[Open[CompletionItemKind]] = None
    tags: Optional[List[Open[CompletionItemTag]]] = since_field("3.15.0")
    detail: Optional[str] = None
    documentation: Optional[Documentation] = None
    deprecated: Optional[bool] = None
    preselect: Optional[bool] = None
    sortText: Optional[str] = None
    filterText: Optional[str] = None
    insertText: Optional[str] = None
    insertTextFormat: Optional[InsertTextFormat] = None
    insertTextMode: Optional[InsertTextMode] = since_field("3.16.0")
    textEdit: Optional[CompletionTextEdit] = None
    additionalTextEdits: Optional[List[TextEdit]] = None
    commitCharacters: Optional[List[str]] = None
    command: Optional[Command] = None
    data: LSPAny = None

    @classmethod
    def new_simple(cls, label: str, detail: str) -> Self:
        """
        Create a completion item with only a label and a detail.
        """
        return cls(label=label, detail=detail)


@frozen
class CompletionList:
    isIncomplete: bool
    items: List[CompletionItem]


CompletionResponse = Union[List[CompletionItem], CompletionList]
