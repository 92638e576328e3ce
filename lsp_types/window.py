from enum import Enum, unique
from typing import Any, Dict, List, Optional, Union

from attrs import field, fields, frozen

from .basic import Range
from .converter import active_version, converter
from .errors import SchemaMismatch
from .features import proposed_enabled
from .schema import field_available_in, members_since, since, since_field, stable_member
from .uri import URI

__all__ = [
    "MessageType",
    "ShowMessageParams",
    "LogMessageParams",
    "MessageActionItemProperty",
    "MessageActionItem",
    "ShowMessageRequestParams",
    "MessageActionItemCapabilities",
    "ShowMessageRequestClientCapabilities",
    "ShowDocumentClientCapabilities",
    "ShowDocumentParams",
    "ShowDocumentResult",
    "WindowClientCapabilities",
]


@members_since(DEBUG="3.18.0")
@unique
class MessageType(Enum):
    ERROR = 1
    WARNING = 2
    INFO = 3
    LOG = 4
    DEBUG = 5


@frozen
class ShowMessageParams:
    type: MessageType = field(validator=stable_member)
    message: str


@frozen
class LogMessageParams:
    type: MessageType = field(validator=stable_member)
    message: str


MessageActionItemProperty = Union[bool, int, str, Dict[str, Any]]


@frozen
class MessageActionItem:
    title: str
    """
    A short title like 'Retry', 'Open Log' etc.
    """

    properties: Optional[Dict[str, MessageActionItemProperty]] = since_field(
        "3.16.0", proposed=True
    )
    """
    Additional attributes the client preserves and sends back to the server,
    flattened next to ``title`` on the wire
    """


@converter.register_structure_hook
def message_action_item_structure_hook(val: Any, _: type) -> MessageActionItem:
    if not isinstance(val, dict):
        raise SchemaMismatch(f"expected object for MessageActionItem, got {type(val).__name__}")
    if "title" not in val:
        raise SchemaMismatch("required field 'title' missing")
    title = converter.structure(val["title"], str)
    properties = None
    extra = {key: value for key, value in val.items() if key != "title"}
    properties_field = fields(MessageActionItem).properties
    if extra and field_available_in(properties_field, active_version(), proposed_enabled()):
        properties = converter.structure(extra, Dict[str, MessageActionItemProperty])
    return MessageActionItem(title=title, properties=properties)


@converter.register_unstructure_hook
def message_action_item_unstructure_hook(obj: MessageActionItem) -> Dict[str, Any]:
    return {**(obj.properties or {}), "title": obj.title}


@frozen
class ShowMessageRequestParams:
    type: MessageType = field(validator=stable_member)
    message: str
    actions: Optional[List[MessageActionItem]] = None


@since("3.16.0")
@frozen
class MessageActionItemCapabilities:
    additionalPropertiesSupport: Optional[bool] = None


@since("3.16.0")
@frozen
class ShowMessageRequestClientCapabilities:
    messageActionItem: Optional[MessageActionItemCapabilities] = None


@since("3.16.0")
@frozen
class ShowDocumentClientCapabilities:
    support: bool


@since("3.16.0")
@frozen
class ShowDocumentParams:
    uri: URI
    external: Optional[bool] = None
    takeFocus: Optional[bool] = None
    selection: Optional[Range] = None


@since("3.16.0")
@frozen
class ShowDocumentResult:
    success: bool


@frozen
class WindowClientCapabilities:
    workDoneProgress: Optional[bool] = since_field("3.15.0")
    showMessage: Optional[ShowMessageRequestClientCapabilities] = since_field("3.16.0")
    showDocument: Optional[ShowDocumentClientCapabilities] = since_field("3.16.0")
