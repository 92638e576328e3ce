from enum import Enum, unique
from typing import Any, Dict, Literal, Optional, Union

from attrs import field, frozen

from .basic import LSPAny, ProgressToken
from .converter import converter
from .schema import Open, members_since, since, stable_member

__all__ = [
    "Message",
    "RequestId",
    "RequestMessage",
    "ErrorCodes",
    "ResponseError",
    "ResponseMessage",
    "NotificationMessage",
    "CancelParams",
    "ProgressParams",
    "WorkDoneProgressBegin",
    "WorkDoneProgressReport",
    "WorkDoneProgressEnd",
    "WorkDoneProgressCreateParams",
    "WorkDoneProgressCancelParams",
    "TraceValue",
    "SetTraceParams",
    "LogTraceParams",
]


RequestId = Union[int, str]


@frozen
class Message:
    jsonrpc: str = "2.0"


@frozen(kw_only=True)
class RequestMessage(Message):
    id: RequestId
    method: str
    params: LSPAny = None


@members_since(
    REQUEST_FAILED="3.17.0",
    SERVER_CANCELLED="3.17.0",
)
@unique
class ErrorCodes(Enum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    SERVER_NOT_INITIALIZED = -32002
    UNKNOWN_ERROR_CODE = -32001
    REQUEST_FAILED = -32803
    SERVER_CANCELLED = -32802
    CONTENT_MODIFIED = -32801
    REQUEST_CANCELLED = -32800


@frozen
class ResponseError:
    code: Open[ErrorCodes] = field(validator=stable_member)
    message: str
    data: LSPAny = None


@frozen(kw_only=True)
class ResponseMessage(Message):
    id: Optional[RequestId]
    result: LSPAny = None
    error: Optional[ResponseError] = None


@converter.register_unstructure_hook
def response_message_unstructure_hook(obj: ResponseMessage) -> Dict[str, Any]:
    # a response carries either a result, possibly null, or an error
    content: Dict[str, Any] = {"jsonrpc": obj.jsonrpc, "id": obj.id}
    if obj.error is None:
        content["result"] = converter.unstructure(obj.result)
    else:
        content["error"] = converter.unstructure(obj.error)
    return content


@frozen(kw_only=True)
class NotificationMessage(Message):
    method: str
    params: LSPAny = None


@frozen
class CancelParams:
    id: RequestId


@since("3.15.0")
@frozen
class ProgressParams:
    token: ProgressToken
    value: LSPAny


@since("3.15.0")
@frozen
class WorkDoneProgressBegin:
    title: str
    cancellable: Optional[bool] = None
    message: Optional[str] = None
    percentage: Optional[int] = None
    kind: Literal["begin"] = "begin"


@since("3.15.0")
@frozen
class WorkDoneProgressReport:
    cancellable: Optional[bool] = None
    message: Optional[str] = None
    percentage: Optional[int] = None
    kind: Literal["report"] = "report"


@since("3.15.0")
@frozen
class WorkDoneProgressEnd:
    message: Optional[str] = None
    kind: Literal["end"] = "end"


@since("3.15.0")
@frozen
class WorkDoneProgressCreateParams:
    token: ProgressToken


@since("3.15.0")
@frozen
class WorkDoneProgressCancelParams:
    token: ProgressToken


@unique
class TraceValue(Enum):
    OFF = "off"
    MESSAGES = "messages"
    VERBOSE = "verbose"


@since("3.16.0")
@frozen
class SetTraceParams:
    value: TraceValue


@since("3.16.0")
@frozen
class LogTraceParams:
    message: str
    verbose: Optional[str] = None
