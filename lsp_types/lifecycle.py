from enum import Enum, unique
from typing import List, Optional

from attrs import Factory, frozen

from .basic import LSPAny, ProgressToken
from .capabilities import ClientCapabilities, ServerCapabilities
from .messages import TraceValue
from .schema import since, since_field
from .uri import DocumentUri
from .workspace import WorkspaceFolder

__all__ = [
    "ClientInfo",
    "InitializeParams",
    "ServerInfo",
    "InitializeResult",
    "InitializeErrorCodes",
    "InitializeError",
    "InitializedParams",
    "Registration",
    "RegistrationParams",
    "Unregistration",
    "UnregistrationParams",
]


@since("3.15.0")
@frozen
class ClientInfo:
    name: str
    version: Optional[str] = None


@frozen(kw_only=True)
class InitializeParams:
    processId: Optional[int]
    """
    Process id of the parent process that started the server, ``None`` when
    it was not started by another process
    """

    rootUri: Optional[DocumentUri]
    capabilities: ClientCapabilities = Factory(ClientCapabilities)
    clientInfo: Optional[ClientInfo] = since_field("3.15.0")
    locale: Optional[str] = since_field("3.16.0")
    rootPath: Optional[str] = None
    """
    Deprecated in favour of ``rootUri``
    """

    initializationOptions: LSPAny = None
    trace: Optional[TraceValue] = None
    workspaceFolders: Optional[List[WorkspaceFolder]] = since_field("3.6.0")
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")


@since("3.15.0")
@frozen
class ServerInfo:
    name: str
    version: Optional[str] = None


@frozen
class InitializeResult:
    capabilities: ServerCapabilities
    serverInfo: Optional[ServerInfo] = since_field("3.15.0")


@unique
class InitializeErrorCodes(Enum):
    UNKNOWN_PROTOCOL_VERSION = 1


@frozen
class InitializeError:
    retry: bool
    """
    Whether the client retries the initialize request after showing the error
    message of the response to the user
    """


@frozen
class InitializedParams:
    pass


@frozen
class Registration:
    id: str
    method: str
    registerOptions: LSPAny = None


@frozen
class RegistrationParams:
    registrations: List[Registration]


@frozen
class Unregistration:
    id: str
    method: str


@frozen
class UnregistrationParams:
    # the misspelling is part of the published protocol
    unregisterations: List[Unregistration]
