from enum import Enum, IntFlag, unique
from typing import List, Optional, Union

from attrs import frozen

from .basic import LSPAny, WorkDoneProgressParams, WorkspaceEdit
from .schema import Open, since, since_field
from .uri import URI, DocumentUri

__all__ = [
    "WorkspaceFolder",
    "WorkspaceFoldersChangeEvent",
    "DidChangeWorkspaceFoldersParams",
    "WorkspaceFoldersServerCapabilities",
    "WorkspaceServerCapabilities",
    "DidChangeConfigurationParams",
    "DidChangeConfigurationClientCapabilities",
    "ConfigurationItem",
    "ConfigurationParams",
    "FileChangeType",
    "FileEvent",
    "DidChangeWatchedFilesParams",
    "WatchKind",
    "FileSystemWatcher",
    "DidChangeWatchedFilesRegistrationOptions",
    "DidChangeWatchedFilesClientCapabilities",
    "ExecuteCommandParams",
    "ExecuteCommandOptions",
    "ExecuteCommandRegistrationOptions",
    "ExecuteCommandClientCapabilities",
    "ApplyWorkspaceEditParams",
    "ApplyWorkspaceEditResponse",
    "ResourceOperationKind",
    "FailureHandlingKind",
    "ChangeAnnotationSupport",
    "WorkspaceEditClientCapabilities",
]


@since("3.6.0")
@frozen
class WorkspaceFolder:
    uri: URI
    name: str


@frozen
class WorkspaceFoldersChangeEvent:
    added: List[WorkspaceFolder]
    removed: List[WorkspaceFolder]


@frozen
class DidChangeWorkspaceFoldersParams:
    event: WorkspaceFoldersChangeEvent


@frozen
class WorkspaceFoldersServerCapabilities:
    supported: Optional[bool] = None
    changeNotifications: Optional[Union[bool, str]] = None
    """
    Either a registration id to unregister the notification with, or whether
    the server wants folder change notifications at all
    """


@frozen
class WorkspaceServerCapabilities:
    workspaceFolders: Optional[WorkspaceFoldersServerCapabilities] = None


@frozen
class DidChangeConfigurationParams:
    settings: LSPAny


@frozen
class DidChangeConfigurationClientCapabilities:
    dynamicRegistration: Optional[bool] = None


@frozen
class ConfigurationItem:
    scopeUri: Optional[DocumentUri] = None
    section: Optional[str] = None


@frozen
class ConfigurationParams:
    items: List[ConfigurationItem]


@unique
class FileChangeType(Enum):
    CREATED = 1
    CHANGED = 2
    DELETED = 3


@frozen
class FileEvent:
    uri: DocumentUri
    type: FileChangeType


@frozen
class DidChangeWatchedFilesParams:
    changes: List[FileEvent]


class WatchKind(IntFlag):
    CREATE = 1
    CHANGE = 2
    DELETE = 4


@frozen
class FileSystemWatcher:
    globPattern: str
    kind: Optional[int] = None
    """
    Bitwise combination of :class:`WatchKind` values, all of them when unset
    """


@frozen
class DidChangeWatchedFilesRegistrationOptions:
    watchers: List[FileSystemWatcher]


@frozen
class DidChangeWatchedFilesClientCapabilities:
    dynamicRegistration: Optional[bool] = None


@frozen(kw_only=True)
class ExecuteCommandParams(WorkDoneProgressParams):
    command: str
    arguments: Optional[List[LSPAny]] = None


@frozen
class ExecuteCommandOptions:
    commands: List[str]
    workDoneProgress: Optional[bool] = since_field("3.15.0")


ExecuteCommandRegistrationOptions = ExecuteCommandOptions


@frozen
class ExecuteCommandClientCapabilities:
    dynamicRegistration: Optional[bool] = None


@frozen
class ApplyWorkspaceEditParams:
    edit: WorkspaceEdit
    label: Optional[str] = None


@frozen
class ApplyWorkspaceEditResponse:
    applied: bool
    failureReason: Optional[str] = since_field("3.16.0")
    failedChange: Optional[int] = since_field("3.16.0")
    """
    Index of the change in ``documentChanges`` that failed
    """


@unique
class ResourceOperationKind(Enum):
    CREATE = "create"
    RENAME = "rename"
    DELETE = "delete"


@unique
class FailureHandlingKind(Enum):
    ABORT = "abort"
    TRANSACTIONAL = "transactional"
    TEXT_ONLY_TRANSACTIONAL = "textOnlyTransactional"
    UNDO = "undo"


@since("3.16.0")
@frozen
class ChangeAnnotationSupport:
    groupsOnLabel: Optional[bool] = None


@frozen
class WorkspaceEditClientCapabilities:
    documentChanges: Optional[bool] = None
    resourceOperations: Optional[List[Open[ResourceOperationKind]]] = since_field(
        "3.13.0"
    )
    failureHandling: Optional[Open[FailureHandlingKind]] = since_field("3.13.0")
    normalizesLineEndings: Optional[bool] = since_field("3.16.0")
    changeAnnotationSupport: Optional[ChangeAnnotationSupport] = since_field("3.16.0")
