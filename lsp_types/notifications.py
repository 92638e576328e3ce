from typing import Any, Dict

from attrs import frozen

from .basic import LSPAny
from .document_sync import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    PublishDiagnosticsParams,
    WillSaveTextDocumentParams,
)
from .errors import UnknownName
from .lifecycle import InitializedParams
from .messages import (
    CancelParams,
    LogTraceParams,
    NotificationMessage,
    ProgressParams,
    SetTraceParams,
    WorkDoneProgressCancelParams,
)
from .notebook import (
    DidChangeNotebookDocumentParams,
    DidCloseNotebookDocumentParams,
    DidOpenNotebookDocumentParams,
    DidSaveNotebookDocumentParams,
)
from .requests import MethodType
from .semantic_highlighting import SemanticHighlightingParams
from .window import LogMessageParams, ShowMessageParams
from .workspace import (
    DidChangeConfigurationParams,
    DidChangeWatchedFilesParams,
    DidChangeWorkspaceFoldersParams,
)

__all__ = [
    "NotificationType",
    "NOTIFICATIONS",
    "lsp_notification",
]


@frozen
class NotificationType(MethodType):
    def notification(self, params: Any = None) -> NotificationMessage:
        self.check_enabled()
        return NotificationMessage(method=self.method, params=self.encode_params(params))


CANCEL = NotificationType("$/cancelRequest", CancelParams)
PROGRESS = NotificationType("$/progress", ProgressParams, "3.15.0")
SET_TRACE = NotificationType("$/setTrace", SetTraceParams, "3.16.0")
LOG_TRACE = NotificationType("$/logTrace", LogTraceParams, "3.16.0")
INITIALIZED = NotificationType("initialized", InitializedParams)
EXIT = NotificationType("exit", None)
SHOW_MESSAGE = NotificationType("window/showMessage", ShowMessageParams)
LOG_MESSAGE = NotificationType("window/logMessage", LogMessageParams)
WORK_DONE_PROGRESS_CANCEL = NotificationType(
    "window/workDoneProgress/cancel", WorkDoneProgressCancelParams, "3.15.0"
)
TELEMETRY_EVENT = NotificationType("telemetry/event", LSPAny)
DID_CHANGE_CONFIGURATION = NotificationType(
    "workspace/didChangeConfiguration", DidChangeConfigurationParams
)
DID_CHANGE_WORKSPACE_FOLDERS = NotificationType(
    "workspace/didChangeWorkspaceFolders", DidChangeWorkspaceFoldersParams, "3.6.0"
)
DID_CHANGE_WATCHED_FILES = NotificationType(
    "workspace/didChangeWatchedFiles", DidChangeWatchedFilesParams
)
DID_OPEN_TEXT_DOCUMENT = NotificationType("textDocument/didOpen", DidOpenTextDocumentParams)
DID_CHANGE_TEXT_DOCUMENT = NotificationType(
    "textDocument/didChange", DidChangeTextDocumentParams
)
WILL_SAVE_TEXT_DOCUMENT = NotificationType(
    "textDocument/willSave", WillSaveTextDocumentParams
)
DID_SAVE_TEXT_DOCUMENT = NotificationType("textDocument/didSave", DidSaveTextDocumentParams)
DID_CLOSE_TEXT_DOCUMENT = NotificationType(
    "textDocument/didClose", DidCloseTextDocumentParams
)
PUBLISH_DIAGNOSTICS = NotificationType(
    "textDocument/publishDiagnostics", PublishDiagnosticsParams
)
SEMANTIC_HIGHLIGHTING = NotificationType(
    "textDocument/semanticHighlighting", SemanticHighlightingParams
)
DID_OPEN_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didOpen", DidOpenNotebookDocumentParams, "3.17.0", proposed=True
)
DID_CHANGE_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didChange", DidChangeNotebookDocumentParams, "3.17.0", proposed=True
)
DID_SAVE_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didSave", DidSaveNotebookDocumentParams, "3.17.0", proposed=True
)
DID_CLOSE_NOTEBOOK_DOCUMENT = NotificationType(
    "notebookDocument/didClose", DidCloseNotebookDocumentParams, "3.17.0", proposed=True
)


NOTIFICATIONS: Dict[str, NotificationType] = {
    notification.method: notification
    for notification in (
        CANCEL,
        PROGRESS,
        SET_TRACE,
        LOG_TRACE,
        INITIALIZED,
        EXIT,
        SHOW_MESSAGE,
        LOG_MESSAGE,
        WORK_DONE_PROGRESS_CANCEL,
        TELEMETRY_EVENT,
        DID_CHANGE_CONFIGURATION,
        DID_CHANGE_WORKSPACE_FOLDERS,
        DID_CHANGE_WATCHED_FILES,
        DID_OPEN_TEXT_DOCUMENT,
        DID_CHANGE_TEXT_DOCUMENT,
        WILL_SAVE_TEXT_DOCUMENT,
        DID_SAVE_TEXT_DOCUMENT,
        DID_CLOSE_TEXT_DOCUMENT,
        PUBLISH_DIAGNOSTICS,
        SEMANTIC_HIGHLIGHTING,
        DID_OPEN_NOTEBOOK_DOCUMENT,
        DID_CHANGE_NOTEBOOK_DOCUMENT,
        DID_SAVE_NOTEBOOK_DOCUMENT,
        DID_CLOSE_NOTEBOOK_DOCUMENT,
    )
}


def lsp_notification(method: str) -> NotificationType:
    try:
        notification = NOTIFICATIONS[method]
    except KeyError:
        raise UnknownName("notification", method) from None
    notification.check_enabled()
    return notification
