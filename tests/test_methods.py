"""Tests for the request and notification registries and the type catalog."""

import pytest

from lsp_types import (
    NOTIFICATIONS,
    REQUESTS,
    ProposedFeatureDisabled,
    SchemaMismatch,
    SpecVersion,
    UnknownName,
    encode,
    lsp_notification,
    lsp_request,
)
from lsp_types.basic import Position, Range, TextDocumentIdentifier
from lsp_types.catalog import find_type, protocol_types
from lsp_types.completion import CompletionItem, CompletionList
from lsp_types.document_sync import TextDocumentSaveReason, WillSaveTextDocumentParams
from lsp_types.language_features import HoverParams
from lsp_types.lifecycle import InitializeParams
from lsp_types.messages import RequestMessage
from lsp_types.notebook import NotebookDocument
from lsp_types.window import LogMessageParams, MessageType

HOVER_PARAMS = {
    "textDocument": {"uri": "file:///a.c"},
    "position": {"line": 3, "character": 7},
}


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


def test_lookup_request():
    hover = lsp_request("textDocument/hover")
    assert hover.params is HoverParams
    params = hover.decode_params(HOVER_PARAMS)
    assert params == HoverParams(
        textDocument=TextDocumentIdentifier("file:///a.c"), position=Position(3, 7)
    )


def test_build_request_message():
    hover = lsp_request("textDocument/hover")
    message = hover.request(1, hover.decode_params(HOVER_PARAMS))
    assert isinstance(message, RequestMessage)
    assert encode(message) == {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "textDocument/hover",
        "params": HOVER_PARAMS,
    }


def test_request_without_params():
    shutdown = lsp_request("shutdown")
    assert shutdown.decode_params(None) is None
    assert shutdown.decode_result(None) is None
    assert encode(shutdown.request(7)) == {"jsonrpc": "2.0", "id": 7, "method": "shutdown"}
    with pytest.raises(SchemaMismatch):
        shutdown.decode_params({})


def test_completion_result_variants():
    completion = lsp_request("textDocument/completion")
    items = completion.decode_result([{"label": "a"}, {"label": "b"}])
    assert items == [CompletionItem(label="a"), CompletionItem(label="b")]
    result = completion.decode_result({"isIncomplete": True, "items": [{"label": "a"}]})
    assert result == CompletionList(isIncomplete=True, items=[CompletionItem(label="a")])
    assert completion.decode_result(None) is None


def test_will_save_wait_until_is_a_request():
    request = lsp_request("textDocument/willSaveWaitUntil")
    params = request.decode_params(
        {"textDocument": {"uri": "file:///a.c"}, "reason": 1}
    )
    assert params == WillSaveTextDocumentParams(
        TextDocumentIdentifier("file:///a.c"), TextDocumentSaveReason.MANUAL
    )
    assert request.decode_result([]) == []


def test_initialize_describes_its_types():
    assert REQUESTS["initialize"].params is InitializeParams
    assert lsp_request("initialize").describe() == (
        "initialize(InitializeParams) -> InitializeResult"
    )
    assert lsp_request("textDocument/hover").describe() == (
        "textDocument/hover(HoverParams) -> Union[Hover, NoneType]"
    )


def test_unknown_request():
    with pytest.raises(UnknownName) as excinfo:
        lsp_request("textDocument/teleport")
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.name == "textDocument/teleport"


def test_proposed_request_needs_the_flag():
    with pytest.raises(ProposedFeatureDisabled):
        lsp_request("textDocument/onTypeRename")


def test_proposed_request_with_flag(proposed):
    request = lsp_request("textDocument/onTypeRename")
    ranges = request.decode_result({"ranges": [{"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 1}}]})
    assert ranges.ranges == [Range(Position(0, 0), Position(0, 1))]


def test_method_availability_by_version():
    show_document = lsp_request("window/showDocument")
    assert not show_document.available_in(SpecVersion.V3_13)
    assert show_document.available_in(SpecVersion.V3_16)
    assert lsp_request("textDocument/prepareRename").available_in(SpecVersion.V3_13)


def test_method_names_match_registry_keys():
    for method, request in REQUESTS.items():
        assert request.method == method
    for method, notification in NOTIFICATIONS.items():
        assert notification.method == method
    assert not set(REQUESTS) & set(NOTIFICATIONS)


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


def test_build_notification_message():
    log = lsp_notification("window/logMessage")
    message = log.notification(LogMessageParams(MessageType.INFO, "indexing"))
    assert encode(message) == {
        "jsonrpc": "2.0",
        "method": "window/logMessage",
        "params": {"type": 3, "message": "indexing"},
    }


def test_exit_has_no_params():
    exit_ = lsp_notification("exit")
    assert encode(exit_.notification()) == {"jsonrpc": "2.0", "method": "exit"}


def test_will_save_carries_params():
    params = lsp_notification("textDocument/willSave").decode_params(
        {"textDocument": {"uri": "file:///a.c"}, "reason": 3}
    )
    assert params.reason is TextDocumentSaveReason.FOCUS_OUT


def test_telemetry_accepts_anything():
    assert lsp_notification("telemetry/event").decode_params({"any": [1, "thing"]}) == {
        "any": [1, "thing"]
    }


def test_unknown_notification():
    with pytest.raises(UnknownName):
        lsp_notification("textDocument/didTeleport")


def test_notebook_notifications_need_the_flag():
    with pytest.raises(ProposedFeatureDisabled):
        lsp_notification("notebookDocument/didOpen")


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def test_find_type():
    assert find_type("Range") is Range
    assert find_type("MessageType") is MessageType
    assert find_type("NotebookDocument") is NotebookDocument


def test_aliases_are_not_listed():
    types = protocol_types()
    assert "GenericCapability" not in types
    assert "DynamicRegistrationClientCapabilities" in types
    assert list(types) == sorted(types)


def test_unknown_type():
    with pytest.raises(UnknownName):
        find_type("Rnage")
