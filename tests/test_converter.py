"""Tests for decoding and encoding of protocol records.

Covers:
- the decode/encode scenario of a Range
- located error reporting
- strict primitives
- omission of unset optionals and required nullable fields
- untagged unions and tagged resource operations
"""

import pytest

from lsp_types import SchemaMismatch, decode, encode
from lsp_types.basic import (
    CreateFile,
    DeleteFile,
    Diagnostic,
    DiagnosticSeverity,
    LanguageString,
    Location,
    LocationLink,
    MarkupContent,
    MarkupKind,
    OptionalVersionedTextDocumentIdentifier,
    Position,
    Range,
    RenameFile,
    TextDocumentEdit,
    TextEdit,
    WorkspaceEdit,
)
from lsp_types.capabilities import ClientCapabilities, ServerCapabilities
from lsp_types.completion import CompletionItem, InsertReplaceEdit
from lsp_types.document_sync import (
    PublishDiagnosticsParams,
    TextDocumentSyncKind,
    TextDocumentSyncOptions,
)
from lsp_types.language_features import DocumentSymbol, Hover, SymbolKind
from lsp_types.lifecycle import InitializeParams, Unregistration, UnregistrationParams
from lsp_types.messages import (
    ErrorCodes,
    ResponseError,
    ResponseMessage,
    WorkDoneProgressBegin,
)
from lsp_types.requests import DOCUMENT_SYMBOL
from lsp_types.rename import PrepareRenameDefaultBehavior, RangeWithPlaceholder

RANGE = {"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 5}}


def range_(start, end):
    return {
        "start": {"line": start[0], "character": start[1]},
        "end": {"line": end[0], "character": end[1]},
    }


# ---------------------------------------------------------------------------
# Decode / encode
# ---------------------------------------------------------------------------


def test_range_decodes_and_encodes_back():
    r = decode(RANGE, Range)
    assert r == Range(start=Position(0, 0), end=Position(0, 5))
    assert encode(r) == RANGE


def test_missing_field_is_located():
    with pytest.raises(SchemaMismatch) as excinfo:
        decode({"start": {"line": 0, "character": 0}}, Range)
    assert excinfo.value.target == "Range"
    assert "required field missing @ $.end" in excinfo.value.errors


def test_every_error_is_reported():
    with pytest.raises(SchemaMismatch) as excinfo:
        decode({"start": {"line": "0"}, "end": {"line": 1, "character": True}}, Range)
    errors = excinfo.value.errors
    assert "expected int, got str @ $.start.line" in errors
    assert "required field missing @ $.start.character" in errors
    assert "expected int, got bool @ $.end.character" in errors


def test_schema_mismatch_is_a_value_error():
    with pytest.raises(ValueError):
        decode([], Range)


def test_list_errors_carry_the_index():
    data = {"uri": "file:///a.c", "diagnostics": [{"range": RANGE, "message": "ok"}, {"range": RANGE}]}
    with pytest.raises(SchemaMismatch) as excinfo:
        decode(data, PublishDiagnosticsParams)
    assert excinfo.value.errors == ["required field missing @ $.diagnostics[1].message"]


@pytest.mark.parametrize(
    "value",
    ["1", 1.5, True, None, [1]],
)
def test_primitives_are_not_coerced(value):
    with pytest.raises(SchemaMismatch):
        decode({"line": value, "character": 0}, Position)


def test_unknown_keys_are_ignored():
    data = {**RANGE, "somethingNew": {"nested": [1, 2]}}
    assert decode(data, Range) == decode(RANGE, Range)


def test_closed_enum_rejects_unknown_value():
    with pytest.raises(SchemaMismatch) as excinfo:
        decode({"range": RANGE, "message": "m", "severity": 7}, Diagnostic)
    assert "unrecognized DiagnosticSeverity value 7 @ $.severity" in excinfo.value.errors


def test_severity_ordering():
    assert DiagnosticSeverity.ERROR < DiagnosticSeverity.WARNING < DiagnosticSeverity.HINT


# ---------------------------------------------------------------------------
# Omission
# ---------------------------------------------------------------------------


def test_unset_optionals_are_omitted():
    d = Diagnostic(range=decode(RANGE, Range), message="unused variable")
    assert encode(d) == {"range": RANGE, "message": "unused variable"}


def test_set_optionals_are_encoded():
    d = Diagnostic(
        range=decode(RANGE, Range),
        message="m",
        severity=DiagnosticSeverity.WARNING,
        code="W1",
        source="clang-tidy",
    )
    assert encode(d) == {
        "range": RANGE,
        "message": "m",
        "severity": 2,
        "code": "W1",
        "source": "clang-tidy",
    }


def test_required_nullable_fields_are_encoded_as_null():
    params = InitializeParams(processId=None, rootUri=None)
    assert encode(params) == {"processId": None, "rootUri": None, "capabilities": {}}
    assert decode(encode(params), InitializeParams) == params


def test_required_nullable_field_must_be_present():
    with pytest.raises(SchemaMismatch) as excinfo:
        decode({"rootUri": None, "capabilities": {}}, InitializeParams)
    assert "required field missing @ $.processId" in excinfo.value.errors


def test_optional_version_is_null_not_absent():
    ident = OptionalVersionedTextDocumentIdentifier(uri="file:///a.c", version=None)
    assert encode(ident) == {"uri": "file:///a.c", "version": None}


def test_empty_capabilities_encode_to_empty_object():
    assert encode(ClientCapabilities()) == {}
    assert encode(ServerCapabilities()) == {}


def test_unregistration_params_keep_the_published_name():
    params = UnregistrationParams([Unregistration(id="1", method="textDocument/hover")])
    assert encode(params) == {
        "unregisterations": [{"id": "1", "method": "textDocument/hover"}]
    }


# ---------------------------------------------------------------------------
# Unions
# ---------------------------------------------------------------------------


def test_completion_text_edit_variants():
    edit = {"range": range_((1, 0), (1, 3)), "newText": "foo"}
    insert_replace = {
        "newText": "foo",
        "insert": range_((1, 0), (1, 2)),
        "replace": range_((1, 0), (1, 3)),
    }
    item = decode({"label": "foo", "textEdit": edit}, CompletionItem)
    assert isinstance(item.textEdit, TextEdit)
    item = decode({"label": "foo", "textEdit": insert_replace}, CompletionItem)
    assert isinstance(item.textEdit, InsertReplaceEdit)
    assert encode(item)["textEdit"] == insert_replace


@pytest.mark.parametrize(
    "contents, expected",
    [
        ("plain", "plain"),
        (
            {"kind": "markdown", "value": "*x*"},
            MarkupContent(kind=MarkupKind.MARKDOWN, value="*x*"),
        ),
        ({"language": "c", "value": "int x;"}, LanguageString("c", "int x;")),
        (["a", {"language": "c", "value": "b"}], ["a", LanguageString("c", "b")]),
    ],
)
def test_hover_contents_variants(contents, expected):
    assert decode({"contents": contents}, Hover).contents == expected


def test_resource_operations_are_told_apart_by_kind():
    data = {
        "documentChanges": [
            {"kind": "create", "uri": "file:///new.c"},
            {"kind": "rename", "oldUri": "file:///a.c", "newUri": "file:///b.c"},
            {"kind": "delete", "uri": "file:///old.c"},
            {
                "textDocument": {"uri": "file:///b.c", "version": 3},
                "edits": [{"range": RANGE, "newText": ""}],
            },
        ]
    }
    edit = decode(data, WorkspaceEdit)
    assert [type(change) for change in edit.documentChanges] == [
        CreateFile,
        RenameFile,
        DeleteFile,
        TextDocumentEdit,
    ]
    assert encode(edit) == data


def test_resource_operation_kind_is_always_encoded():
    assert encode(CreateFile(uri="file:///a.c")) == {"kind": "create", "uri": "file:///a.c"}


def test_wrong_kind_literal_is_rejected():
    with pytest.raises(SchemaMismatch):
        decode({"kind": "delete", "uri": "file:///a.c"}, CreateFile)


@pytest.mark.parametrize(
    "data, cls",
    [
        ({"uri": "file:///a.c"}, CreateFile),
        ({"oldUri": "file:///a.c", "newUri": "file:///b.c"}, RenameFile),
        ({"title": "Indexing"}, WorkDoneProgressBegin),
    ],
)
def test_missing_kind_is_rejected(data, cls):
    with pytest.raises(SchemaMismatch) as excinfo:
        decode(data, cls)
    assert excinfo.value.errors == ["required field missing @ $.kind"]


def test_kindless_resource_operation_matches_nothing():
    with pytest.raises(SchemaMismatch) as excinfo:
        decode({"documentChanges": [{"uri": "file:///a.c"}]}, WorkspaceEdit)
    assert len(excinfo.value.errors) == 1
    assert excinfo.value.errors[0].endswith("@ $.documentChanges[0]")


@pytest.mark.parametrize(
    "data, expected_type",
    [
        (RANGE, Range),
        ({"range": RANGE, "placeholder": "x"}, RangeWithPlaceholder),
        ({"defaultBehavior": True}, PrepareRenameDefaultBehavior),
    ],
)
def test_prepare_rename_response_variants(data, expected_type):
    from lsp_types.rename import PrepareRenameResponse

    assert isinstance(decode(data, PrepareRenameResponse), expected_type)


def test_goto_definition_response_variants():
    from lsp_types.language_features import GotoDefinitionResponse

    location = {"uri": "file:///a.c", "range": RANGE}
    link = {"targetUri": "file:///a.c", "targetRange": RANGE, "targetSelectionRange": RANGE}
    assert isinstance(decode(location, GotoDefinitionResponse), Location)
    assert isinstance(decode([link], GotoDefinitionResponse)[0], LocationLink)
    assert decode([], GotoDefinitionResponse) == []


def test_text_document_sync_accepts_kind_or_options():
    caps = decode({"textDocumentSync": 2}, ServerCapabilities)
    assert caps.textDocumentSync is TextDocumentSyncKind.INCREMENTAL
    caps = decode({"textDocumentSync": {"openClose": True, "save": True}}, ServerCapabilities)
    assert caps.textDocumentSync == TextDocumentSyncOptions(openClose=True, save=True)


def test_union_with_no_matching_member():
    with pytest.raises(SchemaMismatch) as excinfo:
        decode({"hoverProvider": "yes"}, ServerCapabilities)
    assert any(error.endswith("@ $.hoverProvider") for error in excinfo.value.errors)


def test_recursive_document_symbols():
    child = {
        "name": "method",
        "kind": 6,
        "range": RANGE,
        "selectionRange": RANGE,
    }
    data = {**child, "name": "Class", "kind": 5, "children": [child]}
    symbol = decode(data, DocumentSymbol)
    assert symbol.kind is SymbolKind.CLASS
    assert symbol.children[0].kind is SymbolKind.METHOD
    assert encode(symbol) == data


def test_hierarchical_document_symbol_result():
    leaf = {"name": "x", "kind": 13, "range": RANGE, "selectionRange": RANGE}
    data = [{**leaf, "name": "f", "kind": 12, "children": [{**leaf, "children": []}]}]
    symbols = DOCUMENT_SYMBOL.decode_result(data)
    assert isinstance(symbols[0], DocumentSymbol)
    assert symbols[0].children[0].children == []
    assert DOCUMENT_SYMBOL.encode_result(symbols) == data


# ---------------------------------------------------------------------------
# Response messages
# ---------------------------------------------------------------------------


def test_response_with_null_result_keeps_result():
    assert encode(ResponseMessage(id=1)) == {"jsonrpc": "2.0", "id": 1, "result": None}


def test_response_with_error_has_no_result():
    response = ResponseMessage(
        id="a", error=ResponseError(code=ErrorCodes.METHOD_NOT_FOUND, message="nope")
    )
    assert encode(response) == {
        "jsonrpc": "2.0",
        "id": "a",
        "error": {"code": -32601, "message": "nope"},
    }
    assert decode(encode(response), ResponseMessage) == response
