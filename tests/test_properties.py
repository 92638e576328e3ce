"""Hypothesis property-based tests for the structured-data mapping.

Properties tested:
- Round-trip: decode(encode(x)) == x for generated records
- Omission: encoded data never carries a null for an unset optional field
- Forward compatibility: unknown keys are ignored on decode
- The same laws for every type of the catalog, with the proposed surface
  switched off and on
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Literal, Union, get_args, get_origin

import attrs
import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from lsp_types import SchemaMismatch, SpecVersion, Unknown, decode, encode
from lsp_types.basic import (
    CodeDescription,
    Diagnostic,
    DiagnosticRelatedInformation,
    DiagnosticSeverity,
    DiagnosticTag,
    Location,
    Position,
    Range,
)
from lsp_types.catalog import protocol_types
from lsp_types.converter import default_version
from lsp_types.features import proposed_enabled
from lsp_types.messages import ResponseError, ResponseMessage
from lsp_types.schema import available_in, field_available_in, is_proposed
from lsp_types.window import MessageActionItem, MessageActionItemProperty

# the autouse stable_surface fixture is entered once per test, not per example
fixture_settings = settings(suppress_health_check=[HealthCheck.function_scoped_fixture])


# =============================================================================
# Strategy Definitions
# =============================================================================

uints = st.integers(min_value=0, max_value=2**31 - 1)

text = st.text(max_size=30)

uris = st.builds(lambda p: f"file:///{p}.c", st.text(alphabet="abc/", min_size=1, max_size=10))

positions = st.builds(Position, line=uints, character=uints)

ranges = st.builds(Range, start=positions, end=positions)

locations = st.builds(Location, uri=uris, range=ranges)

diagnostic_tags = st.one_of(
    st.sampled_from(DiagnosticTag),
    st.builds(Unknown, st.integers(min_value=3, max_value=100)),
)

diagnostics = st.builds(
    Diagnostic,
    range=ranges,
    message=text,
    severity=st.none() | st.sampled_from(DiagnosticSeverity),
    code=st.none() | st.integers() | text,
    codeDescription=st.none() | st.builds(CodeDescription, href=uris),
    source=st.none() | text,
    tags=st.none() | st.lists(diagnostic_tags, max_size=3),
    relatedInformation=st.none()
    | st.lists(
        st.builds(DiagnosticRelatedInformation, location=locations, message=text),
        max_size=2,
    ),
    data=st.none() | st.dictionaries(st.text(min_size=1, max_size=5), st.integers(), max_size=3),
)

extra_keys = st.dictionaries(
    st.text(min_size=1, max_size=10).map(lambda k: "x-" + k),
    st.integers() | text,
    max_size=3,
)


def _has_null(data) -> bool:
    if data is None:
        return True
    if isinstance(data, dict):
        return any(_has_null(v) for v in data.values())
    if isinstance(data, list):
        return any(_has_null(v) for v in data)
    return False


# =============================================================================
# Properties
# =============================================================================


@fixture_settings
@given(positions)
def test_position_round_trip(position):
    assert decode(encode(position), Position) == position


@fixture_settings
@given(ranges)
def test_range_round_trip(range_):
    assert decode(encode(range_), Range) == range_


@fixture_settings
@given(diagnostics)
def test_diagnostic_round_trip(diagnostic):
    assert decode(encode(diagnostic), Diagnostic) == diagnostic


@fixture_settings
@given(diagnostics)
def test_unset_optionals_are_omitted(diagnostic):
    assert not _has_null(encode(diagnostic))


@fixture_settings
@given(diagnostics, extra_keys)
def test_unknown_keys_are_ignored(diagnostic, extra):
    data = {**encode(diagnostic), **extra}
    assert decode(data, Diagnostic) == diagnostic


@fixture_settings
@given(ranges, extra_keys)
def test_nested_unknown_keys_are_ignored(range_, extra):
    data = encode(range_)
    data["start"] = {**data["start"], **extra}
    assert decode(data, Range) == range_


# =============================================================================
# Catalog-wide properties
# =============================================================================

catalog_settings = settings(
    max_examples=10,
    deadline=None,
    suppress_health_check=[
        HealthCheck.function_scoped_fixture,
        HealthCheck.too_slow,
        HealthCheck.data_too_large,
        HealthCheck.filter_too_much,
    ],
)

_NoneType = type(None)

small_ints = st.integers(min_value=0, max_value=1000)

short_text = st.text(max_size=8)

json_values = (
    st.none()
    | st.booleans()
    | st.integers()
    | short_text
    | st.lists(st.integers(), max_size=2)
)

STABLE_TYPES = [
    name
    for name, cls in protocol_types().items()
    if not is_proposed(cls) and available_in(cls, SpecVersion.V3_16)
]

ALL_TYPES = list(protocol_types())

# records whose wire form legitimately carries extra keys or nulls
_FLATTENED = {MessageActionItem}
_NULL_RESULT = {ResponseMessage}


def _type_available(type_: Any, enabled: bool) -> bool:
    if not isinstance(type_, type) or not (attrs.has(type_) or issubclass(type_, Enum)):
        return True
    return available_in(type_, default_version()) and (enabled or not is_proposed(type_))


def _decodes_back(value: Any, type_: Any) -> bool:
    try:
        return decode(encode(value, type_), type_) == value
    except SchemaMismatch:
        return False


def _enum_strategy(enum_cls: Any, enabled: bool) -> st.SearchStrategy:
    version = default_version()
    members = [
        m for m in enum_cls if available_in(m, version) and (enabled or not is_proposed(m))
    ]
    return st.sampled_from(members) if members else st.nothing()


def _unknown_strategy(enum_cls: Any) -> st.SearchStrategy:
    known = {m.value for m in enum_cls}
    if isinstance(next(iter(known)), str):
        raw = st.text(min_size=1, max_size=8)
    else:
        raw = st.integers(min_value=-100_000, max_value=100_000)
    return raw.filter(lambda v: v not in known).map(Unknown)


def _union_strategy(type_: Any, enabled: bool) -> st.SearchStrategy:
    args = get_args(type_)
    members = [a for a in args if a is not _NoneType]
    if (
        len(members) == 2
        and members[1] is Unknown
        and isinstance(members[0], type)
        and issubclass(members[0], Enum)
    ):
        inner = _enum_strategy(members[0], enabled) | _unknown_strategy(members[0])
    elif len(members) == 1:
        inner = strategy_for(members[0], enabled)
    else:
        candidates = [strategy_for(m, enabled) for m in members if _type_available(m, enabled)]
        union = Union[tuple(members)]
        # overlapping members: keep the values decode attributes to the same member
        inner = st.one_of(*candidates).filter(lambda v: _decodes_back(v, union))
    return st.none() | inner if _NoneType in args else inner


def _record_strategy(cls: Any, enabled: bool) -> st.SearchStrategy:
    if cls is MessageActionItem and enabled:
        properties = st.dictionaries(
            short_text.filter(lambda k: k != "title"),
            strategy_for(MessageActionItemProperty, enabled),
            min_size=1,
            max_size=2,
        )
        return st.builds(MessageActionItem, title=short_text, properties=st.none() | properties)
    if cls is ResponseMessage:
        ids = strategy_for(attrs.fields(ResponseMessage).id.type, enabled)
        return st.builds(ResponseMessage, id=ids, result=json_values) | st.builds(
            ResponseMessage, id=ids, error=strategy_for(ResponseError, enabled)
        )
    attrs.resolve_types(cls)
    version = default_version()
    kwargs = {
        a.name: strategy_for(a.type, enabled)
        for a in attrs.fields(cls)
        if field_available_in(a, version, enabled)
    }
    return st.builds(cls, **kwargs)


@lru_cache(maxsize=None)
def strategy_for(type_: Any, enabled: bool) -> st.SearchStrategy:
    if type_ is Any:
        return json_values
    if type_ is bool:
        return st.booleans()
    if type_ is int:
        return small_ints
    if type_ is str:
        return short_text
    if type_ is _NoneType:
        return st.none()
    origin = get_origin(type_)
    args = get_args(type_)
    if origin is Literal:
        return st.sampled_from(args)
    if origin is list:
        return st.lists(strategy_for(args[0], enabled), max_size=2)
    if origin is dict:
        return st.dictionaries(short_text, strategy_for(args[1], enabled), max_size=2)
    if origin is Union:
        return _union_strategy(type_, enabled)
    if not _type_available(type_, enabled):
        return st.nothing()
    if isinstance(type_, type) and issubclass(type_, Enum):
        return _enum_strategy(type_, enabled)
    if isinstance(type_, type) and attrs.has(type_):
        return st.deferred(lambda: _record_strategy(type_, enabled))
    raise TypeError(f"no strategy for {type_!r}")


def _check_laws(cls: Any, value: Any) -> None:
    data = encode(value)
    assert decode(data, cls) == value
    if not attrs.has(cls):
        return
    if cls not in _FLATTENED:
        assert decode({**data, "x-unknown": [1]}, cls) == value
    if cls not in _NULL_RESULT:
        for a in attrs.fields(cls):
            if a.default is None:
                assert data.get(a.name, "omitted") is not None, a.name


@pytest.mark.parametrize("name", STABLE_TYPES)
@catalog_settings
@given(data=st.data())
def test_every_stable_type_round_trips(name, data):
    cls = protocol_types()[name]
    _check_laws(cls, data.draw(strategy_for(cls, proposed_enabled())))


@pytest.mark.parametrize("name", ALL_TYPES)
@catalog_settings
@given(data=st.data())
def test_every_type_round_trips_with_proposed_surface(proposed, name, data):
    cls = protocol_types()[name]
    _check_laws(cls, data.draw(strategy_for(cls, proposed_enabled())))
