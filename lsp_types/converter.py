"""
Mapping between protocol types and structured data.

All protocol types share one :class:`cattrs.Converter`. On top of the cattrs
defaults it

* omits optional fields (those defaulting to ``None``) when they are unset,
* checks primitive values strictly instead of coercing them,
* tries the members of untagged unions in order,
* falls back to :class:`~lsp_types.schema.Unknown` for open enumerations,
* rejects types, fields and enum members that the active protocol
  version does not know.

:func:`decode` reports every failure as a single
:class:`~lsp_types.errors.SchemaMismatch`.
"""

import contextvars
from enum import Enum
from typing import (
    Any,
    Callable,
    List,
    Literal,
    Optional,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

import attrs
import cattrs
from cattrs.errors import (
    AttributeValidationNote,
    BaseValidationError,
    ClassValidationError,
    IterableValidationError,
    IterableValidationNote,
)
from cattrs.gen import make_dict_structure_fn, make_dict_unstructure_fn, override
from cattrs.v import format_exception, transform_error
from loguru import logger

from .errors import SchemaMismatch
from .features import proposed_enabled, require_proposed
from .schema import (
    CODEC,
    SINCE,
    SpecVersion,
    Unknown,
    available_in,
    field_available_in,
    introduced_in,
    is_proposed,
)

__all__ = [
    "converter",
    "decode",
    "encode",
    "active_version",
    "default_version",
    "type_name",
]

T = TypeVar("T")

_NoneType = type(None)

_DECODE_ERRORS = (
    BaseValidationError,
    KeyError,
    TypeError,
    ValueError,
    AttributeError,
)

_active_version: contextvars.ContextVar[Optional[SpecVersion]] = contextvars.ContextVar(
    "lsp_types_active_version", default=None
)

converter = cattrs.Converter(detailed_validation=True, forbid_extra_keys=False)


def default_version() -> SpecVersion:
    return SpecVersion.PROPOSED if proposed_enabled() else SpecVersion.V3_16


def active_version() -> SpecVersion:
    return _active_version.get() or default_version()


_GENERIC_NAMES = {Union: "Union", list: "List", dict: "Dict"}


def type_name(type_: Any) -> str:
    if isinstance(type_, type):
        return type_.__name__
    origin = get_origin(type_)
    if origin is None:
        return repr(type_).replace("typing.", "")
    if origin is Literal:
        return f"Literal[{', '.join(repr(arg) for arg in get_args(type_))}]"
    args = ", ".join(type_name(arg) for arg in get_args(type_))
    return f"{_GENERIC_NAMES.get(origin) or type_name(origin)}[{args}]"


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def _check_available(obj: Any, name: str) -> None:
    if is_proposed(obj) and not proposed_enabled():
        raise SchemaMismatch(f"{name} belongs to the disabled proposed surface")
    version = active_version()
    if not available_in(obj, version):
        raise SchemaMismatch(
            f"{name} requires LSP {introduced_in(obj)}, decoding as {version.value}"
        )


def _primitive_hook(
    expected: type, check: Callable[[Any], bool]
) -> Callable[[Any, type], Any]:
    def structure(val: Any, _: type) -> Any:
        if not check(val):
            raise SchemaMismatch(f"expected {expected.__name__}, got {_describe(val)}")
        return expected(val)

    return structure


converter.register_structure_hook(str, _primitive_hook(str, lambda v: isinstance(v, str)))
converter.register_structure_hook(
    bool, _primitive_hook(bool, lambda v: isinstance(v, bool))
)
converter.register_structure_hook(
    int,
    _primitive_hook(int, lambda v: isinstance(v, int) and not isinstance(v, bool)),
)
converter.register_structure_hook(
    float,
    _primitive_hook(
        float, lambda v: isinstance(v, (int, float)) and not isinstance(v, bool)
    ),
)


def _enum_value_type(enum_cls: Type[Enum]) -> type:
    return type(next(iter(enum_cls)).value)


def _matches_value_type(val: Any, value_type: type) -> bool:
    return isinstance(val, value_type) and not isinstance(val, bool)


def enum_structure_hook(val: Any, enum_cls: Type[Enum]) -> Enum:
    value_type = _enum_value_type(enum_cls)
    if not _matches_value_type(val, value_type):
        raise SchemaMismatch(
            f"expected {value_type.__name__} discriminant of {enum_cls.__name__},"
            f" got {_describe(val)}"
        )
    try:
        member = enum_cls(val)
    except ValueError:
        raise SchemaMismatch(f"unrecognized {enum_cls.__name__} value {val!r}") from None
    _check_available(member, f"{enum_cls.__name__}.{member.name}")
    return member


converter.register_structure_hook(Enum, enum_structure_hook)


@converter.register_structure_hook
def unknown_structure_hook(val: Any, _: type) -> Unknown:
    if isinstance(val, bool) or not isinstance(val, (int, str)):
        raise SchemaMismatch(f"expected int or str, got {_describe(val)}")
    return Unknown(val)


@converter.register_unstructure_hook
def unknown_unstructure_hook(obj: Unknown) -> Union[int, str]:
    return obj.value


def _is_literal(type_: Any) -> bool:
    return get_origin(type_) is Literal


def literal_structure_hook_factory(type_: Any) -> Callable[[Any, type], Any]:
    values = get_args(type_)

    def structure(val: Any, _: type) -> Any:
        for value in values:
            if val == value and type(val) is type(value):
                return value
        raise SchemaMismatch(f"expected one of {list(values)!r}, got {val!r}")

    return structure


converter.register_structure_hook_factory(_is_literal, literal_structure_hook_factory)


def _is_list(type_: Any) -> bool:
    return type_ is list or get_origin(type_) is list


def list_structure_hook_factory(type_: Any) -> Callable[[Any, type], List[Any]]:
    args = get_args(type_)
    item_type = args[0] if args else Any

    def structure(val: Any, _: type) -> List[Any]:
        if not isinstance(val, list):
            raise SchemaMismatch(f"expected list, got {_describe(val)}")
        result = []
        errors = []
        for index, item in enumerate(val):
            try:
                result.append(converter.structure(item, item_type))
            except Exception as exc:
                exc.__notes__ = [
                    *getattr(exc, "__notes__", []),
                    IterableValidationNote(
                        f"Structuring {type_name(type_)} @ index {index}",
                        index,
                        item_type,
                    ),
                ]
                errors.append(exc)
        if errors:
            raise IterableValidationError(
                f"While structuring {type_name(type_)}", errors, type_
            )
        return result

    return structure


converter.register_structure_hook_factory(_is_list, list_structure_hook_factory)


def _union_members(type_: Any) -> List[Any]:
    if get_origin(type_) is not Union:
        return []
    return [arg for arg in get_args(type_) if arg is not _NoneType]


def _is_untagged_union(type_: Any) -> bool:
    return len(_union_members(type_)) > 1


def _covers_keys(candidate: Any, val: Any) -> bool:
    if not (isinstance(candidate, type) and attrs.has(candidate)):
        return True
    return set(val) <= {a.name for a in attrs.fields(candidate)}


def union_structure_hook_factory(type_: Any) -> Callable[[Any, type], Any]:
    """
    Untagged unions: the first member accounting for every incoming key wins,
    otherwise the first member that decodes at all.
    """
    members = _union_members(type_)
    nullable = _NoneType in get_args(type_)
    names = ", ".join(type_name(m) for m in members)

    def structure(val: Any, _: type) -> Any:
        if val is None and nullable:
            return None
        fallback: List[Any] = []
        for member in members:
            try:
                result = converter.structure(val, member)
            except _DECODE_ERRORS:
                continue
            if not isinstance(val, dict) or _covers_keys(member, val):
                return result
            if not fallback:
                fallback.append(result)
        if fallback:
            return fallback[0]
        raise SchemaMismatch(f"value does not match any of {names}")

    return structure


converter.register_structure_hook_factory(
    _is_untagged_union, union_structure_hook_factory
)


def _is_open_enum(type_: Any) -> bool:
    members = _union_members(type_)
    return (
        len(members) == 2
        and members[1] is Unknown
        and isinstance(members[0], type)
        and issubclass(members[0], Enum)
    )


def open_enum_structure_hook_factory(type_: Any) -> Callable[[Any, type], Any]:
    enum_cls = _union_members(type_)[0]
    value_type = _enum_value_type(enum_cls)
    nullable = _NoneType in get_args(type_)

    def structure(val: Any, _: type) -> Any:
        if val is None and nullable:
            return None
        if not _matches_value_type(val, value_type):
            raise SchemaMismatch(
                f"expected {value_type.__name__} discriminant of {enum_cls.__name__},"
                f" got {_describe(val)}"
            )
        try:
            return enum_structure_hook(val, enum_cls)
        except SchemaMismatch:
            return Unknown(val)

    return structure


converter.register_structure_hook_factory(
    _is_open_enum, open_enum_structure_hook_factory
)


def _is_protocol_record(type_: Any) -> bool:
    return isinstance(type_, type) and attrs.has(type_)


def _codec_overrides(cls: type, *, unstructure: bool) -> dict:
    overrides = {}
    for a in attrs.fields(cls):
        optional = a.default is None
        codec = a.metadata.get(CODEC)
        if unstructure:
            if codec is not None:
                overrides[a.name] = override(
                    omit_if_default=optional,
                    unstruct_hook=codec.encode,
                )
            elif optional:
                overrides[a.name] = override(omit_if_default=True)
        elif codec is not None:
            overrides[a.name] = override(
                struct_hook=lambda val, _, fn=codec.decode: fn(val)
            )
    return overrides


def _missing_discriminants(cls: type, val: dict, names: List[str]) -> None:
    errors = []
    for name in names:
        if name not in val:
            exc = KeyError(name)
            exc.__notes__ = [
                AttributeValidationNote(
                    f"Structuring class {cls.__name__} @ attribute {name}",
                    name,
                    getattr(attrs.fields(cls), name).type,
                )
            ]
            errors.append(exc)
    if errors:
        raise ClassValidationError(f"While structuring {cls.__name__}", errors, cls)


def record_structure_hook_factory(cls: type) -> Callable[[Any, type], Any]:
    # nested forward references such as List["DocumentSymbol"]
    attrs.resolve_types(cls)
    handler = make_dict_structure_fn(cls, converter, **_codec_overrides(cls, unstructure=False))
    versioned = [a for a in attrs.fields(cls) if a.metadata.get(SINCE)]
    # Literal kinds have a default for construction but must be present on the wire
    discriminants = [a.name for a in attrs.fields(cls) if _is_literal(a.type)]

    def structure(val: Any, _: type) -> Any:
        _check_available(cls, cls.__name__)
        if not isinstance(val, dict):
            raise SchemaMismatch(f"expected object for {cls.__name__}, got {_describe(val)}")
        _missing_discriminants(cls, val, discriminants)
        version = active_version()
        hidden = {
            a.name
            for a in versioned
            if not field_available_in(a, version, proposed_enabled())
        }
        if hidden:
            val = {key: value for key, value in val.items() if key not in hidden}
        return handler(val, cls)

    return structure


def record_unstructure_hook_factory(cls: type) -> Callable[[Any], Any]:
    attrs.resolve_types(cls)
    return make_dict_unstructure_fn(
        cls,
        converter,
        _cattrs_omit_if_default=False,
        **_codec_overrides(cls, unstructure=True),
    )


converter.register_structure_hook_factory(
    _is_protocol_record, record_structure_hook_factory
)
converter.register_unstructure_hook_factory(
    _is_protocol_record, record_unstructure_hook_factory
)


def _format_exception(exc: BaseException, type_: Optional[type]) -> str:
    if isinstance(exc, SchemaMismatch):
        return str(exc)
    return format_exception(exc, type_)


def _error_messages(exc: BaseException, cls: Any) -> List[str]:
    if isinstance(exc, BaseValidationError):
        return transform_error(exc, format_exception=_format_exception)
    return [f"{_format_exception(exc, cls)} @ $"]


def decode(data: Any, cls: Type[T], version: Optional[SpecVersion] = None) -> T:
    """
    Decode structured data into a value of ``cls``.

    Unrecognized keys are ignored. Any other mismatch raises
    :class:`SchemaMismatch` listing every offending location.
    """
    version = version or default_version()
    if version.is_proposed:
        require_proposed(f"LSP {version.value}")
    token = _active_version.set(version)
    try:
        return converter.structure(data, cls)
    except _DECODE_ERRORS as exc:
        name = type_name(cls)
        errors = _error_messages(exc, cls)
        logger.debug("Cannot decode {} as LSP {}: {}", name, version.value, errors)
        raise SchemaMismatch(f"cannot decode {name}", target=name, errors=errors) from exc
    finally:
        _active_version.reset(token)


def encode(value: Any, as_type: Any = None) -> Any:
    """
    Encode a value into structured data, omitting unset optional fields.
    """
    if as_type is None:
        return converter.unstructure(value)
    return converter.unstructure(value, unstructure_as=as_type)
