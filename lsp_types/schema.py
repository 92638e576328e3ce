"""
Version tags and field metadata shared by all protocol types.

Every protocol type may carry the protocol version that introduced it::

    @since("3.16.0")
    @frozen
    class CodeDescription:
        href: str

Types introduced after LSP 3.16 belong to the proposed surface: constructing
them requires the proposed feature (see :mod:`lsp_types.features`) and the
converter refuses to decode them while it is off.
"""

import functools
from enum import Enum, unique
from functools import total_ordering
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar, Union

import attrs
from attrs import frozen
from typing_extensions import Self

from .features import require_proposed

__all__ = [
    "SpecVersion",
    "parse_version",
    "Unknown",
    "Open",
    "Codec",
    "since",
    "members_since",
    "since_field",
    "codec",
    "introduced_in",
    "is_proposed",
    "available_in",
    "field_available_in",
    "stable_member",
    "SINCE",
    "PROPOSED",
    "CODEC",
]


SINCE = "lsp_types.since"
PROPOSED = "lsp_types.proposed"
CODEC = "lsp_types.codec"

_LAST_STABLE = (3, 16)


def parse_version(version: str) -> Tuple[int, int]:
    """
    Major and minor number of a version string such as ``"3.16.0"``.
    """
    major, minor, *_ = version.split(".")
    return int(major), int(minor)


@unique
@total_ordering
class SpecVersion(Enum):
    V3_13 = "3.13.0"
    V3_16 = "3.16.0"
    PROPOSED = "3.17.0"

    @property
    def ceiling(self) -> Tuple[int, int]:
        # the proposed version also covers the 3.18 drafts
        return (3, 18) if self is SpecVersion.PROPOSED else parse_version(self.value)

    @property
    def is_proposed(self) -> bool:
        return self.ceiling > _LAST_STABLE

    @classmethod
    def parse(cls, text: str) -> Self:
        if text.strip().lower() == "proposed":
            return cls.PROPOSED
        try:
            wanted = parse_version(text)
        except ValueError:
            raise ValueError(f"invalid LSP version: {text}") from None
        for version in cls:
            if wanted in (parse_version(version.value), version.ceiling):
                return version
        raise ValueError(f"unsupported LSP version: {text}")

    def __lt__(self, other: Self) -> bool:
        if self.__class__ is other.__class__:
            return self.ceiling < other.ceiling
        return NotImplemented


@frozen
class Unknown:
    """
    An enum discriminant outside the set known to this library.

    Used for open enumerations, where the protocol asks receivers to tolerate
    values added by newer versions or by extensions.
    """

    value: Union[int, str]


E = TypeVar("E", bound=Enum)

Open = Union[E, Unknown]


@frozen
class Codec:
    encode: Callable[[Any], Any]
    decode: Callable[[Any], Any]


def _default_proposed(version: str) -> bool:
    return parse_version(version) > _LAST_STABLE


def _gate_construction(cls: type) -> None:
    init = cls.__init__

    @functools.wraps(init)
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        require_proposed(cls.__name__)
        init(self, *args, **kwargs)

    cls.__init__ = __init__  # type: ignore


def since(version: str, *, proposed: Optional[bool] = None):
    """
    Tag a protocol type with the protocol version that introduced it.
    """
    if proposed is None:
        proposed = _default_proposed(version)

    def decorate(cls):
        cls.__lsp_since__ = version
        cls.__lsp_proposed__ = proposed
        if proposed and attrs.has(cls):
            _gate_construction(cls)
        return cls

    return decorate


def members_since(**versions: str):
    """
    Tag individual enum members added after their enumeration was published.
    """

    def decorate(cls):
        unknown = set(versions) - set(cls.__members__)
        if unknown:
            raise TypeError(f"{cls.__name__} has no members {sorted(unknown)}")
        cls.__lsp_member_since__ = dict(versions)
        return cls

    return decorate


def _proposed_value(instance: Any, attribute: "attrs.Attribute", value: Any) -> None:
    if value is not None:
        require_proposed(f"{type(instance).__name__}.{attribute.name}")


def since_field(
    version: str,
    *,
    proposed: Optional[bool] = None,
    default: Any = None,
    metadata: Optional[Dict[str, Any]] = None,
    **kwargs: Any,
) -> Any:
    if proposed is None:
        proposed = _default_proposed(version)
    metadata = {**(metadata or {}), SINCE: version, PROPOSED: proposed}
    if proposed:
        validators = [_proposed_value]
        if "validator" in kwargs:
            validators.append(kwargs.pop("validator"))
        kwargs["validator"] = validators
    return attrs.field(default=default, metadata=metadata, **kwargs)


def codec(encode: Callable[[Any], Any], decode: Callable[[Any], Any]) -> Dict[str, Any]:
    """
    Field metadata replacing the default wire mapping of a single field.
    """
    return {CODEC: Codec(encode, decode)}


def _member_since(member: Enum) -> Optional[str]:
    return type(member).__dict__.get("__lsp_member_since__", {}).get(member.name)


def introduced_in(obj: Any) -> Optional[str]:
    if isinstance(obj, Enum):
        return _member_since(obj) or introduced_in(type(obj))
    return vars(obj).get("__lsp_since__") if isinstance(obj, type) else None


def is_proposed(obj: Any) -> bool:
    if isinstance(obj, Enum):
        member_since = _member_since(obj)
        if member_since is not None and _default_proposed(member_since):
            return True
        return is_proposed(type(obj))
    return isinstance(obj, type) and bool(vars(obj).get("__lsp_proposed__", False))


def available_in(obj: Any, version: SpecVersion) -> bool:
    if isinstance(obj, Enum):
        member_since = _member_since(obj)
        if member_since is not None and parse_version(member_since) > version.ceiling:
            return False
        obj = type(obj)
    introduced = introduced_in(obj)
    return introduced is None or parse_version(introduced) <= version.ceiling


def field_available_in(
    field: "attrs.Attribute", version: SpecVersion, proposed_enabled: bool
) -> bool:
    introduced = field.metadata.get(SINCE)
    if introduced is None:
        return True
    if field.metadata.get(PROPOSED) and not proposed_enabled:
        return False
    return parse_version(introduced) <= version.ceiling


def stable_member(instance: Any, attribute: "attrs.Attribute", value: Any) -> None:
    """
    attrs validator rejecting proposed enum members while the surface is off.
    """
    if isinstance(value, Enum) and is_proposed(value):
        require_proposed(f"{type(value).__name__}.{value.name}")
