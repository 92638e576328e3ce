"""
Semantic highlighting as implemented by clangd and Theia.

This extension predates the semantic tokens of LSP 3.16. Tokens of a line
travel as one base64 string of packed big-endian records::

    uint32 character | uint16 length | uint16 scope
"""

import base64
import binascii
import struct
from typing import Any, List, Optional

from attrs import field, frozen
from attrs.validators import and_, ge, instance_of, lt

from .basic import VersionedTextDocumentIdentifier
from .errors import SchemaMismatch
from .schema import codec

__all__ = [
    "SemanticHighlightingClientCapability",
    "SemanticHighlightingServerCapability",
    "SemanticHighlightingToken",
    "SemanticHighlightingInformation",
    "SemanticHighlightingParams",
    "encode_tokens",
    "decode_tokens",
]


_TOKEN = struct.Struct(">IHH")


def _unsigned(bits: int):
    return and_(instance_of(int), ge(0), lt(1 << bits))


@frozen
class SemanticHighlightingClientCapability:
    semanticHighlighting: bool


@frozen
class SemanticHighlightingServerCapability:
    scopes: Optional[List[List[str]]] = None
    """
    TextMate scopes per scope index, most specific first
    """


@frozen
class SemanticHighlightingToken:
    character: int = field(validator=_unsigned(32))
    length: int = field(validator=_unsigned(16))
    scope: int = field(validator=_unsigned(16))


def encode_tokens(tokens: Optional[List[SemanticHighlightingToken]]) -> Optional[str]:
    if tokens is None:
        return None
    packed = b"".join(
        _TOKEN.pack(token.character, token.length, token.scope) for token in tokens
    )
    return base64.b64encode(packed).decode("ascii")


def decode_tokens(val: Any) -> Optional[List[SemanticHighlightingToken]]:
    if val is None:
        return None
    if not isinstance(val, str):
        raise SchemaMismatch(f"expected base64 str, got {type(val).__name__}")
    try:
        packed = base64.b64decode(val, validate=True)
    except binascii.Error as e:
        raise SchemaMismatch(f"invalid base64 token data: {e}") from e
    if len(packed) % _TOKEN.size:
        raise SchemaMismatch(
            f"token data of {len(packed)} bytes is not a multiple of {_TOKEN.size}"
        )
    return [
        SemanticHighlightingToken(character, length, scope)
        for character, length, scope in _TOKEN.iter_unpack(packed)
    ]


@frozen
class SemanticHighlightingInformation:
    line: int
    tokens: Optional[List[SemanticHighlightingToken]] = field(
        default=None, metadata=codec(encode_tokens, decode_tokens)
    )


@frozen
class SemanticHighlightingParams:
    textDocument: VersionedTextDocumentIdentifier
    lines: List[SemanticHighlightingInformation]
