from enum import Enum
from functools import lru_cache
from typing import Dict, Iterator, Tuple

import attrs

from . import (
    basic,
    capabilities,
    code_lens,
    completion,
    document_highlight,
    document_sync,
    language_features,
    lifecycle,
    messages,
    notebook,
    on_type_rename,
    rename,
    semantic_highlighting,
    window,
    workspace,
)
from .errors import UnknownName

__all__ = ["protocol_types", "find_type"]


_MODULES = (
    basic,
    messages,
    window,
    workspace,
    document_sync,
    completion,
    language_features,
    code_lens,
    document_highlight,
    rename,
    on_type_rename,
    semantic_highlighting,
    notebook,
    capabilities,
    lifecycle,
)


def _is_protocol_type(obj: object) -> bool:
    if not isinstance(obj, type):
        return False
    return attrs.has(obj) or issubclass(obj, Enum)


def _exported() -> Iterator[Tuple[str, type]]:
    for module in _MODULES:
        for name in module.__all__:
            obj = getattr(module, name)
            # aliases such as GenericCapability are listed under their own name
            if _is_protocol_type(obj) and obj.__name__ == name:
                yield name, obj


@lru_cache(maxsize=None)
def protocol_types() -> Dict[str, type]:
    """
    Every protocol record and enumeration, keyed by name.
    """
    return dict(sorted(_exported()))


def find_type(name: str) -> type:
    try:
        return protocol_types()[name]
    except KeyError:
        raise UnknownName("type", name) from None
