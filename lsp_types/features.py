"""
Switches for optional parts of the protocol surface.

The proposed surface (LSP 3.17 and the 3.18 drafts) is off unless the
``LSP_TYPES_PROPOSED`` environment variable is set when this module is first
imported. Embedding applications and tests can override the switch for a scope
with :func:`proposed_features`.
"""

import contextvars
import os
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from attrs import define
from loguru import logger
from typing_extensions import Self

from .errors import ProposedFeatureDisabled

__all__ = [
    "PROPOSED_ENV_VAR",
    "Features",
    "features",
    "proposed_enabled",
    "proposed_features",
    "require_proposed",
]


PROPOSED_ENV_VAR = "LSP_TYPES_PROPOSED"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@define
class Features:
    proposed: bool = False
    """
    Whether types, fields and enum members of the proposed surface are accepted
    """

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> Self:
        raw = environ.get(PROPOSED_ENV_VAR, "")
        return cls(proposed=raw.strip().lower() in _TRUTHY)


features = Features.from_env()
if features.proposed:
    logger.debug("Proposed protocol surface enabled by {}", PROPOSED_ENV_VAR)

# scoped to the current thread or task; None defers to the environment
_override: contextvars.ContextVar[Optional[bool]] = contextvars.ContextVar(
    "lsp_types_proposed", default=None
)


def proposed_enabled() -> bool:
    override = _override.get()
    return features.proposed if override is None else override


def require_proposed(what: str) -> None:
    if not proposed_enabled():
        raise ProposedFeatureDisabled(what)


@contextmanager
def proposed_features(enabled: bool = True) -> Iterator[bool]:
    """
    Switch the proposed surface on or off for the current context.

    Other threads and asyncio tasks keep the setting they started with.
    """
    token = _override.set(enabled)
    try:
        yield enabled
    finally:
        _override.reset(token)
