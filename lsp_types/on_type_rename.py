"""
On-type rename: ranges of a document that change together while typing.

A draft of LSP 3.16 that was renamed to linked editing before release, so it
only exists on the proposed surface.
"""

from typing import List, Optional, Union

from attrs import frozen

from .basic import (
    DocumentSelector,
    DynamicRegistrationClientCapabilities,
    ProgressToken,
    Range,
    TextDocumentPositionParams,
)
from .schema import since, since_field

__all__ = [
    "OnTypeRenameClientCapabilities",
    "OnTypeRenameOptions",
    "OnTypeRenameRegistrationOptions",
    "OnTypeRenameServerCapabilities",
    "OnTypeRenameParams",
    "OnTypeRenameRanges",
]


OnTypeRenameClientCapabilities = DynamicRegistrationClientCapabilities


@since("3.16.0", proposed=True)
@frozen
class OnTypeRenameOptions:
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@since("3.16.0", proposed=True)
@frozen(kw_only=True)
class OnTypeRenameRegistrationOptions:
    documentSelector: Optional[DocumentSelector]
    workDoneProgress: Optional[bool] = since_field("3.15.0")
    id: Optional[str] = None


OnTypeRenameServerCapabilities = Union[
    bool, OnTypeRenameOptions, OnTypeRenameRegistrationOptions
]


@since("3.16.0", proposed=True)
@frozen(kw_only=True)
class OnTypeRenameParams(TextDocumentPositionParams):
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")


@since("3.16.0", proposed=True)
@frozen
class OnTypeRenameRanges:
    ranges: List[Range]
    wordPattern: Optional[str] = None
    """
    Regular expression describing valid contents of the ranges
    """
