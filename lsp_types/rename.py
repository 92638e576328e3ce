from enum import Enum, unique
from typing import Optional, Union

from attrs import frozen

from .basic import ProgressToken, Range, TextDocumentPositionParams
from .schema import since, since_field

__all__ = [
    "RenameParams",
    "RenameOptions",
    "PrepareSupportDefaultBehavior",
    "RenameClientCapabilities",
    "PrepareRenameParams",
    "RangeWithPlaceholder",
    "PrepareRenameDefaultBehavior",
    "PrepareRenameResponse",
]


@frozen(kw_only=True)
class RenameParams(TextDocumentPositionParams):
    newName: str
    workDoneToken: Optional[ProgressToken] = since_field("3.15.0")


@frozen
class RenameOptions:
    prepareProvider: Optional[bool] = since_field("3.12.0")
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@since("3.16.0")
@unique
class PrepareSupportDefaultBehavior(Enum):
    IDENTIFIER = 1
    """
    The client's default behavior is to select the identifier according to
    the language's syntax rule
    """


@frozen
class RenameClientCapabilities:
    dynamicRegistration: Optional[bool] = None
    prepareSupport: Optional[bool] = since_field("3.12.0")
    prepareSupportDefaultBehavior: Optional[PrepareSupportDefaultBehavior] = since_field(
        "3.16.0"
    )
    honorsChangeAnnotations: Optional[bool] = since_field("3.16.0")


@frozen(kw_only=True)
class PrepareRenameParams(TextDocumentPositionParams):
    pass


@frozen
class RangeWithPlaceholder:
    range: Range
    placeholder: str


@since("3.16.0")
@frozen
class PrepareRenameDefaultBehavior:
    defaultBehavior: bool


PrepareRenameResponse = Union[Range, RangeWithPlaceholder, PrepareRenameDefaultBehavior]
