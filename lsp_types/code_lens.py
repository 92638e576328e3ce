from typing import Optional

from attrs import frozen

from .basic import (
    Command,
    LSPAny,
    ProgressToken,
    Range,
    TextDocumentIdentifier,
    WorkDoneProgressParams,
)
from .schema import since, since_field

__all__ = [
    "CodeLensOptions",
    "CodeLensParams",
    "CodeLens",
    "CodeLensClientCapabilities",
    "CodeLensWorkspaceClientCapabilities",
]


@frozen
class CodeLensOptions:
    resolveProvider: Optional[bool] = None
    workDoneProgress: Optional[bool] = since_field("3.15.0")


@frozen(kw_only=True)
class CodeLensParams(WorkDoneProgressParams):
    textDocument: TextDocumentIdentifier
    partialResultToken: Optional[ProgressToken] = since_field("3.15.0")


@frozen
class CodeLens:
    """
    A command shown inline with source text, like the number of references.

    A code lens without ``command`` is unresolved; ``data`` is kept for the
    resolve request.
    """

    range: Range
    command: Optional[Command] = None
    data: LSPAny = None


@frozen
class CodeLensClientCapabilities:
    dynamicRegistration: Optional[bool] = None


@since("3.16.0")
@frozen
class CodeLensWorkspaceClientCapabilities:
    refreshSupport: Optional[bool] = None
    """
    Whether the client supports the ``workspace/codeLens/refresh`` request
    """
