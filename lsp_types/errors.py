from typing import Optional, Sequence

__all__ = [
    "LspTypesError",
    "SchemaMismatch",
    "ProposedFeatureDisabled",
    "UnknownName",
]


class LspTypesError(Exception):
    pass


class SchemaMismatch(LspTypesError, ValueError):
    """
    Structured data does not match the declared shape of a protocol type.

    Raised for a missing required field, a value of the wrong type, or an enum
    discriminant that is unknown for the active protocol version.
    """

    def __init__(
        self,
        reason: str,
        *,
        target: Optional[str] = None,
        errors: Sequence[str] = (),
    ):
        self.reason = reason
        self.target = target
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.errors:
            return self.reason
        return f"{self.reason}: {'; '.join(self.errors)}"


class ProposedFeatureDisabled(LspTypesError):
    """
    A part of the proposed protocol surface was used while it is switched off.
    """

    def __init__(self, what: str):
        self.what = what
        super().__init__(
            f"{what} belongs to the proposed protocol surface;"
            " set LSP_TYPES_PROPOSED=1 to enable it"
        )


class UnknownName(LspTypesError, LookupError):
    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"unknown {kind}: {name!r}")
