from loguru import logger

logger.disable("lsp_types")

from .converter import converter, decode, encode
from .errors import (
    LspTypesError,
    ProposedFeatureDisabled,
    SchemaMismatch,
    UnknownName,
)
from .features import proposed_enabled, proposed_features
from .notifications import NOTIFICATIONS, NotificationType, lsp_notification
from .requests import REQUESTS, RequestType, lsp_request
from .schema import Open, SpecVersion, Unknown
from .version import __version__

__all__ = [
    "converter",
    "decode",
    "encode",
    "LspTypesError",
    "ProposedFeatureDisabled",
    "SchemaMismatch",
    "UnknownName",
    "proposed_enabled",
    "proposed_features",
    "NOTIFICATIONS",
    "NotificationType",
    "lsp_notification",
    "REQUESTS",
    "RequestType",
    "lsp_request",
    "Open",
    "SpecVersion",
    "Unknown",
    "__version__",
]
