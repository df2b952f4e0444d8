"""crpt_api package: app/core/infra/config.

Expose library-friendly API client at the package level.
"""

from .app.api import AppConfig, CrptApiClient
from .config.time_units import interval_from_unit
from .core.cancellation import CancellationToken
from .core.domain import (
    CancellationError,
    ConstructionError,
    CrptApiError,
    Description,
    Document,
    DocumentFormatError,
    Product,
    RemoteRejection,
    SubmissionResult,
    TransportError,
)
from .infra.permit_gate import PermitGate

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "CrptApiClient",
    "AppConfig",
    "PermitGate",
    "CancellationToken",
    "interval_from_unit",
    "Document",
    "Description",
    "Product",
    "SubmissionResult",
    "CrptApiError",
    "ConstructionError",
    "TransportError",
    "RemoteRejection",
    "CancellationError",
    "DocumentFormatError",
]
