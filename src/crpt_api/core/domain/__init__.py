from .errors import (
    CancellationError,
    ConstructionError,
    CrptApiError,
    DocumentFormatError,
    RemoteRejection,
    TransportError,
)
from .models import Description, Document, Product, SubmissionResult

__all__ = [
    "Description",
    "Document",
    "Product",
    "SubmissionResult",
    "CrptApiError",
    "ConstructionError",
    "TransportError",
    "RemoteRejection",
    "CancellationError",
    "DocumentFormatError",
]
