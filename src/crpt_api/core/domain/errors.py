"""Errors surfaced to callers of the document submission API.

Nothing here is retried internally; every error reaches the caller of
``DocumentSubmitter.submit`` (or ``CrptApiClient.create_document``).
"""

from __future__ import annotations


class CrptApiError(Exception):
    """Base class for all crpt_api errors."""


class ConstructionError(CrptApiError, ValueError):
    """Invalid gate parameters (capacity or interval)."""


class TransportError(CrptApiError):
    """The request could not be delivered (connection, timeout, protocol)."""


class RemoteRejection(CrptApiError):
    """The endpoint answered with a status other than 200."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Failed to create document: HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class CancellationError(CrptApiError):
    """The caller abandoned a wait for a permit before one was granted."""


class DocumentFormatError(CrptApiError, ValueError):
    """A JSON payload does not match the document wire schema."""
