from __future__ import annotations

from typing import Optional

from .container import Container
from ..config.settings import AppConfig
from ..core.cancellation import CancellationToken
from ..core.domain.models import Document, SubmissionResult
from ..infra.permit_gate import PermitGate


class CrptApiClient:
    """Thread-safe client for the CRPT document creation endpoint.

    All calls made through one client share a single permit gate, so at most
    ``request_limit`` documents are sent per ``interval_seconds`` window no
    matter how many threads call :meth:`create_document`.

    Example:
        # Defaults from environment variables (10 requests per minute)
        with CrptApiClient() as client:
            client.create_document(doc, signature)

        # 5 requests per second against a sandbox
        with CrptApiClient(request_limit=5, interval_seconds=1.0, api_url=sandbox_url) as client:
            client.create_document(doc, signature)

        # Time unit plus limit
        with CrptApiClient(request_limit=10, interval_seconds=interval_from_unit("minute")) as client:
            ...
    """

    def __init__(
        self,
        *,
        request_limit: int | None = None,
        interval_seconds: float | None = None,
        api_url: str | None = None,
        timeout_seconds: float | None = None,
        signature_header: str | None = None,
    ):
        """Initialize the client and start the background replenish timer.

        Args:
            request_limit: Maximum requests per window.
                           If None, uses CRPT_API_REQUEST_LIMIT or default (10).
            interval_seconds: Window length in seconds.
                              If None, uses CRPT_API_INTERVAL_SECONDS or default (60).
            api_url: Endpoint URL. If None, uses CRPT_API_API_URL or the production endpoint.
            timeout_seconds: HTTP timeout. If None, uses CRPT_API_TIMEOUT_SECONDS or default (20).
            signature_header: Header name for the signature. Empty string disables it.

        Raises:
            pydantic.ValidationError: If a setting is out of range (e.g. request_limit < 1).
        """
        self._container = Container()

        # Build config dict with only provided values
        config_dict: dict[str, object] = {}
        if request_limit is not None:
            config_dict["request_limit"] = request_limit
        if interval_seconds is not None:
            config_dict["interval_seconds"] = interval_seconds
        if api_url is not None:
            config_dict["api_url"] = api_url
        if timeout_seconds is not None:
            config_dict["timeout_seconds"] = timeout_seconds
        if signature_header is not None:
            config_dict["signature_header"] = signature_header

        if config_dict:
            config = AppConfig(**config_dict)
            self._container.config.from_pydantic(config)

        self._container.init_resources()

    @property
    def gate(self) -> PermitGate:
        return self._container.gate()

    def create_document(
        self,
        document: Document,
        signature: str,
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> SubmissionResult:
        """Submit one document, blocking while the current window is exhausted.

        Args:
            document: Document to send.
            signature: Document signature, sent in the configured header.
            cancel_token: Cancel from another thread to stop waiting for a permit.

        Returns:
            SubmissionResult for an HTTP 200 answer.

        Raises:
            CancellationError: cancel_token was cancelled while waiting.
            TransportError: the request could not be sent.
            RemoteRejection: the endpoint answered with a non-200 status.
        """
        submitter = self._container.submitter()
        return submitter.submit(document, signature, cancel_token=cancel_token)

    def close(self) -> None:
        """Stop the replenish timer and close the HTTP connection pool.

        Threads still blocked in create_document are not released.
        """
        self._container.shutdown_resources()

    def __enter__(self) -> CrptApiClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "CrptApiClient",
    "AppConfig",
]
