from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from ..core.domain.errors import TransportError
from ..core.ports.document_sender_port import DocumentSenderPort

logger = logging.getLogger(__name__)


class HttpClient(DocumentSenderPort):
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 20.0,
        signature_header: str = "Signature",
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=dict(base_headers or {}),
            follow_redirects=True,
            max_redirects=10
        )
        self._signature_header = signature_header

    def post_document(self, url: str, body: bytes, signature: str) -> tuple[int, str]:
        headers = {"Content-Type": "application/json"}
        # An empty header name means the endpoint does not take the signature
        if self._signature_header and signature:
            headers[self._signature_header] = signature
        try:
            resp = self._client.post(url, content=body, headers=headers)
        except httpx.TransportError as e:
            logger.debug(f"POST {url} failed: {e!r}")
            raise TransportError(f"Error sending request: {e}") from e
        return resp.status_code, resp.text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
