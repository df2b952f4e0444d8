from __future__ import annotations

import logging
from typing import Callable, Optional

from ..cancellation import CancellationToken
from ..domain.errors import RemoteRejection
from ..domain.models import Document, SubmissionResult
from ..ports.document_sender_port import DocumentSenderPort
from ..ports.permit_gate_port import PermitGatePort

logger = logging.getLogger(__name__)


class DocumentSubmitter:
    """Submits documents one POST at a time, each behind a gate permit.

    A permit is consumed before the request is built and is not given back,
    whatever the endpoint answers. There is no retry.
    """

    def __init__(
        self,
        gate: PermitGatePort,
        sender: DocumentSenderPort,
        url: str,
        encoder: Callable[[Document], bytes],
    ) -> None:
        self._gate = gate
        self._sender = sender
        self._url = url
        self._encode = encoder

    def submit(
        self,
        document: Document,
        signature: str,
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> SubmissionResult:
        """Wait for a permit, then POST ``document``.

        The document is encoded before a permit is taken, so a document that
        fails local validation costs no window capacity.

        Raises:
            DocumentFormatError: the document does not match the wire schema.
            CancellationError: cancel_token was cancelled while waiting for a permit.
            TransportError: the request could not be sent.
            RemoteRejection: the endpoint answered with a non-200 status.
        """
        body = self._encode(document)
        self._gate.acquire(cancel_token)
        logger.debug(f"Submitting document {document.doc_id or '-'} ({len(body)} bytes)")
        status, text = self._sender.post_document(self._url, body, signature)
        if status != 200:
            logger.warning(f"Document {document.doc_id or '-'} rejected: HTTP {status}")
            raise RemoteRejection(status, text)
        return SubmissionResult(status_code=status, body=text)
