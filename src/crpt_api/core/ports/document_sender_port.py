from __future__ import annotations

from typing import Protocol


class DocumentSenderPort(Protocol):
    def post_document(self, url: str, body: bytes, signature: str) -> tuple[int, str]:
        """POST a serialized document and return (status_code, response text).

        Implementations raise TransportError when the request cannot be delivered.
        """
        ...
