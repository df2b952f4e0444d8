from __future__ import annotations

CREATE_DOCUMENT_URL = "https://ismp.crpt.ru/api/v3/lk/documents/create"
