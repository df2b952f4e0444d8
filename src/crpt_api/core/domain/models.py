from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Description:
    participant_inn: Optional[str] = None


@dataclass(frozen=True)
class Product:
    certificate_document: Optional[str] = None
    certificate_document_date: Optional[str] = None  # YYYY-MM-DD
    certificate_document_number: Optional[str] = None
    owner_inn: Optional[str] = None
    producer_inn: Optional[str] = None
    production_date: Optional[str] = None  # YYYY-MM-DD
    tnved_code: Optional[str] = None
    uit_code: Optional[str] = None
    uitu_code: Optional[str] = None


@dataclass(frozen=True)
class Document:
    description: Optional[Description] = None
    doc_id: Optional[str] = None
    doc_status: Optional[str] = None
    doc_type: Optional[str] = None
    import_request: bool = False

    owner_inn: Optional[str] = None
    participant_inn: Optional[str] = None
    producer_inn: Optional[str] = None

    production_date: Optional[str] = None  # YYYY-MM-DD
    production_type: Optional[str] = None

    products: tuple[Product, ...] = field(default_factory=tuple)

    reg_date: Optional[str] = None  # YYYY-MM-DD
    reg_number: Optional[str] = None


@dataclass(frozen=True)
class SubmissionResult:
    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code == 200
