"""Mapping between domain Documents and the JSON wire format."""

from __future__ import annotations

import json
from typing import Any, Mapping, Union

from pydantic import ValidationError

from ..core.domain.errors import DocumentFormatError
from ..core.domain.models import Description, Document, Product
from .schemas import DescriptionSchema, DocumentSchema, ProductSchema


def to_schema(document: Document) -> DocumentSchema:
    description = None
    if document.description is not None:
        description = DescriptionSchema(participant_inn=document.description.participant_inn)
    return DocumentSchema(
        description=description,
        doc_id=document.doc_id,
        doc_status=document.doc_status,
        doc_type=document.doc_type,
        import_request=document.import_request,
        owner_inn=document.owner_inn,
        participant_inn=document.participant_inn,
        producer_inn=document.producer_inn,
        production_date=document.production_date,
        production_type=document.production_type,
        products=[ProductSchema(**vars(p)) for p in document.products],
        reg_date=document.reg_date,
        reg_number=document.reg_number,
    )


def from_schema(schema: DocumentSchema) -> Document:
    description = None
    if schema.description is not None:
        description = Description(participant_inn=schema.description.participant_inn)
    return Document(
        description=description,
        doc_id=schema.doc_id,
        doc_status=schema.doc_status,
        doc_type=schema.doc_type,
        import_request=schema.import_request,
        owner_inn=schema.owner_inn,
        participant_inn=schema.participant_inn,
        producer_inn=schema.producer_inn,
        production_date=schema.production_date,
        production_type=schema.production_type,
        products=tuple(Product(**p.model_dump()) for p in schema.products),
        reg_date=schema.reg_date,
        reg_number=schema.reg_number,
    )


def to_wire(document: Document) -> dict[str, Any]:
    """Return the JSON object for ``document`` using wire field names.

    Every key is present; absent optional values are emitted as null.
    """
    try:
        return to_schema(document).model_dump(mode="json", by_alias=True)
    except ValidationError as e:
        raise DocumentFormatError(f"Document does not match wire schema: {e}") from e


def encode_document(document: Document) -> bytes:
    return json.dumps(to_wire(document), ensure_ascii=False).encode("utf-8")


def decode_document(data: Union[bytes, str, Mapping[str, Any]]) -> Document:
    """Parse wire JSON (raw text or an already-decoded object) into a Document.

    Raises:
        DocumentFormatError: If the payload is not valid JSON or fails validation.
    """
    try:
        if isinstance(data, (bytes, str)):
            schema = DocumentSchema.model_validate_json(data)
        else:
            schema = DocumentSchema.model_validate(dict(data))
    except ValidationError as e:
        raise DocumentFormatError(f"Invalid document payload: {e}") from e
    return from_schema(schema)
