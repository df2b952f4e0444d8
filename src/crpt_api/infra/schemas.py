from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

# Dates travel as plain strings in YYYY-MM-DD form
IsoDate = Annotated[str, Field(pattern=r"^\d{4}-\d{2}-\d{2}$")]


class DescriptionSchema(BaseModel):
	"""Описание документа"""
	model_config = ConfigDict(populate_by_name=True)

	participant_inn: Optional[str] = Field(None, alias="participantInn")


class ProductSchema(BaseModel):
	"""Товар в составе документа"""
	model_config = ConfigDict(populate_by_name=True)

	certificate_document: Optional[str] = None
	certificate_document_date: Optional[IsoDate] = None
	certificate_document_number: Optional[str] = None
	owner_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[IsoDate] = None
	tnved_code: Optional[str] = None
	uit_code: Optional[str] = None
	uitu_code: Optional[str] = None


class DocumentSchema(BaseModel):
	"""Тело запроса POST /api/v3/lk/documents/create"""
	model_config = ConfigDict(populate_by_name=True)

	description: Optional[DescriptionSchema] = None
	doc_id: Optional[str] = None
	doc_status: Optional[str] = None
	doc_type: Optional[str] = None
	import_request: bool = Field(False, alias="importRequest")
	owner_inn: Optional[str] = None
	participant_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[IsoDate] = None
	production_type: Optional[str] = None
	products: list[ProductSchema] = Field(default_factory=list)
	reg_date: Optional[IsoDate] = None
	reg_number: Optional[str] = None
