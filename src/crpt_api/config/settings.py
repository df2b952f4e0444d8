from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .urls import CREATE_DOCUMENT_URL


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the CRPT_API_ prefix.
    For example:
        - CRPT_API_REQUEST_LIMIT=10
        - CRPT_API_INTERVAL_SECONDS=60
        - CRPT_API_API_URL=https://markirovka.sandbox.crptech.ru/api/v3/lk/documents/create

    Alternatively, settings can be passed to CrptApiClient directly:
        client = CrptApiClient(request_limit=5, interval_seconds=1.0)
    """

    model_config = SettingsConfigDict(
        env_prefix="CRPT_API_",
        case_sensitive=False,
        extra="forbid",
    )

    api_url: str = Field(
        default=CREATE_DOCUMENT_URL,
        description="Endpoint that receives the document POST",
    )

    request_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum number of requests per window",
    )

    interval_seconds: float = Field(
        default=60.0,
        gt=0,
        allow_inf_nan=False,
        description="Window length in seconds; capacity is fully restored at the start of every window",
    )

    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="HTTP timeout for a single request",
    )

    signature_header: str = Field(
        default="Signature",
        description="Header carrying the document signature. Empty string disables sending it.",
    )
