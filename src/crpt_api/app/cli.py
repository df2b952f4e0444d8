from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from .api import CrptApiClient
from ..core.domain.errors import DocumentFormatError, RemoteRejection, TransportError
from ..core.domain.models import Description, Document, Product
from ..infra.document_codec import decode_document, to_wire


app = typer.Typer(add_completion=False, help="CRPT document submission client")


class LogLevel(str, Enum):
    OFF = "OFF"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


@app.callback()
def main(
    log_level: Optional[LogLevel] = typer.Option(
        None,
        "--log-level",
        help="Set log level (OFF, CRITICAL, ERROR, WARNING, INFO, DEBUG). Default: OFF",
    ),
) -> None:
    """Configure package logging when requested."""
    if log_level in (None, LogLevel.OFF):
        return

    level = logging.getLevelName(log_level.value)
    package_name = __package__.split(".", 1)[0] if __package__ else "crpt_api"
    logger = logging.getLogger(package_name)

    # avoid stacking console handlers when invoked repeatedly (tests)
    has_stream = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)

    logger.propagate = False
    logger.setLevel(level)


def _load(path: Path) -> Document:
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DocumentFormatError(f"Cannot read {path}: {e.strerror or e}") from e
    return decode_document(raw)


@app.command(help="Submit one or more documents (JSON files in wire format).")
def submit(
    files: list[Path] = typer.Argument(..., help="Document JSON files", metavar="FILE"),
    signature: str = typer.Option(..., "--signature", "-s", help="Document signature"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Requests per window (default: CRPT_API_REQUEST_LIMIT or 10)"),
    interval: Optional[float] = typer.Option(None, "--interval", help="Window length in seconds (default: CRPT_API_INTERVAL_SECONDS or 60)"),
    url: Optional[str] = typer.Option(None, "--url", help="Endpoint URL override"),
) -> None:
    documents: list[tuple[Path, Document]] = []
    for path in files:
        try:
            documents.append((path, _load(path)))
        except DocumentFormatError as e:
            typer.echo(f"{path}: {e}", err=True)
            raise typer.Exit(code=1)

    try:
        client = CrptApiClient(request_limit=limit, interval_seconds=interval, api_url=url)
    except ValueError as e:
        typer.echo(f"Invalid settings: {e}", err=True)
        raise typer.Exit(code=1)

    failed = 0
    with client:
        for path, doc in documents:
            try:
                client.create_document(doc, signature)
            except RemoteRejection as e:
                failed += 1
                typer.echo(f"{path}: rejected ({e.status_code}): {e.body}")
                continue
            except TransportError as e:
                failed += 1
                typer.echo(f"{path}: transport error: {e}")
                continue
            typer.echo(f"{path}: OK")

    if failed:
        raise typer.Exit(code=1)


@app.command(help="Check document files against the wire schema without sending them.")
def validate(
    files: list[Path] = typer.Argument(..., help="Document JSON files", metavar="FILE"),
) -> None:
    invalid = 0
    for path in files:
        try:
            doc = _load(path)
        except DocumentFormatError as e:
            invalid += 1
            typer.echo(f"{path}: invalid: {e}")
            continue
        typer.echo(f"{path}: valid ({len(doc.products)} products)")
    if invalid:
        raise typer.Exit(code=1)


def example_document() -> Document:
    """Sample LP_INTRODUCE_GOODS document with a single product."""
    return Document(
        description=Description(participant_inn="participant_inn_value"),
        doc_id="12345",
        doc_status="ACTIVE",
        doc_type="LP_INTRODUCE_GOODS",
        import_request=True,
        owner_inn="owner_inn_value",
        participant_inn="participant_inn_value",
        producer_inn="producer_inn_value",
        production_date="2020-01-23",
        production_type="type_value",
        products=(
            Product(
                certificate_document="doc",
                certificate_document_date="2020-01-23",
                certificate_document_number="123",
                owner_inn="owner_inn",
                producer_inn="producer_inn",
                production_date="2020-01-23",
                tnved_code="tnved",
                uit_code="uit",
                uitu_code="uitu",
            ),
        ),
        reg_date="2020-01-23",
        reg_number="reg_number",
    )


@app.command(help="Print a sample document as wire JSON.")
def example() -> None:
    print(json.dumps(to_wire(example_document()), ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
