from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..core.services.document_submitter import DocumentSubmitter
from ..infra.document_codec import encode_document
from ..infra.http_client import HttpClient
from ..infra.permit_gate import PermitGate

logger = logging.getLogger(__name__)


def permit_gate_resource(request_limit, interval_seconds):
	"""Create the shared gate and keep auto replenish running for its lifetime.

	Shutdown stops the timer only; callers still blocked in acquire stay blocked.
	"""
	logger.info(f"Initializing permit gate: {request_limit} requests per {interval_seconds}s")
	gate = PermitGate(capacity=request_limit, interval=interval_seconds)
	gate.start_auto_replenish()
	try:
		yield gate
	finally:
		logger.debug("Shutting down permit gate")
		gate.shutdown()


def http_client_resource(timeout_seconds, signature_header):
	logger.debug(f"Initializing HTTP client (timeout: {timeout_seconds}s)")
	client = HttpClient(timeout_seconds=timeout_seconds, signature_header=signature_header)
	try:
		yield client
	finally:
		logger.debug("Closing HTTP client")
		client.close()


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	# One gate per container: every submitter shares the same window
	gate = providers.Resource(
		permit_gate_resource,
		request_limit=config.request_limit,
		interval_seconds=config.interval_seconds,
	)

	http_client = providers.Resource(
		http_client_resource,
		timeout_seconds=config.timeout_seconds,
		signature_header=config.signature_header,
	)

	submitter = providers.Factory(
		DocumentSubmitter,
		gate=gate,
		sender=http_client,
		url=config.api_url,
		encoder=providers.Object(encode_document),
	)
