from __future__ import annotations
import logging
from typing import Any, AsyncIterator

from .errors import ClientInputError, MissingCredentialError
from .gemini_client import GeminiClient
from .settings import settings

logger = logging.getLogger(__name__)


def validate_message(message: Any, *, field: str = "message") -> str:
	if message is None or message == "":
		logger.info("Rejected request without %s", field)
		raise ClientInputError(f"{field} is required")
	limit = settings.max_message_chars
	if not isinstance(message, str):
		logger.info("Rejected %s of type %s", field, type(message).__name__)
		raise ClientInputError(f"{field} must be a string of at most {limit} characters")
	if len(message) > limit:
		logger.info("Rejected %s of %d characters (limit %d)", field, len(message), limit)
		raise ClientInputError(f"{field} must be a string of at most {limit} characters")
	return message


async def relay_prompt(client: GeminiClient, prompt: Any, *, field: str = "message") -> str:
	"""Forward ``prompt`` unchanged to the model and return the completion text.

	The prompt is checked against the length cap before anything is sent, so an
	oversized or mistyped prompt never reaches the upstream service.
	"""
	text = validate_message(prompt, field=field)
	logger.debug("Relaying prompt of %d characters to %s", len(text), client.model)
	return await client.generate(text)


async def get_gemini_client() -> AsyncIterator[GeminiClient]:
	# Fails before any network activity when the credential is absent
	if not settings.gemini_api_key:
		logger.error("GEMINI_API_KEY is not configured")
		raise MissingCredentialError("GEMINI_API_KEY is not configured")
	client = GeminiClient()
	try:
		yield client
	finally:
		await client.aclose()
