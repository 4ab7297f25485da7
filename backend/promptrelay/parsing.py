from __future__ import annotations
import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from .errors import ResponseParseError
from .schemas import Quiz

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\n?([\s\S]*?)\n?[ \t]*```$")


def strip_code_fence(text: str) -> str:
	"""Remove a surrounding markdown code fence such as ```json ... ```."""
	stripped = (text or "").strip()
	match = _FENCE_RE.match(stripped)
	if match:
		return match.group(1).strip()
	return stripped


def parse_json_payload(text: str) -> Any:
	candidate = strip_code_fence(text)
	if not candidate:
		raise ResponseParseError("The language model returned an empty response")
	try:
		return json.loads(candidate)
	except json.JSONDecodeError as err:
		logger.warning("Model response is not valid JSON: %s", err)
		raise ResponseParseError("The language model did not return valid JSON", details=str(err)) from err


def parse_quiz(text: str) -> Quiz:
	data = parse_json_payload(text)
	try:
		return Quiz.model_validate(data)
	except ValidationError as err:
		logger.warning("Model response does not match the quiz format")
		raise ResponseParseError("Invalid quiz format", details=str(err)) from err
