from __future__ import annotations
import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from ..errors import ClientInputError
from ..gemini_client import GeminiClient
from ..prompts import build_cabaret_prompt
from ..relay import get_gemini_client, relay_prompt, validate_message
from ..schemas import RelayResponse

router = APIRouter(prefix="/api", tags=["chat"])


async def _read_json_object(request: Request) -> Dict[str, Any]:
	# Parsed by hand so a mistyped message is a 400, not a schema 422
	try:
		body = await request.json()
	except (json.JSONDecodeError, UnicodeDecodeError):
		raise ClientInputError("Request body must be a JSON object")
	if not isinstance(body, dict):
		raise ClientInputError("Request body must be a JSON object")
	return body


@router.post("/chat", response_model=RelayResponse)
async def chat(request: Request, client: GeminiClient = Depends(get_gemini_client)):
	body = await _read_json_object(request)
	text = await relay_prompt(client, body.get("message"))
	return RelayResponse(response=text)


@router.post("/cabaret", response_model=RelayResponse)
async def cabaret(request: Request, client: GeminiClient = Depends(get_gemini_client)):
	body = await _read_json_object(request)
	message = validate_message(body.get("message")).strip()
	if not message:
		raise ClientInputError("message is required")
	text = await relay_prompt(client, build_cabaret_prompt(message), field="composed prompt")
	return RelayResponse(response=text)
