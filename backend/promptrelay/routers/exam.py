from __future__ import annotations
from fastapi import APIRouter, Depends

from ..gemini_client import GeminiClient
from ..prompts import build_exam_prompt
from ..relay import get_gemini_client, relay_prompt
from ..schemas import ExamConfig, RelayResponse

router = APIRouter(prefix="/api", tags=["exam"])


@router.post("/exam", response_model=RelayResponse)
async def build_exam(config: ExamConfig, client: GeminiClient = Depends(get_gemini_client)):
	text = await relay_prompt(client, build_exam_prompt(config), field="composed prompt")
	return RelayResponse(response=text)
