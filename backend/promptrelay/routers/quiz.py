from __future__ import annotations
from fastapi import APIRouter, Depends

from ..errors import ClientInputError
from ..gemini_client import GeminiClient
from ..parsing import parse_quiz
from ..prompts import build_quiz_prompt
from ..relay import get_gemini_client, relay_prompt
from ..schemas import QuizRequest, QuizResponse

router = APIRouter(prefix="/api", tags=["quiz"])


@router.post("/quiz", response_model=QuizResponse)
async def generate_quiz(req: QuizRequest, client: GeminiClient = Depends(get_gemini_client)):
	keywords = (req.keywords or "").strip()
	if not keywords:
		raise ClientInputError("keywords are required")
	raw = await relay_prompt(client, build_quiz_prompt(keywords), field="composed prompt")
	# Expecting fenced or bare JSON; anything else is reported as a parse failure
	quiz = parse_quiz(raw)
	return QuizResponse(questions=quiz.questions)
