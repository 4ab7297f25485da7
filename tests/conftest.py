import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from promptrelay.gemini_client import GeminiClient
from promptrelay.main import app
from promptrelay import relay
from promptrelay.settings import settings


QUIZ_JSON = """{
  "questions": [
    {
      "question": "Welk ras is het kleinst?",
      "options": ["A) Chihuahua", "B) Labrador", "C) Husky", "D) Boxer"],
      "correctAnswer": "A) Chihuahua"
    }
  ]
}"""


def gemini_reply(text: str) -> dict:
	return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeGemini:
	"""Records outbound generateContent calls and answers with canned replies."""

	def __init__(self) -> None:
		self.requests: List[httpx.Request] = []
		self.reply: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json=gemini_reply("ok"))

	def handler(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		return self.reply(request)

	def reply_with_text(self, text: str) -> None:
		self.reply = lambda request: httpx.Response(200, json=gemini_reply(text))

	@property
	def prompts(self) -> List[str]:
		return [json.loads(r.content)["contents"][0]["parts"][0]["text"] for r in self.requests]


@pytest.fixture(autouse=True)
def relay_settings(monkeypatch):
	monkeypatch.setattr(settings, "gemini_api_key", "test-key")
	monkeypatch.setattr(settings, "gemini_provider", "ai_studio")
	monkeypatch.setattr(settings, "gemini_model", "gemini-test")
	monkeypatch.setattr(settings, "max_message_chars", 4000)
	monkeypatch.setattr(settings, "expose_error_details", False)
	return settings


@pytest.fixture
def fake_gemini():
	return FakeGemini()


@pytest.fixture
def client(fake_gemini, monkeypatch):
	# Keeps the real credential check in get_gemini_client, swaps only the network transport
	monkeypatch.setattr(relay, "GeminiClient", lambda: GeminiClient(transport=httpx.MockTransport(fake_gemini.handler)))
	return TestClient(app)
