from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, Optional
from .errors import MissingCredentialError, UpstreamError
from .settings import settings

logger = logging.getLogger(__name__)


class GeminiClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key or settings.gemini_api_key
		if not self.api_key:
			raise MissingCredentialError("GEMINI_API_KEY is not configured")
		self.model = model or settings.gemini_model
		self.provider = settings.gemini_provider
		if self.provider == "vertex":
			region = settings.vertex_region
			project = settings.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint (API key via header)
			self.base_url = base_url or (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models/{self.model}:generateContent"
			)
			self._auth_in_query = False
		else:
			# Google AI Studio (Generative Language API)
			self.base_url = base_url or f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"
			self._auth_in_query = True
		self._client = httpx.AsyncClient(timeout=settings.gemini_timeout_seconds, transport=transport)

	async def __aenter__(self) -> "GeminiClient":
		return self

	async def __aexit__(self, *exc_info: Any) -> None:
		await self.aclose()

	async def generate(self, prompt: str) -> str:
		"""Send ``prompt`` as the single text part and return the completion text.

		One call, no retry. Any transport, status or payload problem is raised
		as UpstreamError with the underlying error text as details.
		"""
		payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
		params: Dict[str, Any] = {}
		headers: Dict[str, str] = {}
		if self._auth_in_query:
			params["key"] = self.api_key
		else:
			headers["x-goog-api-key"] = self.api_key
		try:
			r = await self._client.post(self.base_url, params=params, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPStatusError as http_err:
			logger.error("Gemini returned HTTP %s for model %s", http_err.response.status_code, self.model)
			raise UpstreamError(
				"The language model request failed",
				details=f"HTTP {http_err.response.status_code}: {http_err.response.text}",
			) from http_err
		except httpx.RequestError as net_err:
			logger.error("Gemini request failed: %s", net_err.__class__.__name__)
			raise UpstreamError("The language model could not be reached", details=str(net_err)) from net_err
		try:
			data = r.json()
			text = data["candidates"][0]["content"]["parts"][0]["text"]
			if not isinstance(text, str):
				raise TypeError(f"text part is {type(text).__name__}, not str")
		except (ValueError, KeyError, IndexError, TypeError) as err:
			logger.error("Unexpected Gemini response payload")
			raise UpstreamError(
				"The language model returned an unexpected response",
				details=f"Unexpected Gemini response: {r.text}",
			) from err
		return text

	async def aclose(self) -> None:
		await self._client.aclose()
