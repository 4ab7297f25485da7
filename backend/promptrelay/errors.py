from __future__ import annotations
from typing import Optional


class RelayError(Exception):
	"""Base class for failures that map onto an HTTP error response.

	``message`` is shown to the caller as ``error``. ``details`` holds the
	underlying error text and is only exposed when EXPOSE_ERROR_DETAILS is set.
	"""

	status_code: int = 500

	def __init__(self, message: str, *, details: Optional[str] = None) -> None:
		super().__init__(message)
		self.message = message
		self.details = details


class ClientInputError(RelayError):
	status_code = 400


class MissingCredentialError(RelayError):
	pass


class UpstreamError(RelayError):
	pass


class ResponseParseError(RelayError):
	pass
