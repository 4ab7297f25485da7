"""Plain-text extraction for uploaded documents."""

from __future__ import annotations
import io
import logging
from typing import Callable, Dict

import pytesseract
from docx import Document
from PIL import Image
from PyPDF2 import PdfReader

from .errors import ClientInputError, RelayError

logger = logging.getLogger(__name__)

# Supported file extensions and the MIME type reported back to the caller
SUPPORTED_EXTENSIONS: Dict[str, str] = {
	".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
	".pdf": "application/pdf",
	".png": "image/png",
	".jpg": "image/jpeg",
	".jpeg": "image/jpeg",
}


def file_extension(filename: str) -> str:
	lower = (filename or "").lower()
	for ext in SUPPORTED_EXTENSIONS:
		if lower.endswith(ext):
			return ext
	return ""


def extract_text_from_docx(content: bytes) -> str:
	doc = Document(io.BytesIO(content))
	parts = [p.text for p in doc.paragraphs if p.text.strip()]
	# Tables are flattened row by row
	for table in doc.tables:
		for row in table.rows:
			cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
			if cells:
				parts.append(" | ".join(cells))
	return "\n\n".join(parts)


def extract_text_from_pdf(content: bytes) -> str:
	reader = PdfReader(io.BytesIO(content))
	parts = []
	for page in reader.pages:
		page_text = page.extract_text()
		if page_text:
			parts.append(page_text)
	return "\n\n".join(parts)


def extract_text_from_image(content: bytes) -> str:
	img = Image.open(io.BytesIO(content))
	return pytesseract.image_to_string(img)


_EXTRACTORS: Dict[str, Callable[[bytes], str]] = {
	".docx": extract_text_from_docx,
	".pdf": extract_text_from_pdf,
	".png": extract_text_from_image,
	".jpg": extract_text_from_image,
	".jpeg": extract_text_from_image,
}


def extract_text(content: bytes, filename: str) -> str:
	"""Return the plain text of an uploaded document.

	Raises ClientInputError for unsupported types, unreadable files and
	documents without any extractable text.
	"""
	ext = file_extension(filename)
	if not ext:
		allowed = ", ".join(SUPPORTED_EXTENSIONS)
		raise ClientInputError(f"Unsupported file type. Allowed: {allowed}")
	if not content:
		raise ClientInputError("Uploaded file is empty")
	try:
		text = _EXTRACTORS[ext](content)
	except pytesseract.TesseractNotFoundError as err:
		logger.error("Tesseract binary is not installed")
		raise RelayError("Image text recognition is not available on this server", details=str(err)) from err
	except Exception as err:
		logger.warning("Failed to extract text from %s: %s", filename, err)
		raise ClientInputError(f"Could not read {filename}", details=str(err)) from err
	text = text.strip()
	if not text:
		raise ClientInputError("The document contains no extractable text")
	logger.info("Extracted %d characters from %s", len(text), filename)
	return text
