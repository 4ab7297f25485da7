from __future__ import annotations
from fastapi import APIRouter, File, UploadFile

from ..documents import SUPPORTED_EXTENSIONS, extract_text, file_extension
from ..errors import ClientInputError
from ..schemas import UploadResponse
from ..settings import settings

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload-docx", response_model=UploadResponse)
async def upload_document(file: UploadFile = File(...)):
	filename = file.filename or ""
	ext = file_extension(filename)
	if not ext:
		raise ClientInputError(f"Unsupported file type. Allowed: {', '.join(SUPPORTED_EXTENSIONS)}")
	# Read one byte past the limit to detect oversized uploads
	content = await file.read(settings.max_upload_bytes + 1)
	if len(content) > settings.max_upload_bytes:
		raise ClientInputError(f"File is larger than {settings.max_upload_bytes} bytes")
	text = extract_text(content, filename)
	return UploadResponse(content=text, filename=filename, type=SUPPORTED_EXTENSIONS[ext])
