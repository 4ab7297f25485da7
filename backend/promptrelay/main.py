import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import RelayError
from .logging_config import configure_logging
from .settings import settings
from .routers import health, chat
from .routers import quiz
from .routers import exam
from .routers import upload

logger = logging.getLogger(__name__)

app = FastAPI(title="Prompt Relay API")

if settings.cors_origins_list:
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.cors_origins_list,
		allow_methods=["*"],
		allow_headers=["*"],
	)

app.include_router(health.router)
app.include_router(chat.router)
app.include_router(quiz.router)
app.include_router(exam.router)
app.include_router(upload.router)


def error_body(message: str, details: str | None = None, *, status_code: int) -> dict:
	body = {"error": message}
	# Details are only ever attached to server-side failures
	if details and status_code >= 500 and settings.expose_error_details:
		body["details"] = details
	return body


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
	if exc.status_code >= 500:
		logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
	return JSONResponse(
		status_code=exc.status_code,
		content=error_body(exc.message, exc.details, status_code=exc.status_code),
	)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
	problems = []
	for err in exc.errors():
		loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
		problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
	logger.info("Rejected %s %s: %s", request.method, request.url.path, "; ".join(problems))
	return JSONResponse(status_code=400, content={"error": "Invalid request", "problems": problems})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
	logger.exception("%s %s failed unexpectedly", request.method, request.url.path)
	return JSONResponse(
		status_code=500,
		content=error_body("Internal server error", str(exc), status_code=500),
	)


@app.get("/info")
def root():
	return {"status": "ok", "gemini_configured": bool(settings.gemini_api_key), "model": settings.gemini_model}


@app.on_event("startup")
async def startup_event():
	configure_logging()
	if not settings.gemini_api_key:
		logger.warning("GEMINI_API_KEY is not set; model requests will fail until it is configured")
