from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
	# Provider can be "vertex" (Vertex AI Express) or "ai_studio" (Generative Language API)
	gemini_provider: str = Field(default="ai_studio", validation_alias="GEMINI_PROVIDER")
	gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")
	gemini_timeout_seconds: float = Field(default=30, validation_alias="GEMINI_TIMEOUT_SECONDS")
	# Vertex configuration
	vertex_region: str = Field(default="us-central1", validation_alias="GEMINI_VERTEX_REGION")
	vertex_project: str | None = Field(default=None, validation_alias="GEMINI_VERTEX_PROJECT")

	# Input limits
	max_message_chars: int = Field(default=4000, validation_alias="MAX_MESSAGE_CHARS")
	max_upload_bytes: int = Field(default=10 * 1024 * 1024, validation_alias="MAX_UPLOAD_BYTES")

	# Adds the underlying error text as "details" on 5xx responses
	expose_error_details: bool = Field(default=False, validation_alias="EXPOSE_ERROR_DETAILS")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
	cors_origins: str = Field(default="", validation_alias="CORS_ORIGINS")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	@property
	def cors_origins_list(self) -> list[str]:
		return [v.strip() for v in (self.cors_origins or "").split(",") if v.strip()]

settings = Settings()
