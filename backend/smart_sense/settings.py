from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field

class Settings(BaseSettings):
	# API_KEY is accepted too; GEMINI_API_KEY wins when both are set
	gemini_api_key: str | None = Field(default=None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"))
	# Provider can be "vertex" (Vertex AI Express) or "ai_studio" (Generative Language API)
	gemini_provider: str = Field(default="ai_studio", validation_alias="GEMINI_PROVIDER")
	# Text model used by every panel except the learning roadmap
	gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")
	gemini_model_roadmap: str = Field(default="gemini-2.5-pro", validation_alias="GEMINI_MODEL_ROADMAP")
	# Speech synthesis
	gemini_model_tts: str = Field(default="gemini-2.5-flash-preview-tts", validation_alias="GEMINI_MODEL_TTS")
	gemini_tts_voice: str = Field(default="Kore", validation_alias="GEMINI_TTS_VOICE")
	# Vertex configuration
	vertex_region: str = Field(default="us-central1", validation_alias="GEMINI_VERTEX_REGION")
	vertex_project: str | None = Field(default=None, validation_alias="GEMINI_VERTEX_PROJECT")
	timeout_seconds: float = Field(default=30.0, validation_alias="GEMINI_TIMEOUT_SECONDS")

	# Where exported .txt results are written
	export_dir: str = Field(default="exports", validation_alias="SMART_SENSE_EXPORT_DIR")
	log_level: str = Field(default="INFO", validation_alias="SMART_SENSE_LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

settings = Settings()
