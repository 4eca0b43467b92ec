"""
Configuration for Legal Document Generation Service
===================================================

Environment variables:
- LLM_MODE: none|openai|openrouter|gemini (default: none)
- OPENAI_API_KEY / OPENAI_MODEL: OpenAI chat completions (default model: gpt-4o)
- OPENROUTER_API_KEY / OPENROUTER_MODEL: OpenRouter chat completions
- GEMINI_API_KEY / GEMINI_MODEL: Google Gemini
- LLM_MAX_CONCURRENCY: Max in-flight AI calls (default: 4)
- UPLOAD_DIR: Directory for uploaded files (default: ./uploads)
- MAX_UPLOAD_BYTES: Per-file upload limit (default: 10MB)
- OCR_MODE: auto|tesseract|none (default: auto)
- OCR_LANGUAGE: Tesseract language code (default: eng)
- DATABASE_URL: SQLAlchemy URL (read by db.session, default: sqlite:///./docgen.db)
"""

from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from .schemas import LLMMode


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM Configuration
    llm_mode: LLMMode = LLMMode.NONE

    # OpenAI
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"
    openai_base_url: str = "https://api.openai.com/v1"

    # Clarifying questions use a cheaper model
    clarifier_model: Optional[str] = "gpt-4o-mini"

    # OpenRouter
    openrouter_api_key: Optional[str] = None
    openrouter_model: str = "openai/gpt-4o"
    openrouter_base_url: str = "https://openrouter.ai/api/v1"

    # Gemini
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"

    # Timeouts (seconds) and concurrency caps
    llm_timeout: int = 60
    llm_max_concurrency: int = 4
    extraction_max_concurrency: int = 2

    # Uploads
    upload_dir: str = "./uploads"
    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_extensions: List[str] = [".pdf", ".doc", ".docx", ".jpg", ".jpeg", ".png"]

    # OCR
    ocr_mode: str = "auto"  # auto | tesseract | none
    ocr_language: str = "eng"

    # CORS (comma separated)
    cors_allow_origins: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"

    # Service info
    service_version: str = "1.0.0"

    def validate_llm_config(self) -> List[str]:
        """Validate LLM configuration, return list of warnings"""
        warnings = []

        if self.llm_mode == LLMMode.NONE:
            warnings.append("LLM_MODE=none: documents cannot be analyzed until an AI provider is configured")

        elif self.llm_mode == LLMMode.OPENAI:
            if not self.openai_api_key:
                warnings.append("LLM_MODE=openai but OPENAI_API_KEY not set")

        elif self.llm_mode == LLMMode.OPENROUTER:
            if not self.openrouter_api_key:
                warnings.append("LLM_MODE=openrouter but OPENROUTER_API_KEY not set")

        elif self.llm_mode == LLMMode.GEMINI:
            if not self.gemini_api_key:
                warnings.append("LLM_MODE=gemini but GEMINI_API_KEY not set")

        return warnings

    def cors_origins(self) -> List[str]:
        origins: List[str] = []
        for item in self.cors_allow_origins.split(","):
            origin = item.strip().strip('"').strip("'").rstrip("/")
            if origin:
                origins.append(origin)
        return origins


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Convenience function
def get_llm_mode() -> LLMMode:
    """Get current LLM mode"""
    return get_settings().llm_mode
