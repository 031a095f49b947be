# exam_generator/utils/config.py
import os
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file before defining settings
load_dotenv()

class Settings(BaseSettings):
    # --- Model Provider Configuration ---
    # Bearer token for the OpenAI-compatible inference endpoint.
    # Checked per request, never at import time.
    github_pat: str | None = os.getenv("GITHUB_PAT")
    model_endpoint: str = os.getenv("MODEL_ENDPOINT", "https://models.inference.ai.azure.com")
    model_name: str = os.getenv("MODEL_NAME", "gpt-4o")

    # Fixed sampling parameters
    temperature: float = 1.0
    top_p: float = 1.0
    max_tokens: int = 4096
    request_timeout_seconds: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "60"))

    # Reject model output whose shape does not match the request
    strict_validation: bool = os.getenv("STRICT_VALIDATION", "false").lower() in ("1", "true", "yes")

    # --- API / View ---
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    api_base_url: str = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
    api_timeout_seconds: float = float(os.getenv("API_TIMEOUT_SECONDS", "120"))
    cors_allow_origins: List[str] = ["*"]  # In production, restrict this to your frontend's domain

    class Config:
        # Values above are resolved through os.getenv after load_dotenv()
        pass

settings = Settings()
