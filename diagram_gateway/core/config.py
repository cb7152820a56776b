# centralized configuration loader
# runs load_dotenv() to read .env
# provider keys are read once here and handed to the provider layer through Settings

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

# Provider credentials; absence is not checked here, upstream rejects the call later
DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY", "")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")

# Endpoints and models
DEEPSEEK_URL = os.getenv("DEEPSEEK_URL", "https://api.deepseek.com/v1/chat/completions")
DEEPSEEK_MODEL = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")
GEMINI_URL_TEMPLATE = os.getenv(
    "GEMINI_URL_TEMPLATE",
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
)
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

# Gemini sampling
GEMINI_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.5"))
GEMINI_TOP_P = float(os.getenv("GEMINI_TOP_P", "0.8"))
GEMINI_TOP_K = int(os.getenv("GEMINI_TOP_K", "40"))

# Outbound call; total seconds, connect is fixed at 10s
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class Settings:
    deepseek_api_key: str = ""
    gemini_api_key: str = ""
    deepseek_url: str = "https://api.deepseek.com/v1/chat/completions"
    deepseek_model: str = "deepseek-chat"
    gemini_url_template: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    )
    gemini_model: str = "gemini-1.5-flash"
    gemini_temperature: float = 0.5
    gemini_top_p: float = 0.8
    gemini_top_k: int = 40
    request_timeout: float = 60.0


def load_settings() -> Settings:
    """Snapshot of the process configuration, built once at startup."""
    return Settings(
        deepseek_api_key=DEEPSEEK_API_KEY,
        gemini_api_key=GEMINI_API_KEY,
        deepseek_url=DEEPSEEK_URL,
        deepseek_model=DEEPSEEK_MODEL,
        gemini_url_template=GEMINI_URL_TEMPLATE,
        gemini_model=GEMINI_MODEL,
        gemini_temperature=GEMINI_TEMPERATURE,
        gemini_top_p=GEMINI_TOP_P,
        gemini_top_k=GEMINI_TOP_K,
        request_timeout=REQUEST_TIMEOUT,
    )
