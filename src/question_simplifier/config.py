"""
Configuration utilities for the Question Simplifier.

Central place to configure:
- Relay API base URL (used by the UI and the relay client)
- Oracle (Groq chat completions) endpoint, model and sampling
- Location of the client-local storage file
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


class Settings(BaseModel):
    # Base URL where the FastAPI relay is running.
    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:4000")
    port: int = int(os.getenv("PORT", "4000"))

    # Relay paths (relative to api_base_url)
    simplify_path: str = "/api/simplify"
    generate_title_path: str = "/api/generate-title"

    # Oracle configuration (OpenAI-compatible chat completions)
    groq_api_key: Optional[str] = os.getenv("GROQ_API_KEY")
    groq_api_url: str = os.getenv(
        "GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions"
    )
    groq_model: str = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")
    oracle_temperature: float = float(os.getenv("ORACLE_TEMPERATURE", "0.3"))
    oracle_max_tokens: int = int(os.getenv("ORACLE_MAX_TOKENS", "300"))
    oracle_timeout: float = float(os.getenv("ORACLE_TIMEOUT", "60"))

    # Client-local key-value store
    storage_path: str = os.getenv(
        "STORAGE_PATH",
        str(Path.home() / ".question_simplifier" / "local_storage.json"),
    )


settings = Settings()
