from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class Settings:
    DICTIONARY_API_URL: str = os.getenv("DICTIONARY_API_URL", "https://api.dictionaryapi.dev/api/v2/entries/en")
    LOOKUP_TIMEOUT: float = float(os.getenv("LOOKUP_TIMEOUT", "10"))
    HISTORY_LIMIT: int = int(os.getenv("HISTORY_LIMIT", "10"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))
    TEMPLATES_DIR: Path = Path(__file__).resolve().parent / "web" / "templates"
    STATIC_DIR: Path = Path(__file__).resolve().parent / "web" / "static"

settings = Settings()
