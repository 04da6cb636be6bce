import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


class Settings(BaseSettings):
    """Runtime settings for the consultation backend."""

    APP_NAME: str = os.getenv("APP_NAME", "AyurCare Consultation Backend")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    CORS_ORIGINS: List[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]

    # Mock "AI" processing delay applied to new consultations
    SIMULATED_LATENCY_SECONDS: float = float(os.getenv("SIMULATED_LATENCY_SECONDS", "0"))

    # Scoring engine
    SCORING_MAX_JITTER: float = float(os.getenv("SCORING_MAX_JITTER", "10"))
    SCORING_SEED: Optional[int] = _optional_int("SCORING_SEED")

    RECENT_CONSULTATIONS_LIMIT: int = int(os.getenv("RECENT_CONSULTATIONS_LIMIT", "5"))

    class Config:
        case_sensitive = True


settings = Settings()
