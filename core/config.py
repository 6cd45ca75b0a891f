import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:4173",
    "http://localhost:3000",
]


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings:
    def __init__(self):
        self.app_name: str = os.getenv("APP_NAME", "Football Bracket API")
        self.app_version: str = os.getenv("APP_VERSION", "0.1.0")
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.log_level: str = os.getenv("LOG_LEVEL", "DEBUG" if self.debug else "INFO").upper()

        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", 4000))

        cors = os.getenv("CORS_ORIGINS")
        self.cors_origins: List[str] = _split_origins(cors) if cors else list(DEFAULT_CORS_ORIGINS)

        # Tournament rules
        self.tournament_name_max_length: int = int(os.getenv("TOURNAMENT_NAME_MAX_LENGTH", 100))
        self.tournament_min_participants: int = int(os.getenv("TOURNAMENT_MIN_PARTICIPANTS", 2))
        self.tournament_max_participants: int = int(os.getenv("TOURNAMENT_MAX_PARTICIPANTS", 64))
        self.pairing_strategy: str = os.getenv("PAIRING_STRATEGY", "RANDOM").upper()

settings = Settings()
