from pathlib import Path

from dotenv import load_dotenv
from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "Club League"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api/v1"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # CORS
    BACKEND_CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Snapshot storage
    DATA_FILE: Path = Path("data/game-data.json")

    # Live betting
    BETTING_WINDOW_SECONDS: int = 30
    ENFORCE_BETTING_WINDOW: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()

    @property
    def betting_window(self) -> int | None:
        """Window handed to the core, or None when callers gate betting themselves."""
        if self.ENFORCE_BETTING_WINDOW:
            return self.BETTING_WINDOW_SECONDS
        return None

    model_config = ConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()
