# config/appconfig.py
"""
Application Configuration
Server, data file locations, CORS and logging for the clinic queue backend
"""
from pathlib import Path
from typing import Any, Dict, List

from pydantic_settings import BaseSettings

# Calculate the project root
BASE_DIR = Path(__file__).resolve().parent.parent


class AppSettings(BaseSettings):
    """Core settings for the clinic queue server"""

    # ============================================================================
    # SERVER
    # ============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # ============================================================================
    # JSON DATA FILES
    # ============================================================================
    DATA_DIR: str = str(BASE_DIR)
    QUEUE_FILE: str = "queue.json"              # waiting patients
    REPORTS_FILE: str = "reports.json"
    ATTENDED_FILE: str = "attendedpatients.json"

    # ============================================================================
    # CORS
    # ============================================================================
    CORS_ORIGINS: List[str] = ["*"]

    # ============================================================================
    # LOGGING
    # ============================================================================
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    # ========================================================================
    # COMPUTED PROPERTIES
    # ========================================================================
    @property
    def resolved_data_dir(self) -> Path:
        """Get absolute path to the directory holding the JSON files."""
        path = Path(self.DATA_DIR)
        return path if path.is_absolute() else BASE_DIR / path

    @property
    def LOGGING_CONFIG(self) -> Dict[str, Any]:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "app": {"level": self.LOG_LEVEL, "handlers": ["console"], "propagate": False},
                "uvicorn": {"level": "INFO", "handlers": ["console"], "propagate": False},
            },
            "root": {"level": "WARNING", "handlers": ["console"]},
        }


settings = AppSettings()
