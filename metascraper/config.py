"""
Configuration management for the metadata scraper.
Handles environment variables for logging and the HTTP API server.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")  # json or console

    @classmethod
    def is_console_logging(cls) -> bool:
        """Check if human-readable console logging is requested."""
        return cls.LOG_FORMAT.lower() == "console"


config = Config()
