"""
Configuration management for the Crime Data Proxy API.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

BASE_DIR: Path = Path(__file__).parent.parent
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings:
    """API server configuration."""

    # Server
    API_TITLE: str = "Crime API"
    API_DESCRIPTION: str = "Crime API that returns latest crime data from Brottsplatskartan"
    API_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DOCS_URL: str = "/api-docs"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Upstream
    UPSTREAM_BASE_URL: str = "https://brottsplatskartan.se/api/events/"
    DEFAULT_LOCATION: str = "helsingborg"
    RESULT_LIMIT: int = 5
    UPSTREAM_TIMEOUT: float = float(os.getenv("UPSTREAM_TIMEOUT", "30"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
