import os
from typing import List

class Settings:
    GITHUB_TOKEN: str = os.getenv("GITHUB_TOKEN", os.getenv("GITHUB_KEY", "")).strip()
    GITHUB_API: str = os.getenv("GITHUB_API", "https://api.github.com").rstrip("/")
    GITHUB_API_VERSION: str = os.getenv("GITHUB_API_VERSION", "2022-11-28")
    GITHUB_ACCOUNT: str = os.getenv("GITHUB_ACCOUNT", "daniel-iliesh")
    COVER_IMAGE_PATH: str = os.getenv("COVER_IMAGE_PATH", "favimage.png")
    MAX_WORKERS: int = int(os.getenv("MAX_WORKERS", "8"))
    CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
