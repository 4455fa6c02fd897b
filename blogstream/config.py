from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env if present
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


class Config:
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.urandom(32).hex())

    # Absolute prefix for links rendered into HTML fragments (no trailing slash)
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:8000").rstrip("/")

    # Database
    # Read from environment and then unset for security
    SQLALCHEMY_DATABASE_URI: str = os.environ.pop("DATABASE_URL", "sqlite:///blogstream.db")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # Post streams
    POST_PAGING_SIZE: int = int(os.getenv("POST_PAGING_SIZE", "10"))
    TITLE_PAGING_SIZE: int = int(os.getenv("TITLE_PAGING_SIZE", "50"))
    TAG_CLOUD_COUNT: int = int(os.getenv("TAG_CLOUD_COUNT", "50"))

    # Sessions
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.getenv("FLASK_ENV", "production") == "production"
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_PATH = "/"
    SESSION_LIFETIME_MINUTES = int(os.getenv("SESSION_LIFETIME_MINUTES", "30"))

    # Caching
    CACHE_TYPE = os.getenv("CACHE_TYPE", "SimpleCache")
    TAG_CACHE_SECONDS: int = int(os.getenv("TAG_CACHE_SECONDS", "300"))

    # Rate limiting
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per minute")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Security headers
    SECURITY_CSP = (
        "default-src 'self'; "
        "img-src 'self' data: https:; "
        "object-src 'none'; "
        "base-uri 'self'; "
        "frame-ancestors 'none'"
    )
    SECURITY_HSTS_SECONDS = 31536000
    SECURITY_PERMISSIONS_POLICY = (
        "geolocation=(), microphone=(), camera=(), payment=(), usb=(), "
        "magnetometer=(), gyroscope=(), accelerometer=()"
    )

    # Flask env
    ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = ENV != "production"
