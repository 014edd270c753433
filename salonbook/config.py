import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and passed to collaborators"""

    database_url: str = "sqlite:///./salonbook.db"
    db_pool_size: int = 20
    db_max_overflow: int = 30
    db_pool_timeout: int = 30
    db_pool_recycle: int = 300

    # Identity collaborator - tokens are issued elsewhere, we only verify them
    jwt_secret: str = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - Dev fallback only
    jwt_algorithm: str = "HS256"

    # Resend Email Configuration
    resend_api_key: str | None = None
    email_from_address: str = "SalonBook <noreply@salonbook.app>"
    notification_timeout_seconds: float = 10.0

    frontend_url: str = "http://localhost:5173"
    allowed_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )


def load_settings() -> Settings:
    """Read settings from the environment (and .env if present)"""
    load_dotenv(dotenv_path=env_path)

    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        warnings.warn(
            "JWT_SECRET not set! Using insecure default - DO NOT USE IN PRODUCTION",
            RuntimeWarning,
            stacklevel=2,
        )
        jwt_secret = Settings.jwt_secret

    return Settings(
        database_url=os.getenv("DATABASE_URL", Settings.database_url),
        db_pool_size=int(os.getenv("DB_POOL_SIZE", "20")),
        db_max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "30")),
        db_pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "30")),
        db_pool_recycle=int(os.getenv("DB_POOL_RECYCLE", "300")),
        jwt_secret=jwt_secret,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        resend_api_key=os.getenv("RESEND_API_KEY"),
        email_from_address=os.getenv("EMAIL_FROM_ADDRESS", Settings.email_from_address),
        notification_timeout_seconds=float(os.getenv("NOTIFICATION_TIMEOUT_SECONDS", "10")),
        frontend_url=os.getenv("FRONTEND_URL", Settings.frontend_url),
        allowed_origins=_split_origins(
            os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000")
        ),
    )
