from pydantic import BaseModel
from dotenv import load_dotenv
from typing import List, Mapping, Optional
import os

from .errors import ConfigError


class Settings(BaseModel):
    database_url: str
    jwt_secret: str
    jwt_expire_minutes: int = 60

    cookie_name: str = "auth_token"
    cookie_secure: bool = False

    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # re-check that the caller still exists before inserting a todo
    validate_owner_exists: bool = False

    log_level: str = "INFO"


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _origins(value: str) -> List[str]:
    origins = [o.strip() for o in value.split(",") if o.strip()]
    return origins or ["http://localhost:3000", "http://127.0.0.1:3000"]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the process environment (and `.env` if present).

    Raises ConfigError when DATABASE_URL or JWT_SECRET is missing.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    database_url = environ.get("DATABASE_URL", "")
    if not database_url:
        raise ConfigError("Database URL is required (DATABASE_URL)")

    jwt_secret = environ.get("JWT_SECRET", "")
    if not jwt_secret:
        raise ConfigError("JWT secret is required (JWT_SECRET)")

    return Settings(
        database_url=database_url,
        jwt_secret=jwt_secret,
        jwt_expire_minutes=int(environ.get("JWT_EXPIRE_MINUTES", "60")),
        cookie_name=environ.get("COOKIE_NAME", "auth_token"),
        cookie_secure=_flag(environ.get("COOKIE_SECURE", "false")),
        cors_origins=_origins(environ.get("ALLOWED_ORIGINS", "")),
        validate_owner_exists=_flag(environ.get("VALIDATE_OWNER_EXISTS", "false")),
        log_level=environ.get("LOG_LEVEL", "INFO"),
    )
