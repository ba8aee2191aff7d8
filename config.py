import os
import logging

logger = logging.getLogger(__name__)

def _get_env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}

def _get_env_list(name: str, default: str) -> list:
    value = os.environ.get(name, default)
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.environ.get("APP_ENV", "development").strip().lower()

DATABASE_URL = os.environ.get("DATABASE_URL", "postgresql://brainly:brainly@db:5432/brainly")
DATABASE_URL_ASYNC = DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://")
SQL_ECHO = _get_env_bool("SQL_ECHO", default=False)
REDIS_URL = os.environ.get("REDIS_URL", "redis://redis:6379/0")

SECRET_KEY = os.environ.get("SECRET_KEY")
if not SECRET_KEY:
    if APP_ENV == "production":
        raise RuntimeError("SECRET_KEY environment variable is required in production.")
    SECRET_KEY = "dev-insecure-secret-key"
    logger.warning("SECRET_KEY is not set, using insecure development key")

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24 * 7))
PASSWORD_HASH_ROUNDS = 8

SHARE_HASH_LENGTH = 12
SHARE_CACHE_TTL_SECONDS = int(os.environ.get("SHARE_CACHE_TTL_SECONDS", 60))
SHARE_BASE_URL = os.environ.get("SHARE_BASE_URL", "http://localhost:5173/share/")

API_PREFIX = os.environ.get("API_PREFIX", "/api/v1")
CORS_ORIGINS = _get_env_list("CORS_ORIGINS", "*")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
