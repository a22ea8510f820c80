import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key: str, default=None):
    """Environment variables win over env.yaml, env.yaml wins over defaults."""
    if key in os.environ:
        return os.environ[key]
    return data.get(key, default)


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def parse_list(value) -> list:
    """YAML lists pass through; env strings are comma separated."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [item.strip() for item in str(value).split(",") if item.strip()]


class ApplicationConfig:
    ENVIRONMENT = _get("ENVIRONMENT", "development")
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./taskflow.db")
    API_PORT = int(_get("API_PORT", 8000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = parse_list(_get("CORS_ORIGINS", []))
    CORS_ALLOW_CREDENTIALS = parse_bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    JWT_SECRET = _get("JWT_SECRET", None)
    JWT_ACCESS_TOKEN_EXPIRY = _get("JWT_ACCESS_TOKEN_EXPIRY", "1h")
    JWT_REFRESH_TOKEN_EXPIRY = _get("JWT_REFRESH_TOKEN_EXPIRY", "30d")
