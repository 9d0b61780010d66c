import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./app.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 60))
    APP_URL = data.get("APP_URL", "http://localhost:3000")

    # "memory" or "redis"
    CACHE_BACKEND = data.get("CACHE_BACKEND", "memory")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    CACHE_TTL_SECONDS = int(data.get("CACHE_TTL_SECONDS", 300))

    # "log" or "smtp"
    EMAIL_BACKEND = data.get("EMAIL_BACKEND", "log")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    EMAIL_SENDER = data.get("EMAIL_SENDER", "noreply@example.com")

    INVITE_LINK_TOKEN_BYTES = int(data.get("INVITE_LINK_TOKEN_BYTES", 24))
    GATE_REQUIRE_ACTIVE_MEMBERSHIP = bool(data.get("GATE_REQUIRE_ACTIVE_MEMBERSHIP", False))
    CYCLE_CHECK_INCLUDE_RELATED = bool(data.get("CYCLE_CHECK_INCLUDE_RELATED", True))
