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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./billing.db")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")
    CACHE_BACKEND = data.get("CACHE_BACKEND", "memory")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", 1))

    # Catalog tree cache (GET /catalog)
    CATALOG_CACHE_TTL_SECONDS = data.get("CATALOG_CACHE_TTL_SECONDS", 600)

    # Price history suggestions
    PRICE_HISTORY_BILL_WINDOW = data.get("PRICE_HISTORY_BILL_WINDOW", 10)  # Most recent bills scanned
    PRICE_HISTORY_LIMIT = data.get("PRICE_HISTORY_LIMIT", 5)  # Distinct prices returned

    DEFAULT_PAGE_SIZE = data.get("DEFAULT_PAGE_SIZE", 20)

    # Estimate PDF header
    COMPANY_NAME = data.get("COMPANY_NAME", "ABC Company")
    COMPANY_PHONE = data.get("COMPANY_PHONE", "")
    CURRENCY_LABEL = data.get("CURRENCY_LABEL", "Rs.")
