# taskboard/config.py

import os

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name, default):
    value = os.environ.get(name, default)
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    # Session signing key. The fallback is insecure; set SESSION_SECRET in production.
    SECRET_KEY = os.environ.get("SESSION_SECRET", "my secret")
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", 3002))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///taskboard.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    STATIC_DIR = os.environ.get("STATIC_DIR", os.path.join(PACKAGE_DIR, "static"))

    # Flask-WTF: the SPA echoes the XSRF-TOKEN cookie back in this header
    WTF_CSRF_ENABLED = _env_flag("CSRF_ENABLED", True)
    WTF_CSRF_HEADERS = ["X-XSRF-TOKEN", "X-CSRFToken"]
    WTF_CSRF_TIME_LIMIT = None
    # No Referer check over HTTPS: responses send Referrer-Policy: no-referrer
    WTF_CSRF_SSL_STRICT = False
    CSRF_COOKIE_NAME = "XSRF-TOKEN"

    FORCE_HTTPS = _env_flag("FORCE_HTTPS")
    SEED_TASKS = _env_flag("SEED_TASKS", True)

    ADMIN_USERS = _env_list("ADMIN_USERS", "Jane")
    KNOWN_USERS = _env_list("KNOWN_USERS", "Steve")
