# nckuboard/config.py
import os
from dotenv import load_dotenv

load_dotenv()

def _as_bool(val: str | None, default=False) -> bool:
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}

class Config:
    # --- Core ---
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")

    # Seed the board with one illustrative open task on startup
    SEED_DEMO_TASK = _as_bool(os.getenv("SEED_DEMO_TASK"), default=True)

    # --- i18n ---
    BABEL_DEFAULT_LOCALE = os.getenv("BABEL_DEFAULT_LOCALE", "zh_TW")
    BABEL_DEFAULT_TIMEZONE = os.getenv("BABEL_DEFAULT_TIMEZONE", "Asia/Taipei")
    LANGUAGES = [s.strip() for s in os.getenv("LANGUAGES", "zh_TW,en").split(",") if s.strip()]

    # CSRF
    WTF_CSRF_TIME_LIMIT = None

    # --- Logging ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_FILENAME = os.getenv("LOG_FILENAME", "nckuboard.log")
    LOG_JSON = _as_bool(os.getenv("LOG_JSON", "0"))

    # --- Sentry ---
    SENTRY_DSN = os.getenv("SENTRY_DSN", "")
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0"))

    PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")

    # --- Session cookie (set SESSION_COOKIE_SECURE=1 behind HTTPS) ---
    SESSION_COOKIE_SECURE = _as_bool(os.getenv("SESSION_COOKIE_SECURE", "0"))
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
