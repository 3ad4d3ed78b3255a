import os


def _int_env(name, default):
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Config:
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "super-secret")

    CORS_ORIGINS = [o.strip() for o in os.getenv(
        "CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",") if o.strip()]

    # Free tier upload cap
    MAX_FREE_FILES = _int_env("MAX_FREE_FILES", 10)

    # Idle sessions are dropped after this many seconds
    SESSION_TTL_SECS = _int_env("SESSION_TTL_SECS", 12 * 3600)

    ENABLE_REMINDER_MONITOR = os.getenv("ENABLE_REMINDER_MONITOR", "0") == "1"
    REMINDER_CHECK_INTERVAL_SECS = _int_env("REMINDER_CHECK_INTERVAL_SECS", 60)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class TestConfig(Config):
    TESTING = True
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    ENABLE_REMINDER_MONITOR = False
    MAX_FREE_FILES = 3
