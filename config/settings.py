"""
Portal – Django Settings (Infrastructure Only)
==============================================
Django is the framework container for the portal access core.
The core never imports settings; the adapter reads the PORTAL_* keys.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("PORTAL_SECRET_KEY", "portal-dev-key-replace-before-deployment")

DEBUG = True

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    # ── Portal Modules ────────────────────────────────────
    "portal.profiles_store",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL ───────────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured separately.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Sessions ──────────────────────────────────────────────────
SESSION_ENGINE = "django.contrib.sessions.backends.cache"
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# ── Portal ────────────────────────────────────────────────────
PORTAL_LOGIN_URL = "/login"
PORTAL_UNAUTHORIZED_URL = "/unauthorized"
PORTAL_SESSION_KEY = "user_session"
PORTAL_SESSION_TTL_SECONDS = 24 * 60 * 60
# Disabled until an administrator turns it on.
PORTAL_EDIT_MODE_ENABLED = False

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "portal": {"handlers": ["console"], "level": "INFO"},
    },
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ── Default Primary Key ──────────────────────────────────────
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
