"""
Django settings for the credentials service.

Framework defaults only. Project settings are layered on top by Dynaconf
in the order documented in apps/settings/__init__.py; do not add project
settings here.
"""

import os
from importlib import import_module
from pathlib import Path

from dynaconf import DjangoDynaconf

from apps.settings.database import override_database_settings

BASE_DIR = Path(__file__).resolve().parent.parent

MODE = os.environ.get("CREDENTIALS_SERVICE_MODE", "development")
"""One of development, test or production; selects apps/settings/{MODE}.py."""

SECRET_KEY = "insecure-development-only-secret-key"
DEBUG = False
ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "credentials_service.urls"
WSGI_APPLICATION = "credentials_service.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

# sqlite fallback; apps/settings/database.py switches to PostgreSQL when DB_HOST is set
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(BASE_DIR / "db.sqlite3"),
    }
}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Gate calls /credentials without a trailing slash
APPEND_SLASH = False

USE_TZ = True
TIME_ZONE = "UTC"
STATIC_URL = "static/"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {"level": "INFO"},
        "apps": {"level": "INFO"},
        "kubernetes_accounts": {"level": "INFO"},
    },
}


def _mode_validators(mode):
    try:
        module = import_module(f"apps.settings.{mode}")
    except ModuleNotFoundError:
        return []
    return list(getattr(module, "validators", []))


settings = DjangoDynaconf(
    __name__,
    ENVVAR_PREFIX_FOR_DYNACONF="CREDENTIALS_SERVICE",
    ROOT_PATH_FOR_DYNACONF=str(BASE_DIR),
    SETTINGS_FILE_FOR_DYNACONF=[
        "apps/settings/defaults.py",
        "apps/credentials/settings.py",
        f"apps/settings/{MODE}.py",
    ],
    ENVIRONMENTS_FOR_DYNACONF=False,
    LOAD_DOTENV_FOR_DYNACONF=False,
    post_hooks=[override_database_settings],
    validators=_mode_validators(MODE),
)
# HERE ENDS DYNACONF EXTENSION LOAD (No more code below this line)
