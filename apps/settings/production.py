"""
Production environment settings.

This file is loaded when CREDENTIALS_SERVICE_MODE=production and serves three purposes:

1. ZERO OUT SENSITIVE INFORMATION
   All sensitive settings (passwords, keys, secrets) are explicitly set to empty
   strings here, even if they already default to something. This ensures production
   never accidentally inherits insecure defaults from development or defaults.py.
   These values MUST be provided via environment variables or external config.

2. SET PRODUCTION-APPROPRIATE DEFAULTS
   - DEBUG = False (never run debug mode in production)
   - JSON-only rendering

3. VALIDATE IMPORTANT SETTINGS
   Each critical setting has a corresponding Dynaconf Validator that runs at
   startup. If any required setting is missing or invalid, the application
   will fail to start with a clear error message.

Usage:
   export CREDENTIALS_SERVICE_MODE=production
   export CREDENTIALS_SERVICE_SECRET_KEY=your-secret-key
   export CREDENTIALS_SERVICE_DB_HOST=db.example.com
   export CREDENTIALS_SERVICE_DB_USER=clouddriver
   export CREDENTIALS_SERVICE_DB_PASSWORD=your-db-password
   gunicorn credentials_service.wsgi

Validators are collected by credentials_service/settings.py and run at load time.
"""

from dynaconf import Validator

validators = []

# =============================================================================
# Security Settings
# =============================================================================

DEBUG = False
validators.append(
    Validator("DEBUG", eq=False, messages={"operations": "DEBUG must be False in production."}),
)

ALLOWED_HOSTS = ["*"]

REST_FRAMEWORK__DEFAULT_RENDERER_CLASSES = [
    "rest_framework.renderers.JSONRenderer",
]

# =============================================================================
# Django Core
# =============================================================================

SECRET_KEY = ""
validators.append(
    Validator(
        "SECRET_KEY",
        must_exist=True,
        ne="",
        messages={"operations": "SECRET_KEY must be set and not empty."},
    ),
)

# =============================================================================
# Database Credentials
# =============================================================================

DB_HOST = ""
validators.append(
    Validator(
        "DB_HOST",
        must_exist=True,
        ne="",
        messages={"operations": "DB_HOST must be set."},
    ),
)

DB_USER = ""
validators.append(
    Validator(
        "DB_USER",
        must_exist=True,
        ne="",
        messages={"operations": "DB_USER must be set."},
    ),
)

DB_PASSWORD = ""
validators.append(
    Validator(
        "DB_PASSWORD",
        must_exist=True,
        ne="",
        messages={"operations": "DB_PASSWORD must be set."},
    ),
)

# =============================================================================
# Namespace Discovery
# =============================================================================

validators.append(
    Validator(
        "CREDENTIALS_DISCOVERY_TIMEOUT",
        gt=0,
        messages={"operations": "CREDENTIALS_DISCOVERY_TIMEOUT must be a positive number of seconds."},
    ),
)
