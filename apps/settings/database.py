"""Database configuration hook for the credentials service.

This module provides the `override_database_settings` post hook that maps
simple DB_* settings (loaded by Dynaconf from CREDENTIALS_SERVICE_DB_*
env vars) into Django's DATABASES dict with PostgreSQL as the backend.

Loading order (in credentials_service/settings.py):
  1. Framework defaults define DATABASES with a sqlite3 fallback
  2. Dynaconf loads CREDENTIALS_SERVICE_DB_* env vars as DB_HOST, DB_PORT, etc.
  3. This hook constructs DATABASES["default"] from those DB_* settings,
     switching the engine to PostgreSQL. Without a DB_HOST the sqlite
     fallback is kept.

Environment variables (set via compose.yaml or shell):
  CREDENTIALS_SERVICE_DB_HOST       (no default; enables PostgreSQL)
  CREDENTIALS_SERVICE_DB_PORT       (default: 5432)
  CREDENTIALS_SERVICE_DB_NAME       (default: clouddriver)
  CREDENTIALS_SERVICE_DB_USER       (default: clouddriver)
  CREDENTIALS_SERVICE_DB_PASSWORD   (required in production)
  CREDENTIALS_SERVICE_DB_SSLMODE    (default: allow)
  CREDENTIALS_SERVICE_DB_SSLROOTCERT (default: "")
"""

import os


def _env_or(loaded_settings, dynaconf_key, env_key, default):
    """Read from Dynaconf DB_* keys, falling back to
    CREDENTIALS_SERVICE_DATABASES__default__* env vars, then default."""
    val = loaded_settings.get(dynaconf_key, None)
    if val not in (None, ""):
        return val
    val = os.environ.get(env_key)
    if val is not None:
        return val
    return default


def override_database_settings(loaded_settings) -> dict:
    """Build a PostgreSQL DATABASES from DB_* settings loaded by Dynaconf."""
    db_host = _env_or(loaded_settings, "DB_HOST", "CREDENTIALS_SERVICE_DATABASES__default__HOST", "")
    if not db_host:
        return {}

    db_port = _env_or(loaded_settings, "DB_PORT", "CREDENTIALS_SERVICE_DATABASES__default__PORT", 5432)
    db_user = _env_or(loaded_settings, "DB_USER", "CREDENTIALS_SERVICE_DATABASES__default__USER", "clouddriver")
    db_password = _env_or(loaded_settings, "DB_PASSWORD", "CREDENTIALS_SERVICE_DATABASES__default__PASSWORD", "")
    db_name = _env_or(loaded_settings, "DB_NAME", "CREDENTIALS_SERVICE_DATABASES__default__NAME", "clouddriver")
    db_app_name = loaded_settings.get("DB_APP_NAME", "credentials_service")

    pg_options = {
        "sslmode": loaded_settings.get("DB_SSLMODE", "allow"),
        "application_name": db_app_name,
    }
    db_sslrootcert = loaded_settings.get("DB_SSLROOTCERT", "")
    if db_sslrootcert:
        pg_options["sslrootcert"] = db_sslrootcert

    databases = dict(loaded_settings.get("DATABASES", {}))
    databases["default"] = {
        "ENGINE": "django.db.backends.postgresql",
        "HOST": db_host,
        "PORT": db_port,
        "USER": db_user,
        "PASSWORD": db_password,
        "NAME": db_name,
        "OPTIONS": pg_options,
    }
    return {"DATABASES": databases}
