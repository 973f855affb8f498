"""
Development environment overrides
Inherits from ./defaults.py and adds dev-specific defaults
"""

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

CSRF_TRUSTED_ORIGINS = [
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]
"""CSRF settings to allow origins to make requests, NOTE: Only use in development!"""

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.dummy.DummyCache",
    }
}
"""Cache settings - use dummy cache for development to avoid caching issues"""

LOGGING__loggers__django__level = "DEBUG"
LOGGING__loggers__apps__level = "DEBUG"
LOGGING__loggers__kubernetes_accounts__level = "DEBUG"
