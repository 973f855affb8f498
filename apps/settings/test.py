"""
Testing environment overrides
Inherits from ./defaults.py and adds test-specific settings

Select with CREDENTIALS_SERVICE_MODE=test. Tests also pass under the
development defaults; nothing here changes behaviour under test.
"""

# Basic required settings
DEBUG = False
TESTING = True
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]
SECRET_KEY = "test-only-secret-key-for-testing-purposes-only"

# Let Django create unique test database names automatically
DATABASES__default__TEST__NAME = None

# Disable caching during tests
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.dummy.DummyCache",
    }
}

# Use faster password hashing for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Disable logging during tests
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "root": {
        "handlers": ["null"],
    },
}

# Keep discovery tests fast when a real client slips through
CREDENTIALS_DISCOVERY_TIMEOUT = 1
