import logging

from django.apps import AppConfig

logger = logging.getLogger("apps.credentials")


class CredentialsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.credentials"
    label = "credentials"
    verbose_name = "Kubernetes Credentials"

    def ready(self):
        from django.conf import settings

        logger.info(
            "Namespace discovery timeout: %ss, max workers: %s",
            settings.CREDENTIALS_DISCOVERY_TIMEOUT,
            settings.CREDENTIALS_DISCOVERY_MAX_WORKERS or "one per provider",
        )
