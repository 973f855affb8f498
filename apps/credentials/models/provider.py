"""
Kubernetes provider records and their access groups.

A KubernetesProvider is a cluster account registered by an external
registration process: its name, API host, bearer token and base64 CA
bundle. Read and write permissions are group names attached to a provider
by name; the credentials endpoints report them as ``permissions.READ`` and
``permissions.WRITE``.

This service only reads these tables.
"""

from django.db import models


class KubernetesProvider(models.Model):
    """A Kubernetes cluster account the control plane can act against."""

    name = models.CharField(
        max_length=256,
        unique=True,
        help_text="Account name. Unique as stored; matched case-insensitively when merging namespaces.",
    )
    host = models.CharField(max_length=1024, help_text="Kubernetes API server URL.")
    ca_data = models.TextField(blank=True, default="", help_text="Base64-encoded CA bundle.")
    bearer_token = models.TextField(blank=True, default="", help_text="Bearer token used against the API.")

    created = models.DateTimeField(auto_now_add=True)
    modified = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name", "pk"]

    def __str__(self):
        return f"{self.name} ({self.host})"


class ProviderReadPermission(models.Model):
    """A group allowed to read through this provider."""

    provider = models.ForeignKey(
        KubernetesProvider,
        to_field="name",
        db_column="account_name",
        on_delete=models.CASCADE,
        related_name="read_permissions",
    )
    group = models.CharField(max_length=256, help_text="Group name.")

    class Meta:
        ordering = ["pk"]
        unique_together = [("provider", "group")]

    def __str__(self):
        return f"{self.provider_id} read: {self.group}"


class ProviderWritePermission(models.Model):
    """A group allowed to write through this provider."""

    provider = models.ForeignKey(
        KubernetesProvider,
        to_field="name",
        db_column="account_name",
        on_delete=models.CASCADE,
        related_name="write_permissions",
    )
    group = models.CharField(max_length=256, help_text="Group name.")

    class Meta:
        ordering = ["pk"]
        unique_together = [("provider", "group")]

    def __str__(self):
        return f"{self.provider_id} write: {self.group}"
