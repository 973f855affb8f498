"""
Initial schema for the credentials service.

Creates the Kubernetes provider table and the read/write permission tables
keyed by account name.
"""

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="KubernetesProvider",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Account name. Unique as stored; matched case-insensitively when merging namespaces.", max_length=256, unique=True)),
                ("host", models.CharField(help_text="Kubernetes API server URL.", max_length=1024)),
                ("ca_data", models.TextField(blank=True, default="", help_text="Base64-encoded CA bundle.")),
                ("bearer_token", models.TextField(blank=True, default="", help_text="Bearer token used against the API.")),
                ("created", models.DateTimeField(auto_now_add=True)),
                ("modified", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name", "pk"],
            },
        ),
        migrations.CreateModel(
            name="ProviderReadPermission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("group", models.CharField(help_text="Group name.", max_length=256)),
                ("provider", models.ForeignKey(db_column="account_name", on_delete=django.db.models.deletion.CASCADE, related_name="read_permissions", to="credentials.kubernetesprovider", to_field="name")),
            ],
            options={
                "ordering": ["pk"],
                "unique_together": {("provider", "group")},
            },
        ),
        migrations.CreateModel(
            name="ProviderWritePermission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("group", models.CharField(help_text="Group name.", max_length=256)),
                ("provider", models.ForeignKey(db_column="account_name", on_delete=django.db.models.deletion.CASCADE, related_name="write_permissions", to="credentials.kubernetesprovider", to_field="name")),
            ],
            options={
                "ordering": ["pk"],
                "unique_together": {("provider", "group")},
            },
        ),
    ]
