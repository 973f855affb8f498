"""Management command: list Kubernetes account credentials.

Usage:
    python manage.py list_credentials
    python manage.py list_credentials --expand
    python manage.py list_credentials --expand --format=yml
    python manage.py list_credentials --expand --timeout=10
"""
from __future__ import annotations

import json

import yaml
from django.core.management.base import BaseCommand, CommandError

from kubernetes_accounts import ProviderStoreError

from apps.credentials import services
from apps.credentials.v1.serializers import CredentialSerializer


class Command(BaseCommand):
    help = "List Kubernetes account credentials, optionally with live namespaces"

    def add_arguments(self, parser):
        parser.add_argument(
            "--expand",
            action="store_true",
            help="Attach the kind map and discover each provider's namespaces",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json", "yml"],
            default="text",
            help="Output format (default: text)",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=None,
            help="Per-provider namespace discovery deadline in seconds "
                 "(default: CREDENTIALS_DISCOVERY_TIMEOUT)",
        )

    def handle(self, **options):
        expand = options["expand"]
        store = services.get_provider_store()

        try:
            credentials = services.list_credentials(
                store, expand=expand, timeout=options["timeout"],
            )
        except ProviderStoreError as exc:
            raise CommandError(f"Provider store error: {exc}")

        data = CredentialSerializer(
            credentials, many=True, context={"include_namespaces": expand},
        ).data

        if options["format"] == "json":
            self.stdout.write(json.dumps(data, indent=2))
            return
        if options["format"] == "yml":
            self.stdout.write(yaml.safe_dump(json.loads(json.dumps(data)), default_flow_style=False))
            return

        if not data:
            self.stdout.write(self.style.WARNING("No providers registered."))
            return

        self.stdout.write(self.style.MIGRATE_HEADING(f"Kubernetes Accounts ({len(data)})"))
        for cred in data:
            self._print_credential(cred, expand)

    def _print_credential(self, cred: dict, expand: bool):
        self.stdout.write(self.style.SUCCESS(f"\n  {cred['name']}"))
        self.stdout.write(f"  Read groups: {', '.join(cred['permissions']['READ']) or '-'}")
        self.stdout.write(f"  Write groups: {', '.join(cred['permissions']['WRITE']) or '-'}")
        if expand:
            namespaces = cred.get("namespaces") or []
            if namespaces:
                self.stdout.write(f"  Namespaces: {', '.join(namespaces)}")
            else:
                self.stdout.write(self.style.WARNING("  Namespaces: (none discovered)"))
