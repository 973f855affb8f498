"""
Credential endpoints consumed by the orchestration system.

GET /credentials?expand=true
  → every provider's credential; namespaces discovered when expanding.
GET /credentials/{account}
  → one credential with the kind map attached, never with namespaces.
"""

import logging

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from kubernetes_accounts import ProviderStoreError

from apps.credentials import services
from apps.credentials.v1.exceptions import ProviderStoreUnavailable, credentials_exception_handler
from apps.credentials.v1.serializers import CredentialSerializer

logger = logging.getLogger("apps.credentials.views")


class CredentialViewSet(ViewSet):
    permission_classes = [AllowAny]
    authentication_classes = []
    lookup_field = "account"
    lookup_value_regex = "[^/]+"

    def get_exception_handler(self):
        return credentials_exception_handler

    def list(self, request):
        """
        List credentials for all providers.

        Query parameters:
            expand: only the literal ``true`` attaches the kind map and
                discovers each provider's namespaces.

        Response: 200 with a JSON array, in provider order. 500 if the
        provider store or any access-group lookup fails. Namespace
        discovery failures never fail the request.
        """
        expand = request.query_params.get("expand") == "true"
        store = services.get_provider_store()

        try:
            credentials = services.list_credentials(store, expand=expand)
        except ProviderStoreError as exc:
            logger.exception("Failed to list credentials")
            raise ProviderStoreUnavailable(str(exc))

        serializer = CredentialSerializer(
            credentials, many=True, context={"include_namespaces": expand},
        )
        return Response(serializer.data)

    def retrieve(self, request, account=None):
        store = services.get_provider_store()

        try:
            credential = services.get_credential(store, account)
        except ProviderStoreError as exc:
            logger.exception("Failed to get credentials for account %s", account)
            raise ProviderStoreUnavailable(str(exc))

        return Response(CredentialSerializer(credential).data)
