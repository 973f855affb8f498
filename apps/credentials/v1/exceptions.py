"""Error responses for the credentials endpoints."""
import time
from http import HTTPStatus

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler


class ProviderStoreUnavailable(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Provider store unavailable."
    default_code = "provider_store_unavailable"


def error_body(status_code: int, message: str) -> dict:
    """The error shape the orchestration system parses."""
    return {
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "status": status_code,
        "timestamp": int(time.time() * 1000),
    }


def credentials_exception_handler(exc, context):
    if isinstance(exc, ProviderStoreUnavailable):
        return Response(error_body(exc.status_code, str(exc.detail)), status=exc.status_code)
    return exception_handler(exc, context)
