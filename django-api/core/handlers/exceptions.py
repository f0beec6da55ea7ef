"""Map domain errors onto HTTP responses.

Every failure leaves the API in the same envelope:
``{"success": false, "error": <user-safe message>, "code": <ErrorCode>}``.
Internal details are logged, never returned.
"""

import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.errors import DomainError, ErrorCode, InternalError

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.MISSING_FIELDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAYLOAD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CUSTOMER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_CART: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_KEY_KIND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_KEY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.KEY_CAPACITY_REACHED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.KEY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NO_KEY_AVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"success": False, "error": error.message, "code": error.code.value},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def exception_handler(exc: Exception, context: dict) -> Response:
    """DRF ``EXCEPTION_HANDLER`` hook."""
    if isinstance(exc, DomainError):
        return error_response(exc)

    if isinstance(exc, APIException):
        response = drf_exception_handler(exc, context)
        if response is not None:
            detail = exc.detail if isinstance(exc.detail, str) else exc.default_detail
            response.data = {
                "success": False,
                "error": str(detail),
                "code": str(exc.default_code).upper(),
            }
            return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s", type(view).__name__ if view is not None else "view"
    )
    return error_response(InternalError())


def not_found(request, exception=None) -> JsonResponse:
    """Django ``handler404`` for paths no route matches."""
    return JsonResponse(
        {"success": False, "error": "Route not found", "code": "NOT_FOUND"},
        status=status.HTTP_404_NOT_FOUND,
    )


def server_error(request) -> JsonResponse:
    """Django ``handler500`` for failures outside DRF views."""
    error = InternalError()
    return JsonResponse(
        {"success": False, "error": error.message, "code": error.code.value},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
