"""
API exception handlers.

This module provides custom exception handling for REST API responses.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    ConstraintViolationError,
    DomainException,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    correlation_id = _get_correlation_id(context)

    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc, correlation_id)

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response is not None:
            response.data = {"errors": _flatten_detail(exc.detail)}
            return response

    if isinstance(exc, Http404):
        return Response({"errors": ["Resource not found"]}, status=status.HTTP_404_NOT_FOUND)

    return _handle_unexpected_exception(exc, correlation_id)


def _get_correlation_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract correlation ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "correlation_id", None)


def _flatten_detail(detail) -> list:
    """Turn a DRF error detail into a flat list of messages."""
    if isinstance(detail, dict):
        return [message for messages in detail.values() for message in _flatten_detail(messages)]
    if isinstance(detail, list):
        return [str(message) for message in detail]
    return [str(detail)]


def _handle_domain_exception(exc: DomainException, correlation_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    if isinstance(exc, ConstraintViolationError):
        status_code = status.HTTP_400_BAD_REQUEST
        body = {"validation_error_messages": [exc.message]}
    elif isinstance(exc, InvalidArgumentError):
        status_code = status.HTTP_400_BAD_REQUEST
        body = {"errors": [exc.message]}
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = {"errors": [exc.message]}

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Domain exception: %s - %s", exc.code, exc.message, extra={"correlation_id": correlation_id}
    )
    return Response(body, status=status_code)


def _handle_unexpected_exception(exc: Exception, correlation_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error(
        "Unexpected error: %s", exc, extra={"correlation_id": correlation_id}, exc_info=True
    )
    return Response({"errors": [str(exc)]}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
