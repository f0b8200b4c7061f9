# exceptions.py
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.db import IntegrityError
import logging
from django.conf import settings

logger = logging.getLogger(__name__)

# Fallback messages when the payload carries nothing more specific
STATUS_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: 'Validation error',
    status.HTTP_401_UNAUTHORIZED: 'Authentication required',
    status.HTTP_403_FORBIDDEN: 'Permission denied',
    status.HTTP_404_NOT_FOUND: 'Resource not found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'Method not allowed',
    status.HTTP_500_INTERNAL_SERVER_ERROR: 'Internal server error',
}

# Statuses whose own detail text is shown to the client
DETAILED_STATUSES = (status.HTTP_400_BAD_REQUEST, status.HTTP_404_NOT_FOUND)


def first_error_message(details):
    """Pull the first human readable message out of a DRF error payload"""
    if isinstance(details, dict):
        for value in details.values():
            message = first_error_message(value)
            if message:
                return message
    elif isinstance(details, (list, tuple)):
        for value in details:
            message = first_error_message(value)
            if message:
                return message
    elif details:
        return str(details)
    return None


def error_response(message, details, status_code):
    return Response({
        'error': True,
        'message': message,
        'details': details,
        'status_code': status_code
    }, status=status_code)


def custom_exception_handler(exc, context):
    """
    Wrap every API error in the Mentra error envelope:
    ``{"error": true, "message": ..., "details": ..., "status_code": ...}``
    """
    response = exception_handler(exc, context)

    if response is not None:
        code = response.status_code
        message = STATUS_MESSAGES.get(code, 'An error occurred')
        if code in DETAILED_STATUSES:
            message = first_error_message(response.data) or message
        # Rewrap in place so headers such as WWW-Authenticate survive
        response.data = error_response(message, response.data, code).data
        return response

    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown view'

    if isinstance(exc, ValidationError):
        logger.warning(f"Model validation failed in {view_name}: {exc.messages}")
        return error_response(
            exc.messages[0] if exc.messages else STATUS_MESSAGES[400],
            {'non_field_errors': exc.messages},
            status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, ObjectDoesNotExist):
        logger.warning(f"Lookup failed in {view_name}: {exc}")
        return error_response(STATUS_MESSAGES[404], {}, status.HTTP_404_NOT_FOUND)

    if isinstance(exc, IntegrityError):
        logger.error(f"Integrity error in {view_name}: {exc}")
        return error_response(
            'Database integrity error',
            {'error': 'This operation violates database constraints'},
            status.HTTP_400_BAD_REQUEST
        )

    logger.exception(f"Unexpected error in {view_name}: {exc}")
    return error_response(
        'An unexpected error occurred',
        {'error': str(exc)} if settings.DEBUG else {},
        status.HTTP_500_INTERNAL_SERVER_ERROR
    )
