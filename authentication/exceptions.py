import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    400: 'Validation error',
    401: 'Authentication required',
    403: 'Permission denied',
    404: 'Resource not found',
    405: 'Method not allowed',
    500: 'Internal server error',
    503: 'Persistence error',
}


def error_body(status_code, message=None, details=None):
    """Envelope shared by every error response of the API"""
    return {
        'error': True,
        'message': message or STATUS_MESSAGES.get(status_code, 'An error occurred'),
        'details': details if details is not None else {},
        'status_code': status_code,
    }


def _debug_details(exc):
    return {'error': str(exc)} if settings.DEBUG else {}


def custom_exception_handler(exc, context):
    """
    DRF exception handler for the POS API.

    API exceptions keep their status code; a plain ``detail`` string (e.g.
    "Transaction not found") becomes the message. Database and unexpected
    errors are turned into responses instead of bubbling up as HTML 500s.
    """
    response = exception_handler(exc, context)

    if response is not None:
        detail = response.data.get('detail') if isinstance(response.data, dict) else None
        response.data = error_body(
            response.status_code, str(detail) if detail else None, response.data
        )
        return response

    if isinstance(exc, ValidationError):
        logger.error("Validation error: %s", exc)
        code = status.HTTP_400_BAD_REQUEST
        return Response(error_body(code, details={'non_field_errors': exc.messages}), status=code)

    # Checked before DatabaseError, its parent; nothing was written
    if isinstance(exc, IntegrityError):
        logger.error("Integrity error: %s", exc)
        code = status.HTTP_400_BAD_REQUEST
        return Response(
            error_body(code, 'Database integrity error',
                       {'error': 'This operation violates database constraints'}),
            status=code,
        )

    if isinstance(exc, DatabaseError):
        logger.error("Persistence error: %s", exc)
        code = status.HTTP_503_SERVICE_UNAVAILABLE
        return Response(error_body(code, details=_debug_details(exc)), status=code)

    logger.exception("Unexpected error: %s", exc)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(error_body(code, 'An unexpected error occurred', _debug_details(exc)), status=code)
