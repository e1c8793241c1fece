"""
Error taxonomy and the DRF exception handler that turns every failure into
the error envelope.

    ValidationError (DRF)         → 400, aggregated field messages
    ClientError                   → 400, semantic precondition violated
    NotAuthenticated / AuthFailed → 401
    PermissionDenied              → 403
    ResourceNotFound / Http404    → 404
    anything else                 → 500, details only in the server log
"""
import logging

from rest_framework            import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.settings   import api_settings
from rest_framework.views      import exception_handler, set_rollback

from .responses import error_body, error_response

logger = logging.getLogger(__name__)


class ClientError(APIException):
    status_code    = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'
    default_code   = 'client_error'


class ResourceNotFound(NotFound):
    """404 carrying the name of the missing resource, e.g. "Profile not found"."""

    def __init__(self, resource='Resource'):
        super().__init__(f'{resource} not found')


class ServerError(APIException):
    status_code    = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code   = 'server_error'


def flatten_errors(detail, field=None):
    """
    Collapse DRF's nested error structure into a flat list of messages.

    Field errors are prefixed with their (dotted) field path; non-field
    errors are returned as-is.
    """
    if isinstance(detail, dict):
        messages = []
        for key, value in detail.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                path = field
            else:
                path = f'{field}.{key}' if field else str(key)
            messages.extend(flatten_errors(value, path))
        return messages
    if isinstance(detail, list):
        messages = []
        for item in detail:
            messages.extend(flatten_errors(item, field))
        return messages
    return [f'{field}: {detail}' if field else str(detail)]


def _view_name(context):
    view = context.get('view')
    return view.__class__.__name__ if view is not None else 'unknown view'


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    view_name = _view_name(context)

    if response is None:
        set_rollback()
        logger.error('Unhandled exception in %s', view_name, exc_info=exc)
        return error_response('Internal server error', status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        errors = flatten_errors(exc.detail)
        logger.warning('Validation failed in %s: %s', view_name, errors)
        response.data = error_body('Validation failed', errors)
        return response

    data = response.data
    message = data.get('detail', '') if isinstance(data, dict) else str(data)
    if response.status_code >= 500:
        logger.error('%s failed with %s: %s', view_name, response.status_code, message, exc_info=exc)
    else:
        logger.warning('%s rejected request with %s: %s', view_name, response.status_code, message)
    response.data = error_body(str(message))
    return response
