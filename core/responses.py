"""
Uniform JSON envelope returned by every endpoint.

    success → {"success": true,  "message": "...", "data": {...}}
    failure → {"success": false, "message": "...", "errors": ["..."]}

`data` and `errors` are omitted when there is nothing to report.
"""
from rest_framework          import status
from rest_framework.response import Response


def success_body(message, data=None):
    body = {'success': True, 'message': message}
    if data is not None:
        body['data'] = data
    return body


def error_body(message, errors=None):
    body = {'success': False, 'message': message}
    if errors:
        body['errors'] = list(errors)
    return body


def success_response(message, data=None, status_code=status.HTTP_200_OK):
    return Response(success_body(message, data), status=status_code)


def created_response(message, data=None):
    return success_response(message, data, status_code=status.HTTP_201_CREATED)


def error_response(message, status_code, errors=None):
    return Response(error_body(message, errors), status=status_code)
