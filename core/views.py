"""
Fallback handlers for requests that never reach a DRF view, such as URLs
matching no route. They answer with the same error envelope.
"""
import logging

from django.http import JsonResponse

from .responses import error_body

logger = logging.getLogger(__name__)


def not_found(request, exception=None):
    logger.warning('No route for %s %s', request.method, request.path)
    return JsonResponse(error_body('Resource not found'), status=404)


def server_error(request):
    return JsonResponse(error_body('Internal server error'), status=500)
