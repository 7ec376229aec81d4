"""
Project-level views: liveness, uploaded files and JSON error pages.
"""
import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.static import serve
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def database_status():
    """'ok' when the database answers a trivial query, 'unavailable' otherwise."""
    try:
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception("Liveness check could not reach the database")
        return 'unavailable'
    return 'ok'


def liveness_response(banner):
    database = database_status()
    healthy = database == 'ok'
    return Response({
        'status': 'success' if healthy else 'error',
        'message': banner if healthy else 'database unavailable',
        'data': {'service': 'magang-api', 'database': database},
    }, status=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE)


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def index(request):
    """
    GET /
    - Banner plus database reachability, 503 when the database is down.
    """
    return liveness_response('API MAGANG RUNNING')


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health(request):
    """
    GET /health/
    - 200 when the database answers, 503 otherwise.
    """
    return liveness_response('healthy')


def uploaded_file(request, path):
    """GET /api/uploads/<path> - files saved through FileField uploads."""
    return serve(request, path, document_root=settings.MEDIA_ROOT)


def not_found(request, exception=None):
    return JsonResponse(
        {'status': 'error', 'message': 'Not found.', 'code': 'not_found', 'data': None},
        status=404
    )


def server_error(request):
    return JsonResponse(
        {'status': 'error', 'message': 'Internal server error.', 'code': 'internal_error', 'data': None},
        status=500
    )
