from rest_framework import status
from rest_framework.decorators import api_view

from core.permissions.decorators import require_permission
from core.permissions.matrix import Resources
from magang_project.pagination import auto_paginate
from magang_project.response_formatter import success_response

from .serializers import (
    LogbookCreateSerializer,
    LogbookReadSerializer,
    LogbookStatusSerializer,
    LogbookUpdateSerializer,
)
from .services import LogbookService


@api_view(['GET', 'POST'])
@require_permission(Resources.LOGBOOK)
@auto_paginate
def logbook_collection(request):
    """
    List every entry (admin) or submit a new one (participant).

    GET /api/logbook/
    - Filters: user_id, status (pending | approved | rejected)

    POST /api/logbook/  (multipart/form-data)
    - Fields: tanggal, kegiatan, bukti_foto?, kehadiran?
    - Requires an active placement (status_laporan=active)
    """
    service = LogbookService()

    if request.method == 'GET':
        entries = service.list_all(
            user_id=request.query_params.get('user_id'),
            status=request.query_params.get('status'),
        )
        return success_response(LogbookReadSerializer(entries, many=True).data)

    serializer = LogbookCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    entry = service.submit(request.identity, serializer.to_dto())
    return success_response(LogbookReadSerializer(entry).data, 'Logbook entry submitted', status.HTTP_201_CREATED)


@api_view(['GET'])
@require_permission(Resources.OWN_LOGBOOK)
@auto_paginate
def my_logbook(request):
    """
    GET /api/logbook/me/
    """
    entries = LogbookService().list_for_owner(request.identity.user_id)
    return success_response(LogbookReadSerializer(entries, many=True).data)


@api_view(['GET'])
@require_permission(Resources.SUPERVISED_LOGBOOK)
@auto_paginate
def supervisor_logbook(request):
    """
    GET /api/logbook/supervisor/
    - Entries of every participant currently placed under the caller.
    """
    entries = LogbookService().list_for_supervisor(request.identity.user_id)
    return success_response(LogbookReadSerializer(entries, many=True).data)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Resources.LOGBOOK_ENTRY)
def logbook_detail(request, pk):
    """
    GET /api/logbook/<pk>/        owner, owner's supervisor or admin
    PUT/PATCH /api/logbook/<pk>/  owner, until approved
    DELETE /api/logbook/<pk>/     owner or admin
    """
    service = LogbookService()

    if request.method == 'GET':
        entry = service.get_visible(request.identity, pk)
        return success_response(LogbookReadSerializer(entry).data)

    if request.method in ['PUT', 'PATCH']:
        serializer = LogbookUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = service.update_content(request.identity, serializer.to_dto(pk))
        return success_response(LogbookReadSerializer(entry).data, 'Logbook entry updated')

    service.remove(request.identity, pk)
    return success_response(message='Logbook entry deleted')


@api_view(['PUT', 'PATCH'])
@require_permission(Resources.LOGBOOK_STATUS)
def logbook_status(request, pk):
    """
    Review an entry.

    PUT/PATCH /api/logbook-status/<pk>/
    - Request body: { "status": "approved", "catatan"?: "..." }
    """
    serializer = LogbookStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    entry = LogbookService().update_status(request.identity, serializer.to_dto(pk))
    return success_response(LogbookReadSerializer(entry).data, 'Logbook status updated')
