from rest_framework import status
from rest_framework.decorators import api_view

from core.base.exceptions import NotFoundError
from core.permissions.decorators import require_permission
from core.permissions.matrix import Resources
from magang_project.pagination import auto_paginate
from magang_project.response_formatter import success_response

from .serializers import PlacementCreateSerializer, PlacementReadSerializer, PlacementUpdateSerializer
from .services import PlacementService


@api_view(['GET', 'POST'])
@require_permission(Resources.PLACEMENTS)
@auto_paginate
def placement_list(request):
    """
    List placements or place a participant.

    GET /api/placements/
    - Admins see every active placement, supervisors only their own.

    POST /api/placements/
    - Request body: { "user_id", "supervisor_id", "company_id" }
    - Activates the participant's logbook and stamps their company.
    """
    service = PlacementService()

    if request.method == 'GET':
        identity = request.identity
        placements = service.list_placements(
            supervisor_id=identity.user_id if identity.is_supervisor else None
        )
        return success_response(PlacementReadSerializer(placements, many=True).data)

    serializer = PlacementCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    placement = service.create(serializer.to_dto())
    return success_response(
        PlacementReadSerializer(service.get(placement.pk)).data,
        'Placement created',
        status.HTTP_201_CREATED
    )


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Resources.PLACEMENTS)
def placement_detail(request, pk):
    """
    GET /api/placements/<pk>/
    PUT/PATCH /api/placements/<pk>/
    DELETE /api/placements/<pk>/  (participant goes back to locked, company cleared)
    """
    service = PlacementService()

    if request.method == 'GET':
        placement = service.get(pk)
        identity = request.identity
        if identity.is_supervisor and placement.supervisor_id != identity.user_id:
            raise NotFoundError('Placement not found.')
        return success_response(PlacementReadSerializer(placement).data)

    if request.method in ['PUT', 'PATCH']:
        serializer = PlacementUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        placement = service.update(serializer.to_dto(pk))
        return success_response(PlacementReadSerializer(service.get(placement.pk)).data, 'Placement updated')

    service.remove_by_id(pk)
    return success_response(message='Placement deleted')


@api_view(['GET'])
@require_permission(Resources.OWN_PLACEMENT)
def my_placement(request):
    """
    GET /api/placements/me/
    - The participant's active placement, or null when not placed.
    """
    placement = PlacementService().get_for_participant(request.identity.user_id)
    data = PlacementReadSerializer(placement).data if placement else None
    return success_response(data)
