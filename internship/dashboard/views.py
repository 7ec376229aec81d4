from rest_framework.decorators import api_view

from core.permissions.decorators import require_permission
from core.permissions.matrix import Resources
from magang_project.response_formatter import success_response

from .services import DashboardService


@api_view(['GET'])
@require_permission(Resources.ADMIN_STATS)
def admin_stats(request):
    """
    GET /api/admin/stats/
    """
    return success_response(DashboardService().admin_stats())


@api_view(['GET'])
@require_permission(Resources.SUPERVISOR_STATS)
def supervisor_stats(request):
    """
    GET /api/supervisor/stats/
    """
    return success_response(DashboardService().supervisor_stats(request.identity.user_id))


@api_view(['GET'])
@require_permission(Resources.PARTICIPANT_STATS)
def participant_stats(request):
    """
    GET /api/participant/stats/
    """
    return success_response(DashboardService().participant_stats(request.identity.user_id))
