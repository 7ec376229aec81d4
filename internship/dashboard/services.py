"""
Role-scoped dashboard counters.
"""
from django.contrib.auth import get_user_model
from django.db import DEFAULT_DB_ALIAS
from django.db.models import Count

from core.user_accounts.models import Role
from internship.company.models import Company
from internship.logbook.models import LogbookEntry, LogbookStatus
from internship.placement.models import Placement
from internship.placement.services import PlacementService


class DashboardService:

    def __init__(self, placements: PlacementService = None, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.placements = placements or PlacementService(using=using)

    def _status_counts(self, entries):
        counts = {value: 0 for value in LogbookStatus.values}
        for row in entries.order_by().values('status').annotate(total=Count('id')):
            counts[row['status']] = row['total']
        return counts

    def admin_stats(self):
        User = get_user_model()
        users = User.objects.using(self.using)
        entries = LogbookEntry.objects.using(self.using)
        return {
            'total_peserta': users.filter(role=Role.PARTICIPANT).count(),
            'total_supervisor': users.filter(role=Role.SUPERVISOR).count(),
            'total_logbooks': entries.count(),
            'total_perusahaan': Company.objects.using(self.using).count(),
            'total_placed': Placement.objects.using(self.using).count(),
            # Graduation is not tracked; kept for client compatibility
            'total_lulus': 0,
            'logbook_status': self._status_counts(entries),
        }

    def supervisor_stats(self, supervisor_id):
        participant_ids = self.placements.supervised_participant_ids(supervisor_id)
        entries = LogbookEntry.objects.using(self.using).filter(user_id__in=participant_ids)
        return {
            'total_peserta': len(participant_ids),
            'total_logbooks': entries.count(),
            'logbook_status': self._status_counts(entries),
        }

    def participant_stats(self, user_id):
        User = get_user_model()
        user = User.objects.using(self.using).get(pk=user_id)
        entries = LogbookEntry.objects.using(self.using).filter(user_id=user_id)
        placement = self.placements.get_for_participant(user_id)
        return {
            'status_laporan': user.status_laporan,
            'total_logbooks': entries.count(),
            'logbook_status': self._status_counts(entries),
            'placement': {
                'id': placement.id,
                'company_id': placement.company_id,
                'nama_perusahaan': placement.company.nama_perusahaan,
                'supervisor_id': placement.supervisor_id,
                'supervisor': placement.supervisor.nama_lengkap,
            } if placement else None,
        }
