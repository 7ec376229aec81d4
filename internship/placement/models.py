from django.conf import settings
from django.db import models
from django.db.models import Q

from core.base.managers import AllObjectsManager, SoftDeleteManager, SoftDeleteQuerySet
from core.base.models import LifecycleStatus, SoftDeleteMixin, TimestampMixin


class PlacementQuerySet(SoftDeleteQuerySet):

    def involving(self, user_id):
        """Placements where the user is the participant or the supervisor."""
        return self.filter(Q(user_id=user_id) | Q(supervisor_id=user_id))

    def for_supervisor(self, supervisor_id):
        return self.filter(supervisor_id=supervisor_id)


class Placement(SoftDeleteMixin, TimestampMixin, models.Model):
    """
    Assignment of a participant to a supervisor at a host company.

    A participant has at most one active placement. While it exists the
    participant's status_laporan is active and user.company mirrors the
    placement's company.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='placements',
        help_text="The participant (peserta)"
    )
    supervisor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='supervised_placements'
    )
    company = models.ForeignKey(
        'company.Company',
        on_delete=models.PROTECT,
        related_name='placements'
    )

    objects = SoftDeleteManager.from_queryset(PlacementQuerySet)()
    all_objects = AllObjectsManager.from_queryset(PlacementQuerySet)()

    class Meta:
        db_table = 'placements'
        verbose_name = 'Placement'
        verbose_name_plural = 'Placements'
        ordering = ['-id']
        constraints = [
            models.UniqueConstraint(
                fields=['user'],
                condition=Q(lifecycle=LifecycleStatus.ACTIVE),
                name='unique_active_placement_per_participant',
            ),
        ]

    def __str__(self):
        return f"{self.user_id} -> {self.company_id} (supervisor {self.supervisor_id})"
