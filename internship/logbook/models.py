from django.conf import settings
from django.db import models

from core.base.managers import AllObjectsManager, SoftDeleteManager
from core.base.models import SoftDeleteMixin, TimestampMixin
from core.base.uploads import evidence_path


class LogbookStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


# Indonesian spellings accepted on input
STATUS_ALIASES = {
    'menunggu': LogbookStatus.PENDING,
    'disetujui': LogbookStatus.APPROVED,
    'ditolak': LogbookStatus.REJECTED,
}


def normalize_status(value):
    """Map a client-supplied status to a LogbookStatus value, or None if unknown."""
    if value is None:
        return None
    value = str(value).strip().lower()
    value = STATUS_ALIASES.get(value, value)
    return value if value in LogbookStatus.values else None


class Attendance(models.TextChoices):
    HADIR = 'hadir', 'Hadir'
    IZIN = 'izin', 'Izin'
    SAKIT = 'sakit', 'Sakit'


class LogbookEntry(SoftDeleteMixin, TimestampMixin, models.Model):
    """One day of internship activity written by a participant."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='logbook_entries'
    )
    tanggal = models.DateField()
    kegiatan = models.TextField()
    bukti_foto = models.FileField(upload_to=evidence_path, max_length=255, null=True, blank=True)
    kehadiran = models.CharField(max_length=10, choices=Attendance.choices, blank=True, default='')
    status = models.CharField(
        max_length=10,
        choices=LogbookStatus.choices,
        default=LogbookStatus.PENDING,
        db_index=True
    )

    # Review
    catatan = models.TextField(blank=True, default='')
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name='reviewed_logbook_entries',
        null=True,
        blank=True
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)

    objects = SoftDeleteManager()
    all_objects = AllObjectsManager()

    class Meta:
        db_table = 'logbooks'
        verbose_name = 'Logbook Entry'
        verbose_name_plural = 'Logbook Entries'
        ordering = ['-tanggal', '-id']
        indexes = [
            models.Index(fields=['user', 'tanggal'], name='logbook_user_date_idx'),
        ]

    def __str__(self):
        return f"{self.user_id} @ {self.tanggal} ({self.status})"
