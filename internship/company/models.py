from django.db import models

from core.base.managers import AllObjectsManager, SoftDeleteManager
from core.base.models import SoftDeleteMixin, TimestampMixin


class Company(SoftDeleteMixin, TimestampMixin, models.Model):
    """Host company where participants do their internship."""
    nama_perusahaan = models.CharField(max_length=255)
    alamat = models.TextField(blank=True, default='')
    kontak = models.CharField(max_length=255, blank=True, default='')

    objects = SoftDeleteManager()
    all_objects = AllObjectsManager()

    class Meta:
        db_table = 'companies'
        verbose_name = 'Company'
        verbose_name_plural = 'Companies'
        ordering = ['-id']

    def __str__(self):
        return self.nama_perusahaan
