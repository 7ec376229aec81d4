"""
Core Base Managers Module

Managers and querysets for SoftDeleteMixin models.

    class Company(SoftDeleteMixin, TimestampMixin, models.Model):
        objects = SoftDeleteManager()
        all_objects = AllObjectsManager()

    Company.objects.all()          # active rows only
    Company.all_objects.deleted()  # soft-deleted rows
"""

from django.contrib.auth.models import BaseUserManager
from django.db import models
from django.db.models import Q

from core.base.models import LifecycleStatus


class SoftDeleteQuerySet(models.QuerySet):

    def active(self):
        return self.filter(lifecycle=LifecycleStatus.ACTIVE)

    def deleted(self):
        return self.filter(lifecycle=LifecycleStatus.DELETED)

    def search(self, term, *fields):
        """
        Case-insensitive contains match across the given fields.
        """
        if not term:
            return self
        query = Q()
        for field in fields:
            query |= Q(**{f'{field}__icontains': term})
        return self.filter(query)


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """
    Default manager: hides soft-deleted rows.
    """

    def get_queryset(self):
        return super().get_queryset().active()


class AllObjectsManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """
    Unfiltered manager, including soft-deleted rows.
    """
    pass


class SoftDeleteUserManager(BaseUserManager.from_queryset(SoftDeleteQuerySet)):
    """
    User manager that hides soft-deleted accounts.

    Authentication, token verification and every listing go through this
    manager, so a deleted account can neither log in nor be listed.
    """

    def get_queryset(self):
        return super().get_queryset().active()
