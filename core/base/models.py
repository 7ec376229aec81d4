from django.db import models
from django.utils import timezone


class LifecycleStatus(models.TextChoices):
    """
    Lifecycle tag shared by every entity.

    Rows are never removed from the database. A deleted row keeps its data
    and is tagged DELETED together with the moment it happened.
    """
    ACTIVE = 'active', 'Active'
    DELETED = 'deleted', 'Deleted'


class TimestampMixin(models.Model):
    """
    Adds created_at / updated_at bookkeeping.
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True


class SoftDeleteMixin(models.Model):
    """
    Mixin for models that support soft deletion.

    Fields:
        - lifecycle: LifecycleStatus (ACTIVE/DELETED)
        - deleted_at: set together with lifecycle=DELETED

    Pair it with SoftDeleteManager as the default manager so that
    `Model.objects` only ever sees active rows; `Model.all_objects`
    exposes deleted rows for audits and admin screens.

    Methods:
        - soft_delete(): tag the record as deleted
        - restore(): bring a deleted record back
    """
    lifecycle = models.CharField(
        max_length=10,
        choices=LifecycleStatus.choices,
        default=LifecycleStatus.ACTIVE,
        db_index=True,
        help_text="Record lifecycle. Set to DELETED instead of deleting."
    )
    deleted_at = models.DateTimeField(null=True, blank=True, editable=False)

    class Meta:
        abstract = True

    @property
    def is_deleted(self):
        return self.lifecycle == LifecycleStatus.DELETED

    def _lifecycle_update_fields(self):
        fields = ['lifecycle', 'deleted_at']
        if hasattr(self, 'updated_at'):
            fields.append('updated_at')
        return fields

    def soft_delete(self, using=None):
        self.lifecycle = LifecycleStatus.DELETED
        self.deleted_at = timezone.now()
        self.save(using=using, update_fields=self._lifecycle_update_fields())

    def restore(self, using=None):
        self.lifecycle = LifecycleStatus.ACTIVE
        self.deleted_at = None
        self.save(using=using, update_fields=self._lifecycle_update_fields())

    def update_fields(self, field_updates: dict):
        """
        Set several fields at once, validate and save.

        Example:
            company.update_fields({'nama_perusahaan': 'PT Baru', 'kontak': '0812'})
        """
        for field_name, value in field_updates.items():
            setattr(self, field_name, value)
        self.full_clean(validate_unique=False, validate_constraints=False)
        self.save()
        return self
