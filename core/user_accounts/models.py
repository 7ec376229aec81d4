"""
User Account Models
Accounts for the three roles of the internship program.
"""
from django.contrib.auth.models import AbstractBaseUser
from django.db import models
from django.db.models import Q

from core.base.managers import AllObjectsManager, SoftDeleteUserManager
from core.base.models import LifecycleStatus, SoftDeleteMixin, TimestampMixin
from core.base.uploads import profile_photo_path


class Role(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    SUPERVISOR = 'supervisor', 'Supervisor'
    PARTICIPANT = 'peserta', 'Peserta'


# Alternate spellings accepted from clients (URLs, query strings).
ROLE_ALIASES = {
    'participant': Role.PARTICIPANT,
}


def normalize_role(value):
    """
    Map a client-supplied role to a Role value, or None if unknown.
    """
    if value is None:
        return None
    value = str(value).strip().lower()
    value = ROLE_ALIASES.get(value, value)
    return value if value in Role.values else None


class ReportStatus(models.TextChoices):
    """Whether a participant may submit logbook entries."""
    LOCKED = 'locked', 'Locked'
    ACTIVE = 'active', 'Active'


class UserManager(SoftDeleteUserManager):
    """
    Manager for User. Only active (not soft-deleted) accounts are visible.
    """
    use_in_migrations = True

    def create_user(self, username, nama_lengkap, password=None, role=Role.PARTICIPANT, **extra_fields):
        """
        Create and save a user with any role.

        Args:
            username: login name, unique among active users
            nama_lengkap: full name
            password: raw password (hashed with bcrypt)
            role: one of Role
            **extra_fields: nim, jurusan, no_hp, company, status_laporan...
        """
        if not username:
            raise ValueError('Username is required')
        if not nama_lengkap:
            raise ValueError('Full name is required')

        user = self.model(
            username=username.strip(),
            nama_lengkap=nama_lengkap,
            role=role,
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, nama_lengkap, password=None, **extra_fields):
        """
        Create an admin account.
        Required by Django for the createsuperuser management command.
        """
        return self.create_user(
            username=username,
            nama_lengkap=nama_lengkap,
            password=password,
            role=Role.ADMIN,
            **extra_fields
        )


class User(SoftDeleteMixin, TimestampMixin, AbstractBaseUser):
    """Account of an admin, a supervisor or an internship participant (peserta)."""
    username = models.CharField(max_length=150, db_index=True)
    nama_lengkap = models.CharField(max_length=255)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.PARTICIPANT,
        db_index=True
    )
    foto_profil = models.FileField(upload_to=profile_photo_path, max_length=255, null=True, blank=True)

    # Participant details
    nim = models.CharField(max_length=50, blank=True, default='')
    jurusan = models.CharField(max_length=255, blank=True, default='')
    no_hp = models.CharField(max_length=30, blank=True, default='')

    # Stamped by placements, never edited directly for participants
    company = models.ForeignKey(
        'company.Company',
        on_delete=models.SET_NULL,
        related_name='users',
        null=True,
        blank=True
    )
    status_laporan = models.CharField(
        max_length=10,
        choices=ReportStatus.choices,
        default=ReportStatus.LOCKED,
        help_text="Participants may submit logbook entries only while active"
    )

    objects = UserManager()
    all_objects = AllObjectsManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = ['nama_lengkap']

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['username'],
                condition=Q(lifecycle=LifecycleStatus.ACTIVE),
                name='unique_active_username',
            ),
        ]

    def __str__(self):
        return f"{self.nama_lengkap} ({self.username})"

    @property
    def is_active(self):
        return not self.is_deleted

    @property
    def is_staff(self):
        return self.role == Role.ADMIN

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    @property
    def is_supervisor(self):
        return self.role == Role.SUPERVISOR

    @property
    def is_participant(self):
        return self.role == Role.PARTICIPANT

    def has_perm(self, perm, obj=None):
        return self.is_active and self.is_staff

    def has_module_perms(self, app_label):
        return self.is_active and self.is_staff
