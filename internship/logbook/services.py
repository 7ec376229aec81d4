"""
Logbook state machine.

Entries are created `pending`. Reviewers (admins, or the supervisor of the
owner's active placement) may set any of pending / approved / rejected
at any time. Owners may edit an entry until it is approved; editing a
rejected entry sends it back to pending.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import DEFAULT_DB_ALIAS, transaction
from django.utils import timezone

from core.base.exceptions import (
    EntryLocked, Forbidden, InputError, InvalidStatus, MissingField,
    NotFoundError, SubmissionLocked,
)
from core.base.uploads import validate_upload
from core.user_accounts.identity import Identity
from core.user_accounts.models import ReportStatus
from internship.placement.services import PlacementService

from .dtos import LogbookCreateDTO, LogbookStatusDTO, LogbookUpdateDTO
from .models import Attendance, LogbookEntry, LogbookStatus, normalize_status

logger = logging.getLogger(__name__)


class LogbookService:
    """Service for LogbookEntry business logic"""

    def __init__(self, placements: PlacementService = None, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.placements = placements or PlacementService(using=using)

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def _entries(self):
        return LogbookEntry.objects.using(self.using).select_related('user', 'reviewed_by')

    def visible_to(self, identity: Identity, entry: LogbookEntry) -> bool:
        if identity.is_admin:
            return True
        if identity.is_participant:
            return entry.user_id == identity.user_id
        if identity.is_supervisor:
            return self.placements.resolve_supervisor(entry.user_id) == identity.user_id
        return False

    def get(self, entry_id) -> LogbookEntry:
        try:
            return self._entries().get(pk=entry_id)
        except (LogbookEntry.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('Logbook entry not found.')

    def get_visible(self, identity: Identity, entry_id) -> LogbookEntry:
        entry = self.get(entry_id)
        if not self.visible_to(identity, entry):
            raise Forbidden('You cannot access this logbook entry.')
        return entry

    def list_for_owner(self, user_id):
        return self._entries().filter(user_id=user_id).order_by('-tanggal', '-id')

    def list_for_supervisor(self, supervisor_id):
        participant_ids = self.placements.supervised_participant_ids(supervisor_id)
        return self._entries().filter(user_id__in=participant_ids).order_by('-tanggal', '-id')

    def list_all(self, user_id=None, status=None):
        """
        Admin listing.

        Filters:
            user_id: only this participant's entries
            status: pending | approved | rejected (Indonesian aliases accepted)
        """
        queryset = self._entries()
        if user_id not in (None, ''):
            queryset = queryset.filter(user_id=user_id)
        if status not in (None, ''):
            normalized = normalize_status(status)
            if normalized is None:
                raise InvalidStatus()
            queryset = queryset.filter(status=normalized)
        return queryset.order_by('-tanggal', '-id')

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def submit(self, identity: Identity, dto: LogbookCreateDTO) -> LogbookEntry:
        """
        Create a pending entry for the calling participant.

        Raises:
            SubmissionLocked: the participant has no active placement
            MissingField: tanggal or kegiatan not given
            FileTypeRejected / FileTooLarge: evidence file rejected
        """
        User = get_user_model()
        try:
            owner = User.objects.using(self.using).get(pk=identity.user_id)
        except User.DoesNotExist:
            raise Forbidden()

        if owner.status_laporan != ReportStatus.ACTIVE:
            raise SubmissionLocked()

        if dto.tanggal is None:
            raise MissingField('tanggal')
        if not (dto.kegiatan or '').strip():
            raise MissingField('kegiatan')
        kehadiran = self._attendance(dto.kehadiran)
        validate_upload(dto.bukti_foto)

        entry = LogbookEntry(
            user=owner,
            tanggal=dto.tanggal,
            kegiatan=dto.kegiatan.strip(),
            bukti_foto=dto.bukti_foto,
            kehadiran=kehadiran,
            status=LogbookStatus.PENDING,
        )
        entry.save(using=self.using)

        logger.info("Logbook entry %s submitted by participant %s", entry.pk, owner.pk)
        return entry

    def update_status(self, identity: Identity, dto: LogbookStatusDTO) -> LogbookEntry:
        """
        Set the review status of an entry.

        Allowed for admins and for the supervisor of the owner's active
        placement. Any status may follow any other.
        """
        with transaction.atomic(using=self.using):
            try:
                entry = self._entries().select_for_update(of=('self',)).get(pk=dto.entry_id)
            except (LogbookEntry.DoesNotExist, ValueError, TypeError):
                raise NotFoundError('Logbook entry not found.')

            if not (identity.is_admin or identity.is_supervisor) or not self.visible_to(identity, entry):
                raise Forbidden('Only an admin or the participant\'s supervisor can review this entry.')

            status = normalize_status(dto.status)
            if status is None:
                raise InvalidStatus()

            previous = entry.status
            entry.status = status
            if dto.catatan is not None:
                entry.catatan = dto.catatan
            entry.reviewed_by_id = identity.user_id
            entry.reviewed_at = timezone.now()
            entry.save(using=self.using)

        logger.info(
            "Logbook entry %s status %s -> %s by %s %s",
            entry.pk, previous, status, identity.role, identity.user_id
        )
        return entry

    def update_content(self, identity: Identity, dto: LogbookUpdateDTO) -> LogbookEntry:
        """
        Owner edit.

        Raises:
            Forbidden: caller is not the owner
            EntryLocked: entry is already approved
        """
        with transaction.atomic(using=self.using):
            try:
                entry = self._entries().select_for_update(of=('self',)).get(pk=dto.entry_id)
            except (LogbookEntry.DoesNotExist, ValueError, TypeError):
                raise NotFoundError('Logbook entry not found.')

            if entry.user_id != identity.user_id:
                raise Forbidden('You can only edit your own logbook entries.')
            if entry.status == LogbookStatus.APPROVED:
                raise EntryLocked()

            field_updates = {}
            if dto.tanggal is not None:
                field_updates['tanggal'] = dto.tanggal
            if dto.kegiatan is not None:
                if not dto.kegiatan.strip():
                    raise MissingField('kegiatan')
                field_updates['kegiatan'] = dto.kegiatan.strip()
            if dto.kehadiran is not None:
                field_updates['kehadiran'] = self._attendance(dto.kehadiran)
            if dto.bukti_foto is not None:
                validate_upload(dto.bukti_foto)
                field_updates['bukti_foto'] = dto.bukti_foto

            if field_updates and entry.status == LogbookStatus.REJECTED:
                # Resubmission
                field_updates.update({
                    'status': LogbookStatus.PENDING,
                    'catatan': '',
                    'reviewed_by': None,
                    'reviewed_at': None,
                })

            if field_updates:
                entry.update_fields(field_updates)

        return entry

    def remove(self, identity: Identity, entry_id) -> LogbookEntry:
        """Admins delete any entry, participants only their own."""
        entry = self.get(entry_id)
        if not identity.is_admin:
            if not identity.is_participant or entry.user_id != identity.user_id:
                raise Forbidden('You can only delete your own logbook entries.')

        entry.soft_delete(using=self.using)
        logger.info("Logbook entry %s deleted by %s %s", entry.pk, identity.role, identity.user_id)
        return entry

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _attendance(self, value):
        if value in (None, ''):
            return ''
        value = str(value).strip().lower()
        if value not in Attendance.values:
            raise InputError(f"kehadiran must be one of: {', '.join(Attendance.values)}.")
        return value
