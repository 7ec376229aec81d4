"""
Placement graph: participant -> supervisor -> company.

Every mutation runs as one unit of work so that the placement row and the
participant's status_laporan / company stamp never disagree.
"""
import logging
from typing import List, Optional

from django.contrib.auth import get_user_model
from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction

from core.base.exceptions import AlreadyPlaced, InvalidReference, MissingField, NotFoundError
from core.user_accounts.models import ReportStatus, Role
from internship.company.models import Company

from .dtos import PlacementCreateDTO, PlacementUpdateDTO
from .models import Placement

logger = logging.getLogger(__name__)


class PlacementService:
    """Service for Placement business logic"""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.user_model = get_user_model()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _placements(self):
        return Placement.objects.using(self.using)

    def list_placements(self, supervisor_id=None):
        queryset = self._placements().select_related('user', 'supervisor', 'company')
        if supervisor_id is not None:
            queryset = queryset.for_supervisor(supervisor_id)
        return queryset.order_by('-id')

    def get(self, placement_id) -> Placement:
        try:
            return self._placements().select_related('user', 'supervisor', 'company').get(pk=placement_id)
        except (Placement.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('Placement not found.')

    def get_for_participant(self, participant_id) -> Optional[Placement]:
        return (
            self._placements()
            .select_related('user', 'supervisor', 'company')
            .filter(user_id=participant_id)
            .first()
        )

    def resolve_supervisor(self, participant_id) -> Optional[int]:
        """Supervisor of the participant's active placement, if any."""
        return self._placements().filter(user_id=participant_id).values_list('supervisor_id', flat=True).first()

    def supervised_participant_ids(self, supervisor_id) -> List[int]:
        return list(
            self._placements().for_supervisor(supervisor_id).values_list('user_id', flat=True)
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, dto: PlacementCreateDTO) -> Placement:
        """
        Place a participant.

        Raises:
            MissingField: user_id, supervisor_id or company_id not given
            InvalidReference: a referenced record is missing or has the wrong role
            AlreadyPlaced: the participant already has an active placement
        """
        for name in ('user_id', 'supervisor_id', 'company_id'):
            if getattr(dto, name) in (None, ''):
                raise MissingField(name)

        with transaction.atomic(using=self.using):
            participant = self._participant(dto.user_id)
            supervisor = self._supervisor(dto.supervisor_id)
            company = self._company(dto.company_id)

            if self._placements().filter(user=participant).exists():
                raise AlreadyPlaced()

            try:
                with transaction.atomic(using=self.using):
                    placement = Placement.objects.db_manager(self.using).create(
                        user=participant,
                        supervisor=supervisor,
                        company=company,
                    )
            except IntegrityError:
                raise AlreadyPlaced()

            self._stamp(participant, company)

        logger.info(
            "Placement %s created: participant %s, supervisor %s, company %s",
            placement.pk, participant.pk, supervisor.pk, company.pk
        )
        return placement

    def update(self, dto: PlacementUpdateDTO) -> Placement:
        """
        Edit a placement.

        Moving it to another participant releases the old one (locked, no
        company) and stamps the new one, who must not already be placed.
        Changing the company re-stamps the participant.
        """
        with transaction.atomic(using=self.using):
            try:
                placement = self._placements().select_for_update().get(pk=dto.placement_id)
            except (Placement.DoesNotExist, ValueError, TypeError):
                raise NotFoundError('Placement not found.')

            old_participant = placement.user
            participant = old_participant
            company = placement.company

            if dto.user_id is not None and dto.user_id != placement.user_id:
                participant = self._participant(dto.user_id)
                if self._placements().filter(user=participant).exclude(pk=placement.pk).exists():
                    raise AlreadyPlaced()

            if dto.supervisor_id is not None:
                placement.supervisor = self._supervisor(dto.supervisor_id)
            if dto.company_id is not None:
                company = self._company(dto.company_id)

            if participant.pk != old_participant.pk:
                self._release(old_participant)

            placement.user = participant
            placement.company = company
            try:
                with transaction.atomic(using=self.using):
                    placement.save(using=self.using)
            except IntegrityError:
                raise AlreadyPlaced()

            self._stamp(participant, company)

        logger.info("Placement %s updated", placement.pk)
        return placement

    def remove(self, placement: Placement) -> None:
        """Soft-delete a placement and lock its participant again."""
        with transaction.atomic(using=self.using):
            placement.soft_delete(using=self.using)
            self._release(placement.user)

        logger.info("Placement %s removed; participant %s locked", placement.pk, placement.user_id)

    def remove_by_id(self, placement_id) -> Placement:
        placement = self.get(placement_id)
        self.remove(placement)
        return placement

    def remove_for_user(self, user) -> int:
        """
        Remove every active placement where the user is participant or
        supervisor. Returns how many were removed.
        """
        placements = list(self._placements().select_related('user').involving(user.pk))
        for placement in placements:
            self.remove(placement)
        return len(placements)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _user_with_role(self, user_id, role, label):
        try:
            user = self.user_model.objects.using(self.using).select_for_update().get(pk=user_id)
        except (self.user_model.DoesNotExist, ValueError, TypeError):
            raise InvalidReference(f'{label} {user_id} does not exist.')
        if user.role != role:
            raise InvalidReference(f'User {user_id} is not a {role}.')
        return user

    def _participant(self, user_id):
        return self._user_with_role(user_id, Role.PARTICIPANT, 'Participant')

    def _supervisor(self, user_id):
        return self._user_with_role(user_id, Role.SUPERVISOR, 'Supervisor')

    def _company(self, company_id):
        try:
            return Company.objects.using(self.using).get(pk=company_id)
        except (Company.DoesNotExist, ValueError, TypeError):
            raise InvalidReference(f'Company {company_id} does not exist.')

    def _stamp(self, participant, company):
        participant.status_laporan = ReportStatus.ACTIVE
        participant.company = company
        participant.save(using=self.using, update_fields=['status_laporan', 'company', 'updated_at'])

    def _release(self, participant):
        participant.status_laporan = ReportStatus.LOCKED
        participant.company = None
        participant.save(using=self.using, update_fields=['status_laporan', 'company', 'updated_at'])
