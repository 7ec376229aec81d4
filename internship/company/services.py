import logging

from django.contrib.auth import get_user_model
from django.db import DEFAULT_DB_ALIAS, transaction

from core.base.exceptions import ConflictError, MissingField, NotFoundError

from .dtos import CompanyCreateDTO, CompanyUpdateDTO
from .models import Company

logger = logging.getLogger(__name__)


class CompanyService:
    """Service for Company business logic"""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def list_companies(self, search=None):
        return Company.objects.using(self.using).search(search, 'nama_perusahaan', 'alamat', 'kontak')

    def get(self, company_id) -> Company:
        try:
            return Company.objects.using(self.using).get(pk=company_id)
        except (Company.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('Company not found.')

    def create(self, dto: CompanyCreateDTO) -> Company:
        if not (dto.nama_perusahaan or '').strip():
            raise MissingField('nama_perusahaan')

        company = Company(
            nama_perusahaan=dto.nama_perusahaan.strip(),
            alamat=dto.alamat or '',
            kontak=dto.kontak or '',
        )
        company.full_clean()
        company.save(using=self.using)
        logger.info("Company %s created", company.pk)
        return company

    def update(self, dto: CompanyUpdateDTO) -> Company:
        company = self.get(dto.company_id)

        field_updates = {}
        if dto.nama_perusahaan is not None:
            if not dto.nama_perusahaan.strip():
                raise MissingField('nama_perusahaan')
            field_updates['nama_perusahaan'] = dto.nama_perusahaan.strip()
        if dto.alamat is not None:
            field_updates['alamat'] = dto.alamat
        if dto.kontak is not None:
            field_updates['kontak'] = dto.kontak

        if field_updates:
            company.update_fields(field_updates)
        return company

    def delete(self, company_id) -> Company:
        """
        Soft-delete a company.

        Refused while participants are placed there; remove the placements first.
        Other users pointing at the company (supervisors, admins) lose the link.
        """
        with transaction.atomic(using=self.using):
            company = self.get(company_id)
            if company.placements.exists():
                raise ConflictError('Company still has active placements.')
            released = get_user_model().all_objects.using(self.using).filter(company=company).update(company=None)
            company.soft_delete(using=self.using)

        logger.info("Company %s deleted; cleared from %s user(s)", company.pk, released)
        return company
