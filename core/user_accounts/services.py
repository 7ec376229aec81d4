"""
Service layer for identity, sessions and account management.
"""
import logging
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional, Tuple

import jwt
from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.utils import timezone
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings as jwt_settings
from rest_framework_simplejwt.tokens import AccessToken

from core.base.exceptions import (
    ConflictError, DuplicateUsername, Forbidden, InputError, InvalidCredential,
    InvalidReference, MissingField, NotFoundError, TokenExpired, TokenMalformed,
    UserNotFound,
)
from core.base.uploads import validate_upload

from .dtos import ProfileUpdateDTO, RegistrationDTO, UserCreateDTO, UserUpdateDTO
from .identity import Identity
from .models import ReportStatus, Role, normalize_role

logger = logging.getLogger(__name__)


def _require(**fields):
    """Raise MissingField for the first blank value."""
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingField(name)


class SessionService:
    """
    Issues and verifies session tokens.

    Tokens are signed simplejwt access tokens carrying
    {user_id, role, nama} and valid for SESSION_TOKEN_DAYS.
    """

    def __init__(self, user_model=None, lifetime: Optional[timedelta] = None):
        self.user_model = user_model or get_user_model()
        self.lifetime = lifetime or timedelta(days=settings.SESSION_TOKEN_DAYS)

    def authenticate(self, username, password) -> Tuple[str, object]:
        """
        Check credentials and open a session.

        Raises:
            MissingField: username or password not supplied
            UserNotFound: no active account with that username
            InvalidCredential: password does not match the stored bcrypt hash
        """
        _require(username=username, password=password)

        try:
            user = self.user_model.objects.get(username=str(username).strip())
        except self.user_model.DoesNotExist:
            logger.warning("Login rejected: unknown username %r", username)
            raise UserNotFound()

        if not user.check_password(password):
            logger.warning("Login rejected: wrong password for user %s", user.pk)
            raise InvalidCredential()

        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])

        token = self.issue(user)
        logger.info("User %s (%s) logged in", user.pk, user.role)
        return token, user

    def issue(self, user) -> str:
        token = AccessToken.for_user(user)
        token.set_exp(lifetime=self.lifetime)
        token['role'] = user.role
        token['nama'] = user.nama_lengkap
        return str(token)

    def verify(self, raw_token) -> Identity:
        """
        Validate signature and expiry of a token.

        Raises:
            TokenExpired: signature is valid but the token is past its exp
            TokenMalformed: anything else (bad signature, garbage, missing claims)
        """
        if not raw_token:
            raise TokenMalformed()

        try:
            token = AccessToken(raw_token)
        except TokenError:
            if self._is_expired(raw_token):
                raise TokenExpired()
            raise TokenMalformed()

        try:
            return Identity(
                user_id=int(token[jwt_settings.USER_ID_CLAIM]),
                role=token['role'],
                name=token.get('nama', ''),
            )
        except (KeyError, TypeError, ValueError):
            raise TokenMalformed()

    def _is_expired(self, raw_token) -> bool:
        try:
            payload = jwt.decode(
                raw_token,
                jwt_settings.SIGNING_KEY,
                algorithms=[jwt_settings.ALGORITHM],
                options={'verify_exp': False},
            )
        except jwt.PyJWTError:
            return False
        exp = payload.get('exp')
        if exp is None:
            return False
        return datetime.fromtimestamp(exp, tz=dt_timezone.utc) <= timezone.now()


class AccountService:
    """Registration, profile and admin account management."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.user_model = get_user_model()

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def register(self, dto: RegistrationDTO):
        """
        Public self-registration. Always creates a locked participant.
        """
        _require(username=dto.username, password=dto.password, nama_lengkap=dto.nama_lengkap)
        user = self._create(
            username=dto.username,
            password=dto.password,
            nama_lengkap=dto.nama_lengkap,
            role=Role.PARTICIPANT,
            nim=dto.nim or '',
            jurusan=dto.jurusan or '',
            no_hp=dto.no_hp or '',
            status_laporan=ReportStatus.LOCKED,
        )
        logger.info("Participant %s registered", user.pk)
        return user

    def create_user(self, dto: UserCreateDTO):
        _require(username=dto.username, password=dto.password,
                 nama_lengkap=dto.nama_lengkap, role=dto.role)
        role = self._role(dto.role)

        company = None
        if dto.company_id is not None:
            if role == Role.PARTICIPANT:
                raise InvalidReference('A participant is assigned to a company through a placement.')
            company = self._company(dto.company_id)

        validate_upload(dto.foto_profil)
        user = self._create(
            username=dto.username,
            password=dto.password,
            nama_lengkap=dto.nama_lengkap,
            role=role,
            nim=dto.nim or '',
            jurusan=dto.jurusan or '',
            no_hp=dto.no_hp or '',
            company=company,
            foto_profil=dto.foto_profil,
        )
        logger.info("User %s created with role %s", user.pk, role)
        return user

    def _create(self, username, password, nama_lengkap, role, **extra):
        username = username.strip()
        self._check_password(password)
        if self.user_model.objects.using(self.using).filter(username=username).exists():
            raise DuplicateUsername()
        try:
            with transaction.atomic(using=self.using):
                return self.user_model.objects.db_manager(self.using).create_user(
                    username=username,
                    nama_lengkap=nama_lengkap,
                    password=password,
                    role=role,
                    **extra
                )
        except IntegrityError:
            raise DuplicateUsername()

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def update_user(self, dto: UserUpdateDTO):
        """
        Admin edit of any account.

        A participant's company and report status belong to the placement
        graph and cannot be set here. Changing the role of a user who is
        part of an active placement is refused.
        """
        user = self.get_user(dto.user_id)
        field_updates = {}

        if dto.username is not None:
            _require(username=dto.username)
            username = dto.username.strip()
            if username != user.username and self.user_model.objects.using(self.using).filter(
                    username=username).exclude(pk=user.pk).exists():
                raise DuplicateUsername()
            field_updates['username'] = username
        if dto.nama_lengkap is not None:
            _require(nama_lengkap=dto.nama_lengkap)
            field_updates['nama_lengkap'] = dto.nama_lengkap
        for name in ('nim', 'jurusan', 'no_hp'):
            value = getattr(dto, name)
            if value is not None:
                field_updates[name] = value

        role = user.role
        if dto.role is not None:
            role = self._role(dto.role)
            if role != user.role and self._has_active_placements(user):
                raise ConflictError('Remove the active placements of this user before changing the role.')
            field_updates['role'] = role

        if dto.company_id is not None:
            if role == Role.PARTICIPANT:
                raise InvalidReference('A participant is assigned to a company through a placement.')
            field_updates['company'] = self._company(dto.company_id)

        if dto.foto_profil is not None:
            validate_upload(dto.foto_profil)
            field_updates['foto_profil'] = dto.foto_profil

        with transaction.atomic(using=self.using):
            if dto.password:
                self._check_password(dto.password, user)
                user.set_password(dto.password)
            try:
                with transaction.atomic(using=self.using):
                    user.update_fields(field_updates)
            except IntegrityError:
                raise DuplicateUsername()

        logger.info("User %s updated (%s)", user.pk, ', '.join(sorted(field_updates)) or 'password')
        return user

    def update_profile(self, user, dto: ProfileUpdateDTO):
        """A user editing their own profile fields and photo."""
        field_updates = {}
        if dto.nama_lengkap is not None:
            _require(nama_lengkap=dto.nama_lengkap)
            field_updates['nama_lengkap'] = dto.nama_lengkap
        for name in ('nim', 'jurusan', 'no_hp'):
            value = getattr(dto, name)
            if value is not None:
                field_updates[name] = value
        if dto.foto_profil is not None:
            validate_upload(dto.foto_profil)
            field_updates['foto_profil'] = dto.foto_profil

        if field_updates:
            user.update_fields(field_updates)
        return user

    def change_password(self, user, old_password, new_password):
        _require(old_password=old_password, new_password=new_password)
        if not user.check_password(old_password):
            raise InputError('Old password is incorrect.')
        self._check_password(new_password, user)
        user.set_password(new_password)
        user.save(update_fields=['password', 'updated_at'])
        logger.info("User %s changed their password", user.pk)
        return user

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------

    def delete_user(self, actor: Identity, user_id):
        """
        Soft-delete an account.

        Every active placement where the user is the participant or the
        supervisor is removed first, in the same transaction.
        """
        from internship.placement.services import PlacementService

        if str(actor.user_id) == str(user_id):
            raise Forbidden('You cannot delete your own account.')

        user = self.get_user(user_id)
        with transaction.atomic(using=self.using):
            removed = PlacementService(using=self.using).remove_for_user(user)
            user.soft_delete(using=self.using)

        logger.info("User %s deleted (%d placements removed)", user.pk, removed)
        return user

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_user(self, user_id):
        try:
            return self.user_model.objects.using(self.using).get(pk=user_id)
        except (self.user_model.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('User not found.')

    def list_users(self, role=None, search=None):
        queryset = self.user_model.objects.using(self.using).select_related('company')
        if role is not None:
            queryset = queryset.filter(role=self._role(role))
        return queryset.search(search, 'username', 'nama_lengkap', 'nim').order_by('-id')

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _role(self, value):
        role = normalize_role(value)
        if role is None:
            raise InputError(f"Unknown role '{value}'. Expected one of: {', '.join(Role.values)}.")
        return role

    def _company(self, company_id):
        from internship.company.models import Company

        try:
            return Company.objects.using(self.using).get(pk=company_id)
        except (Company.DoesNotExist, ValueError, TypeError):
            raise InvalidReference(f'Company {company_id} does not exist.')

    def _has_active_placements(self, user):
        from internship.placement.models import Placement

        return Placement.objects.using(self.using).involving(user.pk).exists()

    def _check_password(self, password, user=None):
        try:
            validate_password(password, user)
        except DjangoValidationError as e:
            raise InputError({'password': e.messages})
