"""
Tests for SessionService and AccountService.
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase

from core.base.exceptions import (
    ConflictError, DuplicateUsername, Forbidden, InputError, InvalidCredential,
    InvalidReference, MissingField, TokenExpired, TokenMalformed, UserNotFound,
)
from core.base.test_utils import (
    DEFAULT_PASSWORD, make_admin, make_company, make_participant, make_supervisor, place,
)
from core.user_accounts.dtos import RegistrationDTO, UserCreateDTO, UserUpdateDTO
from core.user_accounts.identity import Identity
from core.user_accounts.models import ReportStatus, Role
from core.user_accounts.services import AccountService, SessionService

User = get_user_model()


class UserModelTest(TestCase):
    """Test the User model and its manager"""

    def test_create_user_hashes_with_bcrypt(self):
        user = make_participant('amara')
        self.assertTrue(user.password.startswith('bcrypt$$2b$10$'))
        self.assertTrue(user.check_password(DEFAULT_PASSWORD))
        self.assertEqual(user.status_laporan, ReportStatus.LOCKED)

    def test_create_superuser_is_admin(self):
        user = User.objects.create_superuser(username='root', nama_lengkap='Root', password='secret123')
        self.assertEqual(user.role, Role.ADMIN)
        self.assertTrue(user.is_staff)

    def test_soft_deleted_user_hidden_from_default_manager(self):
        user = make_participant('amara')
        user.soft_delete()
        self.assertFalse(User.objects.filter(pk=user.pk).exists())
        self.assertTrue(User.all_objects.filter(pk=user.pk).exists())
        self.assertFalse(User.all_objects.get(pk=user.pk).is_active)

    def test_username_reusable_after_soft_delete(self):
        make_participant('amara').soft_delete()
        again = make_participant('amara')
        self.assertEqual(User.objects.get(username='amara').pk, again.pk)


class SessionServiceTest(TestCase):
    """Test login, token issue and verification"""

    @classmethod
    def setUpTestData(cls):
        cls.user = make_participant('amara', nama_lengkap='Amara Putri')

    def setUp(self):
        self.service = SessionService()

    def test_authenticate_success(self):
        token, user = self.service.authenticate('amara', DEFAULT_PASSWORD)
        self.assertEqual(user.pk, self.user.pk)
        identity = self.service.verify(token)
        self.assertEqual(identity, Identity(user_id=self.user.pk, role=Role.PARTICIPANT, name='Amara Putri'))

    def test_authenticate_records_last_login(self):
        self.service.authenticate('amara', DEFAULT_PASSWORD)
        self.user.refresh_from_db()
        self.assertIsNotNone(self.user.last_login)

    def test_unknown_username(self):
        with self.assertRaises(UserNotFound):
            self.service.authenticate('nobody', DEFAULT_PASSWORD)

    def test_wrong_password(self):
        with self.assertRaises(InvalidCredential):
            self.service.authenticate('amara', 'wrong-password')

    def test_missing_fields(self):
        with self.assertRaises(MissingField):
            self.service.authenticate('', DEFAULT_PASSWORD)
        with self.assertRaises(MissingField):
            self.service.authenticate('amara', None)

    def test_deleted_user_cannot_login(self):
        self.user.soft_delete()
        with self.assertRaises(UserNotFound):
            self.service.authenticate('amara', DEFAULT_PASSWORD)

    def test_expired_token(self):
        token = SessionService(lifetime=timedelta(seconds=-60)).issue(self.user)
        with self.assertRaises(TokenExpired):
            self.service.verify(token)

    def test_tampered_token(self):
        token = self.service.issue(self.user)
        head, payload, signature = token.split('.')
        tampered = '.'.join([head, payload, signature[::-1]])
        with self.assertRaises(TokenMalformed):
            self.service.verify(tampered)

    def test_garbage_token(self):
        with self.assertRaises(TokenMalformed):
            self.service.verify('not-a-token')
        with self.assertRaises(TokenMalformed):
            self.service.verify('')


class AccountServiceTest(TestCase):
    """Test registration and admin account management"""

    def setUp(self):
        self.service = AccountService()
        self.admin = make_admin()

    def test_register_creates_locked_participant(self):
        user = self.service.register(RegistrationDTO(
            username='amara', password='rahasia123', nama_lengkap='Amara', nim='123', jurusan='TI'
        ))
        self.assertEqual(user.role, Role.PARTICIPANT)
        self.assertEqual(user.status_laporan, ReportStatus.LOCKED)
        self.assertEqual(user.nim, '123')

    def test_register_duplicate_username(self):
        dto = RegistrationDTO(username='amara', password='rahasia123', nama_lengkap='Amara')
        self.service.register(dto)
        with self.assertRaises(DuplicateUsername):
            self.service.register(dto)

    def test_register_missing_field(self):
        with self.assertRaises(MissingField) as ctx:
            self.service.register(RegistrationDTO(username='amara', password='rahasia123'))
        self.assertEqual(ctx.exception.field, 'nama_lengkap')

    def test_register_short_password(self):
        with self.assertRaises(InputError):
            self.service.register(RegistrationDTO(username='amara', password='123', nama_lengkap='Amara'))

    def test_create_user_accepts_role_alias(self):
        user = self.service.create_user(UserCreateDTO(
            username='amara', password='rahasia123', nama_lengkap='Amara', role='participant'
        ))
        self.assertEqual(user.role, Role.PARTICIPANT)

    def test_create_supervisor_with_company(self):
        company = make_company()
        user = self.service.create_user(UserCreateDTO(
            username='budi', password='rahasia123', nama_lengkap='Budi', role='supervisor',
            company_id=company.pk
        ))
        self.assertEqual(user.company, company)

    def test_participant_company_comes_from_placement(self):
        company = make_company()
        with self.assertRaises(InvalidReference):
            self.service.create_user(UserCreateDTO(
                username='amara', password='rahasia123', nama_lengkap='Amara', role='peserta',
                company_id=company.pk
            ))

    def test_unknown_role(self):
        with self.assertRaises(InputError):
            self.service.create_user(UserCreateDTO(
                username='x', password='rahasia123', nama_lengkap='X', role='guru'
            ))

    def test_update_user_password_and_name(self):
        user = make_participant('amara')
        self.service.update_user(UserUpdateDTO(user_id=user.pk, nama_lengkap='Amara P', password='baru12345'))
        user.refresh_from_db()
        self.assertEqual(user.nama_lengkap, 'Amara P')
        self.assertTrue(user.check_password('baru12345'))

    def test_update_user_duplicate_username(self):
        make_participant('amara')
        other = make_participant('citra')
        with self.assertRaises(DuplicateUsername):
            self.service.update_user(UserUpdateDTO(user_id=other.pk, username='amara'))

    def test_role_change_refused_while_placed(self):
        participant = make_participant('amara')
        place(participant, make_supervisor('budi'), make_company())
        with self.assertRaises(ConflictError):
            self.service.update_user(UserUpdateDTO(user_id=participant.pk, role='supervisor'))

    def test_change_password(self):
        user = make_participant('amara')
        self.service.change_password(user, DEFAULT_PASSWORD, 'baru12345')
        user.refresh_from_db()
        self.assertTrue(user.check_password('baru12345'))

    def test_change_password_wrong_old(self):
        user = make_participant('amara')
        with self.assertRaises(InputError):
            self.service.change_password(user, 'salah', 'baru12345')

    def test_delete_user_removes_placements(self):
        participant = make_participant('amara')
        supervisor = make_supervisor('budi')
        place(participant, supervisor, make_company())

        self.service.delete_user(Identity.for_user(self.admin), supervisor.pk)

        participant.refresh_from_db()
        self.assertEqual(participant.status_laporan, ReportStatus.LOCKED)
        self.assertIsNone(participant.company)
        self.assertFalse(User.objects.filter(pk=supervisor.pk).exists())

    def test_cannot_delete_self(self):
        with self.assertRaises(Forbidden):
            self.service.delete_user(Identity.for_user(self.admin), self.admin.pk)
