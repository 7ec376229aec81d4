"""
Tests for User Account API Views.
Covers login, registration, own profile and user administration.
"""
import shutil
import tempfile

from django.contrib.auth import get_user_model
from django.test import override_settings
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from core.base.test_utils import (
    DEFAULT_PASSWORD, authenticate, image_upload, make_admin, make_company,
    make_participant, make_supervisor, place,
)
from core.user_accounts.models import ReportStatus, Role

User = get_user_model()


class LoginAPITest(APITestCase):
    """Test login endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/api/login/'
        self.user = make_participant('amara', nama_lengkap='Amara Putri')

    def test_login_success(self):
        response = self.client.post(self.url, {'username': 'amara', 'password': DEFAULT_PASSWORD}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'success')
        data = response.data['data']
        self.assertIn('token', data)
        self.assertEqual(data['user']['id'], self.user.pk)
        self.assertEqual(data['user']['nama'], 'Amara Putri')
        self.assertEqual(data['user']['role'], Role.PARTICIPANT)

    def test_token_opens_protected_routes(self):
        response = self.client.post(self.url, {'username': 'amara', 'password': DEFAULT_PASSWORD}, format='json')
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['data']['token']}")
        me = self.client.get('/api/auth/me/')
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.data['data']['username'], 'amara')

    def test_wrong_password_twice_issues_no_token(self):
        for _ in range(2):
            response = self.client.post(self.url, {'username': 'amara', 'password': 'salah'}, format='json')
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
            self.assertEqual(response.data['code'], 'invalid_credential')
            self.assertIsNone(response.data['data'])
        self.user.refresh_from_db()
        self.assertIsNone(self.user.last_login)

    def test_unknown_username(self):
        response = self.client.post(self.url, {'username': 'nobody', 'password': 'x'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['code'], 'user_not_found')

    def test_missing_password(self):
        response = self.client.post(self.url, {'username': 'amara'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'missing_field')

    def test_null_password_is_missing(self):
        response = self.client.post(self.url, {'username': 'amara', 'password': None}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'missing_field')

    def test_numeric_password_is_checked_as_text(self):
        response = self.client.post(self.url, {'username': 'amara', 'password': 123456}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['code'], 'invalid_credential')

    def test_non_object_body(self):
        response = self.client.post(self.url, ['amara', DEFAULT_PASSWORD], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['status'], 'error')

    def test_login_without_trailing_slash(self):
        response = self.client.post('/api/login', {'username': 'amara', 'password': DEFAULT_PASSWORD}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('token', response.data['data'])


class RegistrationAPITest(APITestCase):
    """Test public registration endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/api/register/'
        self.valid_data = {
            'username': 'amara',
            'password': 'rahasia123',
            'nama_lengkap': 'Amara Putri',
            'nim': '2101001',
            'jurusan': 'Teknik Informatika',
            'no_hp': '08123456789',
        }

    def test_register_success(self):
        response = self.client.post(self.url, self.valid_data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        user = User.objects.get(pk=response.data['data']['id'])
        self.assertEqual(user.role, Role.PARTICIPANT)
        self.assertEqual(user.status_laporan, ReportStatus.LOCKED)

    def test_register_duplicate_username(self):
        self.client.post(self.url, self.valid_data, format='json')
        response = self.client.post(self.url, self.valid_data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'duplicate_username')

    def test_register_without_trailing_slash(self):
        response = self.client.post('/api/register', self.valid_data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_register_missing_name(self):
        data = dict(self.valid_data)
        del data['nama_lengkap']
        response = self.client.post(self.url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'missing_field')


class AuthenticationAPITest(APITestCase):
    """Test token handling on protected routes"""

    def setUp(self):
        self.client = APIClient()
        self.user = make_participant('amara')

    def test_no_token(self):
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['code'], 'unauthenticated')

    def test_malformed_token(self):
        self.client.credentials(HTTP_AUTHORIZATION='Bearer not.a.token')
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['code'], 'token_malformed')

    def test_token_of_deleted_user(self):
        authenticate(self.client, self.user)
        self.user.soft_delete()
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['code'], 'token_malformed')


class ProfileAPITest(APITestCase):
    """Test own profile and password endpoints"""

    def setUp(self):
        self.client = APIClient()
        self.user = make_participant('amara', nama_lengkap='Amara')
        authenticate(self.client, self.user)
        self.media_root = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.media_root, ignore_errors=True)

    def test_get_profile(self):
        response = self.client.get('/api/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['nama_lengkap'], 'Amara')
        self.assertNotIn('password', response.data['data'])

    def test_patch_profile(self):
        response = self.client.patch('/api/auth/me/', {'no_hp': '0811111111'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.no_hp, '0811111111')

    def test_upload_profile_photo(self):
        with override_settings(MEDIA_ROOT=self.media_root):
            response = self.client.patch(
                '/api/auth/me/', {'foto_profil': image_upload('me.GIF')}, format='multipart'
            )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertRegex(self.user.foto_profil.name, r'^foto_profil-\d{13}-\d{9}\.gif$')

    def test_upload_rejected_extension(self):
        with override_settings(MEDIA_ROOT=self.media_root):
            response = self.client.patch(
                '/api/auth/me/', {'foto_profil': image_upload('me.exe')}, format='multipart'
            )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'file_type_rejected')

    def test_change_password(self):
        response = self.client.post(
            '/api/auth/change-password/',
            {'old_password': DEFAULT_PASSWORD, 'new_password': 'baru12345'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('baru12345'))


class UserAdminAPITest(APITestCase):
    """Test admin user management endpoints"""

    def setUp(self):
        self.client = APIClient()
        self.admin = make_admin()
        self.supervisor = make_supervisor('budi')
        self.participant = make_participant('amara')
        self.company = make_company()
        authenticate(self.client, self.admin)

    def test_list_users_by_role(self):
        response = self.client.get('/api/users/peserta/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([u['username'] for u in response.data['data']], ['amara'])

    def test_participant_role_alias(self):
        response = self.client.get('/api/users/participant/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['data']), 1)

    def test_unknown_role_is_404(self):
        response = self.client.get('/api/users/guru/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_users_paginated(self):
        response = self.client.get('/api/users/', {'page_size': 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['count'], 3)
        self.assertEqual(len(response.data['data']['results']), 2)

    def test_create_user(self):
        response = self.client.post('/api/users/', {
            'username': 'citra',
            'password': 'rahasia123',
            'nama_lengkap': 'Citra',
            'role': 'supervisor',
            'company_id': self.company.pk,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['role'], Role.SUPERVISOR)
        self.assertEqual(response.data['data']['company'], self.company.pk)

    def test_create_user_duplicate(self):
        response = self.client.post('/api/users/', {
            'username': 'amara', 'password': 'rahasia123', 'nama_lengkap': 'Amara 2', 'role': 'peserta',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'duplicate_username')

    def test_update_user(self):
        response = self.client.put(
            f'/api/users/{self.participant.pk}/', {'nama_lengkap': 'Amara Baru', 'nim': '99'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['nama_lengkap'], 'Amara Baru')

    def test_delete_user_is_soft(self):
        response = self.client.delete(f'/api/users/{self.participant.pk}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(User.objects.filter(pk=self.participant.pk).exists())
        self.assertTrue(User.all_objects.filter(pk=self.participant.pk).exists())
        self.assertEqual(self.client.get(f'/api/users/{self.participant.pk}/').status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_participant_releases_placement(self):
        place(self.participant, self.supervisor, self.company)
        self.client.delete(f'/api/users/{self.participant.pk}/')
        response = self.client.get('/api/placements/')
        self.assertEqual(response.data['data'], [])

    def test_non_admin_forbidden(self):
        authenticate(self.client, self.supervisor)
        response = self.client.get('/api/users/peserta/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['code'], 'forbidden')
