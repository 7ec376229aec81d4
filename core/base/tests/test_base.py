"""
Tests for shared building blocks: uploads, soft delete, the response
envelope and the project-level routes.
"""
from unittest import mock

from django.test import SimpleTestCase, TestCase, override_settings
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.settings import api_settings
from rest_framework.test import APIClient

from core.base.exceptions import FileTooLarge, FileTypeRejected, MissingField
from core.base.test_utils import image_upload, make_company
from core.base.uploads import build_upload_name, validate_upload
from internship.company.models import Company
from magang_project.response_formatter import (
    StandardizedJSONRenderer, custom_exception_handler, error_code_for, format_error_message,
)


class UploadHelpersTest(SimpleTestCase):
    """Test upload naming and validation"""

    def test_upload_name_format(self):
        self.assertRegex(build_upload_name('bukti_foto', 'IMG_01.JPG'), r'^bukti_foto-\d{13}-\d{9}\.jpg$')

    def test_upload_name_without_extension(self):
        self.assertRegex(build_upload_name('foto_profil', 'photo'), r'^foto_profil-\d{13}-\d{9}$')

    def test_validate_upload_passes_none(self):
        self.assertIsNone(validate_upload(None))

    def test_validate_upload_rejects_extension(self):
        with self.assertRaises(FileTypeRejected):
            validate_upload(image_upload('virus.exe'))

    @override_settings(MAX_UPLOAD_SIZE=10)
    def test_validate_upload_rejects_size(self):
        with self.assertRaises(FileTooLarge):
            validate_upload(image_upload())


class SoftDeleteTest(TestCase):
    """Test the lifecycle tag and its managers"""

    def test_soft_delete_and_restore(self):
        company = make_company()
        company.soft_delete()
        self.assertFalse(Company.objects.filter(pk=company.pk).exists())
        self.assertEqual(list(Company.all_objects.deleted()), [company])
        self.assertIsNotNone(company.deleted_at)

        company.restore()
        self.assertTrue(Company.objects.filter(pk=company.pk).exists())
        self.assertIsNone(company.deleted_at)

    def test_search(self):
        make_company('PT Maju Jaya')
        make_company('CV Sentosa', alamat='Bandung')
        self.assertEqual(Company.objects.search('bandung', 'nama_perusahaan', 'alamat').count(), 1)
        self.assertEqual(Company.objects.search('', 'nama_perusahaan').count(), 2)


class ErrorFormattingTest(SimpleTestCase):
    """Test error message flattening and code selection"""

    def test_format_error_message(self):
        self.assertEqual(format_error_message({'detail': 'Nope'}), 'Nope')
        self.assertEqual(format_error_message({'tanggal': ['a', 'b']}), 'tanggal: a, b')
        self.assertEqual(format_error_message(['a', 'b']), 'a, b')

    def test_required_field_maps_to_missing_field(self):
        exc = ValidationError({'username': ['This field is required.']}, code='required')
        self.assertEqual(error_code_for(exc), MissingField.default_code)

    def test_api_error_keeps_its_code(self):
        self.assertEqual(error_code_for(FileTooLarge()), 'file_too_large')

    def test_framework_settings_resolve_envelope_classes(self):
        self.assertIn(StandardizedJSONRenderer, api_settings.DEFAULT_RENDERER_CLASSES)
        self.assertIs(api_settings.EXCEPTION_HANDLER, custom_exception_handler)

    def test_unexpected_error_becomes_internal_error(self):
        with self.assertLogs('magang_project.response_formatter', level='ERROR'):
            response = custom_exception_handler(RuntimeError('boom'), {'view': None})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['code'], 'internal_error')
        self.assertIsNone(response.data['data'])


class ProjectRoutesTest(TestCase):
    """Test the routes outside /api/"""

    def setUp(self):
        self.client = APIClient()

    def test_index(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'API MAGANG RUNNING')

    def test_health(self):
        response = self.client.get('/health/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['database'], 'ok')

    def test_unknown_route_uses_error_envelope(self):
        response = self.client.get('/api/does-not-exist/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        body = response.json()
        self.assertEqual(body['status'], 'error')
        self.assertEqual(body['code'], 'not_found')

    def test_index_reports_database(self):
        response = self.client.get('/')
        self.assertEqual(response.data['data']['database'], 'ok')

    def test_database_down(self):
        with mock.patch('magang_project.views.database_status', return_value='unavailable'):
            for url in ('/', '/health/'):
                response = self.client.get(url)
                self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
                self.assertEqual(response.data['data']['database'], 'unavailable')

    @override_settings(CORS_ALLOWED_ORIGINS=['http://localhost:5173'], CORS_ALLOW_CREDENTIALS=True)
    def test_cors_headers_for_client_origin(self):
        response = self.client.get('/api/companies/', HTTP_ORIGIN='http://localhost:5173')
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:5173')
        self.assertEqual(response['Access-Control-Allow-Credentials'], 'true')

    @override_settings(CORS_ALLOWED_ORIGINS=['http://localhost:5173'])
    def test_cors_preflight_on_login(self):
        response = self.client.options(
            '/api/login/',
            HTTP_ORIGIN='http://localhost:5173',
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:5173')

    @override_settings(CORS_ALLOWED_ORIGINS=['http://localhost:5173'])
    def test_cors_ignores_other_origins(self):
        response = self.client.get('/health/', HTTP_ORIGIN='http://evil.example')
        self.assertNotIn('Access-Control-Allow-Origin', response)
