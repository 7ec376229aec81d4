"""
Shared fixtures for the API test suites.
"""
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile

from core.user_accounts.models import Role
from core.user_accounts.services import SessionService

DEFAULT_PASSWORD = 'rahasia123'

# Smallest valid GIF, used as evidence / profile photo
TINY_GIF = (
    b'GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04'
    b'\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;'
)


def make_user(username, role=Role.PARTICIPANT, password=DEFAULT_PASSWORD, **extra_fields):
    """Create an active user. nama_lengkap defaults to the capitalized username."""
    extra_fields.setdefault('nama_lengkap', username.capitalize())
    return get_user_model().objects.create_user(
        username=username,
        password=password,
        role=role,
        **extra_fields
    )


def make_admin(username='admin'):
    return make_user(username, role=Role.ADMIN)


def make_supervisor(username='supervisor', **extra_fields):
    return make_user(username, role=Role.SUPERVISOR, **extra_fields)


def make_participant(username='peserta', **extra_fields):
    return make_user(username, role=Role.PARTICIPANT, **extra_fields)


def make_company(nama_perusahaan='PT Maju Jaya', **extra_fields):
    from internship.company.models import Company

    extra_fields.setdefault('alamat', 'Jl. Merdeka 1')
    extra_fields.setdefault('kontak', '021-555-0101')
    return Company.objects.create(nama_perusahaan=nama_perusahaan, **extra_fields)


def place(participant, supervisor, company):
    """Place a participant through PlacementService and refresh it."""
    from internship.placement.dtos import PlacementCreateDTO
    from internship.placement.services import PlacementService

    placement = PlacementService().create(PlacementCreateDTO(
        user_id=participant.pk,
        supervisor_id=supervisor.pk,
        company_id=company.pk,
    ))
    participant.refresh_from_db()
    return placement


def token_for(user):
    return SessionService().issue(user)


def authenticate(client, user):
    """Attach a Bearer token for `user` to an APIClient."""
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token_for(user)}')
    return client


def image_upload(name='bukti.gif', content=TINY_GIF, content_type='image/gif'):
    return SimpleUploadedFile(name, content, content_type=content_type)
