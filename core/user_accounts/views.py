"""
API Views for authentication, own profile and user administration.
"""
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny

from core.base.exceptions import NotFoundError
from core.permissions.decorators import require_permission
from core.permissions.matrix import Actions, Resources
from magang_project.pagination import auto_paginate
from magang_project.response_formatter import success_response

from .models import normalize_role
from .serializers import (
    ChangePasswordSerializer,
    LoginSerializer,
    LoginUserSerializer,
    ProfileUpdateSerializer,
    RegistrationSerializer,
    UserCreateSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from .services import AccountService, SessionService


# ============================================================================
# Public Authentication Views
# ============================================================================

@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """
    Exchange username and password for a session token.

    POST /api/login/
    - Request body: { "username": "...", "password": "..." }
    - Returns: { "token": "...", "user": {...} }
    """
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    token, user = SessionService().authenticate(
        serializer.validated_data.get('username'),
        serializer.validated_data.get('password'),
    )
    return success_response(
        {'token': token, 'user': LoginUserSerializer(user).data},
        'Login successful'
    )


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register(request):
    """
    Public self-registration. New accounts are participants whose logbook
    stays locked until an admin places them.

    POST /api/register/
    - Request body: { "username", "password", "nama_lengkap", "nim"?, "jurusan"?, "no_hp"? }
    - Returns: { "id": ... }
    """
    serializer = RegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = AccountService().register(serializer.to_dto())
    return success_response({'id': user.id}, 'User registered successfully', status.HTTP_201_CREATED)


# ============================================================================
# Own Profile Views
# ============================================================================

@api_view(['GET', 'PATCH'])
@require_permission(Resources.PROFILE)
def me(request):
    """
    GET /api/auth/me/
    PATCH /api/auth/me/  (multipart when uploading foto_profil)
    """
    user = request.user

    if request.method == 'GET':
        return success_response(UserSerializer(user).data)

    serializer = ProfileUpdateSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    user = AccountService().update_profile(user, serializer.to_dto())
    return success_response(UserSerializer(user).data, 'Profile updated successfully')


@api_view(['POST'])
@require_permission(Resources.PROFILE, Actions.EDIT)
def change_password(request):
    """
    POST /api/auth/change-password/
    - Request body: { "old_password", "new_password" }
    """
    serializer = ChangePasswordSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    AccountService().change_password(
        request.user,
        serializer.validated_data['old_password'],
        serializer.validated_data['new_password'],
    )
    return success_response(message='Password changed successfully')


# ============================================================================
# Admin User Management Views
# ============================================================================

@api_view(['GET', 'POST'])
@require_permission(Resources.USERS)
@auto_paginate
def user_list(request):
    """
    List or create users.

    GET /api/users/
    - Filters: role (admin | supervisor | peserta | participant)
    - Search: ?search=query (username, nama_lengkap, nim)

    POST /api/users/
    - Request body: { "username", "password", "nama_lengkap", "role", ... }
    """
    service = AccountService()

    if request.method == 'GET':
        users = service.list_users(
            role=request.query_params.get('role'),
            search=request.query_params.get('search'),
        )
        return success_response(UserSerializer(users, many=True).data)

    serializer = UserCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = service.create_user(serializer.to_dto())
    return success_response(UserSerializer(user).data, 'User created successfully', status.HTTP_201_CREATED)


@api_view(['GET'])
@require_permission(Resources.USERS)
@auto_paginate
def users_by_role(request, role):
    """
    GET /api/users/<role>/
    """
    if normalize_role(role) is None:
        raise NotFoundError(f"Unknown role '{role}'.")
    users = AccountService().list_users(role=role, search=request.query_params.get('search'))
    return success_response(UserSerializer(users, many=True).data)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission(Resources.USERS)
def user_detail(request, user_id):
    """
    Retrieve, update or soft-delete a user.

    GET /api/users/<id>/
    PUT/PATCH /api/users/<id>/
    DELETE /api/users/<id>/  (also removes the user's active placements)
    """
    service = AccountService()

    if request.method == 'GET':
        return success_response(UserSerializer(service.get_user(user_id)).data)

    if request.method in ['PUT', 'PATCH']:
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = service.update_user(serializer.to_dto(user_id))
        return success_response(UserSerializer(user).data, 'User updated successfully')

    user = service.delete_user(request.identity, user_id)
    return success_response(message=f'User {user.username} deleted successfully')
