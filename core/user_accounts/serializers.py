from rest_framework import serializers

from .dtos import ProfileUpdateDTO, RegistrationDTO, UserCreateDTO, UserUpdateDTO
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Read serializer for User model"""
    nama_perusahaan = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'username', 'nama_lengkap', 'role',
            'foto_profil', 'nim', 'jurusan', 'no_hp',
            'company', 'nama_perusahaan', 'status_laporan',
            'last_login', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_nama_perusahaan(self, obj):
        return obj.company.nama_perusahaan if obj.company else None


class LoginUserSerializer(serializers.ModelSerializer):
    """The user summary returned together with a session token"""
    nama = serializers.CharField(source='nama_lengkap', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'nama', 'nama_lengkap', 'role', 'foto_profil', 'status_laporan']
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    """
    Write serializer for login.

    Presence is checked by SessionService so that a missing value is
    reported as `missing_field`.
    """
    username = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    password = serializers.CharField(required=False, allow_blank=True, allow_null=True,
                                     trim_whitespace=False, write_only=True,
                                     style={'input_type': 'password'})


class RegistrationSerializer(serializers.Serializer):
    """
    Write serializer for public registration.

    Required fields are checked by AccountService so that a missing value
    is reported as `missing_field`.
    """
    username = serializers.CharField(max_length=150, required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True,
                                     style={'input_type': 'password'})
    nama_lengkap = serializers.CharField(max_length=255, required=False, allow_blank=True)
    nim = serializers.CharField(max_length=50, required=False, allow_blank=True)
    jurusan = serializers.CharField(max_length=255, required=False, allow_blank=True)
    no_hp = serializers.CharField(max_length=30, required=False, allow_blank=True)

    def to_dto(self) -> RegistrationDTO:
        return RegistrationDTO(**self.validated_data)


class UserCreateSerializer(serializers.Serializer):
    """Write serializer for an admin creating an account"""
    username = serializers.CharField(max_length=150, required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True,
                                     style={'input_type': 'password'})
    nama_lengkap = serializers.CharField(max_length=255, required=False, allow_blank=True)
    role = serializers.CharField(required=False, allow_blank=True)
    nim = serializers.CharField(max_length=50, required=False, allow_blank=True)
    jurusan = serializers.CharField(max_length=255, required=False, allow_blank=True)
    no_hp = serializers.CharField(max_length=30, required=False, allow_blank=True)
    company_id = serializers.IntegerField(required=False, allow_null=True)
    foto_profil = serializers.FileField(required=False, allow_null=True)

    def to_dto(self) -> UserCreateDTO:
        return UserCreateDTO(**self.validated_data)


class UserUpdateSerializer(serializers.Serializer):
    """Write serializer for an admin updating an account"""
    username = serializers.CharField(max_length=150, required=False)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True,
                                     style={'input_type': 'password'})
    nama_lengkap = serializers.CharField(max_length=255, required=False)
    role = serializers.CharField(required=False)
    nim = serializers.CharField(max_length=50, required=False, allow_blank=True)
    jurusan = serializers.CharField(max_length=255, required=False, allow_blank=True)
    no_hp = serializers.CharField(max_length=30, required=False, allow_blank=True)
    company_id = serializers.IntegerField(required=False, allow_null=True)
    foto_profil = serializers.FileField(required=False, allow_null=True)

    def to_dto(self, user_id) -> UserUpdateDTO:
        return UserUpdateDTO(user_id=user_id, **self.validated_data)


class ProfileUpdateSerializer(serializers.Serializer):
    """Write serializer for editing one's own profile"""
    nama_lengkap = serializers.CharField(max_length=255, required=False)
    nim = serializers.CharField(max_length=50, required=False, allow_blank=True)
    jurusan = serializers.CharField(max_length=255, required=False, allow_blank=True)
    no_hp = serializers.CharField(max_length=30, required=False, allow_blank=True)
    foto_profil = serializers.FileField(required=False, allow_null=True)

    def to_dto(self) -> ProfileUpdateDTO:
        return ProfileUpdateDTO(**self.validated_data)


class ChangePasswordSerializer(serializers.Serializer):
    old_password = serializers.CharField(write_only=True, style={'input_type': 'password'})
    new_password = serializers.CharField(write_only=True, style={'input_type': 'password'})
