"""
Data Transfer Objects for User Accounts

Update DTOs treat None as "leave unchanged".
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class RegistrationDTO:
    """DTO for public self-registration (always a participant)"""
    username: Optional[str] = None
    password: Optional[str] = None
    nama_lengkap: Optional[str] = None
    nim: Optional[str] = ''
    jurusan: Optional[str] = ''
    no_hp: Optional[str] = ''


@dataclass
class UserCreateDTO:
    """DTO for an admin creating an account of any role"""
    username: Optional[str] = None
    password: Optional[str] = None
    nama_lengkap: Optional[str] = None
    role: Optional[str] = None
    nim: Optional[str] = ''
    jurusan: Optional[str] = ''
    no_hp: Optional[str] = ''
    company_id: Optional[int] = None
    foto_profil: Any = None


@dataclass
class UserUpdateDTO:
    """DTO for an admin updating an account"""
    user_id: int
    username: Optional[str] = None
    password: Optional[str] = None
    nama_lengkap: Optional[str] = None
    role: Optional[str] = None
    nim: Optional[str] = None
    jurusan: Optional[str] = None
    no_hp: Optional[str] = None
    company_id: Optional[int] = None
    foto_profil: Any = None


@dataclass
class ProfileUpdateDTO:
    """DTO for a user editing their own profile"""
    nama_lengkap: Optional[str] = None
    nim: Optional[str] = None
    jurusan: Optional[str] = None
    no_hp: Optional[str] = None
    foto_profil: Any = None
