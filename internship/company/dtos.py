from dataclasses import dataclass
from typing import Optional


@dataclass
class CompanyCreateDTO:
    """DTO for creating a host company"""
    nama_perusahaan: Optional[str] = None
    alamat: Optional[str] = ''
    kontak: Optional[str] = ''


@dataclass
class CompanyUpdateDTO:
    """DTO for updating a host company"""
    company_id: int
    nama_perusahaan: Optional[str] = None
    alamat: Optional[str] = None
    kontak: Optional[str] = None
