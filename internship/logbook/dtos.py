from dataclasses import dataclass
from datetime import date
from typing import Any, Optional


@dataclass
class LogbookCreateDTO:
    """DTO for submitting a logbook entry"""
    tanggal: Optional[date] = None
    kegiatan: Optional[str] = None
    bukti_foto: Any = None
    kehadiran: Optional[str] = ''


@dataclass
class LogbookUpdateDTO:
    """DTO for the owner editing an entry"""
    entry_id: int
    tanggal: Optional[date] = None
    kegiatan: Optional[str] = None
    bukti_foto: Any = None
    kehadiran: Optional[str] = None


@dataclass
class LogbookStatusDTO:
    """DTO for a reviewer setting the status"""
    entry_id: int
    status: Optional[str] = None
    catatan: Optional[str] = None
