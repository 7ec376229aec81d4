from dataclasses import dataclass
from typing import Optional


@dataclass
class PlacementCreateDTO:
    """DTO for placing a participant"""
    user_id: Optional[int] = None  # participant
    supervisor_id: Optional[int] = None
    company_id: Optional[int] = None


@dataclass
class PlacementUpdateDTO:
    """DTO for editing a placement"""
    placement_id: int
    user_id: Optional[int] = None
    supervisor_id: Optional[int] = None
    company_id: Optional[int] = None
