"""
Common/shared Pydantic models used across multiple screens
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class ConsoleView(str, Enum):
    """Screens of the console; exactly one is active per session"""
    LOGIN = "login"
    REGISTER = "register"
    DASHBOARD = "dashboard"
    HOTEL_REGISTRATION = "hotel-registration"
    HOTEL_MANAGEMENT = "hotel-management"
    AMENITIES = "amenities"


# ============================================
# REFERENCE LIST MODELS (shared by wizard, hotel management, amenities)
# ============================================

class ReferenceItem(BaseModel):
    """One selectable (key, display-name) pair of a reference list"""
    key: str
    name: str


class Amenity(BaseModel):
    """Amenity as shown by the console"""
    id: str
    name: str
    icon: str = "🏷️"
    category: str = ""


class ReferenceLists(BaseModel):
    """Reference lists fetched once when the registration wizard starts"""
    districts: List[ReferenceItem] = Field(default_factory=list)
    hotel_types: List[ReferenceItem] = Field(default_factory=list)
    landscapes: List[ReferenceItem] = Field(default_factory=list)
    amenities: List[Amenity] = Field(default_factory=list)

    @property
    def amenity_ids(self) -> List[str]:
        return [amenity.id for amenity in self.amenities]


# ============================================
# ERROR DETAIL (validation failures surfaced by every screen)
# ============================================

class ValidationErrorDetail(BaseModel):
    """Field-scoped validation failure"""
    message: str
    errors: Dict[str, str]
    step: Optional[int] = None


class MessageResponse(BaseModel):
    """Plain message response"""
    message: str
