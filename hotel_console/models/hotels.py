"""
Hotel-related Pydantic models
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import List, Optional, Union
from datetime import datetime, timezone

from hotel_console.models.common import ConsoleView


# ============================================
# HOTEL RECORD (as served by the Hotel API)
# ============================================

class Hotel(BaseModel):
    """Hotel listing record"""
    id: str = Field(validation_alias=AliasChoices("id", "hotelId"))
    hotelName: str = ""
    hotelDescription: str = ""
    hotelRating: Optional[float] = None
    hotelBasicPricePerNight: Union[float, str] = ""
    hotelAddress: str = ""
    district: str = ""
    hotelType: str = ""
    landscape: str = ""
    location: Optional[str] = None
    hotelEmail: str = ""
    hotelPhoneNumber: str = ""
    hotelImageUrls: List[str] = Field(default_factory=list)
    hotelTypeName: Optional[str] = None
    landscapeTypeName: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", "hotelType", "landscape", "district", mode="before")
    @classmethod
    def coerce_key_to_string(cls, v):
        """Upstream ids arrive as numbers"""
        if v is None:
            return ""
        return str(v)

    @field_validator("amenities", mode="before")
    @classmethod
    def coerce_amenity_ids(cls, v):
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return [str(v)]
        return [str(item) for item in v]

    @field_validator("hotelImageUrls", mode="before")
    @classmethod
    def coerce_image_urls(cls, v):
        """Some records carry a single URL string instead of a list"""
        if v is None or v == "":
            return []
        if not isinstance(v, (list, tuple)):
            return [str(v)]
        return [str(url) for url in v]

    @field_validator("createdAt", mode="wrap")
    @classmethod
    def parse_created_at(cls, v, handler) -> datetime:
        """Missing or unreadable timestamps become now; naive ones are taken as UTC"""
        try:
            created_at = handler(v)
        except ValidationError:
            return datetime.now(timezone.utc)
        if created_at.tzinfo is None:
            return created_at.replace(tzinfo=timezone.utc)
        return created_at


# ============================================
# HOTEL MANAGEMENT
# ============================================

class UpdateHotelRequest(BaseModel):
    """Request model for editing a hotel (partial updates supported)"""
    hotelName: Optional[str] = None
    hotelDescription: Optional[str] = None
    hotelRating: Optional[float] = None
    hotelBasicPricePerNight: Optional[Union[float, str]] = None
    hotelAddress: Optional[str] = None
    district: Optional[str] = None
    hotelType: Optional[str] = None
    landscape: Optional[str] = None
    location: Optional[str] = None
    hotelEmail: Optional[str] = None
    hotelPhoneNumber: Optional[str] = None
    amenities: Optional[List[str]] = None


class HotelListResponse(BaseModel):
    """Filtered hotel list"""
    hotels: List[Hotel]
    shown: int
    total: int


class HotelImagesResponse(BaseModel):
    """All images of one hotel, uploaded images first"""
    hotel_id: str
    images: List[str]
    total: int


# ============================================
# REGISTRATION SUBMISSION (wire shapes)
# ============================================

class HotelRegistrationPayload(BaseModel):
    """Structured hotel attributes sent as the ``hotelData`` part"""
    hotelName: str
    hotelDescription: str
    hotelRating: Optional[float]
    hotelBasicPricePerNight: str
    hotelAddress: str
    hotelEmail: str
    hotelPhoneNumber: str
    district: str
    location: str
    hotelTypeId: Optional[Union[int, float]]
    landscapeId: Optional[Union[int, float]]


class AmenityAssignmentRequest(BaseModel):
    """Body of the amenity-association call"""
    hotelId: str
    amenitiesIds: List[str]


class RegistrationResultResponse(BaseModel):
    """Successful hotel registration"""
    message: str
    hotel: Hotel
    view: ConsoleView
