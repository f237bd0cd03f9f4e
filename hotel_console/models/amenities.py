"""
Amenity management Pydantic models
"""
from pydantic import BaseModel, Field
from typing import List, Literal

from hotel_console.models.common import Amenity


class AmenityRequest(BaseModel):
    """Request model for adding or renaming an amenity"""
    name: str = Field(..., min_length=1, max_length=100)


class AmenityListResponse(BaseModel):
    """Amenities sorted by name"""
    amenities: List[Amenity]
    order: Literal["asc", "desc"]
    total: int
