"""
Dashboard Pydantic models
"""
from pydantic import BaseModel
from typing import List

from hotel_console.models.hotels import Hotel


class DistrictCount(BaseModel):
    """Number of hotels in one district"""
    district: str
    count: int


class DashboardStats(BaseModel):
    """Aggregate statistics shown on the dashboard"""
    total_hotels: int
    total_amenities: int
    average_rating: float
    total_revenue: float
    recent_hotels: List[Hotel]
    district_counts: List[DistrictCount]
