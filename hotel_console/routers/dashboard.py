"""
Dashboard routes
"""
from fastapi import APIRouter, HTTPException, status, Depends, Query
import asyncio
import logging

from hotel_console.dashboard import compute_dashboard_stats
from hotel_console.dependencies import get_current_session
from hotel_console.hotel_api import HotelApiError
from hotel_console.models.dashboard import DashboardStats
from hotel_console.repositories.amenity_repo import AmenityRepository
from hotel_console.repositories.hotel_repo import HotelRepository
from hotel_console.session import ConsoleSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def get_dashboard(
    refresh: bool = Query(False, description="Reload hotels and amenities from the Hotel API first"),
    session: ConsoleSession = Depends(get_current_session)
):
    """
    Aggregate statistics over the console's hotel and amenity collections.

    Without ``refresh`` the collections are used as they are: hotels loaded by
    the management screen plus hotels registered in this session.
    """
    if refresh:
        try:
            hotels, amenities = await asyncio.gather(
                HotelRepository.list_hotels(token=session.token),
                AmenityRepository.list_amenities(token=session.token),
            )
        except HotelApiError as e:
            logger.error(f"Error refreshing dashboard data: {e}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=e.detail or "Failed to load dashboard data"
            )
        session.replace_hotels(hotels)
        session.replace_amenities(amenities)

    return compute_dashboard_stats(session.hotels, session.amenities)
