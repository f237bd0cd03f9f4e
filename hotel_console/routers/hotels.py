"""
Hotel management routes
"""
from fastapi import APIRouter, HTTPException, status, Depends, Query
from typing import List
import logging

from hotel_console.dependencies import get_current_session
from hotel_console.hotel_api import HotelApiError
from hotel_console.models.hotels import (
    Hotel,
    HotelImagesResponse,
    HotelListResponse,
    UpdateHotelRequest,
)
from hotel_console.repositories.hotel_repo import HotelRepository
from hotel_console.repositories.reference_repo import ReferenceRepository
from hotel_console.session import ConsoleSession
from hotel_console.validation import validate_hotel_edit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])

ALL_DISTRICTS = "All Districts"


def filter_hotels(hotels: List[Hotel], search: str = "", district: str = ALL_DISTRICTS) -> List[Hotel]:
    """Case-insensitive search over name and address, optionally narrowed to one district"""
    term = search.lower()
    return [
        hotel for hotel in hotels
        if (term in hotel.hotelName.lower() or term in hotel.hotelAddress.lower())
        and (district == ALL_DISTRICTS or hotel.district == district)
    ]


@router.get("", response_model=HotelListResponse)
async def list_hotels(
    search: str = Query("", description="Matches hotel name or address"),
    district: str = Query(ALL_DISTRICTS, description="District name, or 'All Districts'"),
    session: ConsoleSession = Depends(get_current_session)
):
    """
    List registered hotels.

    Refreshes the console's hotel collection from the Hotel API, then filters
    it in memory.
    """
    try:
        hotels = await HotelRepository.list_hotels(token=session.token)
    except HotelApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Failed to load hotels"
        )

    session.replace_hotels(hotels)
    filtered = filter_hotels(hotels, search, district)
    return HotelListResponse(hotels=filtered, shown=len(filtered), total=len(hotels))


@router.get("/districts", response_model=List[str])
async def list_district_filters(session: ConsoleSession = Depends(get_current_session)):
    """District filter options, starting with 'All Districts'"""
    try:
        districts = await ReferenceRepository.get_districts(token=session.token)
    except HotelApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Failed to load districts"
        )
    return [ALL_DISTRICTS] + [district.name for district in districts]


@router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: str, session: ConsoleSession = Depends(get_current_session)):
    hotel = session.find_hotel(hotel_id)
    if hotel is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hotel not found"
        )
    return hotel


@router.get("/{hotel_id}/images", response_model=HotelImagesResponse)
async def get_hotel_images(hotel_id: str, session: ConsoleSession = Depends(get_current_session)):
    """Uploaded images (as data URIs) followed by external image URLs"""
    try:
        images = await HotelRepository.get_hotel_images(hotel_id, token=session.token)
    except HotelApiError as e:
        logger.error(f"Error fetching images for hotel {hotel_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Failed to load hotel images"
        )
    return HotelImagesResponse(hotel_id=hotel_id, images=images, total=len(images))


@router.put("/{hotel_id}", response_model=Hotel)
async def update_hotel(
    hotel_id: str,
    request: UpdateHotelRequest,
    session: ConsoleSession = Depends(get_current_session)
):
    """
    Edit a hotel in the console's collection.

    The edited record must still pass the edit form's rules as a whole.
    """
    hotel = session.find_hotel(hotel_id)
    if hotel is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hotel not found"
        )

    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    updated = hotel.model_copy(update=changes)

    errors = validate_hotel_edit(updated)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Please fix the highlighted fields", "errors": errors}
        )

    session.replace_hotel(updated)
    logger.info(f"Hotel {hotel_id} updated: {', '.join(sorted(changes))}")
    return updated
