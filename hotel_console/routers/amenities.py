"""
Amenity management routes
"""
from fastapi import APIRouter, HTTPException, status, Depends, Query
from typing import List, Literal
import logging

from hotel_console.dependencies import get_current_session
from hotel_console.hotel_api import HotelApiError
from hotel_console.models.amenities import AmenityListResponse, AmenityRequest
from hotel_console.models.common import Amenity
from hotel_console.repositories.amenity_repo import AmenityRepository
from hotel_console.session import ConsoleSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/amenities", tags=["amenities"])


def sort_amenities(amenities: List[Amenity], order: str = "asc") -> List[Amenity]:
    """Sort by name, case-insensitively"""
    return sorted(amenities, key=lambda amenity: amenity.name.casefold(), reverse=order == "desc")


async def _reload_amenities(session: ConsoleSession, order: str) -> AmenityListResponse:
    """Replace the session's amenity collection with the Hotel API's current list"""
    try:
        amenities = await AmenityRepository.list_amenities(token=session.token)
    except HotelApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Failed to load amenities"
        )
    session.replace_amenities(amenities)
    return AmenityListResponse(
        amenities=sort_amenities(amenities, order),
        order=order,
        total=len(amenities)
    )


@router.get("", response_model=AmenityListResponse)
async def list_amenities(
    order: Literal["asc", "desc"] = Query("asc"),
    session: ConsoleSession = Depends(get_current_session)
):
    return await _reload_amenities(session, order)


@router.post("", response_model=AmenityListResponse, status_code=status.HTTP_201_CREATED)
async def add_amenity(
    request: AmenityRequest,
    order: Literal["asc", "desc"] = Query("asc"),
    session: ConsoleSession = Depends(get_current_session)
):
    """Add an amenity and return the refreshed list"""
    try:
        await AmenityRepository.add_amenity(request.name, token=session.token)
    except HotelApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Failed to add amenity"
        )
    logger.info(f"Amenity added: {request.name}")
    return await _reload_amenities(session, order)


@router.put("/{amenity_id}", response_model=AmenityListResponse)
async def rename_amenity(
    amenity_id: str,
    request: AmenityRequest,
    order: Literal["asc", "desc"] = Query("asc"),
    session: ConsoleSession = Depends(get_current_session)
):
    """Rename an amenity and return the refreshed list"""
    try:
        await AmenityRepository.rename_amenity(amenity_id, request.name, token=session.token)
    except HotelApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Failed to update amenity"
        )
    logger.info(f"Amenity {amenity_id} renamed to {request.name}")
    return await _reload_amenities(session, order)


@router.delete("/{amenity_id}", response_model=AmenityListResponse)
async def delete_amenity(
    amenity_id: str,
    order: Literal["asc", "desc"] = Query("asc"),
    session: ConsoleSession = Depends(get_current_session)
):
    """Delete an amenity and return the refreshed list"""
    try:
        await AmenityRepository.delete_amenity(amenity_id, token=session.token)
    except HotelApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Failed to delete amenity"
        )
    logger.info(f"Amenity {amenity_id} deleted")
    return await _reload_amenities(session, order)
