"""
Repository for the reference lists (districts, hotel types, landscapes, amenities)
"""
import asyncio
from typing import List, Optional

from hotel_console.hotel_api import HotelApi
from hotel_console.models.common import ReferenceItem, ReferenceLists
from hotel_console.repositories.amenity_repo import AmenityRepository


class ReferenceRepository:

    @staticmethod
    async def get_districts(*, token: Optional[str] = None) -> List[ReferenceItem]:
        rows = await HotelApi.get("districts", token=token)
        return [ReferenceItem(key=str(row["key"]), name=row["name"]) for row in rows or []]

    @staticmethod
    async def get_hotel_types(*, token: Optional[str] = None) -> List[ReferenceItem]:
        rows = await HotelApi.get("get-all-hotel-types", token=token)
        return [
            ReferenceItem(key=str(row["hotelTypeId"]), name=row["hotelTypeName"])
            for row in rows or []
        ]

    @staticmethod
    async def get_landscapes(*, token: Optional[str] = None) -> List[ReferenceItem]:
        rows = await HotelApi.get("landscape/get-all-landscapes", token=token)
        return [
            ReferenceItem(key=str(row["landscapeId"]), name=row["landscapeTypeName"])
            for row in rows or []
        ]

    @staticmethod
    async def load_all(*, token: Optional[str] = None) -> ReferenceLists:
        """Fetch the four lists concurrently; any failure fails the whole load"""
        districts, hotel_types, landscapes, amenities = await asyncio.gather(
            ReferenceRepository.get_districts(token=token),
            ReferenceRepository.get_hotel_types(token=token),
            ReferenceRepository.get_landscapes(token=token),
            AmenityRepository.list_amenities(token=token),
        )
        return ReferenceLists(
            districts=districts,
            hotel_types=hotel_types,
            landscapes=landscapes,
            amenities=amenities,
        )
