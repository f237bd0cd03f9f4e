"""
Repository for amenity endpoints of the Hotel API
"""
from typing import List, Optional

from hotel_console.config import settings
from hotel_console.hotel_api import HotelApi
from hotel_console.models.common import Amenity
from hotel_console.models.hotels import AmenityAssignmentRequest


def to_amenity(item: dict) -> Amenity:
    """Map an upstream amenity record; the display icon is always the console's own glyph"""
    return Amenity(
        id=str(item["amenitiesId"]),
        name=item["amenitiesName"],
        icon=settings.AMENITY_ICON,
        category=item.get("category") or "",
    )


class AmenityRepository:

    @staticmethod
    async def list_amenities(*, token: Optional[str] = None) -> List[Amenity]:
        rows = await HotelApi.get("amenities/retrieve-all-amenities", token=token)
        return [to_amenity(row) for row in rows or []]

    @staticmethod
    async def add_amenity(name: str, *, token: Optional[str] = None) -> None:
        await HotelApi.post("amenities/add", token=token, json={"amenitiesName": name})

    @staticmethod
    async def rename_amenity(amenity_id: str, new_name: str, *, token: Optional[str] = None) -> None:
        await HotelApi.put(
            "amenities/edit-amenities",
            token=token,
            params={"amenitiesId": amenity_id, "newName": new_name},
        )

    @staticmethod
    async def delete_amenity(amenity_id: str, *, token: Optional[str] = None) -> None:
        await HotelApi.delete(
            "amenities/delete-amenities",
            token=token,
            params={"amenitiesId": amenity_id},
        )

    @staticmethod
    async def assign_to_hotel(
        hotel_id: str,
        amenity_ids: List[str],
        *,
        token: Optional[str] = None,
    ) -> None:
        """Associate amenities with an existing hotel"""
        await HotelApi.post(
            "amenities/assign-to-hotel",
            token=token,
            json=AmenityAssignmentRequest(hotelId=hotel_id, amenitiesIds=list(amenity_ids)).model_dump(),
        )
