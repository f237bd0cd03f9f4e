"""
Repository for hotel endpoints of the Hotel API
"""
import asyncio
import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from hotel_console.hotel_api import HotelApi, HotelApiError
from hotel_console.models.hotels import Hotel, HotelRegistrationPayload
from hotel_console.models.wizard import ImageAttachment

logger = logging.getLogger(__name__)


class HotelRepository:

    @staticmethod
    async def register_hotel(
        payload: HotelRegistrationPayload,
        images: List[ImageAttachment],
        image_urls: List[str],
        *,
        token: Optional[str] = None,
    ) -> dict:
        """Create a hotel with one multipart request.

        Parts: ``hotelData`` (JSON blob), one ``imageFiles`` part per attachment,
        and ``imageUrls`` holding a JSON-encoded array of external URLs.
        """
        files = [
            ("hotelData", ("blob", json.dumps(payload.model_dump()).encode("utf-8"), "application/json")),
        ]
        for image in images:
            files.append(("imageFiles", (image.filename, image.content, image.content_type)))

        created = await HotelApi.post(
            "register-hotel",
            token=token,
            data={"imageUrls": json.dumps(image_urls)},
            files=files,
        )
        return created if isinstance(created, dict) else {}

    @staticmethod
    async def list_hotels(*, token: Optional[str] = None) -> List[Hotel]:
        rows = await HotelApi.get("fetch-all-hotels", token=token)
        try:
            return [Hotel.model_validate(row) for row in rows or []]
        except ValidationError as e:
            logger.error(f"Unreadable hotel record from the Hotel API: {e}")
            raise HotelApiError(502, "Hotel API returned an unreadable hotel record") from e

    @staticmethod
    async def get_hotel_images(hotel_id: str, *, token: Optional[str] = None) -> List[str]:
        """Uploaded images as data URIs first, then external URLs"""
        uploaded, linked = await asyncio.gather(
            HotelApi.get("get-hotel-images", token=token, params={"hotelId": hotel_id}),
            HotelApi.get("get-hotel-image-urls", token=token, params={"hotelId": hotel_id}),
        )
        images = [
            f"data:image/jpeg;base64,{row['base64Image']}"
            for row in uploaded or []
            if row.get("base64Image")
        ]
        images.extend(row["urls"] for row in linked or [] if row.get("urls"))
        return images
