"""
Repository for administrator login and registration on the Hotel API
"""
from typing import Any

from hotel_console.hotel_api import HotelApi


class AdminRepository:

    @staticmethod
    async def login(email: str, phone_number: str, password: str) -> Any:
        """Exactly one of ``email`` / ``phone_number`` is expected to be non-empty"""
        return await HotelApi.post(
            "admin/admin-login",
            json={
                "adminEmail": email,
                "adminPhoneNumber": phone_number,
                "adminPassword": password,
            },
        )

    @staticmethod
    async def register(name: str, email: str, phone_number: str, password: str) -> Any:
        return await HotelApi.post(
            "admin/admin-register",
            json={
                "adminName": name,
                "adminEmail": email,
                "adminPhoneNumber": phone_number,
                "adminPassword": password,
            },
        )
