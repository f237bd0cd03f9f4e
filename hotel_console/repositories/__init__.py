from hotel_console.repositories.admin_repo import AdminRepository
from hotel_console.repositories.amenity_repo import AmenityRepository
from hotel_console.repositories.hotel_repo import HotelRepository
from hotel_console.repositories.reference_repo import ReferenceRepository

__all__ = [
    "AdminRepository",
    "AmenityRepository",
    "HotelRepository",
    "ReferenceRepository",
]
