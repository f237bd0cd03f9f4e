"""
Dashboard statistics over the session's hotel and amenity collections
"""
from collections import Counter
from typing import List

from hotel_console.models.common import Amenity
from hotel_console.models.dashboard import DashboardStats, DistrictCount
from hotel_console.models.hotels import Hotel
from hotel_console.validation import parse_number

RECENT_HOTELS_LIMIT = 3
TOP_DISTRICTS_LIMIT = 5


def compute_dashboard_stats(hotels: List[Hotel], amenities: List[Amenity]) -> DashboardStats:
    total_hotels = len(hotels)

    # Unrated hotels count as 0
    average_rating = (
        sum(hotel.hotelRating or 0 for hotel in hotels) / total_hotels
        if total_hotels else 0.0
    )
    total_revenue = sum(parse_number(hotel.hotelBasicPricePerNight) or 0 for hotel in hotels)

    recent_hotels = sorted(hotels, key=lambda hotel: hotel.createdAt, reverse=True)[:RECENT_HOTELS_LIMIT]

    counts = Counter(hotel.district for hotel in hotels)
    district_counts = [
        DistrictCount(district=district, count=count)
        for district, count in sorted(counts.items(), key=lambda item: item[1], reverse=True)[:TOP_DISTRICTS_LIMIT]
    ]

    return DashboardStats(
        total_hotels=total_hotels,
        total_amenities=len(amenities),
        average_rating=average_rating,
        total_revenue=total_revenue,
        recent_hotels=recent_hotels,
        district_counts=district_counts,
    )
