"""
Tests for dashboard statistics
"""
from datetime import datetime, timezone

import pytest
from fastapi import status
from httpx import AsyncClient

from hotel_console.dashboard import compute_dashboard_stats
from hotel_console.models.common import Amenity
from hotel_console.models.hotels import Hotel


def hotel(hotel_id: str, day: int, district: str = "Kolkata", rating=None, price="1000") -> Hotel:
    return Hotel(
        id=hotel_id,
        hotelName=f"Hotel {hotel_id}",
        district=district,
        hotelRating=rating,
        hotelBasicPricePerNight=price,
        createdAt=datetime(2026, 1, day, tzinfo=timezone.utc),
    )


class TestDashboardStats:
    """Test aggregate computation"""

    def test_empty(self):
        stats = compute_dashboard_stats([], [])
        assert stats.total_hotels == 0
        assert stats.average_rating == 0
        assert stats.total_revenue == 0
        assert stats.recent_hotels == []
        assert stats.district_counts == []

    def test_average_counts_unrated_as_zero(self):
        stats = compute_dashboard_stats([hotel("1", 1, rating=4), hotel("2", 2)], [])
        assert stats.average_rating == 2

    def test_revenue_ignores_non_numeric_prices(self):
        hotels = [hotel("1", 1, price="1500"), hotel("2", 2, price=250.5), hotel("3", 3, price="on request")]
        assert compute_dashboard_stats(hotels, []).total_revenue == 1750.5

    def test_three_most_recent(self):
        hotels = [hotel(str(day), day) for day in (3, 1, 4, 2)]
        recent = compute_dashboard_stats(hotels, []).recent_hotels
        assert [h.id for h in recent] == ["4", "3", "2"]

    def test_district_counts_descending(self):
        hotels = [
            hotel("1", 1, "Darjeeling"),
            hotel("2", 2, "Kolkata"),
            hotel("3", 3, "Kolkata"),
        ]
        counts = compute_dashboard_stats(hotels, []).district_counts
        assert [(c.district, c.count) for c in counts] == [("Kolkata", 2), ("Darjeeling", 1)]

    def test_only_top_five_districts(self):
        hotels = [hotel(str(i), 1, f"District {i}") for i in range(7)]
        hotels += [hotel("extra", 2, "District 6")]
        counts = compute_dashboard_stats(hotels, []).district_counts
        assert len(counts) == 5
        assert (counts[0].district, counts[0].count) == ("District 6", 2)

    def test_amenity_total(self):
        amenities = [Amenity(id="1", name="WiFi"), Amenity(id="2", name="Spa")]
        assert compute_dashboard_stats([], amenities).total_amenities == 2


class TestDashboardEndpoint:
    """Test the dashboard route"""

    @pytest.mark.asyncio
    async def test_uses_session_collections(self, client: AsyncClient, hotel_api, auth_headers, console_session):
        console_session.replace_hotels([hotel("1", 1, rating=5, price="900")])

        response = await client.get("/dashboard", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total_hotels"] == 1
        assert data["average_rating"] == 5
        assert data["total_revenue"] == 900
        assert hotel_api.requests == []

    @pytest.mark.asyncio
    async def test_refresh(self, client: AsyncClient, hotel_api, auth_headers, console_session):
        hotel_api.set("GET", "/fetch-all-hotels", [
            {"hotelId": 1, "hotelName": "A", "district": "Kolkata", "hotelRating": 3, "hotelBasicPricePerNight": "100"},
            {"hotelId": 2, "hotelName": "B", "district": "Kolkata", "hotelRating": 5, "hotelBasicPricePerNight": "300"},
        ])

        response = await client.get("/dashboard", params={"refresh": "true"}, headers=auth_headers)

        data = response.json()
        assert data["total_hotels"] == 2
        assert data["total_amenities"] == 3
        assert data["average_rating"] == 4
        assert data["total_revenue"] == 400
        assert data["district_counts"] == [{"district": "Kolkata", "count": 2}]
        assert len(console_session.hotels) == 2
        assert len(console_session.amenities) == 3

    @pytest.mark.asyncio
    async def test_registered_hotel_counted(self, client: AsyncClient, hotel_api, auth_headers, console_session):
        console_session.complete_registration(hotel("9", 5, rating=4, price="1200"))

        data = (await client.get("/dashboard", headers=auth_headers)).json()

        assert data["total_hotels"] == 1
        assert data["recent_hotels"][0]["id"] == "9"

    @pytest.mark.asyncio
    async def test_refresh_failure(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/fetch-all-hotels", None, status_code=500)

        response = await client.get("/dashboard", params={"refresh": "true"}, headers=auth_headers)

        assert response.status_code == status.HTTP_502_BAD_GATEWAY

    @pytest.mark.asyncio
    async def test_refresh_with_unreadable_record(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/fetch-all-hotels", [{"hotelId": 1, "hotelRating": "excellent"}])

        response = await client.get("/dashboard", params={"refresh": "true"}, headers=auth_headers)

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
