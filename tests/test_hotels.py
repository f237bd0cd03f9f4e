"""
Tests for hotel management endpoints
"""
import pytest
from fastapi import status
from httpx import AsyncClient

from hotel_console.models.hotels import Hotel
from hotel_console.routers.hotels import ALL_DISTRICTS, filter_hotels

HOTELS = [
    {
        "hotelId": 1,
        "hotelName": "Ocean View",
        "hotelDescription": "Sea facing rooms",
        "hotelRating": 4.5,
        "hotelBasicPricePerNight": 1500,
        "hotelAddress": "12 Beach Road",
        "district": "Kolkata",
        "hotelType": 1,
        "landscape": 7,
        "hotelEmail": "ocean@example.com",
        "hotelPhoneNumber": "9876543210",
        "createdAt": "2026-01-10T10:00:00",
    },
    {
        "hotelId": 2,
        "hotelName": "Hill Crest",
        "hotelDescription": "Tea garden views",
        "hotelRating": None,
        "hotelBasicPricePerNight": "2200",
        "hotelAddress": "Mall Road",
        "district": "Darjeeling",
        "hotelType": 2,
        "landscape": 8,
        "hotelEmail": "hill@example.com",
        "hotelPhoneNumber": "9123456780",
        "createdAt": "2026-02-01T08:30:00Z",
    },
]


def make_hotel(**fields) -> Hotel:
    return Hotel(**{"id": "1", "hotelName": "Ocean View", "hotelAddress": "Beach Road", "district": "Kolkata", **fields})


class TestHotelFilter:
    """Test the in-memory hotel search"""

    def test_search_matches_name_or_address(self):
        hotels = [
            make_hotel(id="1", hotelName="Ocean View", hotelAddress="Beach Road"),
            make_hotel(id="2", hotelName="Hill Crest", hotelAddress="Ocean Drive"),
            make_hotel(id="3", hotelName="City Inn", hotelAddress="Park Street"),
        ]
        assert [h.id for h in filter_hotels(hotels, "ocean")] == ["1", "2"]

    def test_district_filter(self):
        hotels = [make_hotel(id="1", district="Kolkata"), make_hotel(id="2", district="Darjeeling")]
        assert [h.id for h in filter_hotels(hotels, "", "Darjeeling")] == ["2"]
        assert len(filter_hotels(hotels, "", ALL_DISTRICTS)) == 2


class TestHotelRecord:
    """Test mapping of upstream hotel records"""

    def test_numeric_ids_become_strings(self):
        hotel = Hotel.model_validate(HOTELS[0])
        assert hotel.id == "1"
        assert hotel.hotelType == "1"
        assert hotel.landscape == "7"

    def test_naive_timestamp_taken_as_utc(self):
        hotel = Hotel.model_validate(HOTELS[0])
        assert hotel.createdAt.tzinfo is not None

    def test_missing_created_at_defaults_to_now(self):
        hotel = Hotel.model_validate({"hotelId": 5, "createdAt": None})
        assert hotel.createdAt is not None

    def test_unreadable_created_at_defaults_to_now(self):
        hotel = Hotel.model_validate({"hotelId": 5, "createdAt": "sometime last week"})
        assert hotel.createdAt.tzinfo is not None

    def test_single_image_url_becomes_list(self):
        hotel = Hotel.model_validate({"hotelId": 5, "hotelImageUrls": "https://img.example/1.jpg"})
        assert hotel.hotelImageUrls == ["https://img.example/1.jpg"]


class TestListHotels:
    """Test listing registered hotels"""

    @pytest.mark.asyncio
    async def test_list_refreshes_session(self, client: AsyncClient, hotel_api, auth_headers, console_session):
        hotel_api.set("GET", "/fetch-all-hotels", HOTELS)

        response = await client.get("/hotels", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 2
        assert data["shown"] == 2
        assert [h["id"] for h in data["hotels"]] == ["1", "2"]
        assert [h.id for h in console_session.hotels] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_search_and_district(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/fetch-all-hotels", HOTELS)

        response = await client.get(
            "/hotels", params={"search": "MALL", "district": "Darjeeling"}, headers=auth_headers
        )

        data = response.json()
        assert data["shown"] == 1
        assert data["total"] == 2
        assert data["hotels"][0]["hotelName"] == "Hill Crest"

    @pytest.mark.asyncio
    async def test_upstream_failure(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/fetch-all-hotels", {"message": "down"}, status_code=500)

        response = await client.get("/hotels", headers=auth_headers)

        assert response.status_code == status.HTTP_502_BAD_GATEWAY

    @pytest.mark.asyncio
    async def test_scalar_image_urls_listed(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/fetch-all-hotels", [{"hotelId": 1, "hotelName": "A", "hotelImageUrls": "u"}])

        response = await client.get("/hotels", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["hotels"][0]["hotelImageUrls"] == ["u"]

    @pytest.mark.asyncio
    async def test_unreadable_record_is_upstream_failure(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/fetch-all-hotels", [{"hotelId": 1, "hotelRating": "excellent"}])

        response = await client.get("/hotels", headers=auth_headers)

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["detail"] == "Hotel API returned an unreadable hotel record"

    @pytest.mark.asyncio
    async def test_district_options(self, client: AsyncClient, hotel_api, auth_headers):
        response = await client.get("/hotels/districts", headers=auth_headers)
        assert response.json() == ["All Districts", "Kolkata", "Darjeeling"]


class TestHotelDetails:
    """Test hotel details and images"""

    @pytest.mark.asyncio
    async def test_get_hotel(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/fetch-all-hotels", HOTELS)
        await client.get("/hotels", headers=auth_headers)

        response = await client.get("/hotels/2", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["hotelName"] == "Hill Crest"

    @pytest.mark.asyncio
    async def test_unknown_hotel(self, client: AsyncClient, auth_headers):
        response = await client.get("/hotels/999", headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_images_uploaded_first(self, client: AsyncClient, hotel_api, auth_headers):
        hotel_api.set("GET", "/get-hotel-images", [{"base64Image": "AAAA"}, {"base64Image": ""}])
        hotel_api.set("GET", "/get-hotel-image-urls", [{"urls": "https://img.example/1.jpg"}])

        response = await client.get("/hotels/1/images", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["images"] == ["data:image/jpeg;base64,AAAA", "https://img.example/1.jpg"]
        assert data["total"] == 2
        request = hotel_api.calls("GET", "/get-hotel-images")[0]
        assert request.url.params["hotelId"] == "1"


class TestUpdateHotel:
    """Test editing hotels in the console's collection"""

    @pytest.mark.asyncio
    async def test_update_hotel(self, client: AsyncClient, hotel_api, auth_headers, console_session):
        hotel_api.set("GET", "/fetch-all-hotels", HOTELS)
        await client.get("/hotels", headers=auth_headers)

        response = await client.put(
            "/hotels/1", json={"hotelName": "Ocean View Deluxe", "hotelRating": 5}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["hotelName"] == "Ocean View Deluxe"
        assert console_session.find_hotel("1").hotelName == "Ocean View Deluxe"
        assert console_session.find_hotel("1").hotelAddress == "12 Beach Road"

    @pytest.mark.asyncio
    async def test_invalid_edit_rejected(self, client: AsyncClient, hotel_api, auth_headers, console_session):
        hotel_api.set("GET", "/fetch-all-hotels", HOTELS)
        await client.get("/hotels", headers=auth_headers)

        response = await client.put(
            "/hotels/1", json={"hotelEmail": "nope", "hotelName": ""}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        errors = response.json()["detail"]["errors"]
        assert errors == {"hotelName": "Hotel name is required", "hotelEmail": "Invalid email format"}
        assert console_session.find_hotel("1").hotelEmail == "ocean@example.com"

    @pytest.mark.asyncio
    async def test_update_unknown_hotel(self, client: AsyncClient, auth_headers):
        response = await client.put("/hotels/999", json={"hotelName": "X"}, headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND
