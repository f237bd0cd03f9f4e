"""
Pytest configuration and fixtures
"""
import os

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("HOTEL_API_BASE_URL", "http://hotel-api.test/hotel")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:5173")
os.environ.setdefault("DEBUG", "true")

import re
from datetime import datetime, timedelta, timezone
from io import BytesIO
from typing import Any, Dict, List, Optional, Tuple

import httpx
import jwt
import pytest
from httpx import AsyncClient
from PIL import Image

from hotel_console.hotel_api import HotelApi
from hotel_console.main import app
from hotel_console.models.auth import Admin
from hotel_console.session import sessions

UPSTREAM_PREFIX = "/hotel"

DISTRICTS = [
    {"key": "KOL", "name": "Kolkata"},
    {"key": "DJ", "name": "Darjeeling"},
]
HOTEL_TYPES = [
    {"hotelTypeId": 1, "hotelTypeName": "Luxury Resort"},
    {"hotelTypeId": 2, "hotelTypeName": "Boutique Hotel"},
]
LANDSCAPES = [
    {"landscapeId": 7, "landscapeTypeName": "Beach"},
    {"landscapeId": 8, "landscapeTypeName": "Mountain"},
]
AMENITIES = [
    {"amenitiesId": 1, "amenitiesName": "WiFi", "category": "Technology"},
    {"amenitiesId": 2, "amenitiesName": "Swimming Pool"},
    {"amenitiesId": 3, "amenitiesName": "Spa", "category": None},
]


class FakeHotelApi:
    """Stand-in for the remote Hotel API, served through httpx.MockTransport"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.set("GET", "/districts", DISTRICTS)
        self.set("GET", "/get-all-hotel-types", HOTEL_TYPES)
        self.set("GET", "/landscape/get-all-landscapes", LANDSCAPES)
        self.set("GET", "/amenities/retrieve-all-amenities", AMENITIES)

    def set(self, method: str, path: str, body: Any = None, status_code: int = 200):
        """Answer ``method path`` with ``body`` (JSON, text, or a callable taking the request)"""
        self.routes[(method, path)] = (status_code, body)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [
            request for request in self.requests
            if request.method == method and _relative_path(request) == path
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, _relative_path(request)))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        status_code, body = route
        if callable(body):
            return body(request)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)


def _relative_path(request: httpx.Request) -> str:
    path = request.url.path
    if path.startswith(UPSTREAM_PREFIX):
        return path[len(UPSTREAM_PREFIX):]
    return path


def parse_multipart(request: httpx.Request) -> Dict[str, List[dict]]:
    """Split a multipart request body into its parts, grouped by field name"""
    boundary = request.headers["content-type"].split("boundary=")[1].strip('"').encode()
    parts: Dict[str, List[dict]] = {}
    for segment in request.content.split(b"--" + boundary):
        if not segment or segment.startswith(b"--"):
            continue
        segment = segment[2:] if segment.startswith(b"\r\n") else segment
        segment = segment[:-2] if segment.endswith(b"\r\n") else segment
        raw_headers, _, content = segment.partition(b"\r\n\r\n")
        headers = raw_headers.decode("utf-8")
        name = re.search(r'name="([^"]*)"', headers).group(1)
        filename = re.search(r'filename="([^"]*)"', headers)
        content_type = re.search(r"(?i)content-type:\s*([^\r\n]+)", headers)
        parts.setdefault(name, []).append({
            "filename": filename.group(1) if filename else None,
            "content_type": content_type.group(1).strip() if content_type else None,
            "content": content,
        })
    return parts


def create_test_image(
    width: int = 100,
    height: int = 100,
    format: str = "JPEG"
) -> bytes:
    """Create a test image file."""
    img = Image.new("RGB", (width, height), color="red")
    buffer = BytesIO()
    img.save(buffer, format=format)
    buffer.seek(0)
    return buffer.getvalue()


def make_token(
    subject: str = "admin@example.com",
    role: str = "ADMIN",
    expires_in: Optional[timedelta] = timedelta(hours=1)
) -> str:
    """Token shaped like the ones the Hotel API issues"""
    claims = {"sub": subject, "role": role, "iat": datetime.now(timezone.utc)}
    if expires_in is not None:
        claims["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(claims, "upstream-signing-key", algorithm="HS256")


def get_auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def hotel_api():
    """Route Hotel API calls to a fake upstream"""
    fake = FakeHotelApi()
    await HotelApi.use_transport(httpx.MockTransport(fake))
    yield fake
    await HotelApi.use_transport(None)


@pytest.fixture
async def client():
    """Create a test client"""
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture(autouse=True)
def clear_sessions():
    """Each test starts without console sessions"""
    sessions.clear()
    yield
    sessions.clear()


@pytest.fixture
def console_session():
    """A signed-in administrator"""
    token = make_token()
    return sessions.open(token, Admin(id="admin@example.com", admin_email="admin@example.com", role="ADMIN"))


@pytest.fixture
def auth_headers(console_session):
    return get_auth_headers(console_session.token)
