"""
Remote Hotel API client and utilities
"""
import httpx
import logging
from typing import Any, Optional
from hotel_console.config import settings

logger = logging.getLogger(__name__)


class HotelApiError(Exception):
    """Raised when the remote Hotel API is unreachable or answers with an error status"""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Hotel API error {status_code}: {detail}")


def _read_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to plain text"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Extract the server's error message from an error response"""
    body = _read_body(response)
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            if body.get(key):
                return str(body[key])
        return None
    if isinstance(body, str) and body.strip():
        return body.strip()
    return None


class HotelApi:
    """Shared HTTP client manager for the remote Hotel API"""

    _client: Optional[httpx.AsyncClient] = None
    _transport: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    async def get_client(cls) -> httpx.AsyncClient:
        """Get or create the shared HTTP client"""
        if cls._client is None:
            cls._client = httpx.AsyncClient(
                base_url=settings.hotel_api_base_url,
                timeout=settings.HOTEL_API_TIMEOUT,
                transport=cls._transport,
            )
        return cls._client

    @classmethod
    async def close_client(cls):
        """Close the shared HTTP client"""
        if cls._client:
            await cls._client.aclose()
            cls._client = None

    @classmethod
    async def use_transport(cls, transport: Optional[httpx.AsyncBaseTransport]):
        """Route all future calls through ``transport`` (None restores the network)"""
        await cls.close_client()
        cls._transport = transport

    @classmethod
    async def request(
        cls,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        **kwargs,
    ) -> Any:
        """
        Send a request to the Hotel API and return the decoded body

        Args:
            method: HTTP method
            path: Path relative to HOTEL_API_BASE_URL
            token: Optional bearer credential forwarded as the Authorization header
            **kwargs: Passed through to httpx (json, data, files, params)

        Returns:
            Decoded JSON body, plain text, or None for an empty body

        Raises:
            HotelApiError: on transport failures and non-2xx statuses
        """
        headers = dict(kwargs.pop("headers", None) or {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        client = await cls.get_client()
        try:
            response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Hotel API {method} {path} failed: {e}")
            raise HotelApiError(502, f"Hotel API unreachable: {e}") from e

        if response.is_error:
            detail = _error_detail(response)
            logger.error(f"Hotel API {method} {path} returned {response.status_code}: {detail}")
            raise HotelApiError(response.status_code, detail)

        return _read_body(response)

    @classmethod
    async def get(cls, path: str, *, token: Optional[str] = None, **kwargs) -> Any:
        return await cls.request("GET", path, token=token, **kwargs)

    @classmethod
    async def post(cls, path: str, *, token: Optional[str] = None, **kwargs) -> Any:
        return await cls.request("POST", path, token=token, **kwargs)

    @classmethod
    async def put(cls, path: str, *, token: Optional[str] = None, **kwargs) -> Any:
        return await cls.request("PUT", path, token=token, **kwargs)

    @classmethod
    async def delete(cls, path: str, *, token: Optional[str] = None, **kwargs) -> Any:
        return await cls.request("DELETE", path, token=token, **kwargs)


async def check_hotel_api_connection() -> dict:
    """Check if the Hotel API answers"""
    try:
        districts = await HotelApi.get("districts")
        return {
            "connected": True,
            "base_url": settings.hotel_api_base_url,
            "districts": len(districts) if isinstance(districts, list) else 0
        }
    except HotelApiError as e:
        return {
            "connected": False,
            "error": str(e)
        }
