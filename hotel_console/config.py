"""
Application configuration using environment variables
"""
from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Configuration
    API_TITLE: str = "Hotel Admin Console"
    API_VERSION: str = "1.0.0"

    # Remote Hotel API
    HOTEL_API_BASE_URL: str = Field("http://localhost:8080/hotel", description="Base URL of the remote Hotel API")
    HOTEL_API_TIMEOUT: float = Field(30.0, description="Timeout in seconds for calls to the Hotel API")

    # CORS Configuration
    CORS_ORIGINS: str = Field("http://localhost:5173", description="Comma-separated allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: str = "*"  # Comma-separated or "*" for all
    CORS_ALLOW_HEADERS: str = "*"   # Comma-separated or "*" for all

    # Environment
    DEBUG: bool = True

    # Registration wizard
    MAX_HOTEL_IMAGES: int = Field(3, description="Maximum number of local image attachments per hotel")
    AMENITY_ICON: str = Field("🏷️", description="Display glyph assigned to every amenity")

    # Image attachment validation
    MAX_IMAGE_SIZE_MB: int = Field(5, description="Maximum image file size in MB")
    ALLOWED_IMAGE_TYPES: List[str] = Field(default_factory=lambda: ["image/jpeg", "image/png", "image/webp", "image/jpg"], description="Allowed MIME types for image attachments")

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @property
    def hotel_api_base_url(self) -> str:
        """Base URL without a trailing slash"""
        return self.HOTEL_API_BASE_URL.rstrip("/")

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
        # Remove duplicates while preserving order
        seen = set()
        unique_origins = []
        for origin in origins:
            if origin and origin not in seen:
                seen.add(origin)
                unique_origins.append(origin)
        return unique_origins

    @property
    def cors_methods_list(self) -> List[str]:
        """Parse CORS methods - returns ["*"] if set to "*", otherwise comma-separated list"""
        if self.CORS_ALLOW_METHODS.strip() == "*":
            return ["*"]
        return [method.strip() for method in self.CORS_ALLOW_METHODS.split(",") if method.strip()]

    @property
    def cors_headers_list(self) -> List[str]:
        """Parse CORS headers - returns ["*"] if set to "*", otherwise comma-separated list"""
        if self.CORS_ALLOW_HEADERS.strip() == "*":
            return ["*"]
        return [header.strip() for header in self.CORS_ALLOW_HEADERS.split(",") if header.strip()]


# Create global settings instance
settings = Settings()
