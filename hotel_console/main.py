"""
Main FastAPI application
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from hotel_console.hotel_api import HotelApi, check_hotel_api_connection
from hotel_console.config import settings
from hotel_console.routers import amenities, auth, dashboard, hotels, registration


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown"""
    # Startup
    await HotelApi.get_client()
    yield
    # Shutdown
    await HotelApi.close_client()


app = FastAPI(
    title=settings.API_TITLE,
    description="Administrative console for hotel-property operators",
    version=settings.API_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# Configure CORS from environment variables
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.cors_methods_list,
    allow_headers=settings.cors_headers_list,
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "Welcome to the Hotel Admin Console"}


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "hotel-admin-console"
    }


@app.get("/health/upstream")
async def health_upstream():
    """Hotel API health check endpoint"""
    upstream_status = await check_hotel_api_connection()
    return {
        "status": "healthy" if upstream_status.get("connected") else "unhealthy",
        "hotel_api": upstream_status
    }


# Include routers
app.include_router(auth.router)
app.include_router(registration.router)
app.include_router(hotels.router)
app.include_router(amenities.router)
app.include_router(dashboard.router)
