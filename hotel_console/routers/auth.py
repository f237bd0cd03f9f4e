"""
Authentication routes
"""
from fastapi import APIRouter, HTTPException, status, Depends
import logging

from hotel_console.dependencies import get_bearer_token, get_current_session
from hotel_console.hotel_api import HotelApiError
from hotel_console.jwt_utils import get_token_claims, is_jwt_format
from hotel_console.models.auth import (
    Admin,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    SessionResponse,
    ViewChangeRequest,
)
from hotel_console.models.common import ConsoleView, MessageResponse
from hotel_console.repositories.admin_repo import AdminRepository
from hotel_console.session import ConsoleSession, sessions
from hotel_console.validation import is_valid_email, validate_admin_registration, validate_login

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


def _session_response(session: ConsoleSession) -> SessionResponse:
    return SessionResponse(
        admin=session.admin,
        view=session.view,
        has_wizard=session.wizard is not None,
        hotels=len(session.hotels),
        amenities=len(session.amenities),
    )


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest):
    """
    Sign in with an email address or a mobile number.

    The credential issued by the Hotel API is returned as the console's bearer
    token and opens a console session.
    """
    errors = validate_login(request.identifier, request.password)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Invalid login details", "errors": errors}
        )

    is_email = is_valid_email(request.identifier)
    try:
        data = await AdminRepository.login(
            email=request.identifier if is_email else "",
            phone_number="" if is_email else request.identifier,
            password=request.password,
        )
    except HotelApiError as e:
        logger.warning(f"Login rejected for {request.identifier}: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED if e.status_code < 500 else status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Login failed"
        )

    token = data.get("token") if isinstance(data, dict) else None
    if not is_jwt_format(token):
        logger.warning(f"Login for {request.identifier} returned no usable token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login failed"
        )

    claims = get_token_claims(token) or {}
    email = data.get("email") or claims.get("sub") or request.identifier
    admin = Admin(
        id=email,
        admin_email=data.get("email") or (request.identifier if is_email else None),
        admin_phone_number=None if is_email else request.identifier,
        role=data.get("role") or claims.get("role"),
    )
    session = sessions.open(token, admin)
    logger.info(f"Admin {admin.id} signed in")

    return LoginResponse(
        access_token=token,
        admin=admin,
        view=session.view,
        message="Login successful"
    )


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest):
    """
    Register a new administrator on the Hotel API.

    The identifier may be an email or a mobile number; a separate mobile
    number is always required.
    """
    errors = validate_admin_registration(
        request.admin_name,
        request.identifier,
        request.phone_number,
        request.password,
        request.confirm_password,
    )
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Invalid registration details", "errors": errors}
        )

    is_email = is_valid_email(request.identifier)
    email = request.identifier if is_email else ""
    phone_number = request.phone_number if is_email else request.identifier

    try:
        data = await AdminRepository.register(
            name=request.admin_name,
            email=email,
            phone_number=phone_number,
            password=request.password,
        )
    except HotelApiError as e:
        logger.warning(f"Admin registration rejected for {request.identifier}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST if e.status_code < 500 else status.HTTP_502_BAD_GATEWAY,
            detail=e.detail or "Registration failed / server unreachable"
        )

    message = data if isinstance(data, str) and data else "Admin Registration Successful"
    logger.info(f"Admin {request.admin_name} registered")

    return RegisterResponse(
        message=message,
        admin=Admin(
            id=email or phone_number,
            admin_name=request.admin_name,
            admin_email=email or None,
            admin_phone_number=phone_number,
        )
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(token: str = Depends(get_bearer_token)):
    """Close the console session of this credential"""
    sessions.close(token)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=SessionResponse)
async def get_session(session: ConsoleSession = Depends(get_current_session)):
    """Current administrator and screen"""
    return _session_response(session)


@router.put("/me/view", response_model=SessionResponse)
async def change_view(
    request: ViewChangeRequest,
    session: ConsoleSession = Depends(get_current_session)
):
    """
    Switch the console to another screen.

    Leaving the hotel registration screen discards the draft in progress.
    The registration screen itself is entered by starting a registration.
    """
    if request.view in (ConsoleView.LOGIN, ConsoleView.REGISTER):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Sign out to return to the login or register screens"
        )
    if request.view == ConsoleView.HOTEL_REGISTRATION and session.wizard is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Start a hotel registration to open this screen"
        )

    session.navigate(request.view)
    return _session_response(session)
