"""
Authentication-related Pydantic models
"""
from pydantic import BaseModel
from typing import Optional

from hotel_console.models.common import ConsoleView


class Admin(BaseModel):
    """Signed-in administrator"""
    id: str
    admin_name: Optional[str] = None
    admin_email: Optional[str] = None
    admin_phone_number: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    """Login request model (identifier is an email or a mobile number)"""
    identifier: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    """Login response model"""
    access_token: str
    token_type: str = "bearer"
    admin: Admin
    view: ConsoleView
    message: str


class RegisterRequest(BaseModel):
    """Admin registration request model"""
    admin_name: str = ""
    identifier: str = ""
    phone_number: str = ""
    password: str = ""
    confirm_password: str = ""


class RegisterResponse(BaseModel):
    """Admin registration response model"""
    message: str
    admin: Admin


class SessionResponse(BaseModel):
    """Current console session"""
    admin: Admin
    view: ConsoleView
    has_wizard: bool
    hotels: int
    amenities: int


class ViewChangeRequest(BaseModel):
    """Switch the console to another screen"""
    view: ConsoleView
