"""
Form validation rules shared by the console screens

Every validator returns a mapping of field name to message; an empty mapping
means the form is valid. All rules of a form are evaluated together.
"""
import re
from typing import Dict, Optional, Union

from hotel_console.models.hotels import Hotel
from hotel_console.models.wizard import RegistrationDraft

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
MOBILE_PATTERN = re.compile(r"[6-9][0-9]{9}")
SPECIAL_CHARACTERS = set('!@#$%^&*(),.?":{}|<>')

# Leading decimal literal, as a browser number parser reads it
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?))")

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
RATING_MIN = 0
RATING_MAX = 5


def parse_number(value: Union[str, int, float, None]) -> Optional[float]:
    """
    Parse the leading number of a text value

    Returns None when the text does not start with a number, so callers can
    treat it as not-a-number (which never satisfies a range comparison).
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_PREFIX.match(value)
    if not match:
        return None
    return float(match.group(1))


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: str) -> bool:
    """Exactly ten digits"""
    return PHONE_PATTERN.fullmatch(value) is not None


def is_valid_mobile(value: str) -> bool:
    """Ten-digit mobile number starting with 6-9"""
    return MOBILE_PATTERN.fullmatch(value) is not None


def is_strong_password(value: str) -> bool:
    """At least 8 characters with an uppercase letter, a digit and a special character"""
    return (
        len(value) >= 8
        and re.search(r"[A-Z]", value) is not None
        and re.search(r"[0-9]", value) is not None
        and any(ch in SPECIAL_CHARACTERS for ch in value)
    )


# ============================================
# REGISTRATION WIZARD
# ============================================

def validate_basic_info(draft: RegistrationDraft) -> Dict[str, str]:
    """Step 1: name, description, rating, price and the location selections"""
    errors: Dict[str, str] = {}

    if not draft.name:
        errors["name"] = "Hotel name is required"
    elif len(draft.name) > NAME_MAX_LENGTH:
        errors["name"] = "Max 100 characters"

    if not draft.description:
        errors["description"] = "Description required"
    elif len(draft.description) > DESCRIPTION_MAX_LENGTH:
        errors["description"] = "Max 1000 characters"

    if draft.rating:
        rating = parse_number(draft.rating)
        if rating is not None and (rating < RATING_MIN or rating > RATING_MAX):
            errors["rating"] = "Rating 0-5"

    if not draft.price_per_night:
        errors["price_per_night"] = "Price required"
    else:
        price = parse_number(draft.price_per_night)
        if price is not None and price < 0:
            errors["price_per_night"] = "Must be positive"

    if not draft.address:
        errors["address"] = "Address required"
    if not draft.district:
        errors["district"] = "District required"
    if not draft.hotel_type:
        errors["hotel_type"] = "Hotel type required"
    if not draft.landscape:
        errors["landscape"] = "Landscape required"

    return errors


def validate_contact_info(draft: RegistrationDraft) -> Dict[str, str]:
    """Step 2: email and phone are both required"""
    errors: Dict[str, str] = {}

    if not draft.email:
        errors["email"] = "Email required"
    elif not is_valid_email(draft.email):
        errors["email"] = "Invalid email"

    if not draft.phone:
        errors["phone"] = "Phone required"
    elif not is_valid_phone(draft.phone):
        errors["phone"] = "10 digits"

    return errors


# ============================================
# AUTHENTICATION
# ============================================

def validate_login(identifier: str, password: str) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    if not identifier.strip():
        errors["identifier"] = "Email or phone number is required"
    elif not is_valid_email(identifier) and not is_valid_mobile(identifier):
        errors["identifier"] = "Please enter a valid email or 10-digit phone number"

    if not password:
        errors["password"] = "Password is required"
    elif not is_strong_password(password):
        errors["password"] = "Password must be ≥8 chars, 1 uppercase, 1 number, 1 special char"

    return errors


def validate_admin_registration(
    admin_name: str,
    identifier: str,
    phone_number: str,
    password: str,
    confirm_password: str,
) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    if not admin_name.strip():
        errors["admin_name"] = "Admin name is required"
    elif len(admin_name) < 3:
        errors["admin_name"] = "Admin name must be at least 3 characters"
    elif len(admin_name) > 100:
        errors["admin_name"] = "Admin name must not exceed 100 characters"

    if not identifier.strip():
        errors["identifier"] = "Email or phone number is required"
    elif not is_valid_email(identifier) and not is_valid_mobile(identifier):
        errors["identifier"] = "Enter valid email or 10-digit phone"

    if not phone_number.strip():
        errors["phone_number"] = "Phone number is required"
    elif not is_valid_mobile(phone_number):
        errors["phone_number"] = "Enter valid 10-digit mobile number"

    if not password:
        errors["password"] = "Password is required"
    elif not is_strong_password(password):
        errors["password"] = "≥8 chars, 1 uppercase, 1 number & 1 special"

    if not confirm_password:
        errors["confirm_password"] = "Confirm your password"
    elif password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"

    return errors


# ============================================
# HOTEL MANAGEMENT
# ============================================

def validate_hotel_edit(hotel: Hotel) -> Dict[str, str]:
    """Edit form: every field required, email and phone format-checked"""
    errors: Dict[str, str] = {}

    if not hotel.hotelName:
        errors["hotelName"] = "Hotel name is required"
    if not hotel.hotelDescription:
        errors["hotelDescription"] = "Description is required"
    if hotel.hotelBasicPricePerNight in ("", 0, None):
        errors["hotelBasicPricePerNight"] = "Price is required"
    if not hotel.hotelAddress:
        errors["hotelAddress"] = "Address is required"
    if not hotel.district:
        errors["district"] = "District is required"
    if not hotel.hotelType:
        errors["hotelType"] = "Hotel type is required"
    if not hotel.landscape:
        errors["landscape"] = "Landscape is required"

    if not hotel.hotelEmail:
        errors["hotelEmail"] = "Email is required"
    elif not is_valid_email(hotel.hotelEmail):
        errors["hotelEmail"] = "Invalid email format"

    if not hotel.hotelPhoneNumber:
        errors["hotelPhoneNumber"] = "Phone number is required"
    elif not is_valid_phone(hotel.hotelPhoneNumber):
        errors["hotelPhoneNumber"] = "Phone number must be 10 digits"

    return errors
