"""
Hotel registration wizard

Three linear steps (basic info, contact info, images and amenities). Each step
is validated before the wizard advances; submission creates the hotel with one
multipart request and then associates the selected amenities with a second,
separate request. The two calls are not transactional.
"""
from enum import IntEnum
import logging
import math
from typing import Dict, List, Optional, Union

from hotel_console.config import settings
from hotel_console.hotel_api import HotelApiError
from hotel_console.image_processing import get_image_info, validate_image
from hotel_console.models.common import ReferenceLists
from hotel_console.models.hotels import Hotel, HotelRegistrationPayload
from hotel_console.models.wizard import (
    DraftResponse,
    ImageAttachment,
    ImageAttachmentResponse,
    RegistrationDraft,
    WizardStateResponse,
)
from hotel_console.repositories.amenity_repo import AmenityRepository
from hotel_console.repositories.hotel_repo import HotelRepository
from hotel_console.repositories.reference_repo import ReferenceRepository
from hotel_console.validation import parse_number, validate_basic_info, validate_contact_info

logger = logging.getLogger(__name__)


class WizardStep(IntEnum):
    BASIC_INFO = 1
    CONTACT_INFO = 2
    IMAGES_AND_AMENITIES = 3


FIRST_STEP = WizardStep.BASIC_INFO
LAST_STEP = WizardStep.IMAGES_AND_AMENITIES

STEP_NAMES = {
    WizardStep.BASIC_INFO: "Basic Information",
    WizardStep.CONTACT_INFO: "Contact Information",
    WizardStep.IMAGES_AND_AMENITIES: "Images & Amenities",
}


class WizardError(Exception):
    """Base class for wizard failures"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ReferenceDataError(WizardError):
    """One of the reference lists could not be loaded"""


class SubmissionNotAllowedError(WizardError):
    """Submit was attempted before the last step"""


class HotelCreationError(WizardError):
    """The create request failed; nothing was created and the draft is kept"""


class AmenityAssignmentError(WizardError):
    """The hotel was created but its amenities could not be associated"""

    def __init__(self, message: str, hotel_id: str):
        self.hotel_id = hotel_id
        super().__init__(message)


def parse_image_urls(text: str) -> List[str]:
    """Split the comma-separated URL field into trimmed, non-empty entries"""
    return [url.strip() for url in text.split(",") if url.strip()]


def _to_key_id(value: str) -> Optional[Union[int, float]]:
    """
    Read a reference key as a number, the whole text or nothing

    Blank text reads as 0. Text that is not a finite number reads as None.
    """
    text = value.strip()
    if not text:
        return 0
    if "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


class RegistrationWizard:
    """State of one hotel registration in progress"""

    def __init__(self, reference_lists: ReferenceLists):
        self.reference_lists = reference_lists
        self.draft = RegistrationDraft()
        self.step = FIRST_STEP
        self.errors: Dict[str, str] = {}

    @classmethod
    async def start(cls, *, token: Optional[str] = None) -> "RegistrationWizard":
        """Load the reference lists and return a wizard with an empty draft"""
        try:
            reference_lists = await ReferenceRepository.load_all(token=token)
        except (HotelApiError, KeyError, TypeError) as e:
            logger.error(f"Failed to load reference lists: {e}")
            raise ReferenceDataError("Failed to load master data. Try refreshing.") from e
        return cls(reference_lists)

    # ── field edits ──

    def update(self, **changes) -> None:
        """Apply field edits; an edited field loses its error, other errors stay"""
        for field, value in changes.items():
            if field not in RegistrationDraft.model_fields:
                raise AttributeError(f"Unknown draft field: {field}")
            setattr(self.draft, field, value)
            self.errors.pop(field, None)

    def select_images(self, attachments: List[ImageAttachment]) -> bool:
        """
        Replace the attachments with a new selection batch

        A batch over the limit, or holding a file that is not a valid image,
        is rejected whole and the current attachments are left untouched.
        """
        if len(attachments) > settings.MAX_HOTEL_IMAGES:
            logger.warning(f"Rejected selection of {len(attachments)} images")
            self.errors["images"] = f"Maximum {settings.MAX_HOTEL_IMAGES} images allowed"
            return False

        for attachment in attachments:
            is_valid, error_message = validate_image(
                attachment.content,
                attachment.filename,
                attachment.content_type
            )
            if not is_valid:
                logger.warning(f"Rejected image selection: {error_message}")
                self.errors["images"] = error_message or "Invalid image file"
                return False

        self.update(images=list(attachments))
        return True

    def remove_image(self, position: int) -> None:
        images = self.draft.images
        if position < 0 or position >= len(images):
            raise IndexError(f"No image at position {position}")
        self.update(images=images[:position] + images[position + 1:])

    def toggle_amenity(self, amenity_id: str) -> bool:
        """Add the amenity if absent, remove it if present; returns whether it is now selected"""
        if amenity_id not in self.reference_lists.amenity_ids:
            raise KeyError(amenity_id)

        selected = list(self.draft.selected_amenities)
        if amenity_id in selected:
            selected.remove(amenity_id)
        else:
            selected.append(amenity_id)
        self.update(selected_amenities=selected)
        return amenity_id in selected

    # ── navigation ──

    def validate_step(self, step: WizardStep) -> Dict[str, str]:
        if step == WizardStep.BASIC_INFO:
            return validate_basic_info(self.draft)
        if step == WizardStep.CONTACT_INFO:
            return validate_contact_info(self.draft)
        # The image cap is enforced when files are selected
        return {}

    def next(self) -> bool:
        """Validate the current step and advance on success"""
        self.errors = self.validate_step(self.step)
        if self.errors:
            return False
        self.step = WizardStep(min(self.step + 1, LAST_STEP))
        return True

    def previous(self) -> None:
        self.step = WizardStep(max(self.step - 1, FIRST_STEP))

    # ── submission ──

    def build_payload(self) -> HotelRegistrationPayload:
        draft = self.draft
        rating = parse_number(draft.rating) if draft.rating else 0
        if rating is not None and not math.isfinite(rating):
            rating = None
        return HotelRegistrationPayload(
            hotelName=draft.name,
            hotelDescription=draft.description,
            hotelRating=rating,
            hotelBasicPricePerNight=draft.price_per_night,
            hotelAddress=draft.address,
            hotelEmail=draft.email,
            hotelPhoneNumber=draft.phone,
            district=draft.district,
            location=draft.location,
            hotelTypeId=_to_key_id(draft.hotel_type),
            landscapeId=_to_key_id(draft.landscape),
        )

    async def submit(self, *, token: Optional[str] = None) -> Optional[Hotel]:
        """
        Register the hotel

        Only the contact fields are re-validated here. Returns None when they
        fail (no request is sent). Returns the created hotel on success.

        Raises:
            SubmissionNotAllowedError: when not on the last step
            HotelCreationError: when the create request fails
            AmenityAssignmentError: when the hotel was created but the
                amenity association failed
        """
        if self.step != LAST_STEP:
            raise SubmissionNotAllowedError("Complete all steps before submitting")

        self.errors = self.validate_step(WizardStep.CONTACT_INFO)
        if self.errors:
            return None

        payload = self.build_payload()
        image_urls = parse_image_urls(self.draft.image_urls)

        try:
            created = await HotelRepository.register_hotel(
                payload,
                self.draft.images,
                image_urls,
                token=token
            )
        except HotelApiError as e:
            logger.error(f"Hotel registration failed: {e}")
            raise HotelCreationError(e.detail or "Registration failed") from e

        hotel_id = created.get("hotelId", created.get("id"))
        if hotel_id is None:
            raise HotelCreationError("Registration response did not include a hotel id")
        hotel_id = str(hotel_id)
        logger.info(f"Hotel {hotel_id} registered: {payload.hotelName}")

        amenity_ids = list(self.draft.selected_amenities)
        if amenity_ids:
            try:
                await AmenityRepository.assign_to_hotel(hotel_id, amenity_ids, token=token)
            except HotelApiError as e:
                # Hotel stays created upstream without its amenities
                logger.warning(f"Hotel {hotel_id} created but amenity assignment failed: {e}")
                raise AmenityAssignmentError(e.detail or "Failed to assign amenities", hotel_id) from e

        # Only the id is taken from the response; the rest is what was sent
        return Hotel(
            id=hotel_id,
            hotelName=payload.hotelName,
            hotelDescription=payload.hotelDescription,
            hotelRating=payload.hotelRating,
            hotelBasicPricePerNight=payload.hotelBasicPricePerNight,
            hotelAddress=payload.hotelAddress,
            district=payload.district,
            hotelType=self.draft.hotel_type,
            landscape=self.draft.landscape,
            location=payload.location,
            hotelEmail=payload.hotelEmail,
            hotelPhoneNumber=payload.hotelPhoneNumber,
            hotelImageUrls=image_urls,
            amenities=amenity_ids,
        )

    # ── presentation ──

    def to_response(self) -> WizardStateResponse:
        draft = self.draft
        images = []
        for position, image in enumerate(draft.images):
            info = get_image_info(image.content)
            images.append(ImageAttachmentResponse(
                position=position,
                filename=image.filename,
                content_type=image.content_type,
                size_bytes=image.size_bytes,
                width=info.get("width"),
                height=info.get("height"),
                format=info.get("format"),
            ))

        return WizardStateResponse(
            step=int(self.step),
            step_name=STEP_NAMES[self.step],
            can_submit=self.step == LAST_STEP,
            draft=DraftResponse(
                **draft.model_dump(exclude={"images"}),
                images=images,
            ),
            errors=dict(self.errors),
            reference_lists=self.reference_lists,
        )
