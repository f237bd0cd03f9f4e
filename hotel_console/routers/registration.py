"""
Hotel registration wizard routes
"""
from fastapi import APIRouter, HTTPException, status, Depends, UploadFile, File
from typing import List
import logging

from hotel_console.dependencies import get_current_session, get_current_wizard
from hotel_console.models.common import ValidationErrorDetail
from hotel_console.models.hotels import RegistrationResultResponse
from hotel_console.models.wizard import DraftUpdateRequest, ImageAttachment, WizardStateResponse
from hotel_console.session import ConsoleSession
from hotel_console.wizard import (
    AmenityAssignmentError,
    HotelCreationError,
    ReferenceDataError,
    RegistrationWizard,
    SubmissionNotAllowedError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/registration", tags=["registration"])


def _validation_failed(wizard: RegistrationWizard, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=ValidationErrorDetail(
            message=message,
            errors=dict(wizard.errors),
            step=int(wizard.step)
        ).model_dump()
    )


@router.post("/wizard", response_model=WizardStateResponse, status_code=status.HTTP_201_CREATED)
async def start_registration(session: ConsoleSession = Depends(get_current_session)):
    """
    Start a hotel registration with an empty draft.

    Loads districts, hotel types, landscapes and amenities. If any of them
    fails to load, no wizard is created. A draft already in progress is
    replaced.
    """
    try:
        wizard = await RegistrationWizard.start(token=session.token)
    except ReferenceDataError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )

    session.open_wizard(wizard)
    logger.info(f"Hotel registration started by {session.admin.id}")
    return wizard.to_response()


@router.get("/wizard", response_model=WizardStateResponse)
async def get_registration(wizard: RegistrationWizard = Depends(get_current_wizard)):
    """Current step, draft and errors"""
    return wizard.to_response()


@router.delete("/wizard", status_code=status.HTTP_204_NO_CONTENT)
async def discard_registration(session: ConsoleSession = Depends(get_current_session)):
    """Discard the draft and return to the dashboard"""
    session.discard_wizard()


@router.patch("/wizard/draft", response_model=WizardStateResponse)
async def update_draft(
    request: DraftUpdateRequest,
    wizard: RegistrationWizard = Depends(get_current_wizard)
):
    """Edit draft fields; only the fields sent are changed"""
    wizard.update(**request.model_dump(exclude_unset=True, exclude_none=True))
    return wizard.to_response()


@router.post("/wizard/images", response_model=WizardStateResponse)
async def select_images(
    files: List[UploadFile] = File(...),
    wizard: RegistrationWizard = Depends(get_current_wizard)
):
    """
    Select the hotel's local images (replaces the current selection).

    A selection of more than 3 files, or one containing an invalid image, is
    rejected whole and the current images are kept.
    """
    attachments = []
    for file in files:
        content = await file.read()
        attachments.append(ImageAttachment(
            filename=file.filename or "image",
            content_type=file.content_type or "image/jpeg",
            content=content
        ))

    if not wizard.select_images(attachments):
        raise _validation_failed(wizard, wizard.errors.get("images", "Invalid image selection"))
    return wizard.to_response()


@router.delete("/wizard/images/{position}", response_model=WizardStateResponse)
async def remove_image(position: int, wizard: RegistrationWizard = Depends(get_current_wizard)):
    """Remove one image; later images move up one position"""
    try:
        wizard.remove_image(position)
    except IndexError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    return wizard.to_response()


@router.post("/wizard/amenities/{amenity_id}", response_model=WizardStateResponse)
async def toggle_amenity(amenity_id: str, wizard: RegistrationWizard = Depends(get_current_wizard)):
    """Select the amenity if unselected, unselect it otherwise"""
    try:
        wizard.toggle_amenity(amenity_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown amenity: {amenity_id}"
        )
    return wizard.to_response()


@router.post("/wizard/next", response_model=WizardStateResponse)
async def next_step(wizard: RegistrationWizard = Depends(get_current_wizard)):
    """Validate the current step and move to the next one"""
    if not wizard.next():
        raise _validation_failed(wizard, "Please fix the highlighted fields")
    return wizard.to_response()


@router.post("/wizard/previous", response_model=WizardStateResponse)
async def previous_step(wizard: RegistrationWizard = Depends(get_current_wizard)):
    """Move back one step; errors are left as they are"""
    wizard.previous()
    return wizard.to_response()


@router.post("/wizard/submit", response_model=RegistrationResultResponse, status_code=status.HTTP_201_CREATED)
async def submit_registration(session: ConsoleSession = Depends(get_current_session)):
    """
    Register the hotel.

    Sends the hotel with its images in one request, then associates the
    selected amenities in a second request. If the first request fails the
    draft is kept for another attempt. If only the second fails, the hotel
    exists without its amenities.
    """
    wizard = session.wizard
    if wizard is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No hotel registration in progress. Start the registration first."
        )

    try:
        hotel = await wizard.submit(token=session.token)

        if hotel is None:
            raise _validation_failed(wizard, "Please fix the highlighted fields")

        session.complete_registration(hotel)
        return RegistrationResultResponse(
            message="Hotel registered successfully!",
            hotel=hotel,
            view=session.view
        )

    except SubmissionNotAllowedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message
        )
    except HotelCreationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )
    except AmenityAssignmentError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": e.message, "hotel_id": e.hotel_id}
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error submitting hotel registration: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to register hotel: {str(e)}"
        )
