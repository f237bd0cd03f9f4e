"""
Registration wizard Pydantic models
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from hotel_console.models.common import ReferenceLists


class ImageAttachment(BaseModel):
    """Local image file attached to the draft"""
    filename: str
    content_type: str = "image/jpeg"
    content: bytes = Field(repr=False)

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class RegistrationDraft(BaseModel):
    """In-progress hotel record; every text field holds what the user typed"""
    name: str = ""
    description: str = ""
    rating: str = ""
    price_per_night: str = ""
    address: str = ""
    district: str = ""
    hotel_type: str = ""
    landscape: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    images: List[ImageAttachment] = Field(default_factory=list)
    image_urls: str = ""
    selected_amenities: List[str] = Field(default_factory=list)


class DraftUpdateRequest(BaseModel):
    """Field edits applied to the draft (only the fields sent are changed)"""
    name: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[str] = None
    price_per_night: Optional[str] = None
    address: Optional[str] = None
    district: Optional[str] = None
    hotel_type: Optional[str] = None
    landscape: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    image_urls: Optional[str] = None


# ============================================
# RESPONSES
# ============================================

class ImageAttachmentResponse(BaseModel):
    """Attachment summary (file content is never echoed back)"""
    position: int
    filename: str
    content_type: str
    size_bytes: int
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None


class DraftResponse(BaseModel):
    """Draft as shown to the console"""
    name: str
    description: str
    rating: str
    price_per_night: str
    address: str
    district: str
    hotel_type: str
    landscape: str
    location: str
    email: str
    phone: str
    images: List[ImageAttachmentResponse]
    image_urls: str
    selected_amenities: List[str]


class WizardStateResponse(BaseModel):
    """Current wizard step, draft, errors and reference lists"""
    step: int
    step_name: str
    total_steps: int = 3
    can_submit: bool
    draft: DraftResponse
    errors: Dict[str, str]
    reference_lists: ReferenceLists
