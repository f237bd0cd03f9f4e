"""
Per-administrator console state

A session owns the authoritative hotel and amenity collections shown on the
dashboard and management screens, plus the single registration wizard of that
administrator. Sessions are keyed by the bearer credential and held in memory.
"""
from datetime import datetime, timezone
import logging
from typing import Dict, List, Optional

from hotel_console.models.auth import Admin
from hotel_console.models.common import Amenity, ConsoleView
from hotel_console.models.hotels import Hotel
from hotel_console.wizard import RegistrationWizard

logger = logging.getLogger(__name__)


class ConsoleSession:
    """State of one signed-in administrator"""

    def __init__(self, token: str, admin: Admin):
        self.token = token
        self.admin = admin
        self.view = ConsoleView.DASHBOARD
        self.hotels: List[Hotel] = []
        self.amenities: List[Amenity] = []
        self.wizard: Optional[RegistrationWizard] = None
        self.created_at = datetime.now(timezone.utc)

    def navigate(self, view: ConsoleView) -> None:
        """Switch screens; leaving the registration screen discards the draft"""
        if view != ConsoleView.HOTEL_REGISTRATION and self.wizard is not None:
            self.discard_wizard()
        self.view = view

    def open_wizard(self, wizard: RegistrationWizard) -> None:
        self.wizard = wizard
        self.view = ConsoleView.HOTEL_REGISTRATION

    def discard_wizard(self) -> None:
        self.wizard = None
        if self.view == ConsoleView.HOTEL_REGISTRATION:
            self.view = ConsoleView.DASHBOARD

    def complete_registration(self, hotel: Hotel) -> None:
        """Hand the created hotel over from the wizard and return to the dashboard"""
        self.hotels.append(hotel)
        self.wizard = None
        self.view = ConsoleView.DASHBOARD

    # ── collections ──

    def replace_hotels(self, hotels: List[Hotel]) -> None:
        self.hotels = list(hotels)

    def replace_amenities(self, amenities: List[Amenity]) -> None:
        self.amenities = list(amenities)

    def find_hotel(self, hotel_id: str) -> Optional[Hotel]:
        for hotel in self.hotels:
            if hotel.id == hotel_id:
                return hotel
        return None

    def replace_hotel(self, updated: Hotel) -> None:
        self.hotels = [updated if hotel.id == updated.id else hotel for hotel in self.hotels]


class SessionStore:
    """In-memory sessions keyed by bearer credential"""

    def __init__(self):
        self._sessions: Dict[str, ConsoleSession] = {}

    def open(self, token: str, admin: Admin) -> ConsoleSession:
        session = ConsoleSession(token, admin)
        self._sessions[token] = session
        logger.info(f"Console session opened for {admin.id}")
        return session

    def get(self, token: str) -> Optional[ConsoleSession]:
        return self._sessions.get(token)

    def close(self, token: str) -> bool:
        session = self._sessions.pop(token, None)
        if session:
            logger.info(f"Console session closed for {session.admin.id}")
        return session is not None

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


sessions = SessionStore()
