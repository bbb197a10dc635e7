"""
Animal Detail Controller - one animal, and the viewer's relation to it.

What the page offers depends on who is looking:
- Owner: how many requests were received, edit and delete
- Other logged-in user: send a request, or edit/cancel the one already sent
- Guest: the details only
"""

import logging
from typing import Optional

from config.auth import SessionContext
from controllers.base import NOT_LOADED, Page, Severity, ViewStateController
from models import AdoptionRequestRecord, AnimalRecord, RequestStatus, can_transition
from services.adoption_service import AdoptionService
from services.animal_service import AnimalService
from services.errors import ApiClientError, ValidationError

logger = logging.getLogger(__name__)


class AnimalDetailController(ViewStateController):
    """Controller for the Animal Details page."""

    state_key = "animal_detail"

    def __init__(
        self,
        session: SessionContext,
        animal_service: AnimalService,
        adoption_service: AdoptionService,
        state=None,
    ):
        self.animal_service = animal_service
        self.adoption_service = adoption_service
        super().__init__(session, state)

    def _defaults(self) -> dict:
        return {
            "loaded_for": NOT_LOADED,
            "animal_id": None,
            "animal": None,
            "is_owner": False,
            "request_count": 0,
            "existing_request": None,
            "note": "",
            "delete_pending": False,
        }

    @property
    def animal(self) -> Optional[AnimalRecord]:
        return self.state["animal"]

    @property
    def is_owner(self) -> bool:
        return self.state["is_owner"]

    @property
    def request_count(self) -> int:
        return self.state["request_count"]

    @property
    def existing_request(self) -> Optional[AdoptionRequestRecord]:
        return self.state["existing_request"]

    @property
    def has_sent_request(self) -> bool:
        return self.existing_request is not None

    @property
    def note(self) -> str:
        return self.state["note"]

    def can_cancel(self) -> bool:
        request = self.existing_request
        return request is not None and can_transition(request.status, RequestStatus.CANCELLED)

    # ==========================================
    # Loading
    # ==========================================

    def ensure_loaded(self, animal_id: Optional[int]):
        """Load once per animal; reruns reuse what's in state."""
        if self.state["loaded_for"] != animal_id:
            self.load(animal_id)

    def load(self, animal_id: Optional[int]) -> bool:
        """Load the animal and, for a logged-in viewer, their relation to it."""
        self.reset_state()
        self.state["loaded_for"] = animal_id
        if animal_id is None:
            self.error("Missing or invalid animal id.")
            return False

        self.state["animal_id"] = animal_id
        try:
            animal = self.animal_service.get_animal(animal_id, self.session.current_token())
        except ApiClientError as e:
            self.report_error("Cannot load animal details", e)
            return False
        self.state["animal"] = animal

        if not self.session.is_logged_in():
            return True

        is_owner = animal.owner_id is not None and animal.owner_id == self.session.user_id
        self.state["is_owner"] = is_owner
        if is_owner:
            self._load_request_count()
        else:
            self._load_existing_request()
        return True

    def _load_request_count(self):
        try:
            requests = self.adoption_service.requests_for_animal(
                self.state["animal_id"], self._require_token()
            )
        except ApiClientError as e:
            self.report_error("Error loading adoption count", e)
            self.state["request_count"] = 0
            return
        self.state["request_count"] = len(requests)

    def _load_existing_request(self):
        try:
            existing = self.adoption_service.request_for_animal(
                self.state["animal_id"], self._require_token()
            )
        except ApiClientError as e:
            self.report_error("Error checking for existing request", e)
            return
        self.state["existing_request"] = existing
        self.state["note"] = (existing.note or "") if existing else ""

    # ==========================================
    # Requester actions
    # ==========================================

    def send_request(self, note: str) -> bool:
        """Send an adoption request for this animal."""
        try:
            token = self._require_token()
            if self.animal is None:
                raise ValidationError("No animal selected.")
            if self.has_sent_request:
                raise ValidationError("You have already sent a request for this animal.")
            self.adoption_service.create(self.state["animal_id"], (note or "").strip(), token)
        except ApiClientError as e:
            self.report_error("Error sending adoption request", e)
            return False

        self.success("Adoption request sent!")
        self._load_existing_request()
        return True

    def update_note(self, note: str) -> bool:
        """Change the note on the request already sent."""
        request = self.existing_request
        if request is None:
            self.error("No request to update.")
            return False
        note = (note or "").strip()
        try:
            self.adoption_service.update_note(request.id, note, self._require_token())
        except ApiClientError as e:
            self.report_error("Error updating adoption request", e)
            return False

        request.note = note
        self.state["note"] = note
        self.success("Adoption request updated successfully.")
        return True

    def cancel_request(self) -> Optional[str]:
        """
        Withdraw the request already sent.

        Returns:
            The My Requests page on success, None to stay here
        """
        request = self.existing_request
        if request is None:
            self.error("No request to cancel.")
            return None
        if not self.can_cancel():
            self.error("Only pending requests can be cancelled.")
            return None
        try:
            self.adoption_service.delete(request.id, self._require_token())
        except ApiClientError as e:
            self.report_error("Error cancelling adoption request", e)
            return None

        self.state["existing_request"] = None
        self.state["note"] = ""
        self.flash(Severity.SUCCESS, "Adoption request cancelled successfully.")
        return Page.MY_REQUESTS

    # ==========================================
    # Owner actions
    # ==========================================

    def confirm_delete(self):
        self.state["delete_pending"] = True

    def cancel_delete(self):
        self.state["delete_pending"] = False

    def is_delete_pending(self) -> bool:
        return self.state["delete_pending"]

    def delete_animal(self) -> Optional[str]:
        """
        Delete this animal and, server-side, all its requests.

        Returns:
            The My Animals page on success, None to stay here
        """
        try:
            if self.animal is None:
                raise ValidationError("No animal selected for deletion.")
            token = self._require_token()
            self.animal_service.delete_animal(self.state["animal_id"], token)
        except ApiClientError as e:
            self.report_error("Failed to delete animal", e)
            return None
        finally:
            self.state["delete_pending"] = False

        self.reset_state()
        self.flash(Severity.SUCCESS, "Animal and all related adoption requests were successfully deleted.")
        return Page.MY_ANIMALS
