"""
Animal Requests Controller - an owner reviewing requests for one animal.

Only PENDING requests can be approved or rejected. Anything else is refused
here, before a request is sent; the server still has the final say (e.g. a
409 when someone else resolved the request first).
"""

import logging
from typing import Optional, Union

from config.auth import SessionContext
from controllers.base import NOT_LOADED, LoadResult, ViewStateController
from models import AdoptionRequestRecord, RequestStatus, can_transition
from models.workflow import OWNER_DECISIONS, parse_status
from services.adoption_service import AdoptionService
from services.errors import ApiClientError, ValidationError

logger = logging.getLogger(__name__)

PAST_TENSE = {
    RequestStatus.APPROVED: "approved",
    RequestStatus.REJECTED: "rejected",
}


class AnimalRequestsController(ViewStateController):
    """Controller for the Animal Requests page."""

    state_key = "animal_requests"

    def __init__(self, session: SessionContext, adoption_service: AdoptionService, state=None):
        self.adoption_service = adoption_service
        super().__init__(session, state)

    def _defaults(self) -> dict:
        return {
            "loaded_for": NOT_LOADED,
            "animal_id": None,
            "requests": [],
            "selected_request_id": None,
        }

    @property
    def animal_id(self) -> Optional[int]:
        return self.state["animal_id"]

    @property
    def requests(self) -> list[AdoptionRequestRecord]:
        return self.state["requests"]

    # ==========================================
    # Loading
    # ==========================================

    def ensure_loaded(self, animal_id: Optional[int]):
        if self.state["loaded_for"] != animal_id:
            self.load(animal_id)

    def load(self, animal_id: Optional[int]) -> LoadResult:
        """Fetch all requests received for an animal the user owns."""
        self.state["loaded_for"] = animal_id
        if animal_id != self.animal_id:
            self.state["requests"] = []
            self.state["selected_request_id"] = None
        self.state["animal_id"] = animal_id
        try:
            if animal_id is None:
                raise ValidationError("Animal ID not found. Open this page from one of your animals.")
            requests = self.adoption_service.requests_for_animal(animal_id, self._require_token())
        except ApiClientError as e:
            text = self.report_error("Error loading adoption requests", e)
            return LoadResult(success=False, items=self.requests, error=text)
        self.state["requests"] = requests
        return LoadResult(success=True, items=requests)

    # ==========================================
    # Selection
    # ==========================================

    def select(self, request_id: int):
        self.state["selected_request_id"] = request_id

    def clear_selection(self):
        self.state["selected_request_id"] = None

    @property
    def selected_request(self) -> Optional[AdoptionRequestRecord]:
        selected_id = self.state["selected_request_id"]
        if selected_id is None:
            return None
        for request in self.requests:
            if request.id == selected_id:
                return request
        return None

    # ==========================================
    # Decisions
    # ==========================================

    def act(self, request: Optional[AdoptionRequestRecord], target: Union[RequestStatus, str]) -> bool:
        """
        Approve or reject one request.

        The selection is cleared whatever the outcome. On success the list
        is reloaded so every row shows the server's current status.
        """
        try:
            if request is None:
                raise ValidationError("No adoption request selected.")
            decision = parse_status(target)
            if decision not in OWNER_DECISIONS:
                shown = decision.value if decision else target
                raise ValidationError(f"Requests can only be approved or rejected, not {shown}.")
            if not can_transition(request.status, decision):
                raise ValidationError(
                    "Cannot modify request: Only pending requests can be approved or rejected."
                )
            token = self._require_token()
            self.adoption_service.update_status(request.id, decision, token)
        except ApiClientError as e:
            self.report_error("An error occurred while updating the request status", e)
            return False
        finally:
            self.clear_selection()

        requester = request.requester_name or request.requester_email or "the requester"
        self.success(f"Adoption request from {requester} has been {PAST_TENSE[decision]} successfully!")
        self.load(self.animal_id)
        return True

    def approve(self) -> bool:
        return self.act(self.selected_request, RequestStatus.APPROVED)

    def reject(self) -> bool:
        return self.act(self.selected_request, RequestStatus.REJECTED)
