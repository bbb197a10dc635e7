"""
My Animals Controller - the animals the current user has listed.
"""

import logging
from typing import Optional

from config.auth import SessionContext
from controllers.base import LoadResult, ViewStateController
from models import AnimalRecord
from services.adoption_service import AdoptionService
from services.animal_service import AnimalService
from services.errors import ApiClientError, ValidationError

logger = logging.getLogger(__name__)


class MyAnimalsController(ViewStateController):
    """Controller for the My Animals page."""

    state_key = "my_animals"

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
            "animals": [],
            "pending_counts": {},
            "to_delete_id": None,
        }

    @property
    def animals(self) -> list[AnimalRecord]:
        return self.state["animals"]

    @property
    def to_delete_id(self) -> Optional[int]:
        return self.state["to_delete_id"]

    def pending_count_for(self, animal_id: Optional[int]) -> int:
        return self.state["pending_counts"].get(animal_id, 0)

    # ==========================================
    # Loading
    # ==========================================

    def load(self) -> LoadResult:
        """Fetch the user's animals and their pending request counts."""
        try:
            token = self._require_token()
            user_id = self.session.user_id
            if user_id is None:
                raise ValidationError("Your user id is not available. Please log in again.")
            animals = self.animal_service.list_by_owner(user_id, token)
        except ApiClientError as e:
            text = self.report_error("Failed to load your animals", e)
            return LoadResult(success=False, items=self.animals, error=text)

        self.state["animals"] = animals
        self.state["pending_counts"] = {
            a.id: self.pending_count(a.id, token) for a in animals if a.id is not None
        }
        return LoadResult(success=True, items=animals)

    def pending_count(self, animal_id: int, token: str) -> int:
        """Pending requests for one animal; 0 if the count can't be fetched."""
        try:
            return self.adoption_service.pending_count(animal_id, token)
        except ApiClientError as e:
            logger.warning(f"Could not fetch pending count for animal {animal_id}: {e}")
            return 0

    # ==========================================
    # Delete
    # ==========================================

    def confirm_delete(self, animal_id: int):
        """Mark an animal for deletion; the page asks for confirmation."""
        self.state["to_delete_id"] = animal_id

    def cancel_delete(self):
        self.state["to_delete_id"] = None

    def delete_selected(self) -> bool:
        animal_id = self.to_delete_id
        if animal_id is None:
            return False
        try:
            token = self._require_token()
            self.animal_service.delete_animal(animal_id, token)
        except ApiClientError as e:
            self.report_error("Failed to delete animal", e)
            return False
        finally:
            self.state["to_delete_id"] = None

        self.success("Animal and all related adoption requests were successfully deleted.")
        self.load()
        return True
