"""
My Requests Controller - adoption requests the current user has sent.
"""

import logging
from typing import Optional

from config.auth import SessionContext
from controllers.base import LoadResult, ViewStateController
from models import AdoptionRequestRecord, is_actionable
from services.adoption_service import AdoptionService
from services.errors import ApiClientError, ApiError, ValidationError

logger = logging.getLogger(__name__)


class MyRequestsController(ViewStateController):
    """Controller for the My Requests page."""

    state_key = "my_requests"

    def __init__(self, session: SessionContext, adoption_service: AdoptionService, state=None):
        self.adoption_service = adoption_service
        super().__init__(session, state)

    def _defaults(self) -> dict:
        return {
            "requests": [],
            "loaded": False,
        }

    @property
    def requests(self) -> list[AdoptionRequestRecord]:
        return self.state["requests"]

    def is_loaded(self) -> bool:
        return self.state["loaded"]

    def can_delete(self, request: AdoptionRequestRecord) -> bool:
        """Only requests still waiting for a decision can be withdrawn."""
        return is_actionable(request.status)

    def load(self) -> LoadResult:
        try:
            requests = self.adoption_service.my_requests(self._require_token())
        except ApiClientError as e:
            text = self.report_error("Failed to load adoption requests", e)
            return LoadResult(success=False, items=self.requests, error=text)
        self.state["requests"] = requests
        self.state["loaded"] = True
        return LoadResult(success=True, items=requests)

    def _find(self, request_id: int) -> Optional[AdoptionRequestRecord]:
        for request in self.requests:
            if request.id == request_id:
                return request
        return None

    def delete_request(self, request_id: Optional[int]) -> bool:
        """Withdraw a pending request, then reload the list."""
        try:
            if request_id is None:
                raise ValidationError("Request ID cannot be empty.")
            token = self._require_token()
            request = self._find(request_id)
            if request is not None and not self.can_delete(request):
                raise ValidationError("Only pending requests can be deleted.")
            self.adoption_service.delete(request_id, token)
        except ApiError as e:
            logger.warning(f"Delete of adoption request {request_id} rejected: HTTP {e.status}")
            if e.status in (401, 403):
                self.error("You are not authorized to delete this request.")
            elif e.status == 404:
                self.warning("The specified adoption request could not be found.")
            else:
                self.report_error("An error occurred while deleting the adoption request", e)
            return False
        except ApiClientError as e:
            self.report_error("An error occurred while deleting the adoption request", e)
            return False

        self.success("Adoption request deleted successfully.")
        self.load()
        return True
