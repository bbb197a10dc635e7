"""
Adoption Service - adoption requests against the HomeTail API.

All endpoints require a token. Status changes are validated again by the
server; see models.workflow for the rules the UI mirrors.
"""

import logging
from typing import Optional

from models import AdoptionRequestRecord, RequestStatus
from services.api_client import ApiClient, decode_list, with_query
from services.errors import ResponseFormatError

logger = logging.getLogger(__name__)

REQUESTS_PATH = "/adoption-requests"


class AdoptionService:
    """Calls the /adoption-requests endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def my_requests(self, token: str) -> list[AdoptionRequestRecord]:
        """Requests the current user has sent."""
        response = self.client.get(f"{REQUESTS_PATH}/my-requests", auth_token=token)
        return decode_list(response.text, AdoptionRequestRecord)

    def request_for_animal(self, animal_id: int, token: str) -> Optional[AdoptionRequestRecord]:
        """The current user's request for one animal, if any."""
        for request in self.my_requests(token):
            if request.animal_id == animal_id:
                return request
        return None

    def requests_for_animal(self, animal_id: int, token: str) -> list[AdoptionRequestRecord]:
        """Requests other users sent for an animal the current user owns."""
        response = self.client.get(
            f"{REQUESTS_PATH}/requests-for-my-animal/{animal_id}", auth_token=token
        )
        return decode_list(response.text, AdoptionRequestRecord)

    def pending_count(self, animal_id: int, token: str) -> int:
        response = self.client.get(f"{REQUESTS_PATH}/animal/{animal_id}/pending/count", auth_token=token)
        try:
            return int(response.json())
        except (TypeError, ValueError) as e:
            raise ResponseFormatError(f"Expected a count, got {response.text[:50]!r}") from e

    def create(self, animal_id: int, note: str, token: str) -> None:
        payload = {"animalId": animal_id, "note": note}
        response = self.client.send_json("POST", REQUESTS_PATH, payload, token)
        logger.info(f"Sent adoption request for animal {animal_id} ({response.status_code})")

    def update_status(self, request_id: int, status: RequestStatus, token: str) -> None:
        url = with_query(f"{REQUESTS_PATH}/{request_id}/status", [("status", status.value)])
        self.client.execute("PUT", url, auth_token=token)
        logger.info(f"Adoption request {request_id} -> {status.value}")

    def update_note(self, request_id: int, note: str, token: str) -> None:
        self.client.send_json("PUT", f"{REQUESTS_PATH}/{request_id}/note", {"note": note}, token)

    def delete(self, request_id: int, token: str) -> None:
        self.client.delete(f"{REQUESTS_PATH}/{request_id}", auth_token=token)
        logger.info(f"Deleted adoption request {request_id}")
