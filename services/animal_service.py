"""
Animal Service - animal listings and CRUD against the HomeTail API.

Creating and updating an animal is a multipart request: the animal as a
JSON part named "animal" and, optionally, a photo part named "image".
"""

import json
import logging
from typing import Optional

from models import AnimalFilters, AnimalRecord
from services.api_client import (
    ApiClient,
    FilePart,
    MultipartBody,
    decode_list,
    decode_record,
    with_query,
)

logger = logging.getLogger(__name__)

ANIMALS_PATH = "/animals"
UPLOADS_PREFIX = "/uploads/"


def resolve_image_url(path: Optional[str], uploads_base_url: str) -> Optional[str]:
    """Absolute URL for an animal image; uploaded files are served by the API host."""
    if not path or not path.strip():
        return None
    if path.startswith(UPLOADS_PREFIX):
        return f"{uploads_base_url.rstrip('/')}{path}"
    return path


class AnimalService:
    """Calls the /animals endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def listing_url(self, filters: AnimalFilters) -> str:
        """Listing path with the filter query. Same filters, same URL."""
        return with_query(ANIMALS_PATH, filters.to_query_params())

    def list_animals(self, filters: AnimalFilters, token: Optional[str] = None) -> list[AnimalRecord]:
        """Animals matching the filters, in server order."""
        response = self.client.get(self.listing_url(filters), auth_token=token)
        animals = decode_list(response.text, AnimalRecord)
        logger.debug(f"Loaded {len(animals)} animals")
        return animals

    def get_animal(self, animal_id: int, token: Optional[str] = None) -> AnimalRecord:
        response = self.client.get(f"{ANIMALS_PATH}/{animal_id}", auth_token=token)
        return decode_record(response.text, AnimalRecord)

    def list_by_owner(self, owner_id: int, token: str) -> list[AnimalRecord]:
        response = self.client.get(f"{ANIMALS_PATH}/by-owner/{owner_id}", auth_token=token)
        return decode_list(response.text, AnimalRecord)

    def save_animal(
        self,
        payload: dict,
        token: str,
        image: Optional[FilePart] = None,
    ) -> Optional[AnimalRecord]:
        """
        Create (POST) or update (PUT) an animal.

        The payload's "id" decides which: present means update.

        Returns:
            The saved animal if the server echoed it back, else None
        """
        animal_id = payload.get("id")
        body = MultipartBody(
            json_part_name="animal",
            json_text=json.dumps(payload),
            file_part_name="image",
            file=image,
        )
        if animal_id is None:
            response = self.client.send_multipart("POST", ANIMALS_PATH, body, token)
        else:
            response = self.client.send_multipart("PUT", f"{ANIMALS_PATH}/{animal_id}", body, token)

        logger.info(f"Saved animal {payload.get('name')!r} ({response.status_code})")
        if not response.text.strip():
            return None
        return decode_record(response.text, AnimalRecord)

    def delete_animal(self, animal_id: int, token: str) -> None:
        """Delete an animal; the server also removes its adoption requests."""
        self.client.delete(f"{ANIMALS_PATH}/{animal_id}", auth_token=token)
        logger.info(f"Deleted animal {animal_id}")
