"""
Catalog Service - categories and breeds.

Public reads back the listing and edit forms; the /admin endpoints back the
category and breed management pages.
"""

import logging
from typing import Optional

from models import BreedRecord, CategoryRecord
from services.api_client import ApiClient, decode_list, decode_record, with_query

logger = logging.getLogger(__name__)


def sort_by_name(records: list) -> list:
    """Case-insensitive sort on .name, nameless records last."""
    return sorted(records, key=lambda r: (r.name is None, (r.name or "").casefold()))


class CatalogService:
    """Calls the category and breed endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    # ==========================================
    # Public
    # ==========================================

    def list_categories(self, token: Optional[str] = None) -> list[CategoryRecord]:
        """Active categories, sorted by name."""
        response = self.client.get(with_query("/categories", [("active", "true")]), auth_token=token)
        return sort_by_name(decode_list(response.text, CategoryRecord))

    def list_breeds(self, category_id: int, token: Optional[str] = None) -> list[BreedRecord]:
        """Breeds of one category, in server order."""
        url = with_query("/breeds", [("categoryId", str(category_id))])
        response = self.client.get(url, auth_token=token)
        return decode_list(response.text, BreedRecord)

    # ==========================================
    # Admin: categories
    # ==========================================

    def admin_categories(self, token: str, active_only: bool = False) -> list[CategoryRecord]:
        url = with_query("/admin/categories", [("active", "true")] if active_only else [])
        response = self.client.get(url, auth_token=token)
        return decode_list(response.text, CategoryRecord)

    def save_category(self, category: CategoryRecord, token: str) -> Optional[CategoryRecord]:
        """POST a new category or PUT an existing one (by id)."""
        if category.id is None:
            response = self.client.send_json("POST", "/admin/categories", category.to_payload(), token)
        else:
            response = self.client.send_json(
                "PUT", f"/admin/categories/{category.id}", category.to_payload(), token
            )
        logger.info(f"Saved category {category.name!r}")
        if not response.text.strip():
            return None
        return decode_record(response.text, CategoryRecord)

    def delete_category(self, category_id: int, token: str) -> None:
        self.client.delete(f"/admin/categories/{category_id}", auth_token=token)
        logger.info(f"Deleted category {category_id}")

    # ==========================================
    # Admin: breeds
    # ==========================================

    def admin_breeds(self, token: str, category_id: Optional[int] = None) -> list[BreedRecord]:
        params = [("categoryId", str(category_id))] if category_id is not None else []
        response = self.client.get(with_query("/admin/breeds", params), auth_token=token)
        return decode_list(response.text, BreedRecord)

    def save_breed(self, breed: BreedRecord, token: str) -> Optional[BreedRecord]:
        """POST a new breed or PUT an existing one (by id)."""
        if breed.id is None:
            response = self.client.send_json("POST", "/admin/breeds", breed.to_payload(), token)
        else:
            response = self.client.send_json("PUT", f"/admin/breeds/{breed.id}", breed.to_payload(), token)
        logger.info(f"Saved breed {breed.name!r}")
        if not response.text.strip():
            return None
        return decode_record(response.text, BreedRecord)

    def delete_breed(self, breed_id: int, token: str) -> None:
        self.client.delete(f"/admin/breeds/{breed_id}", auth_token=token)
        logger.info(f"Deleted breed {breed_id}")
