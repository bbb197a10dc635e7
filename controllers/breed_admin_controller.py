"""
Breed Admin Controller - create, edit and delete breeds, optionally filtered
by category.
"""

import logging
from typing import Optional

from config.auth import SessionContext
from controllers.base import LoadResult, ViewStateController
from models import BreedRecord, CategoryRecord
from services.catalog_service import CatalogService, sort_by_name
from services.errors import ApiClientError

logger = logging.getLogger(__name__)


class BreedAdminController(ViewStateController):
    """Controller for the breed management page."""

    state_key = "breed_admin"

    def __init__(self, session: SessionContext, catalog_service: CatalogService, state=None):
        self.catalog_service = catalog_service
        super().__init__(session, state)

    def _defaults(self) -> dict:
        return {
            "breeds": [],
            "categories": [],
            "filter_category_id": None,
            "form": BreedRecord(active=True),
            "editing": False,
            "to_delete_id": None,
            "loaded": False,
        }

    @property
    def breeds(self) -> list[BreedRecord]:
        return self.state["breeds"]

    @property
    def categories(self) -> list[CategoryRecord]:
        return self.state["categories"]

    @property
    def filter_category_id(self) -> Optional[int]:
        return self.state["filter_category_id"]

    @property
    def form(self) -> BreedRecord:
        return self.state["form"]

    @property
    def editing(self) -> bool:
        return self.state["editing"]

    @property
    def to_delete_id(self) -> Optional[int]:
        return self.state["to_delete_id"]

    def is_loaded(self) -> bool:
        return self.state["loaded"]

    # ==========================================
    # Loading
    # ==========================================

    def reload(self) -> bool:
        """Reload categories and breeds. True only if both loaded."""
        categories_ok = self.reload_categories().success
        breeds_ok = self.reload_breeds().success
        self.state["loaded"] = True
        return categories_ok and breeds_ok

    def reload_categories(self) -> LoadResult:
        try:
            categories = self.catalog_service.admin_categories(self._require_token(), active_only=True)
        except ApiClientError as e:
            text = self.report_error("Failed to load categories", e)
            return LoadResult(success=False, items=self.categories, error=text)
        self.state["categories"] = sort_by_name(categories)
        return LoadResult(success=True, items=self.categories)

    def reload_breeds(self) -> LoadResult:
        try:
            breeds = self.catalog_service.admin_breeds(self._require_token(), self.filter_category_id)
        except ApiClientError as e:
            text = self.report_error("Failed to load breeds", e)
            return LoadResult(success=False, items=self.breeds, error=text)
        self.state["breeds"] = breeds
        return LoadResult(success=True, items=breeds)

    def apply_category_filter(self, category_id: Optional[int]) -> LoadResult:
        self.state["filter_category_id"] = category_id
        return self.reload_breeds()

    def category_name(self, category_id: Optional[int]) -> str:
        if category_id is None:
            return ""
        for category in self.categories:
            if category.id == category_id:
                return category.name or ""
        return ""

    # ==========================================
    # Form
    # ==========================================

    def start_create(self):
        """New breed, pre-set to the category being filtered on."""
        self.state["editing"] = False
        self.state["form"] = BreedRecord(active=True, category_id=self.filter_category_id)

    def start_edit(self, breed: BreedRecord):
        self.state["editing"] = True
        self.state["form"] = BreedRecord(
            id=breed.id,
            name=breed.name,
            category_id=breed.category_id,
            category_name=breed.category_name,
            active=breed.active if breed.active is not None else True,
            sort_order=breed.sort_order,
        )

    def update_form(self, **fields):
        for name, value in fields.items():
            setattr(self.form, name, value)

    def save(self) -> bool:
        form = self.form
        if not (form.name or "").strip():
            self.error("Name is required")
            return False
        if form.category_id is None:
            self.error("Category is required")
            return False

        updating = self.editing and form.id is not None
        if not updating:
            form.id = None
        try:
            form.name = form.name.strip()
            self.catalog_service.save_breed(form, self._require_token())
        except ApiClientError as e:
            self.report_error("Save failed", e)
            return False

        self.success("Breed updated" if updating else "Breed created")
        self.start_create()
        self.reload_breeds()
        return True

    # ==========================================
    # Delete
    # ==========================================

    def confirm_delete(self, breed: BreedRecord):
        self.state["to_delete_id"] = breed.id

    def cancel_delete(self):
        self.state["to_delete_id"] = None

    def delete_selected(self) -> bool:
        breed_id = self.to_delete_id
        if breed_id is None:
            return False
        try:
            self.catalog_service.delete_breed(breed_id, self._require_token())
        except ApiClientError as e:
            self.report_error("Delete failed", e)
            return False
        finally:
            self.state["to_delete_id"] = None

        self.success("Breed deleted")
        self.reload_breeds()
        return True
