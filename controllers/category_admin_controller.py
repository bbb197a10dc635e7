"""
Category Admin Controller - create, edit and delete animal categories.
"""

import logging
from typing import Optional

from config.auth import SessionContext
from controllers.base import LoadResult, ViewStateController
from models import CategoryRecord
from services.catalog_service import CatalogService
from services.errors import ApiClientError, ValidationError

logger = logging.getLogger(__name__)


class CategoryAdminController(ViewStateController):
    """Controller for the category management page."""

    state_key = "category_admin"

    def __init__(self, session: SessionContext, catalog_service: CatalogService, state=None):
        self.catalog_service = catalog_service
        super().__init__(session, state)

    def _defaults(self) -> dict:
        return {
            "categories": [],
            "form": CategoryRecord(active=True),
            "editing": False,
            "to_delete_id": None,
            "loaded": False,
        }

    @property
    def categories(self) -> list[CategoryRecord]:
        return self.state["categories"]

    @property
    def form(self) -> CategoryRecord:
        return self.state["form"]

    @property
    def editing(self) -> bool:
        return self.state["editing"]

    @property
    def to_delete_id(self) -> Optional[int]:
        return self.state["to_delete_id"]

    def is_loaded(self) -> bool:
        return self.state["loaded"]

    def reload(self) -> LoadResult:
        try:
            categories = self.catalog_service.admin_categories(self._require_token())
        except ApiClientError as e:
            text = self.report_error("Load failed", e)
            return LoadResult(success=False, items=self.categories, error=text)
        self.state["categories"] = categories
        self.state["loaded"] = True
        return LoadResult(success=True, items=categories)

    # ==========================================
    # Form
    # ==========================================

    def start_create(self):
        self.state["editing"] = False
        self.state["form"] = CategoryRecord(active=True)

    def start_edit(self, category: CategoryRecord):
        """Edit a copy, so the list isn't changed until the save succeeds."""
        self.state["editing"] = True
        self.state["form"] = CategoryRecord(
            id=category.id,
            name=category.name,
            active=category.active if category.active is not None else True,
            sort_order=category.sort_order,
        )

    def update_form(self, **fields):
        for name, value in fields.items():
            setattr(self.form, name, value)

    def save(self) -> bool:
        """Create or update the category in the form, then reload the list."""
        form = self.form
        if not (form.name or "").strip():
            self.warning("Name is required")
            return False
        try:
            token = self._require_token()
            if self.editing and form.id is None:
                raise ValidationError("The category being edited has no id.")
            form.name = form.name.strip()
            saved = self.catalog_service.save_category(form, token)
        except ApiClientError as e:
            self.report_error("Save failed", e)
            return False

        name = saved.name if saved and saved.name else form.name
        self.success(f"Saved category {name}")
        self.start_create()
        self.reload()
        return True

    # ==========================================
    # Delete
    # ==========================================

    def confirm_delete(self, category: CategoryRecord):
        self.state["to_delete_id"] = category.id

    def cancel_delete(self):
        self.state["to_delete_id"] = None

    def delete_selected(self) -> bool:
        category_id = self.to_delete_id
        if category_id is None:
            return False
        try:
            self.catalog_service.delete_category(category_id, self._require_token())
        except ApiClientError as e:
            self.report_error("Delete failed", e)
            return False
        finally:
            self.state["to_delete_id"] = None

        self.success(f"Deleted category #{category_id}")
        self.reload()
        return True
