"""
Animal List Controller - the public animal listing with filters and sorting.

Filtering happens on the server (query parameters); sorting happens locally
so changing the sort order never triggers a request.
"""

import logging
from typing import Optional

from config.auth import SessionContext
from config.settings import get_settings
from controllers.base import LoadResult, ViewStateController
from models import AnimalFilters, AnimalRecord, CategoryRecord
from services.animal_service import AnimalService, resolve_image_url
from services.animal_sorting import ensure_age_descriptions, sort_animals
from services.catalog_service import CatalogService
from services.errors import ApiClientError

logger = logging.getLogger(__name__)


class AnimalListController(ViewStateController):
    """Controller for the Browse Animals page."""

    state_key = "animal_list"

    def __init__(
        self,
        session: SessionContext,
        animal_service: AnimalService,
        catalog_service: CatalogService,
        state=None,
        uploads_base_url: Optional[str] = None,
    ):
        self.animal_service = animal_service
        self.catalog_service = catalog_service
        if uploads_base_url is None:
            uploads_base_url = get_settings().uploads_base_url
        self.uploads_base_url = uploads_base_url.rstrip("/")
        super().__init__(session, state)

    def _defaults(self) -> dict:
        return {
            "filters": AnimalFilters(),
            "animals": [],
            "categories": [],
            "loaded": False,
        }

    # ==========================================
    # State
    # ==========================================

    @property
    def filters(self) -> AnimalFilters:
        return self.state["filters"]

    @property
    def animals(self) -> list[AnimalRecord]:
        return self.state["animals"]

    @property
    def categories(self) -> list[CategoryRecord]:
        return self.state["categories"]

    def is_loaded(self) -> bool:
        return self.state["loaded"]

    def set_query(self, q: Optional[str]):
        self.filters.q = q

    def set_category(self, category_id: Optional[int]):
        self.filters.category_id = category_id

    def set_gender(self, gender: Optional[str]):
        self.filters.gender = gender

    def set_size(self, size: Optional[str]):
        self.filters.size = size

    def set_age_group(self, age_group: Optional[str]):
        self.filters.age_group = age_group

    def set_only_available(self, only_available: bool):
        self.filters.only_available = bool(only_available)

    def set_sort(self, sort_by: str, sort_order: str):
        """Change the sort order and re-sort what is already loaded."""
        self.filters.sort_by = sort_by
        self.filters.sort_order = sort_order
        self.state["animals"] = sort_animals(self.animals, sort_by, sort_order)

    # ==========================================
    # Loading
    # ==========================================

    def load(self) -> LoadResult:
        """Fetch animals for the current filters, then sort them."""
        try:
            fetched = self.animal_service.list_animals(self.filters, self.session.current_token())
        except ApiClientError as e:
            text = self.report_error("Failed to load animals", e)
            return LoadResult(success=False, items=self.animals, error=text)

        ensure_age_descriptions(fetched)
        animals = sort_animals(fetched, self.filters.sort_by, self.filters.sort_order)
        self.state["animals"] = animals
        self.state["loaded"] = True
        return LoadResult(success=True, items=animals)

    def apply_filters(self) -> LoadResult:
        return self.load()

    def clear_filters(self) -> LoadResult:
        """Reset every filter and the sort order, then reload."""
        self.state["filters"] = AnimalFilters()
        return self.load()

    def load_categories(self) -> LoadResult:
        try:
            categories = self.catalog_service.list_categories(self.session.current_token())
        except ApiClientError as e:
            text = self.report_error("Failed to load categories", e)
            return LoadResult(success=False, items=self.categories, error=text)
        self.state["categories"] = categories
        return LoadResult(success=True, items=categories)

    # ==========================================
    # Display helpers
    # ==========================================

    def category_name(self, category_id: Optional[int]) -> str:
        if category_id is None:
            return ""
        for category in self.categories:
            if category.id == category_id:
                return category.name or ""
        return ""

    def resolve_image(self, path: Optional[str]) -> Optional[str]:
        return resolve_image_url(path, self.uploads_base_url)
