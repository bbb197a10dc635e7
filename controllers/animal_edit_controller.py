"""
Animal Edit Controller - add a new animal or edit an existing one.

The form keeps whatever the user typed across reruns and failed submits;
it's only cleared after a successful save.
"""

import logging
from typing import Optional

from config.auth import SessionContext
from controllers.base import NOT_LOADED, LoadResult, Page, Severity, ViewStateController
from models import AnimalForm, BreedRecord, CategoryRecord, normalize_enum
from services.animal_service import AnimalService
from services.api_client import FilePart
from services.catalog_service import CatalogService
from services.errors import ApiClientError, ValidationError

logger = logging.getLogger(__name__)


def _match_by_name(records: list, name: Optional[str]) -> Optional[int]:
    """Id of the first record whose name equals `name`, ignoring case."""
    if not name:
        return None
    wanted = name.strip().casefold()
    for record in records:
        if (record.name or "").strip().casefold() == wanted:
            return record.id
    return None


class AnimalEditController(ViewStateController):
    """Controller for the Add/Edit Animal page."""

    state_key = "animal_edit"

    def __init__(
        self,
        session: SessionContext,
        animal_service: AnimalService,
        catalog_service: CatalogService,
        state=None,
    ):
        self.animal_service = animal_service
        self.catalog_service = catalog_service
        super().__init__(session, state)

    def _defaults(self) -> dict:
        return {
            "form": AnimalForm(),
            "categories": [],
            "breeds": [],
            "loaded_for": NOT_LOADED,
            "load_failed": False,
        }

    @property
    def form(self) -> AnimalForm:
        return self.state["form"]

    @property
    def categories(self) -> list[CategoryRecord]:
        return self.state["categories"]

    @property
    def breeds(self) -> list[BreedRecord]:
        return self.state["breeds"]

    @property
    def load_failed(self) -> bool:
        """True when the animal being edited could not be fetched."""
        return self.state["load_failed"]

    # ==========================================
    # Loading
    # ==========================================

    def ensure_loaded(self, animal_id: Optional[int] = None):
        """Load the form once per target animal, so reruns keep user edits."""
        if self.state["loaded_for"] != animal_id:
            self.load_form(animal_id)

    def load_form(self, animal_id: Optional[int] = None):
        """Load categories and, for an edit, the animal itself."""
        self.state["loaded_for"] = animal_id
        self.state["form"] = AnimalForm(animal_id=animal_id)
        self.state["breeds"] = []
        self.state["load_failed"] = False
        self.load_categories()
        if animal_id is not None:
            self.state["load_failed"] = not self.load_for_edit(animal_id)

    def load_categories(self) -> LoadResult:
        try:
            categories = self.catalog_service.list_categories(self.session.current_token())
        except ApiClientError as e:
            text = self.report_error("Failed to load categories", e)
            return LoadResult(success=False, items=self.categories, error=text)
        self.state["categories"] = categories
        return LoadResult(success=True, items=categories)

    def load_breeds(self, category_id: Optional[int]) -> LoadResult:
        if category_id is None:
            self.state["breeds"] = []
            return LoadResult(success=True)
        try:
            breeds = self.catalog_service.list_breeds(category_id, self.session.current_token())
        except ApiClientError as e:
            text = self.report_error("Failed to load breeds", e)
            return LoadResult(success=False, items=self.breeds, error=text)
        self.state["breeds"] = breeds
        return LoadResult(success=True, items=breeds)

    def load_for_edit(self, animal_id: int) -> bool:
        """
        Fill the form from an existing animal.

        Category and breed ids win; their names are only used to look the id
        up when the backend didn't send one.
        """
        try:
            animal = self.animal_service.get_animal(animal_id, self.session.current_token())
        except ApiClientError as e:
            self.report_error("Error loading animal", e)
            return False

        category_id = animal.category_id
        if category_id is None:
            category_id = _match_by_name(self.categories, animal.category_name or animal.category)
        self.load_breeds(category_id)

        breed_id = animal.breed_id
        if breed_id is None and self.breeds:
            breed_id = _match_by_name(self.breeds, animal.display_breed)

        self.state["form"] = AnimalForm(
            animal_id=animal_id,
            name=animal.name,
            category_id=category_id,
            breed_id=breed_id,
            gender=normalize_enum(animal.gender),
            size=normalize_enum(animal.size),
            birthday=animal.birthday,
            short_description=animal.short_description,
            long_description=animal.long_description,
            age_description=animal.age_description,
            image=animal.image,
        )
        return True

    # ==========================================
    # Form updates
    # ==========================================

    def on_category_change(self, category_id: Optional[int]):
        """Switch category: the old breed no longer applies."""
        self.form.category_id = category_id
        self.form.breed_id = None
        self.state["breeds"] = []
        self.load_breeds(category_id)

    def update_form(self, **fields):
        """Set form fields by name. A category change also resets the breed."""
        unknown = set(fields) - AnimalForm.field_names()
        if unknown:
            raise TypeError(f"Unknown animal form fields: {', '.join(sorted(unknown))}")
        if "category_id" in fields and fields["category_id"] != self.form.category_id:
            self.on_category_change(fields.pop("category_id"))
        for name, value in fields.items():
            setattr(self.form, name, value)

    # ==========================================
    # Submit
    # ==========================================

    def build_payload(self) -> dict:
        """The JSON part of the multipart request."""
        form = self.form
        payload = {}
        if not form.is_new:
            payload["id"] = form.animal_id
        payload.update({
            "name": form.name.strip() if form.name else form.name,
            "categoryId": form.category_id,
            "breedId": form.breed_id,
            "gender": normalize_enum(form.gender),
            "size": normalize_enum(form.size),
        })
        if form.birthday is not None:
            payload["birthday"] = form.birthday.isoformat()
        payload.update({
            "shortDescription": form.short_description,
            "longDescription": form.long_description,
            "ownerId": self.session.user_id,
        })
        return payload

    def _check_target(self):
        """Refuse to save a form that doesn't belong to the animal last loaded."""
        if self.load_failed:
            raise ValidationError("The animal could not be loaded, so it can't be saved. Please reload the page.")
        loaded_for = self.state["loaded_for"]
        if loaded_for != NOT_LOADED and self.form.animal_id != loaded_for:
            raise ValidationError("This form belongs to a different animal. Please reload the page.")

    def submit(self, image: Optional[FilePart] = None) -> Optional[str]:
        """
        Save the animal.

        Returns:
            The My Animals page on success, None to stay on the form
        """
        is_new = self.form.is_new
        try:
            token = self._require_token()
            self._check_target()
            if not (self.form.name or "").strip():
                raise ValidationError("Name is required.")
            self.animal_service.save_animal(self.build_payload(), token, image)
        except ApiClientError as e:
            self.report_error("Error saving animal", e)
            return None

        self.reset_state()
        self.flash(
            Severity.SUCCESS,
            f"{'Animal added' if is_new else 'Animal updated'} successfully!",
        )
        return Page.MY_ANIMALS
