"""
Filter and sort state for the animal listing page, plus the enum-like
option lists shared by the listing and edit forms.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Display label -> API value, in the order shown in select boxes
GENDER_OPTIONS = {
    "Male": "MALE",
    "Female": "FEMALE",
    "Unknown": "UNKNOWN",
}

SIZE_OPTIONS = {
    "Small": "SMALL",
    "Medium": "MEDIUM",
    "Large": "LARGE",
    "Extra Large": "EXTRA_LARGE",
}

AGE_GROUP_OPTIONS = {
    "Baby": "BABY",
    "Young": "YOUNG",
    "Adult": "ADULT",
    "Senior": "SENIOR",
}


class SortKey(str, Enum):
    NAME = "name"
    CATEGORY = "category"
    AGE = "age"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


SORT_KEY_LABELS = {
    SortKey.NAME.value: "Name",
    SortKey.CATEGORY.value: "Category",
    SortKey.AGE.value: "Age",
}

SORT_DIRECTION_LABELS = {
    SortDirection.ASC.value: "Ascending",
    SortDirection.DESC.value: "Descending",
}


def normalize_enum(value: Optional[str]) -> Optional[str]:
    """
    Normalize an enum-like string to its API form ("extra large" -> "EXTRA_LARGE").

    Client-side convenience only; the backend still validates the value.
    """
    if value is None:
        return None
    return value.strip().replace(" ", "_").upper()


def label_for(options: dict[str, str], value: Optional[str]) -> str:
    """Reverse lookup of a display label, falling back to the raw value."""
    if not value:
        return ""
    for label, api_value in options.items():
        if api_value == normalize_enum(value):
            return label
    return value


def _is_set(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


@dataclass
class AnimalFilters:
    """
    Filters and sort order of the animal listing.

    The same field values always produce the same query parameters, in the
    same order, so a repeated load issues an identical request.
    """
    q: Optional[str] = None
    category_id: Optional[int] = None
    gender: Optional[str] = None
    size: Optional[str] = None
    age_group: Optional[str] = None
    only_available: bool = False
    sort_by: str = SortKey.NAME.value
    sort_order: str = SortDirection.ASC.value

    def to_query_params(self) -> list[tuple[str, str]]:
        """
        Query parameters for GET /animals.

        Only non-default fields are included. Sorting is applied locally and
        never sent.
        """
        params: list[tuple[str, str]] = []
        if _is_set(self.q):
            params.append(("q", self.q))
        if self.category_id is not None:
            params.append(("categoryId", str(self.category_id)))
        if _is_set(self.gender):
            params.append(("gender", self.gender))
        if _is_set(self.size):
            params.append(("animalSize", self.size))
        if _is_set(self.age_group):
            params.append(("ageGroup", self.age_group))
        if self.only_available:
            params.append(("adopted", "false"))
        return params

    def is_default(self) -> bool:
        """True when nothing differs from a freshly cleared filter."""
        return self == AnimalFilters()
