"""
Transfer Records - Pydantic models mirroring the remote API resources.

These records exist only at the HTTP boundary: a response body is decoded
into a record, a form is encoded from one, and the record is thrown away
when the page ends.

Wire conventions:
- Field names are camelCase on the wire and snake_case in Python
- Every field is nullable; unknown fields are ignored so newer backends
  don't break older front-ends
- Dates travel as "yyyy-MM-dd" strings, never as timestamps

Resources:
    UserRecord
    CategoryRecord ──< BreedRecord
    AnimalRecord ──> CategoryRecord, BreedRecord, owner UserRecord
    AdoptionRequestRecord ──> AnimalRecord, requester UserRecord
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TransferRecord(BaseModel):
    """Base record with camelCase aliases and forward-compatible decoding."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_payload(cls, data: Any) -> "TransferRecord":
        """Build a record from an already-decoded JSON value."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, json_str: str) -> "TransferRecord":
        """Parse a record from a JSON response body."""
        return cls.model_validate_json(json_str)

    def to_payload(self) -> dict:
        """JSON-ready dict using wire names, with unset (None) fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_json(self) -> str:
        """Serialize to a JSON request body."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ============================================
# Users
# ============================================

class UserRecord(TransferRecord):
    """
    A registered user as returned by the auth endpoints.

    The role is a free-form string ("ADMIN", "ROLE_USER", ...); see
    SessionContext.has_role for how it's compared.
    """
    id: Optional[int] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[str] = None


class LoginResponse(TransferRecord):
    """Body of a successful POST /auth/login."""
    token: Optional[str] = None
    user: Optional[UserRecord] = None


# ============================================
# Catalog
# ============================================

class CategoryRecord(TransferRecord):
    """
    Animal category (Dogs, Cats, ...).

    Inactive categories are hidden from selection lists but kept for
    existing animals.
    """
    id: Optional[int] = None
    name: Optional[str] = None
    active: Optional[bool] = True
    sort_order: Optional[int] = None


class BreedRecord(TransferRecord):
    """Breed within a category. Lower sort_order values are listed first."""
    id: Optional[int] = None
    name: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    active: Optional[bool] = True
    sort_order: Optional[int] = None


# ============================================
# Animals
# ============================================

class AnimalRecord(TransferRecord):
    """
    An animal listed for adoption.

    The backend is inconsistent about how it names the category and breed,
    so the record carries every variant it may send:
    - category / category_name: display name of the category
    - breed_name, and the legacy breed field
    Ids win over names; names are only used to resolve a missing id.
    """
    id: Optional[int] = None
    name: Optional[str] = None

    category_id: Optional[int] = None
    category: Optional[str] = None
    category_name: Optional[str] = None

    breed_id: Optional[int] = None
    breed_name: Optional[str] = None
    breed: Optional[str] = None

    gender: Optional[str] = None
    size: Optional[str] = None

    short_description: Optional[str] = None
    long_description: Optional[str] = None

    adopted: Optional[bool] = False
    image: Optional[str] = None

    owner_id: Optional[int] = None
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    owner_phone: Optional[str] = None

    birthday: Optional[date] = Field(default=None, description="yyyy-MM-dd")
    age_description: Optional[str] = None

    @property
    def display_category(self) -> Optional[str]:
        """Category name, whichever field the backend filled."""
        return self.category or self.category_name

    @property
    def display_breed(self) -> Optional[str]:
        """Breed name, preferring the current field over the legacy one."""
        return self.breed_name or self.breed


# ============================================
# Adoption Requests
# ============================================

class AdoptionRequestRecord(TransferRecord):
    """
    A user's request to adopt an animal.

    Status values are the names in models.workflow.RequestStatus.
    created_at is kept as the raw string the backend sends.
    """
    id: Optional[int] = None
    animal_id: Optional[int] = None
    animal_name: Optional[str] = None
    requester_id: Optional[int] = None
    requester_name: Optional[str] = None
    requester_email: Optional[str] = None
    status: Optional[str] = None
    note: Optional[str] = None
    created_at: Optional[str] = None
