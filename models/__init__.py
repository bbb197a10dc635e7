"""
Models layer - transfer records and UI state shapes. No I/O here.
"""

from models.entities import (
    TransferRecord,
    UserRecord,
    LoginResponse,
    CategoryRecord,
    BreedRecord,
    AnimalRecord,
    AdoptionRequestRecord,
)
from models.filters import AnimalFilters, SortKey, SortDirection, normalize_enum
from models.forms import AnimalForm, RegistrationForm
from models.workflow import RequestStatus, can_transition, is_actionable

__all__ = [
    # Records
    "TransferRecord",
    "UserRecord",
    "LoginResponse",
    "CategoryRecord",
    "BreedRecord",
    "AnimalRecord",
    "AdoptionRequestRecord",
    # Filters
    "AnimalFilters",
    "SortKey",
    "SortDirection",
    "normalize_enum",
    # Forms
    "AnimalForm",
    "RegistrationForm",
    # Workflow
    "RequestStatus",
    "can_transition",
    "is_actionable",
]
