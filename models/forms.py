"""
Form state for pages that edit data before sending it to the API.
"""

from dataclasses import dataclass, fields
from datetime import date
from typing import Optional


@dataclass
class AnimalForm:
    """Fields of the add/edit animal form. animal_id is None for a new animal."""
    animal_id: Optional[int] = None
    name: Optional[str] = None
    category_id: Optional[int] = None
    breed_id: Optional[int] = None
    gender: Optional[str] = None
    size: Optional[str] = None
    birthday: Optional[date] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    age_description: Optional[str] = None
    image: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.animal_id is None

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}


@dataclass
class RegistrationForm:
    """Fields of the sign-up form."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    phone_number: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name.strip()} {self.last_name.strip()}".strip()
