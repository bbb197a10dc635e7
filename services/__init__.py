"""
Services layer - HTTP access to the HomeTail API, no Streamlit dependencies.
"""

from services.errors import (
    ApiClientError,
    ApiError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
    ValidationError,
)
from services.api_client import (
    ApiClient,
    ApiResponse,
    ContentKind,
    FilePart,
    MultipartBody,
    encode_query,
    get_api_client,
)
from services.auth_service import AuthService
from services.animal_service import AnimalService
from services.catalog_service import CatalogService
from services.adoption_service import AdoptionService
from services.animal_sorting import sort_animals, describe_age, age_in_days

__all__ = [
    # Errors
    "ApiClientError",
    "ApiError",
    "ConfigurationError",
    "ResponseFormatError",
    "TransportError",
    "ValidationError",
    # Client
    "ApiClient",
    "ApiResponse",
    "ContentKind",
    "FilePart",
    "MultipartBody",
    "encode_query",
    "get_api_client",
    # Services
    "AuthService",
    "AnimalService",
    "CatalogService",
    "AdoptionService",
    # Sorting
    "sort_animals",
    "describe_age",
    "age_in_days",
]
