"""
Controllers layer - orchestration and session state management.
"""

from controllers.base import ViewStateController, LoadResult, Message, Severity, Page
from controllers.auth_controller import AuthController
from controllers.animal_list_controller import AnimalListController
from controllers.animal_edit_controller import AnimalEditController
from controllers.animal_detail_controller import AnimalDetailController
from controllers.my_animals_controller import MyAnimalsController
from controllers.animal_requests_controller import AnimalRequestsController
from controllers.my_requests_controller import MyRequestsController
from controllers.category_admin_controller import CategoryAdminController
from controllers.breed_admin_controller import BreedAdminController

__all__ = [
    # Base
    "ViewStateController",
    "LoadResult",
    "Message",
    "Severity",
    "Page",
    # Pages
    "AuthController",
    "AnimalListController",
    "AnimalEditController",
    "AnimalDetailController",
    "MyAnimalsController",
    "AnimalRequestsController",
    "MyRequestsController",
    "CategoryAdminController",
    "BreedAdminController",
]
