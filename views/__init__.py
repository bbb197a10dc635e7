"""
Views layer - UI presentation components.
"""

from views.home_view import HomeView
from views.login_view import LoginView
from views.register_view import RegisterView
from views.animals_view import AnimalsView
from views.animal_detail_view import AnimalDetailView
from views.animal_edit_view import AnimalEditView
from views.my_animals_view import MyAnimalsView
from views.animal_requests_view import AnimalRequestsView
from views.my_requests_view import MyRequestsView
from views.category_admin_view import CategoryAdminView
from views.breed_admin_view import BreedAdminView

__all__ = [
    "HomeView",
    "LoginView",
    "RegisterView",
    "AnimalsView",
    "AnimalDetailView",
    "AnimalEditView",
    "MyAnimalsView",
    "AnimalRequestsView",
    "MyRequestsView",
    "CategoryAdminView",
    "BreedAdminView",
]
