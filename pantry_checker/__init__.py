"""Recipe scaling and pantry shortage checking."""

from pantry_checker.data_layer.models import Ingredient, Recipe, Pantry
from pantry_checker.ingestion.ingredient_errors import (
    PantryCheckError,
    UnsupportedConversionError,
    ValidationFailureError,
)
from pantry_checker.planning.shopping_planner import ShoppingPlanner, ShoppingResult

__all__ = [
    "Ingredient",
    "Recipe",
    "Pantry",
    "PantryCheckError",
    "UnsupportedConversionError",
    "ValidationFailureError",
    "ShoppingPlanner",
    "ShoppingResult",
]
