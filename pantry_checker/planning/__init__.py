"""Shopping planning: scale a recipe, then check the pantry."""

from pantry_checker.planning.shopping_planner import ShoppingPlanner, ShoppingResult

__all__ = ["ShoppingPlanner", "ShoppingResult"]
