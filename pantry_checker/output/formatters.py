"""Formatters for pantry check output (text report and JSON)."""

import json
from typing import Any, Dict, Iterable, List

from pantry_checker.data_layer.models import Ingredient
from pantry_checker.planning.shopping_planner import ShoppingResult


NOTHING_MISSING_LINE = " - None, you have everything!"


def format_ingredient_string(ingredient: Ingredient) -> str:
    """Format an ingredient as a string (e.g., "1.5 l Milk").

    Args:
        ingredient: Ingredient object

    Returns:
        Quantity (at most two decimals), unit and name
    """
    return str(ingredient)


def format_ingredient_list(ingredients: Iterable[Ingredient]) -> List[str]:
    """Format ingredients as bullet lines (" - 750 g Flour")."""
    return [f" - {format_ingredient_string(ingredient)}" for ingredient in ingredients]


def format_shopping_report(result: ShoppingResult) -> str:
    """Format a ShoppingResult as the plain-text report.

    Args:
        result: ShoppingResult from ShoppingPlanner

    Returns:
        Scaled recipe section, blank line, then the shopping list section
    """
    lines = [f"Scaled recipe for {result.target_servings} servings:"]
    lines.extend(format_ingredient_list(result.scaled_ingredients))

    lines.append("")
    lines.append("Shopping List (Shortages):")
    if result.has_everything:
        lines.append(NOTHING_MISSING_LINE)
    else:
        lines.extend(format_ingredient_list(result.shortages))

    return "\n".join(lines)


def _ingredient_to_dict(ingredient: Ingredient) -> Dict[str, Any]:
    return {
        "name": ingredient.name,
        "quantity": ingredient.quantity,
        "unit": ingredient.unit,
    }


def format_shopping_json(result: ShoppingResult) -> Dict[str, Any]:
    """Format a ShoppingResult as a JSON-serializable dictionary.

    Args:
        result: ShoppingResult from ShoppingPlanner

    Returns:
        Dictionary with target servings, scaled ingredients, shortages
        and the has_everything flag
    """
    return {
        "target_servings": result.target_servings,
        "scaled_ingredients": [_ingredient_to_dict(i) for i in result.scaled_ingredients],
        "shortages": [_ingredient_to_dict(i) for i in result.shortages],
        "has_everything": result.has_everything,
    }


def format_shopping_json_string(result: ShoppingResult, indent: int = 2) -> str:
    """Format a ShoppingResult as a JSON string."""
    return json.dumps(format_shopping_json(result), indent=indent)
