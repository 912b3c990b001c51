"""Output formatting for pantry checks."""

from pantry_checker.output.formatters import (
    format_ingredient_string,
    format_ingredient_list,
    format_shopping_report,
    format_shopping_json,
    format_shopping_json_string,
)

__all__ = [
    "format_ingredient_string",
    "format_ingredient_list",
    "format_shopping_report",
    "format_shopping_json",
    "format_shopping_json_string",
]
