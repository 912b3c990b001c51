#!/usr/bin/env python3
"""Command-line interface for the pantry checker."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pantry_checker.data_layer.kitchen_loader import Kitchen, KitchenLoader
from pantry_checker.data_layer.models import Ingredient, Pantry, Recipe
from pantry_checker.ingestion.ingredient_errors import (
    KitchenFileError,
    UnsupportedConversionError,
    ValidationFailureError,
)
from pantry_checker.output.formatters import (
    format_shopping_report,
    format_shopping_json_string,
)
from pantry_checker.planning.shopping_planner import ShoppingPlanner


def build_reference_kitchen() -> Kitchen:
    """Return the built-in pancake batter scenario (4 servings → 6)."""
    recipe = Recipe(
        base_servings=4,
        ingredients=[
            Ingredient("Flour", 500, "g"),
            Ingredient("Sugar", 200, "g"),
            Ingredient("Milk", 1, "l"),
            Ingredient("Eggs", 4, "pcs"),
        ],
    )
    pantry = Pantry(stock=[
        Ingredient("Flour", 1, "kg"),
        Ingredient("Sugar", 150, "g"),
        Ingredient("Milk", 500, "ml"),
        Ingredient("Eggs", 2, "pcs"),
    ])
    return Kitchen(recipe=recipe, pantry=pantry, target_servings=6)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scale a recipe and list what the pantry is short of"
    )
    parser.add_argument(
        "--kitchen",
        type=str,
        help="Path to kitchen YAML file (default: built-in reference scenario)"
    )
    parser.add_argument(
        "--servings",
        type=int,
        help="Target serving count (overrides the kitchen file's target_servings)"
    )
    parser.add_argument(
        "--output",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.kitchen:
            kitchen_path = Path(args.kitchen)
            if not kitchen_path.exists():
                print(f"Error: Kitchen file not found: {kitchen_path}", file=sys.stderr)
                return 1
            print(f"Loading kitchen from {kitchen_path}...", file=sys.stderr)
            kitchen = KitchenLoader(str(kitchen_path)).load()
        else:
            kitchen = build_reference_kitchen()
    except (KitchenFileError, ValidationFailureError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    target_servings = args.servings if args.servings is not None else kitchen.target_servings

    try:
        result = ShoppingPlanner().plan(kitchen.recipe, kitchen.pantry, target_servings)
    except UnsupportedConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 3

    if args.output == "json":
        print(format_shopping_json_string(result, indent=2))
    else:
        print(format_shopping_report(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
