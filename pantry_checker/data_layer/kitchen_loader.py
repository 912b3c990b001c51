"""Kitchen loader for reading a recipe and pantry definition from YAML."""
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

from pantry_checker.data_layer.models import Ingredient, Pantry, Recipe
from pantry_checker.ingestion.ingredient_errors import KitchenFileError


@dataclass
class Kitchen:
    """A recipe, the pantry to check it against, and how many to cook for."""

    recipe: Recipe
    pantry: Pantry
    target_servings: int


class KitchenLoader:
    """Loader for kitchen definitions from YAML.

    Expected layout:

        target_servings: 6
        recipe:
          base_servings: 4
          ingredients:
            - {name: Flour, quantity: 500, unit: g}
        pantry:
          - {name: Flour, quantity: 1, unit: kg}
    """

    def __init__(self, yaml_path: str):
        """Initialize kitchen loader from YAML file.

        Args:
            yaml_path: Path to YAML file containing the kitchen definition
        """
        self.yaml_path = Path(yaml_path)

    def load(self) -> Kitchen:
        """Load the kitchen definition from the YAML file.

        Returns:
            Kitchen object

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            KitchenFileError: If the file is not valid YAML, or required
                sections or fields are missing or malformed
            ValidationFailureError: If base servings is not positive
        """
        with open(self.yaml_path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise self._error(f"not valid YAML ({e})") from e

        if not isinstance(data, dict):
            raise self._error("top level must be a mapping")

        recipe_data = data.get("recipe")
        if not isinstance(recipe_data, dict):
            raise self._error("missing 'recipe' section")
        if "base_servings" not in recipe_data:
            raise self._error("recipe is missing 'base_servings'")

        pantry_data = data.get("pantry", [])
        if not isinstance(pantry_data, list):
            raise self._error("'pantry' must be a list of ingredients")

        recipe = Recipe(
            base_servings=self._whole_number(recipe_data["base_servings"], "base_servings"),
            ingredients=self._parse_ingredients(recipe_data.get("ingredients", []), "recipe"),
        )
        pantry = Pantry(stock=self._parse_ingredients(pantry_data, "pantry"))

        # Cook for the recipe's own serving count unless told otherwise
        target_servings = self._whole_number(
            data.get("target_servings", recipe.base_servings), "target_servings"
        )

        return Kitchen(recipe=recipe, pantry=pantry, target_servings=target_servings)

    def _parse_ingredients(self, items: Any, section: str) -> List[Ingredient]:
        """Parse a list of {name, quantity, unit} mappings.

        Args:
            items: Raw YAML list
            section: Section name used in error messages

        Returns:
            List of Ingredient objects
        """
        if not isinstance(items, list):
            raise self._error(f"'{section}' ingredients must be a list")

        ingredients = []
        for position, item in enumerate(items, 1):
            if not isinstance(item, dict):
                raise self._error(f"{section} entry {position} must be a mapping")
            missing = [key for key in ("name", "quantity", "unit") if key not in item]
            if missing:
                raise self._error(
                    f"{section} entry {position} is missing {', '.join(missing)}"
                )
            ingredients.append(Ingredient(
                name=str(item["name"]),
                quantity=self._quantity(item["quantity"], f"{section} entry {position}"),
                unit=str(item["unit"]),
            ))
        return ingredients

    def _error(self, reason: str) -> KitchenFileError:
        return KitchenFileError(path=str(self.yaml_path), reason=reason)

    def _quantity(self, value: Any, where: str) -> float:
        if isinstance(value, bool):
            raise self._error(f"{where} quantity must be a number (got {value!r})")
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise self._error(f"{where} quantity must be a number (got {value!r})") from e

    def _whole_number(self, value: Any, key: str) -> int:
        """Convert a serving count, rejecting fractions and non-numbers.

        Args:
            value: Raw YAML value (2, 2.0 and "2" are accepted)
            key: Field name used in error messages

        Returns:
            The value as an int
        """
        if isinstance(value, bool):
            raise self._error(f"'{key}' must be a whole number (got {value!r})")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise self._error(f"'{key}' must be a whole number (got {value!r})") from e
        if not number.is_integer():
            raise self._error(f"'{key}' must be a whole number (got {value!r})")
        return int(number)
