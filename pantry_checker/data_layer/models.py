"""Data models for the pantry checker."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from pantry_checker.ingestion.ingredient_errors import ValidationFailureError
from pantry_checker.ingestion.units import (
    convert_quantity,
    format_quantity,
    normalize_unit,
)


@dataclass(frozen=True)
class Ingredient:
    """An amount of a named ingredient.

    The unit is normalized on construction ("Grams" → "g"), so two
    ingredients built from different spellings compare equal.
    """

    name: str  # Display name; matching against the pantry ignores case
    quantity: float  # Amount in `unit` (e.g., 500.0)
    unit: str  # Canonical unit ("g", "kg", "ml", "l", "pcs") or pass-through

    def __post_init__(self):
        object.__setattr__(self, "unit", normalize_unit(self.unit))

    def convert_to(self, target_unit: str) -> float:
        """Return the quantity expressed in target_unit.

        Raises:
            UnsupportedConversionError: If the units are not convertible
        """
        return convert_quantity(self.quantity, self.unit, target_unit)

    def scale(self, factor: float) -> "Ingredient":
        """Return a copy with the quantity multiplied by factor."""
        return Ingredient(name=self.name, quantity=self.quantity * factor, unit=self.unit)

    def __str__(self) -> str:
        return f"{format_quantity(self.quantity)} {self.unit} {self.name}"


@dataclass(frozen=True)
class Recipe:
    """Ingredient list for a base number of servings."""

    base_servings: int
    ingredients: Tuple[Ingredient, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.base_servings <= 0:
            raise ValidationFailureError(
                field="base_servings",
                value=self.base_servings,
                reason="Base servings must be positive"
            )
        object.__setattr__(self, "ingredients", tuple(self.ingredients))

    def scale_to(self, target_servings: int) -> List[Ingredient]:
        """Scale every ingredient to target_servings.

        Args:
            target_servings: Number of servings to cook for

        Returns:
            New list of ingredients in recipe order, each multiplied by
            target_servings / base_servings
        """
        factor = target_servings / self.base_servings
        return [ingredient.scale(factor) for ingredient in self.ingredients]


@dataclass(frozen=True)
class Pantry:
    """Ingredients currently in stock.

    Duplicate names are allowed; lookups only ever see the first entry
    for a given name.
    """

    stock: Tuple[Ingredient, ...] = field(default_factory=tuple)
    _by_name: Dict[str, Ingredient] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "stock", tuple(self.stock))

        # Lowered name → first stock entry; stock is frozen so this never goes stale
        by_name: Dict[str, Ingredient] = {}
        for item in self.stock:
            by_name.setdefault(item.name.lower(), item)
        object.__setattr__(self, "_by_name", by_name)

    def find(self, name: str) -> Optional[Ingredient]:
        """Get the first stock entry matching name (case-insensitive).

        Args:
            name: Ingredient name to search for

        Returns:
            Ingredient if found, None otherwise
        """
        return self._by_name.get(name.lower())

    def get_shortages(self, needed: Iterable[Ingredient]) -> List[Ingredient]:
        """Compute what is missing to cover the needed ingredients.

        For each needed ingredient, the first pantry entry with the same
        name is converted into the needed unit and compared. Items absent
        from the pantry are short by their full amount.

        Args:
            needed: Required ingredients (typically Recipe.scale_to output)

        Returns:
            Shortage ingredients in the order of `needed`, each carrying the
            deficit in the required unit. Empty if everything is covered.

        Raises:
            UnsupportedConversionError: If a pantry entry's unit cannot be
                converted to the required unit. The whole computation aborts.
        """
        shortages: List[Ingredient] = []

        for required in needed:
            pantry_item = self._by_name.get(required.name.lower())

            if pantry_item is None:
                shortages.append(required)
                continue

            available = pantry_item.convert_to(required.unit)
            if available < required.quantity:
                shortages.append(Ingredient(
                    name=required.name,
                    quantity=required.quantity - available,
                    unit=required.unit,
                ))

        return shortages
