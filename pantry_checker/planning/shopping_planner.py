"""Shopping planner: scale a recipe and check it against the pantry."""

import logging
from dataclasses import dataclass, field
from typing import List

from pantry_checker.data_layer.models import Ingredient, Pantry, Recipe


logger = logging.getLogger(__name__)


@dataclass
class ShoppingResult:
    """Outcome of a pantry check for one recipe.

    Attributes:
        target_servings: Servings the recipe was scaled to
        scaled_ingredients: Recipe ingredients for target_servings
        shortages: What must be bought (deficits in the recipe's units)
    """
    target_servings: int
    scaled_ingredients: List[Ingredient] = field(default_factory=list)
    shortages: List[Ingredient] = field(default_factory=list)

    @property
    def has_everything(self) -> bool:
        return not self.shortages


class ShoppingPlanner:
    """Runs the scale → shortage pipeline.

    Usage:
        planner = ShoppingPlanner()
        result = planner.plan(recipe, pantry, target_servings=6)
        for item in result.shortages:
            print(item)
    """

    def plan(self, recipe: Recipe, pantry: Pantry, target_servings: int) -> ShoppingResult:
        """Scale recipe to target_servings and compute pantry shortages.

        Raises:
            UnsupportedConversionError: If a pantry unit cannot be converted
                to the recipe's unit for the same ingredient
        """
        logger.debug(
            "Scaling recipe from %d to %d servings (factor %.4f)",
            recipe.base_servings,
            target_servings,
            target_servings / recipe.base_servings,
        )
        scaled = recipe.scale_to(target_servings)

        shortages = pantry.get_shortages(scaled)
        logger.debug(
            "Found %d shortage(s) across %d ingredient(s)",
            len(shortages),
            len(scaled),
        )

        return ShoppingResult(
            target_servings=target_servings,
            scaled_ingredients=scaled,
            shortages=shortages,
        )
