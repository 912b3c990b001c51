"""FastAPI server for the pantry checker."""

from typing import Any, Dict, List

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pantry_checker.data_layer.models import Ingredient, Pantry, Recipe
from pantry_checker.ingestion.ingredient_errors import PantryCheckError
from pantry_checker.output.formatters import format_shopping_json
from pantry_checker.planning.shopping_planner import ShoppingPlanner


app = FastAPI(title="Pantry Checker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Local development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class IngredientModel(BaseModel):
    name: str
    quantity: float
    unit: str


class RecipeModel(BaseModel):
    base_servings: int
    ingredients: List[IngredientModel] = Field(default_factory=list)


class ShoppingListRequest(BaseModel):
    target_servings: int
    recipe: RecipeModel
    pantry: List[IngredientModel] = Field(default_factory=list)


def _to_ingredients(items: List[IngredientModel]) -> List[Ingredient]:
    return [Ingredient(name=i.name, quantity=i.quantity, unit=i.unit) for i in items]


@app.post("/api/shopping-list")
def shopping_list(request: ShoppingListRequest) -> Dict[str, Any]:
    try:
        recipe = Recipe(
            base_servings=request.recipe.base_servings,
            ingredients=_to_ingredients(request.recipe.ingredients),
        )
        pantry = Pantry(stock=_to_ingredients(request.pantry))

        result = ShoppingPlanner().plan(recipe, pantry, request.target_servings)
        return format_shopping_json(result)
    except PantryCheckError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
