# recipebox/services/records.py
"""
Row shape handed to the persistence layer after a successful extraction.
Nothing here talks to the store.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from recipebox.services.recipe_models import Difficulty, ExtractedRecipe, Ingredient, Nutrition


class RecipeRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    owner_id: str
    name: str
    description: str
    cuisine: str
    prepTime: int
    cookTime: int
    servings: int
    difficulty: Difficulty
    dietaryTags: list[str] = Field(default_factory=list)
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    nutrition: Optional[Nutrition] = None
    imageUrl: Optional[str] = None
    sourceUrl: Optional[str] = None
    isFavorite: bool = False
    isAiGenerated: bool = True
    notes: str = ""
    category: str = ""
    createdAt: datetime
    updatedAt: datetime


def build_recipe_record(
    recipe: ExtractedRecipe,
    owner_id: str,
    *,
    category: str = "",
    notes: str = "",
    now: Optional[datetime] = None,
) -> RecipeRecord:
    """Attach identity, ownership, flags and timestamps to an extracted recipe."""
    timestamp = now or datetime.now(timezone.utc)
    return RecipeRecord(
        owner_id=owner_id,
        name=recipe.name,
        description=recipe.description,
        cuisine=recipe.cuisine,
        prepTime=recipe.prep_time_minutes,
        cookTime=recipe.cook_time_minutes,
        servings=recipe.servings,
        difficulty=recipe.difficulty,
        dietaryTags=list(recipe.dietary_tags),
        ingredients=list(recipe.ingredients),
        instructions=list(recipe.instructions),
        tips=list(recipe.tips),
        nutrition=recipe.nutrition,
        imageUrl=recipe.image_url,
        sourceUrl=recipe.source_url,
        isFavorite=False,
        isAiGenerated=True,
        notes=notes,
        category=category,
        createdAt=timestamp,
        updatedAt=timestamp,
    )
