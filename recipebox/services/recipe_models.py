from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


def _whole_number(value: Any) -> Any:
    # bool is an int subclass and JSON strings are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a whole number, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected a whole number, got {value}")
        return int(value)
    return value


def _numeric_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class Ingredient(_WireModel):
    item: str
    amount: str = ""
    unit: str = ""

    @field_validator("amount", "unit", mode="before")
    @classmethod
    def _coerce_quantity(cls, value: Any) -> Any:
        if value is None:
            return ""
        return _numeric_to_str(value)


class Nutrition(_WireModel):
    calories: float
    protein: str
    carbs: str
    fat: str

    @field_validator("protein", "carbs", "fat", mode="before")
    @classmethod
    def _coerce_macro(cls, value: Any) -> Any:
        return _numeric_to_str(value)


class ExtractedRecipe(_WireModel):
    """Structured recipe produced by the extraction pipeline.

    Immutable. Identity, timestamps and flags are assigned downstream
    (see ``recipebox.services.records``).
    """

    name: str
    description: str = ""
    cuisine: str = ""
    prep_time_minutes: int = Field(alias="prepTime", ge=0)
    cook_time_minutes: int = Field(alias="cookTime", ge=0)
    servings: int = Field(ge=1)
    difficulty: Difficulty
    dietary_tags: tuple[str, ...] = Field(default=(), alias="dietaryTags")
    ingredients: tuple[Ingredient, ...]
    instructions: tuple[str, ...]
    tips: tuple[str, ...] = ()
    nutrition: Optional[Nutrition] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")

    @field_validator("prep_time_minutes", "cook_time_minutes", "servings", mode="before")
    @classmethod
    def _require_whole_number(cls, value: Any) -> Any:
        return _whole_number(value)

    @field_validator("description", "cuisine", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("dietary_tags", "tips", mode="before")
    @classmethod
    def _none_to_empty_sequence(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def total_time_minutes(self) -> int:
        return self.prep_time_minutes + self.cook_time_minutes

    def to_wire(self) -> dict[str, Any]:
        """Dump with the camelCase keys the model and the frontend use."""
        return self.model_dump(mode="json", by_alias=True)
