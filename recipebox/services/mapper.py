from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from recipebox.services.errors import RecipeValidationError
from recipebox.services.recipe_models import ExtractedRecipe

logger = logging.getLogger(__name__)


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def _describe(error: ValidationError) -> tuple[str, list[str]]:
    missing: list[str] = []
    invalid: list[str] = []
    for item in error.errors():
        name = _field_name(item.get("loc", ()))
        if item.get("type") == "missing":
            missing.append(name)
        else:
            invalid.append(name)

    parts = []
    if missing:
        parts.append(f"missing required field(s): {', '.join(missing)}")
    if invalid:
        parts.append(f"invalid field(s): {', '.join(invalid)}")
    return "Recipe validation failed: " + "; ".join(parts), missing + invalid


def map_recipe(data: Any) -> ExtractedRecipe:
    """Validate parsed model output into an ``ExtractedRecipe``.

    Unknown keys are ignored. Required fields are never defaulted.
    """
    if not isinstance(data, dict):
        raise RecipeValidationError(
            f"Recipe validation failed: expected a JSON object, got {type(data).__name__}",
            fields=["<root>"],
        )

    try:
        return ExtractedRecipe.model_validate(data)
    except ValidationError as error:
        message, fields = _describe(error)
        logger.warning(message)
        raise RecipeValidationError(message, fields=fields) from error
