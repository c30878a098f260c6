from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from recipebox.services.recipe_models import ExtractedRecipe

_DATA_URL = re.compile(r"^data:(?P<media_type>image/[A-Za-z0-9.+-]+);base64,")


class GenerateRecipeRequest(BaseModel):
    ingredients: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)
    cuisine: Optional[str] = None
    time: int = Field(default=30, ge=1, le=1440, description="Available time in minutes")
    servings: int = Field(default=2, ge=1, le=100)
    kidFriendly: bool = False


class ExtractFromUrlRequest(BaseModel):
    url: str = Field(..., min_length=1)

    @field_validator("url")
    @classmethod
    def _require_http(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return value


class ExtractFromImageRequest(BaseModel):
    imageBase64: str = Field(..., min_length=1)
    mediaType: str = Field(default="image/jpeg", pattern=r"^image/[A-Za-z0-9.+-]+$")

    @model_validator(mode="after")
    def _split_data_url(self) -> "ExtractFromImageRequest":
        # the browser FileReader hands us "data:image/png;base64,<payload>"
        value = self.imageBase64.strip()
        match = _DATA_URL.match(value)
        if match:
            self.mediaType = match.group("media_type")
            value = value[match.end():]
        if not value:
            raise ValueError("imageBase64 is empty")
        self.imageBase64 = value
        return self


class ExtractionResponse(BaseModel):
    recipe: ExtractedRecipe
