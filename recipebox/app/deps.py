# recipebox/app/deps.py
from __future__ import annotations

from fastapi import Depends, HTTPException, status

from recipebox.app.config import Settings, get_settings
from recipebox.services.errors import ConfigurationError
from recipebox.services.extraction import RecipeExtractor

_extractor: RecipeExtractor | None = None


def get_extractor(settings: Settings = Depends(get_settings)) -> RecipeExtractor:
    global _extractor
    if _extractor is None:
        try:
            _extractor = RecipeExtractor.from_settings(settings)
        except ConfigurationError as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="AI service not configured",
            ) from exc
    return _extractor
