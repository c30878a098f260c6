# recipebox/app/routers/extraction.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.concurrency import run_in_threadpool

from recipebox.app.deps import get_extractor
from recipebox.app.schemas.extraction import (
    ExtractFromImageRequest,
    ExtractFromUrlRequest,
    ExtractionResponse,
    GenerateRecipeRequest,
)
from recipebox.services.errors import ConfigurationError, ServiceError
from recipebox.services.extraction import RecipeExtractor
from recipebox.services.types import ByImage, ByIngredients, ByUrl, ExtractionRequest

log = logging.getLogger("extraction")
router = APIRouter(prefix="/recipes", tags=["extraction"])

GENERATE_FAILED = "Failed to generate recipe"
EXTRACT_FAILED = "Failed to extract recipe"
EXTRACT_IMAGE_FAILED = "Failed to extract recipe from image"


async def _run(extractor: RecipeExtractor, request: ExtractionRequest, failure: str) -> ExtractionResponse:
    try:
        recipe = await run_in_threadpool(extractor.extract, request)
    except ConfigurationError as exc:
        log.error("Extraction not configured: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI service not configured",
        ) from exc
    except ServiceError as exc:
        log.warning("%s (%s): %s", failure, type(exc).__name__, exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=failure) from exc
    return ExtractionResponse(recipe=recipe)


@router.post("/generate", response_model=ExtractionResponse)
async def generate(
    payload: GenerateRecipeRequest,
    extractor: RecipeExtractor = Depends(get_extractor),
) -> ExtractionResponse:
    request = ByIngredients(
        ingredients=tuple(payload.ingredients),
        restrictions=tuple(payload.restrictions),
        cuisine=payload.cuisine,
        time_budget_minutes=payload.time,
        servings=payload.servings,
        kid_friendly=payload.kidFriendly,
    )
    return await _run(extractor, request, GENERATE_FAILED)


@router.post("/extract/url", response_model=ExtractionResponse)
async def extract_from_url(
    payload: ExtractFromUrlRequest,
    extractor: RecipeExtractor = Depends(get_extractor),
) -> ExtractionResponse:
    return await _run(extractor, ByUrl(url=payload.url), EXTRACT_FAILED)


@router.post("/extract/image", response_model=ExtractionResponse)
async def extract_from_image(
    payload: ExtractFromImageRequest,
    extractor: RecipeExtractor = Depends(get_extractor),
) -> ExtractionResponse:
    request = ByImage(image_base64=payload.imageBase64, media_type=payload.mediaType)
    return await _run(extractor, request, EXTRACT_IMAGE_FAILED)
