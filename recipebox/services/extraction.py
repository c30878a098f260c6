from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from recipebox.app.config import Settings, get_settings
from recipebox.services import prompt_builder
from recipebox.services.fetcher import DEFAULT_FETCH_TIMEOUT, fetch_page
from recipebox.services.mapper import map_recipe
from recipebox.services.normalizer import normalize_response
from recipebox.services.recipe_models import ExtractedRecipe
from recipebox.services.types import ByImage, ByIngredients, ByUrl, ExtractionRequest
from recipebox.services.xai_client import XaiClient

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str], str]


class RecipeExtractor:
    """Drives one extraction request through prompt, model call, parse and mapping.

    Holds no per-request state, so a single instance can serve concurrent calls.
    """

    def __init__(
        self,
        client: XaiClient,
        *,
        page_fetcher: Optional[PageFetcher] = None,
        page_fetch_timeout: float = DEFAULT_FETCH_TIMEOUT,
        page_max_chars: int = prompt_builder.DEFAULT_PAGE_MAX_CHARS,
        generation_temperature: float = prompt_builder.DEFAULT_GENERATION_TEMPERATURE,
        extraction_temperature: float = prompt_builder.DEFAULT_EXTRACTION_TEMPERATURE,
        image_max_tokens: Optional[int] = prompt_builder.DEFAULT_IMAGE_MAX_TOKENS,
    ) -> None:
        self._client = client
        self._page_fetcher = page_fetcher or (lambda url: fetch_page(url, timeout=page_fetch_timeout))
        self.page_max_chars = page_max_chars
        self.generation_temperature = generation_temperature
        self.extraction_temperature = extraction_temperature
        self.image_max_tokens = image_max_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecipeExtractor":
        client = XaiClient(
            api_key=settings.XAI_API_KEY.get_secret_value(),
            api_url=settings.XAI_API_URL,
            text_model=settings.XAI_TEXT_MODEL,
            vision_model=settings.XAI_VISION_MODEL,
            timeout=settings.XAI_TIMEOUT_SECONDS,
        )
        return cls(
            client,
            page_fetch_timeout=settings.PAGE_FETCH_TIMEOUT_SECONDS,
            page_max_chars=settings.PAGE_MAX_CHARS,
            generation_temperature=settings.GENERATION_TEMPERATURE,
            extraction_temperature=settings.EXTRACTION_TEMPERATURE,
            image_max_tokens=settings.IMAGE_MAX_TOKENS,
        )

    def _fetch_page_text(self, request: ExtractionRequest) -> Optional[str]:
        if not isinstance(request, ByUrl):
            return None
        logger.info("Fetching recipe page %s", request.url)
        return self._page_fetcher(request.url)

    def extract(self, request: ExtractionRequest) -> ExtractedRecipe:
        page_text = self._fetch_page_text(request)
        model_request = prompt_builder.build_model_request(
            request,
            page_text,
            page_max_chars=self.page_max_chars,
            generation_temperature=self.generation_temperature,
            extraction_temperature=self.extraction_temperature,
            image_max_tokens=self.image_max_tokens,
        )

        envelope = self._client.complete(model_request)
        parsed = normalize_response(envelope)
        recipe = map_recipe(parsed)

        logger.info(
            "Extracted recipe %r (%d ingredients, %d steps)",
            recipe.name,
            len(recipe.ingredients),
            len(recipe.instructions),
        )
        return recipe


def _default_extractor() -> RecipeExtractor:
    return RecipeExtractor.from_settings(get_settings())


def generate_recipe(
    ingredients: Iterable[str],
    restrictions: Iterable[str] = (),
    cuisine: Optional[str] = None,
    time_budget_minutes: int = 30,
    servings: int = 2,
    kid_friendly: bool = False,
    *,
    extractor: Optional[RecipeExtractor] = None,
) -> ExtractedRecipe:
    request = ByIngredients(
        ingredients=tuple(ingredients),
        restrictions=tuple(restrictions),
        cuisine=cuisine,
        time_budget_minutes=time_budget_minutes,
        servings=servings,
        kid_friendly=kid_friendly,
    )
    return (extractor or _default_extractor()).extract(request)


def extract_recipe_from_url(url: str, *, extractor: Optional[RecipeExtractor] = None) -> ExtractedRecipe:
    return (extractor or _default_extractor()).extract(ByUrl(url=url))


def extract_recipe_from_image(
    image_base64: str,
    media_type: str = "image/jpeg",
    *,
    extractor: Optional[RecipeExtractor] = None,
) -> ExtractedRecipe:
    request = ByImage(image_base64=image_base64, media_type=media_type)
    return (extractor or _default_extractor()).extract(request)
