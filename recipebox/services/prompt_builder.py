from __future__ import annotations

import json

from recipebox.services.types import ByImage, ByIngredients, ByUrl, ExtractionRequest, ModelRequest

DEFAULT_PAGE_MAX_CHARS = 15000
DEFAULT_GENERATION_TEMPERATURE = 0.7
DEFAULT_EXTRACTION_TEMPERATURE = 0.3
DEFAULT_IMAGE_MAX_TOKENS = 4096

SCHEMA_FIELDS = (
    "name",
    "description",
    "cuisine",
    "prepTime",
    "cookTime",
    "servings",
    "difficulty",
    "dietaryTags",
    "ingredients",
    "instructions",
    "tips",
    "nutrition",
    "imageUrl",
    "sourceUrl",
)

GENERATE_SYSTEM_PROMPT = "You are a helpful recipe assistant. Always respond with valid JSON only."
URL_SYSTEM_PROMPT = "You are a recipe extraction assistant. Extract recipe details and return valid JSON only."
IMAGE_SYSTEM_PROMPT = (
    "You are a recipe extraction assistant. Extract recipe details from images and return valid JSON only."
)

_RECIPE_SCHEMA_TEMPLATE = """{{
  "name": "Recipe Name",
  "description": "Brief description",
  "cuisine": "Cuisine type",
  "prepTime": number,
  "cookTime": number,
  "servings": number,
  "difficulty": "Easy" | "Medium" | "Hard",
  "dietaryTags": ["tag1"],
  "ingredients": [{{"item": "name", "amount": "qty", "unit": "unit"}}],
  "instructions": ["Step 1", "Step 2"],
  "tips": ["Tip"],
  "nutrition": {{"calories": number, "protein": "0g", "carbs": "0g", "fat": "0g"}} or null,
  "imageUrl": {image_url},
  "sourceUrl": {source_url}
}}"""


def render_schema(source_url: str | None = None, image_url_hint: bool = False) -> str:
    """Render the shared JSON schema block.

    Only the two URL placeholders vary between modes; the field list does not.
    """
    return _RECIPE_SCHEMA_TEMPLATE.format(
        image_url='"url or null"' if image_url_hint else "null",
        source_url=json.dumps(source_url) if source_url else "null",
    )


def _join_or(values: tuple[str, ...], fallback: str) -> str:
    cleaned = [value.strip() for value in values if value and value.strip()]
    return ", ".join(cleaned) or fallback


def truncate_page(text: str, max_chars: int = DEFAULT_PAGE_MAX_CHARS) -> str:
    return text[:max(0, max_chars)]


def to_image_data_url(image_base64: str, media_type: str = "image/jpeg") -> str:
    return f"data:{media_type};base64,{image_base64}"


def build_generation_prompt(
    request: ByIngredients,
    *,
    temperature: float = DEFAULT_GENERATION_TEMPERATURE,
) -> ModelRequest:
    cuisine = (request.cuisine or "").strip() or "any"
    kid_friendly = "Yes" if request.kid_friendly else "No preference"

    user_prompt = (
        "You are a helpful recipe assistant. Generate a detailed recipe based on:\n"
        f"- Available ingredients: {_join_or(request.ingredients, 'any')}\n"
        f"- Dietary restrictions: {_join_or(request.restrictions, 'none')}\n"
        f"- Cuisine preference: {cuisine}\n"
        f"- Available time: {request.time_budget_minutes} minutes\n"
        f"- Servings needed: {request.servings}\n"
        f"- Kid-friendly: {kid_friendly}\n"
        "\n"
        "Return ONLY valid JSON:\n"
        f"{render_schema()}"
    )
    return ModelRequest(
        system=GENERATE_SYSTEM_PROMPT,
        user=user_prompt,
        temperature=temperature,
        mode="generate",
    )


def build_url_prompt(
    request: ByUrl,
    page_text: str,
    *,
    max_chars: int = DEFAULT_PAGE_MAX_CHARS,
    temperature: float = DEFAULT_EXTRACTION_TEMPERATURE,
) -> ModelRequest:
    user_prompt = (
        "Extract the recipe from this webpage HTML and return ONLY valid JSON:\n"
        f"{render_schema(source_url=request.url, image_url_hint=True)}\n"
        "\n"
        "HTML:\n"
        f"{truncate_page(page_text, max_chars)}"
    )
    return ModelRequest(
        system=URL_SYSTEM_PROMPT,
        user=user_prompt,
        temperature=temperature,
        mode="extract",
    )


def build_image_prompt(
    request: ByImage,
    *,
    temperature: float = DEFAULT_EXTRACTION_TEMPERATURE,
    max_tokens: int | None = DEFAULT_IMAGE_MAX_TOKENS,
) -> ModelRequest:
    user_prompt = (
        "Extract the recipe from this image. Return ONLY valid JSON:\n"
        f"{render_schema()}"
    )
    return ModelRequest(
        system=IMAGE_SYSTEM_PROMPT,
        user=user_prompt,
        temperature=temperature,
        mode="extract",
        image_data_url=to_image_data_url(request.image_base64, request.media_type),
        max_tokens=max_tokens,
    )


def build_model_request(
    request: ExtractionRequest,
    page_text: str | None = None,
    *,
    page_max_chars: int = DEFAULT_PAGE_MAX_CHARS,
    generation_temperature: float = DEFAULT_GENERATION_TEMPERATURE,
    extraction_temperature: float = DEFAULT_EXTRACTION_TEMPERATURE,
    image_max_tokens: int | None = DEFAULT_IMAGE_MAX_TOKENS,
) -> ModelRequest:
    if isinstance(request, ByIngredients):
        return build_generation_prompt(request, temperature=generation_temperature)
    if isinstance(request, ByUrl):
        if page_text is None:
            raise ValueError("URL requests need the fetched page text")
        return build_url_prompt(
            request,
            page_text,
            max_chars=page_max_chars,
            temperature=extraction_temperature,
        )
    if isinstance(request, ByImage):
        return build_image_prompt(
            request,
            temperature=extraction_temperature,
            max_tokens=image_max_tokens,
        )
    raise TypeError(f"Unsupported extraction request: {type(request).__name__}")
