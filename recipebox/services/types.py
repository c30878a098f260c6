from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union

Mode = Literal["generate", "extract"]


def _ordered_unique(values) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return tuple(seen)


@dataclass(frozen=True)
class ByIngredients:
    ingredients: tuple[str, ...] = ()
    restrictions: tuple[str, ...] = ()
    cuisine: Optional[str] = None
    time_budget_minutes: int = 30
    servings: int = 2
    kid_friendly: bool = False

    def __post_init__(self) -> None:
        # frozen: assign through object.__setattr__
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "restrictions", _ordered_unique(self.restrictions))


@dataclass(frozen=True)
class ByUrl:
    url: str


@dataclass(frozen=True)
class ByImage:
    image_base64: str
    media_type: str = "image/jpeg"


ExtractionRequest = Union[ByIngredients, ByUrl, ByImage]


@dataclass(frozen=True)
class ModelRequest:
    """A single chat-completions call, before model selection."""
    system: str
    user: str
    temperature: float
    mode: Mode
    image_data_url: Optional[str] = None
    max_tokens: Optional[int] = None

    @property
    def has_image(self) -> bool:
        return self.image_data_url is not None

