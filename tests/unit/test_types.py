from __future__ import annotations

import dataclasses

import pytest

from recipebox.services.types import ByImage, ByIngredients, ByUrl, ModelRequest


class TestByIngredients:
    def test_defaults(self) -> None:
        request = ByIngredients()
        assert request.ingredients == ()
        assert request.restrictions == ()
        assert request.cuisine is None
        assert request.kid_friendly is False

    def test_lists_become_tuples(self) -> None:
        request = ByIngredients(ingredients=["chicken", "rice"], restrictions=["Vegan"])
        assert request.ingredients == ("chicken", "rice")
        assert request.restrictions == ("Vegan",)

    def test_restrictions_deduplicated_in_order(self) -> None:
        request = ByIngredients(restrictions=["Vegan", "Gluten-Free", "Vegan"])
        assert request.restrictions == ("Vegan", "Gluten-Free")

    def test_is_frozen(self) -> None:
        request = ByIngredients(ingredients=["egg"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.servings = 10  # type: ignore[misc]

    def test_equal_values_compare_equal(self) -> None:
        assert ByIngredients(ingredients=["egg"]) == ByIngredients(ingredients=("egg",))


class TestOtherVariants:
    def test_url_variant(self) -> None:
        assert ByUrl(url="https://example.com/recipe").url == "https://example.com/recipe"

    def test_image_variant_has_no_url(self) -> None:
        request = ByImage(image_base64="aGVsbG8=")
        assert not hasattr(request, "url")


class TestModelRequest:
    def test_has_image(self) -> None:
        text_only = ModelRequest(system="s", user="u", temperature=0.3, mode="extract")
        with_image = ModelRequest(
            system="s", user="u", temperature=0.3, mode="extract", image_data_url="data:image/jpeg;base64,AA=="
        )
        assert text_only.has_image is False
        assert with_image.has_image is True
