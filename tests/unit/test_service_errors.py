from __future__ import annotations

from recipebox.services.errors import (
    ConfigurationError,
    MalformedResponseError,
    PageFetchError,
    ParseError,
    RecipeValidationError,
    ServiceError,
    TransportError,
)


class TestServiceError:
    def test_base_exception(self) -> None:
        error = ServiceError("Base service error")
        assert str(error) == "Base service error"
        assert isinstance(error, Exception)


class TestTransportError:
    def test_status_and_url(self) -> None:
        error = TransportError("Failed to extract recipe", status_code=500, url="https://api.example.com")
        assert str(error) == "Failed to extract recipe"
        assert error.status_code == 500
        assert error.url == "https://api.example.com"

    def test_defaults_to_no_status(self) -> None:
        error = TransportError("connection reset")
        assert error.status_code is None
        assert error.url is None


class TestPageFetchError:
    def test_is_a_transport_error(self) -> None:
        error = PageFetchError("HTTP 404 fetching page", status_code=404, url="https://example.com/r")
        assert isinstance(error, TransportError)
        assert error.status_code == 404


class TestParseError:
    def test_keeps_offending_content(self) -> None:
        error = ParseError("not json", content="Sorry, I can't help with that.")
        assert error.content == "Sorry, I can't help with that."


class TestRecipeValidationError:
    def test_fields(self) -> None:
        error = RecipeValidationError("missing servings", fields=["servings"])
        assert error.fields == ["servings"]

    def test_fields_default_empty(self) -> None:
        assert RecipeValidationError("bad").fields == []


class TestExceptionHierarchy:
    def test_all_errors_inherit_from_service_error(self) -> None:
        assert issubclass(ConfigurationError, ServiceError)
        assert issubclass(TransportError, ServiceError)
        assert issubclass(PageFetchError, ServiceError)
        assert issubclass(MalformedResponseError, ServiceError)
        assert issubclass(ParseError, ServiceError)
        assert issubclass(RecipeValidationError, ServiceError)

    def test_failure_kinds_are_distinct(self) -> None:
        kinds = [MalformedResponseError, ParseError, RecipeValidationError, TransportError]
        for kind in kinds:
            others = [other for other in kinds if other is not kind]
            assert not any(issubclass(kind, other) for other in others)
