from __future__ import annotations


class ServiceError(Exception):
    pass


class ConfigurationError(ServiceError):
    pass


class TransportError(ServiceError):
    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class PageFetchError(TransportError):
    pass


class MalformedResponseError(ServiceError):
    pass


class ParseError(ServiceError):
    def __init__(self, message: str, content: str = ""):
        super().__init__(message)
        self.content = content


class RecipeValidationError(ServiceError):
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []
