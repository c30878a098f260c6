from __future__ import annotations

import logging

import httpx

from .errors import PageFetchError

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 15.0
_HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; recipebox/0.3)"}


def _validate_page_url(url: str) -> None:
    if not url.startswith(("http://", "https://")):
        raise PageFetchError(f"URL must be http(s): {url}", url=url)


def fetch_page(
    url: str,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: httpx.Client | None = None,
) -> str:
    """GET ``url`` and return the body as text. The body is not parsed."""
    _validate_page_url(url)

    try:
        if client is not None:
            response = client.get(url, headers=_HEADERS, timeout=timeout, follow_redirects=True)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned_client:
                response = owned_client.get(url, headers=_HEADERS)
        response.raise_for_status()
    except httpx.TimeoutException as error:
        logger.warning("Timed out fetching %s after %ss", url, timeout)
        raise PageFetchError(f"Timed out fetching page after {timeout}s: {url}", url=url) from error
    except httpx.HTTPStatusError as error:
        status = error.response.status_code
        logger.warning("Page fetch for %s returned HTTP %s", url, status)
        raise PageFetchError(f"HTTP {status} fetching page: {url}", status_code=status, url=url) from error
    except httpx.HTTPError as error:
        logger.warning("Network error fetching %s: %s", url, error)
        raise PageFetchError(f"Network error fetching page: {error}", url=url) from error

    return response.text
