"""Fetching recipe pages over HTTP."""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 15


class FetchError(RuntimeError):
    """Raised when a page cannot be downloaded."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def fetch_html(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Download a page and return its body as text.

    Makes exactly one request; failures are not retried.

    Args:
        url: Page to download
        session: Optional requests session to reuse
        timeout: Request timeout in seconds
        user_agent: User agent header to send

    Returns:
        The response body as text

    Raises:
        FetchError: On connection problems, timeouts or HTTP error statuses
    """
    http = session or requests
    headers = {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }

    try:
        response = http.get(url, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.warning(f"Failed to fetch {url}: {e}")
        raise FetchError(url, f"Failed to fetch URL: {e}") from e

    if response.status_code >= 400:
        logger.warning(f"Failed to fetch {url}: HTTP {response.status_code}")
        raise FetchError(
            url,
            f"Failed to fetch URL: HTTP {response.status_code} {response.reason or ''}".strip(),
            status_code=response.status_code,
        )

    return response.text
