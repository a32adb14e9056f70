"""Web page fetching utilities."""

from .fetch import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, FetchError, fetch_html

__all__ = ["DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT", "FetchError", "fetch_html"]
