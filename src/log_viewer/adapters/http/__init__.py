"""HTTP adapter – async httpx client with error mapping."""
from log_viewer.adapters.http.client import DEFAULT_TIMEOUT, HttpxHttpClient

__all__ = ["DEFAULT_TIMEOUT", "HttpxHttpClient"]
