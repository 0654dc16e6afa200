"""HTTP adapter – async HTTP client wrapper."""
from flagman.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
