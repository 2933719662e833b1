"""HTTP client for the parish API."""

from .auth_session import AuthSession, FileTokenStore, InMemoryTokenStore, TokenStore
from .parish_client import ApiClientError, ParishApiClient

__all__ = [
    "ApiClientError",
    "AuthSession",
    "FileTokenStore",
    "InMemoryTokenStore",
    "ParishApiClient",
    "TokenStore",
]
