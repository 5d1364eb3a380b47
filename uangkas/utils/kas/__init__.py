# uangkas/utils/kas/__init__.py
from .client import KasApiClient, KasApiError
from .session import KasSession, SessionContext, NotAuthenticated, client_from_env, login, logout

__all__ = [
    "KasApiClient",
    "KasApiError",
    "KasSession",
    "SessionContext",
    "NotAuthenticated",
    "login",
    "logout",
    "client_from_env",
]
