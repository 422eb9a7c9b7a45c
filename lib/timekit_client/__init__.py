from .async_client import AsyncTimekitClient
from .client import TimekitClient
from .config_types import ClientConfig, UserCredentials
from .errors import ApiError, AuthError, NetworkError, RedirectUnavailableError, TimekitClientError
from .navigation import Navigator, WebbrowserNavigator

__all__ = [
    "TimekitClient",
    "AsyncTimekitClient",
    "ClientConfig",
    "UserCredentials",
    "ApiError",
    "AuthError",
    "NetworkError",
    "RedirectUnavailableError",
    "TimekitClientError",
    "Navigator",
    "WebbrowserNavigator",
]
