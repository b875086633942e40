from .dto import AuthTokenConfig, LoginIn, LoginOut
from .service import AuthService

__all__ = ["AuthService", "AuthTokenConfig", "LoginIn", "LoginOut"]
