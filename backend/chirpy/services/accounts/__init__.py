from .dto import UserAuthIn, UserPublicOut, UserRegisterIn, UserUpdateIn
from .service import AccountService

__all__ = ["AccountService", "UserAuthIn", "UserPublicOut", "UserRegisterIn", "UserUpdateIn"]
