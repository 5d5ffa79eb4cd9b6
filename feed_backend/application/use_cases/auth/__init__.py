from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .verify_token import VerifyTokenUseCase
from .get_user_status import GetUserStatusUseCase
from .update_user_status import UpdateUserStatusUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "VerifyTokenUseCase",
    "GetUserStatusUseCase",
    "UpdateUserStatusUseCase",
]
