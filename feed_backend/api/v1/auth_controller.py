# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from ...application.dto.user_dto import UserResponse, UserStatusResponse, UserStatusUpdateRequest
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_user_status import GetUserStatusUseCase
from ...application.use_cases.auth.update_user_status import UpdateUserStatusUseCase
from ...domain.exceptions import InvalidCredentialsError, NotFoundError
from ...domain.models.auth_context import AuthContext
from ...di.container import get_container
from .dependencies import get_auth_context


router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=TokenResponse)
async def login(request: UserLoginRequest) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        TokenResponse with access token and user id
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    try:
        return await login_use_case.execute(request)
    except NotFoundError as exception:
        # Unknown emails are a login failure (401), not a missing resource
        raise InvalidCredentialsError(exception.message) from exception


@router.get("/status", response_model=UserStatusResponse)
async def get_status(auth_context: AuthContext = Depends(get_auth_context)) -> UserStatusResponse:
    container = get_container()
    return await container.get(GetUserStatusUseCase).execute(auth_context)


@router.patch("/status", response_model=UserStatusResponse)
async def update_status(
    request: UserStatusUpdateRequest,
    auth_context: AuthContext = Depends(get_auth_context),
) -> UserStatusResponse:
    container = get_container()
    return await container.get(UpdateUserStatusUseCase).execute(auth_context, request)
