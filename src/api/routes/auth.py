"""Authentication routes (register, login)."""

from fastapi import APIRouter, Depends, HTTPException, status

from api.config import Settings, get_settings
from api.dependencies import get_token_issuer, get_user_repo
from api.models import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, UserResponse
from domain.model.errors import (
    DuplicateEmailError,
    InternalError,
    InvalidCredentialsError,
    ValidationError,
)
from port.token_issuer import TokenIssuer
from port.user_repository import UserRepository
from services import auth_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    settings: Settings = Depends(get_settings),
):
    """Register a new user.

    Raises:
        HTTPException: 400 if validation fails or the email is taken, 500 on store failure
    """
    try:
        user = auth_service.register(
            repo,
            firstname=request.firstname,
            lastname=request.lastname,
            email=request.email,
            password=request.password,
            rounds=settings.bcrypt_rounds,
        )
    except (ValidationError, DuplicateEmailError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return RegisterResponse(
        data=UserResponse.from_domain(user),
        message="User registered successfully",
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Login user and return JWT token.

    Raises:
        HTTPException: 400 if credentials are invalid, 500 on store failure
    """
    try:
        token = auth_service.login(repo, issuer, email=request.email, password=request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return LoginResponse(status=True, message="Login successful", token=token)
