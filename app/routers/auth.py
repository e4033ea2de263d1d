import logging

from fastapi import APIRouter, status

from app import repository
from app.dependencies import DbSession
from app.errors import InvalidCredentials
from app.identity import issue_token
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest

logger = logging.getLogger("registry.auth")

router = APIRouter(tags=["auth"])


def auth_response(user) -> AuthResponse:
    return AuthResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        token=issue_token(user.id, user.name),
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(request: RegisterRequest, db: DbSession):
    user = repository.create_user(
        db, name=request.name, email=request.email, password=request.password
    )
    logger.info("User registered user=%s", user.id)
    return auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, db: DbSession):
    user = repository.get_user_by_email(db, request.email)

    if user is None or not user.check_password(request.password):
        raise InvalidCredentials()

    return auth_response(user)
