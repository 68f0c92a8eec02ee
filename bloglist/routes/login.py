# bloglist/routes/login.py

"""Login route issuing bearer tokens."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import AuthServiceDep
from bloglist.schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
    },
    operation_id="login",
)
async def login(credentials: LoginRequest, auth_service: AuthServiceDep) -> LoginResponse:
    """
    Exchange credentials for a bearer token.

    Parameters
    ----------
    credentials : LoginRequest
        Username and plaintext password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    LoginResponse
        Token plus the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If the username is unknown or the password is wrong.
    """
    user = await auth_service.authenticate_user(
        credentials.username,
        credentials.password.get_secret_value(),
    )
    return auth_service.create_token_for_user(user)
