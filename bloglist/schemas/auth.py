from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field, SecretStr, StringConstraints


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        ...,
        examples=["mluukkai"],
    )
    password: SecretStr = Field(..., min_length=1, examples=["salainen"])


class LoginResponse(BaseModel):
    """Bearer token issued on a successful login."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
    token_type: str = "access"
