"""Authentication schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(
        ..., min_length=2, max_length=100, validation_alias=AliasChoices("name", "nome")
    )
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(
        ..., min_length=6, max_length=100, validation_alias=AliasChoices("password", "senha")
    )


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(
        ..., min_length=1, max_length=100, validation_alias=AliasChoices("password", "senha")
    )


class UserUpdate(BaseModel):
    """Self-service profile update. Every field is optional."""

    name: str | None = Field(
        None, min_length=2, max_length=100, validation_alias=AliasChoices("name", "nome")
    )
    email: EmailStr | None = None
    current_password: str | None = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("current_password", "senha_atual", "senhaAtual"),
    )
    new_password: str | None = Field(
        None,
        min_length=6,
        max_length=100,
        validation_alias=AliasChoices("new_password", "nova_senha", "novaSenha"),
    )


class UserResponse(BaseModel):
    """Public user view. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    active: bool = Field(
        validation_alias=AliasChoices("active", "ativo"), serialization_alias="ativo"
    )
    created_at: datetime
    updated_at: datetime


class LoginResponse(BaseModel):
    """Login result with the issued bearer token."""

    user: UserResponse
    token: str
    token_type: str = "bearer"  # noqa: S105


class AuthenticatedIdentity(BaseModel):
    """Identity claims carried by an access token."""

    model_config = ConfigDict(frozen=True)

    id: int
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
