"""FastAPI dependencies for authentication, services and the database."""

import logging
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.errors import AppError, ErrorKind
from src.schemas.auth import AuthenticatedIdentity
from src.services.auth import AuthService
from src.services.cliente_service import ClienteService
from src.services.orcamento_service import OrcamentoService
from src.services.tokens import TokenService

logger = logging.getLogger(__name__)


def get_token_service() -> TokenService:
    """Get the token service configured from settings."""
    return TokenService.from_settings(get_settings())


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, token_service)


def get_cliente_service(
    db: Annotated[Session, Depends(get_db)],
) -> ClienteService:
    """Get cliente service with dependencies."""
    return ClienteService(db)


def get_orcamento_service(
    db: Annotated[Session, Depends(get_db)],
) -> OrcamentoService:
    """Get orcamento service with dependencies."""
    return OrcamentoService(db)


def get_current_identity(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedIdentity:
    """Resolve the bearer token on the request into an identity.

    Each check is terminal: missing header, malformed header, bad token and
    a token whose user no longer exists all reject the request with 401.
    """
    if not authorization:
        raise AppError(ErrorKind.UNAUTHENTICATED)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise AppError(ErrorKind.MALFORMED_CREDENTIAL)

    try:
        identity = auth_service.verify_token(parts[1])
    except AppError:
        logger.warning("Rejected request with an invalid or expired token")
        raise

    # Same error as a bad token so callers cannot tell deleted from never issued
    if auth_service.find_by_id(identity.id) is None:
        logger.warning(f"Rejected token for missing user {identity.id}")
        raise AppError(ErrorKind.INVALID_OR_EXPIRED_TOKEN)

    return identity


CurrentIdentity = Annotated[AuthenticatedIdentity, Depends(get_current_identity)]
