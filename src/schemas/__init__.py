"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    AuthenticatedIdentity,
    LoginResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from src.schemas.cliente import (
    ClienteCreate,
    ClienteDetail,
    ClienteListItem,
    ClienteOrcamentos,
    ClienteResponse,
    ClienteUpdate,
)
from src.schemas.common import ApiResponse, ErrorDetail, ErrorResponse
from src.schemas.orcamento import (
    ClienteResumo,
    OrcamentoComCliente,
    OrcamentoCreate,
    OrcamentoResponse,
    OrcamentoResumo,
    OrcamentoStatusUpdate,
    OrcamentoUpdate,
)

__all__ = [
    "ApiResponse",
    "ErrorDetail",
    "ErrorResponse",
    "AuthenticatedIdentity",
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "LoginResponse",
    "ClienteCreate",
    "ClienteUpdate",
    "ClienteListItem",
    "ClienteResponse",
    "ClienteDetail",
    "ClienteOrcamentos",
    "ClienteResumo",
    "OrcamentoCreate",
    "OrcamentoUpdate",
    "OrcamentoStatusUpdate",
    "OrcamentoResumo",
    "OrcamentoResponse",
    "OrcamentoComCliente",
]
