"""Cliente API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from src.api.dependencies import get_cliente_service, get_current_identity, get_orcamento_service
from src.errors import AppError, ErrorKind
from src.schemas.cliente import (
    ClienteCreate,
    ClienteDetail,
    ClienteListItem,
    ClienteOrcamentos,
    ClienteResponse,
    ClienteUpdate,
)
from src.schemas.common import ApiResponse
from src.services.cliente_service import ClienteService
from src.services.orcamento_service import OrcamentoService

router = APIRouter(
    prefix="/api/v1/clientes",
    tags=["clientes"],
    dependencies=[Depends(get_current_identity)],
)

ClienteId = Annotated[int, Path(gt=0)]
ClienteServiceDep = Annotated[ClienteService, Depends(get_cliente_service)]


@router.get("", response_model=ApiResponse[list[ClienteListItem]])
def get_clientes(cliente_service: ClienteServiceDep):
    """List all clientes, newest first."""
    return ApiResponse(data=cliente_service.find_all())


@router.get("/search", response_model=ApiResponse[list[ClienteListItem]])
def search_clientes(
    nome: Annotated[str, Query(min_length=1)],
    cliente_service: ClienteServiceDep,
):
    """Search clientes by partial name."""
    return ApiResponse(data=cliente_service.search_by_name(nome))


@router.post("", response_model=ApiResponse[ClienteResponse], status_code=status.HTTP_201_CREATED)
def create_cliente(cliente_data: ClienteCreate, cliente_service: ClienteServiceDep):
    """Create a new cliente."""
    return ApiResponse(data=cliente_service.create(cliente_data))


@router.get("/{cliente_id}", response_model=ApiResponse[ClienteDetail])
def get_cliente(cliente_id: ClienteId, cliente_service: ClienteServiceDep):
    """Get a cliente with its quotes."""
    cliente = cliente_service.find_by_id_with_orcamentos(cliente_id)
    if cliente is None:
        raise AppError(ErrorKind.CLIENTE_NOT_FOUND)
    return ApiResponse(data=cliente)


@router.put("/{cliente_id}", response_model=ApiResponse[ClienteResponse])
def update_cliente(
    cliente_id: ClienteId,
    cliente_data: ClienteUpdate,
    cliente_service: ClienteServiceDep,
):
    """Update a cliente."""
    return ApiResponse(data=cliente_service.update(cliente_id, cliente_data))


@router.delete("/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cliente(cliente_id: ClienteId, cliente_service: ClienteServiceDep):
    """Delete a cliente and its quotes."""
    cliente_service.delete(cliente_id)


@router.get("/{cliente_id}/orcamentos", response_model=ApiResponse[ClienteOrcamentos])
def get_cliente_orcamentos(
    cliente_id: ClienteId,
    cliente_service: ClienteServiceDep,
    orcamento_service: Annotated[OrcamentoService, Depends(get_orcamento_service)],
):
    """Get a cliente and the quotes made for it."""
    cliente = cliente_service.find_by_id(cliente_id)
    if cliente is None:
        raise AppError(ErrorKind.CLIENTE_NOT_FOUND)

    orcamentos = orcamento_service.find_by_cliente_id(cliente_id)
    return ApiResponse(data=ClienteOrcamentos(cliente=cliente, orcamentos=orcamentos))
