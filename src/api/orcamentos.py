"""Orcamento API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from src.api.dependencies import get_current_identity, get_orcamento_service
from src.errors import AppError, ErrorKind
from src.models.enums import OrcamentoStatus
from src.schemas.common import ApiResponse
from src.schemas.orcamento import (
    OrcamentoComCliente,
    OrcamentoCreate,
    OrcamentoResponse,
    OrcamentoStatusUpdate,
    OrcamentoUpdate,
)
from src.services.orcamento_service import OrcamentoService

router = APIRouter(
    prefix="/api/v1/orcamentos",
    tags=["orcamentos"],
    dependencies=[Depends(get_current_identity)],
)

OrcamentoId = Annotated[int, Path(gt=0)]
OrcamentoServiceDep = Annotated[OrcamentoService, Depends(get_orcamento_service)]


@router.get("", response_model=ApiResponse[list[OrcamentoComCliente]])
def get_orcamentos(orcamento_service: OrcamentoServiceDep):
    """List all quotes, newest first."""
    return ApiResponse(data=orcamento_service.find_all())


@router.get("/status/{status_value}", response_model=ApiResponse[list[OrcamentoComCliente]])
def get_orcamentos_by_status(
    status_value: OrcamentoStatus,
    orcamento_service: OrcamentoServiceDep,
):
    """List quotes with the given status."""
    return ApiResponse(data=orcamento_service.find_by_status(status_value))


@router.post(
    "", response_model=ApiResponse[OrcamentoResponse], status_code=status.HTTP_201_CREATED
)
def create_orcamento(orcamento_data: OrcamentoCreate, orcamento_service: OrcamentoServiceDep):
    """Create a quote for an existing cliente."""
    orcamento = orcamento_service.create_for_cliente(orcamento_data.cliente_id, orcamento_data)
    return ApiResponse(data=orcamento)


@router.get("/{orcamento_id}", response_model=ApiResponse[OrcamentoComCliente])
def get_orcamento(orcamento_id: OrcamentoId, orcamento_service: OrcamentoServiceDep):
    """Get a quote with its cliente."""
    orcamento = orcamento_service.find_by_id(orcamento_id)
    if orcamento is None:
        raise AppError(ErrorKind.ORCAMENTO_NOT_FOUND)
    return ApiResponse(data=orcamento)


@router.put("/{orcamento_id}", response_model=ApiResponse[OrcamentoResponse])
def update_orcamento(
    orcamento_id: OrcamentoId,
    orcamento_data: OrcamentoUpdate,
    orcamento_service: OrcamentoServiceDep,
):
    """Update a quote."""
    return ApiResponse(data=orcamento_service.update(orcamento_id, orcamento_data))


@router.patch("/{orcamento_id}/status", response_model=ApiResponse[OrcamentoResponse])
def update_orcamento_status(
    orcamento_id: OrcamentoId,
    status_data: OrcamentoStatusUpdate,
    orcamento_service: OrcamentoServiceDep,
):
    """Change the status of a quote."""
    return ApiResponse(data=orcamento_service.update_status(orcamento_id, status_data.status))


@router.delete("/{orcamento_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_orcamento(orcamento_id: OrcamentoId, orcamento_service: OrcamentoServiceDep):
    """Delete a quote."""
    orcamento_service.delete(orcamento_id)
