"""Orcamento schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import OrcamentoStatus


class OrcamentoCreate(BaseModel):
    """Create a quote for an existing cliente."""

    cliente_id: int = Field(..., gt=0)
    descricao: str = Field(..., min_length=5, max_length=500)
    valor_total: float = Field(..., gt=0)
    status: OrcamentoStatus = OrcamentoStatus.CRIADO
    observacoes: str | None = Field(None, max_length=500)


class OrcamentoUpdate(BaseModel):
    """Update a quote."""

    descricao: str | None = Field(None, min_length=5, max_length=500)
    valor_total: float | None = Field(None, gt=0)
    status: OrcamentoStatus | None = None
    observacoes: str | None = Field(None, max_length=500)


class OrcamentoStatusUpdate(BaseModel):
    """Change only the status of a quote."""

    status: OrcamentoStatus


class ClienteResumo(BaseModel):
    """Cliente fields embedded in quote responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    telefone: str | None


class OrcamentoResumo(BaseModel):
    """Quote fields embedded in cliente responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    descricao: str
    valor_total: float
    status: OrcamentoStatus
    data_criacao: datetime


class OrcamentoResponse(BaseModel):
    """Quote response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cliente_id: int
    descricao: str
    valor_total: float
    status: OrcamentoStatus
    observacoes: str | None
    data_criacao: datetime
    data_atualizacao: datetime


class OrcamentoComCliente(OrcamentoResponse):
    """Quote response including a cliente summary."""

    cliente: ClienteResumo
