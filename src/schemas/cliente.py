"""Cliente schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import Sexo
from src.schemas.orcamento import OrcamentoResumo

TELEFONE_PATTERN = r"^\(\d{2}\) \d{4,5}-\d{4}$"


class ClienteCreate(BaseModel):
    """Create a new cliente."""

    model_config = ConfigDict(use_enum_values=True)

    nome: str = Field(..., min_length=2, max_length=100)
    sexo: Sexo | None = None
    data_nascimento: datetime | None = None
    telefone: str | None = Field(None, pattern=TELEFONE_PATTERN)
    observacoes: str | None = Field(None, max_length=500)


class ClienteUpdate(BaseModel):
    """Update a cliente."""

    model_config = ConfigDict(use_enum_values=True)

    nome: str | None = Field(None, min_length=2, max_length=100)
    sexo: Sexo | None = None
    data_nascimento: datetime | None = None
    telefone: str | None = Field(None, pattern=TELEFONE_PATTERN)
    observacoes: str | None = Field(None, max_length=500)


class ClienteListItem(BaseModel):
    """Cliente row in listings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    sexo: Sexo | None
    telefone: str | None


class ClienteResponse(BaseModel):
    """Cliente response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    sexo: Sexo | None
    data_nascimento: datetime | None
    telefone: str | None
    observacoes: str | None
    created_at: datetime
    updated_at: datetime


class ClienteDetail(ClienteResponse):
    """Cliente response including its quotes."""

    orcamentos: list[OrcamentoResumo] = []


class ClienteOrcamentos(BaseModel):
    """A cliente and the summaries of its quotes."""

    cliente: ClienteResponse
    orcamentos: list[OrcamentoResumo]
