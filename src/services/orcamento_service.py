"""Orcamento service."""

import logging

from sqlalchemy.orm import Session, joinedload

from src.errors import AppError, ErrorKind
from src.models.cliente import Cliente
from src.models.enums import OrcamentoStatus
from src.models.orcamento import Orcamento
from src.schemas.orcamento import (
    OrcamentoComCliente,
    OrcamentoCreate,
    OrcamentoResponse,
    OrcamentoResumo,
    OrcamentoUpdate,
)

logger = logging.getLogger(__name__)

# Columns that a partial update may not clear
NON_NULLABLE_FIELDS = {"descricao", "valor_total", "status"}


class OrcamentoService:
    """Service for quote CRUD operations."""

    def __init__(self, db: Session):
        self.db = db

    def _with_cliente(self):
        return self.db.query(Orcamento).options(joinedload(Orcamento.cliente))

    def get_orcamento(self, orcamento_id: int) -> Orcamento:
        """Get a quote or raise ``ORCAMENTO_NOT_FOUND``."""
        orcamento = self.db.query(Orcamento).filter(Orcamento.id == orcamento_id).first()
        if not orcamento:
            raise AppError(ErrorKind.ORCAMENTO_NOT_FOUND)
        return orcamento

    def create_for_cliente(self, cliente_id: int, data: OrcamentoCreate) -> OrcamentoResponse:
        """Create a quote attached to an existing cliente."""
        if not self.db.query(Cliente.id).filter(Cliente.id == cliente_id).first():
            raise AppError(ErrorKind.CLIENTE_NOT_FOUND)

        orcamento = Orcamento(
            cliente_id=cliente_id,
            descricao=data.descricao,
            valor_total=data.valor_total,
            status=data.status.value,
            observacoes=data.observacoes,
        )
        self.db.add(orcamento)
        self.db.commit()
        self.db.refresh(orcamento)
        logger.info(f"Created orcamento {orcamento.id} for cliente {cliente_id}")
        return OrcamentoResponse.model_validate(orcamento)

    def find_all(self) -> list[OrcamentoComCliente]:
        orcamentos = (
            self._with_cliente()
            .order_by(Orcamento.data_criacao.desc(), Orcamento.id.desc())
            .all()
        )
        return [OrcamentoComCliente.model_validate(orcamento) for orcamento in orcamentos]

    def find_by_id(self, orcamento_id: int) -> OrcamentoComCliente | None:
        orcamento = self._with_cliente().filter(Orcamento.id == orcamento_id).first()
        return OrcamentoComCliente.model_validate(orcamento) if orcamento else None

    def find_by_cliente_id(self, cliente_id: int) -> list[OrcamentoResumo]:
        orcamentos = (
            self.db.query(Orcamento)
            .filter(Orcamento.cliente_id == cliente_id)
            .order_by(Orcamento.data_criacao.desc(), Orcamento.id.desc())
            .all()
        )
        return [OrcamentoResumo.model_validate(orcamento) for orcamento in orcamentos]

    def find_by_status(self, status: OrcamentoStatus) -> list[OrcamentoComCliente]:
        orcamentos = (
            self._with_cliente()
            .filter(Orcamento.status == status.value)
            .order_by(Orcamento.data_criacao.desc(), Orcamento.id.desc())
            .all()
        )
        return [OrcamentoComCliente.model_validate(orcamento) for orcamento in orcamentos]

    def update(self, orcamento_id: int, data: OrcamentoUpdate) -> OrcamentoResponse:
        """Update only the fields present in the request."""
        orcamento = self.get_orcamento(orcamento_id)

        for field, value in data.model_dump(exclude_unset=True, mode="json").items():
            if value is None and field in NON_NULLABLE_FIELDS:
                continue
            setattr(orcamento, field, value)

        self.db.commit()
        self.db.refresh(orcamento)
        return OrcamentoResponse.model_validate(orcamento)

    def update_status(self, orcamento_id: int, status: OrcamentoStatus) -> OrcamentoResponse:
        orcamento = self.get_orcamento(orcamento_id)
        orcamento.status = status.value
        self.db.commit()
        self.db.refresh(orcamento)
        logger.info(f"Orcamento {orcamento_id} moved to {status.value}")
        return OrcamentoResponse.model_validate(orcamento)

    def delete(self, orcamento_id: int) -> OrcamentoResponse:
        orcamento = self.get_orcamento(orcamento_id)
        deleted = OrcamentoResponse.model_validate(orcamento)
        self.db.delete(orcamento)
        self.db.commit()
        logger.info(f"Deleted orcamento {orcamento_id}")
        return deleted
