"""Cliente service."""

import logging

from sqlalchemy.orm import Session

from src.errors import AppError, ErrorKind
from src.models.cliente import Cliente
from src.schemas.cliente import (
    ClienteCreate,
    ClienteDetail,
    ClienteListItem,
    ClienteResponse,
    ClienteUpdate,
)

logger = logging.getLogger(__name__)

# Columns that a partial update may not clear
NON_NULLABLE_FIELDS = {"nome"}


class ClienteService:
    """Service for cliente CRUD operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_cliente(self, cliente_id: int) -> Cliente:
        """Get a cliente or raise ``CLIENTE_NOT_FOUND``."""
        cliente = self.db.query(Cliente).filter(Cliente.id == cliente_id).first()
        if not cliente:
            raise AppError(ErrorKind.CLIENTE_NOT_FOUND)
        return cliente

    def create(self, data: ClienteCreate) -> ClienteResponse:
        cliente = Cliente(**data.model_dump())
        self.db.add(cliente)
        self.db.commit()
        self.db.refresh(cliente)
        logger.info(f"Created cliente {cliente.id}")
        return ClienteResponse.model_validate(cliente)

    def find_all(self) -> list[ClienteListItem]:
        clientes = self.db.query(Cliente).order_by(Cliente.created_at.desc(), Cliente.id.desc()).all()
        return [ClienteListItem.model_validate(cliente) for cliente in clientes]

    def find_by_id(self, cliente_id: int) -> ClienteResponse | None:
        cliente = self.db.query(Cliente).filter(Cliente.id == cliente_id).first()
        return ClienteResponse.model_validate(cliente) if cliente else None

    def find_by_id_with_orcamentos(self, cliente_id: int) -> ClienteDetail | None:
        """Get a cliente together with summaries of its quotes."""
        cliente = self.db.query(Cliente).filter(Cliente.id == cliente_id).first()
        return ClienteDetail.model_validate(cliente) if cliente else None

    def update(self, cliente_id: int, data: ClienteUpdate) -> ClienteResponse:
        """Update only the fields present in the request."""
        cliente = self.get_cliente(cliente_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in NON_NULLABLE_FIELDS:
                continue
            setattr(cliente, field, value)

        self.db.commit()
        self.db.refresh(cliente)
        return ClienteResponse.model_validate(cliente)

    def delete(self, cliente_id: int) -> ClienteResponse:
        """Delete a cliente and, through the cascade, its quotes."""
        cliente = self.get_cliente(cliente_id)
        deleted = ClienteResponse.model_validate(cliente)
        self.db.delete(cliente)
        self.db.commit()
        logger.info(f"Deleted cliente {cliente_id}")
        return deleted

    def search_by_name(self, nome: str) -> list[ClienteListItem]:
        """Partial, case-insensitive name match ordered alphabetically.

        Wildcard characters in ``nome`` are matched literally.
        """
        clientes = (
            self.db.query(Cliente)
            .filter(Cliente.nome.icontains(nome, autoescape=True))
            .order_by(Cliente.nome.asc())
            .all()
        )
        return [ClienteListItem.model_validate(cliente) for cliente in clientes]
