"""Cliente model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Cliente(Base, TimestampMixin):
    """Customer of the studio."""

    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False, index=True)
    sexo = Column(String(10), nullable=True)  # 'M', 'F', 'Outro'
    data_nascimento = Column(DateTime(timezone=True), nullable=True)
    telefone = Column(String(20), nullable=True)
    observacoes = Column(String(500), nullable=True)

    # Relationships
    orcamentos = relationship(
        "Orcamento",
        back_populates="cliente",
        cascade="all, delete-orphan",
        order_by="Orcamento.data_criacao.desc()",
    )
