"""Orcamento model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import OrcamentoStatus


class Orcamento(Base):
    """Price quote for a tattoo job."""

    __tablename__ = "orcamentos"

    id = Column(Integer, primary_key=True, index=True)
    cliente_id = Column(
        Integer, ForeignKey("clientes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    descricao = Column(String(500), nullable=False)
    valor_total = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    status = Column(String(20), nullable=False, default=OrcamentoStatus.CRIADO.value, index=True)
    observacoes = Column(String(500), nullable=True)
    data_criacao = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    data_atualizacao = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    cliente = relationship("Cliente", back_populates="orcamentos")
