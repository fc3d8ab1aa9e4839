"""SQLAlchemy models."""

from src.models.cliente import Cliente
from src.models.orcamento import Orcamento
from src.models.user import User

__all__ = [
    "User",
    "Cliente",
    "Orcamento",
]
