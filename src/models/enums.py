"""Enums for model fields."""

from enum import Enum


class Sexo(str, Enum):
    """Sex of a cliente as recorded on the intake form."""

    MASCULINO = "M"
    FEMININO = "F"
    OUTRO = "Outro"


class OrcamentoStatus(str, Enum):
    """Lifecycle of a tattoo quote."""

    CRIADO = "criado"
    FEITO = "feito"
    CANCELADO = "cancelado"
