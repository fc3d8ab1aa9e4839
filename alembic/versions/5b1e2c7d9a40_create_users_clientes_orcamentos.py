"""Create users, clientes and orcamentos tables

Revision ID: 5b1e2c7d9a40
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b1e2c7d9a40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps(created: str, updated: str) -> list[sa.Column]:
    return [
        sa.Column(created, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column(updated, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("active", sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps("created_at", "updated_at"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "clientes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("sexo", sa.String(length=10), nullable=True),
        sa.Column("data_nascimento", sa.DateTime(timezone=True), nullable=True),
        sa.Column("telefone", sa.String(length=20), nullable=True),
        sa.Column("observacoes", sa.String(length=500), nullable=True),
        *_timestamps("created_at", "updated_at"),
    )
    op.create_index("ix_clientes_id", "clientes", ["id"])
    op.create_index("ix_clientes_nome", "clientes", ["nome"])

    op.create_table(
        "orcamentos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "cliente_id",
            sa.Integer(),
            sa.ForeignKey("clientes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("descricao", sa.String(length=500), nullable=False),
        sa.Column("valor_total", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("observacoes", sa.String(length=500), nullable=True),
        *_timestamps("data_criacao", "data_atualizacao"),
    )
    op.create_index("ix_orcamentos_id", "orcamentos", ["id"])
    op.create_index("ix_orcamentos_cliente_id", "orcamentos", ["cliente_id"])
    op.create_index("ix_orcamentos_status", "orcamentos", ["status"])


def downgrade() -> None:
    op.drop_table("orcamentos")
    op.drop_table("clientes")
    op.drop_table("users")
