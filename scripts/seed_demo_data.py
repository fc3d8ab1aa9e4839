#!/usr/bin/env python3
"""Seed demo data.

Creates a demo user plus clientes with quotes. Each cliente and its quotes
are written in a single transaction.

Usage:
    # From project root:
    JWT_SECRET=dev-secret python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=sqlite:///./demo.db JWT_SECRET=dev-secret python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.config import get_settings
from src.database import Base
from src.models import Cliente, Orcamento, User
from src.models.enums import OrcamentoStatus, Sexo
from src.services.auth import get_password_hash

DATABASE_URL = os.getenv("DATABASE_URL", get_settings().database_url)

# Demo user credentials
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"

DEMO_CLIENTES = [
    {
        "cliente": {"nome": "Maria Silva", "sexo": Sexo.FEMININO, "telefone": "(11) 99999-9999"},
        "orcamentos": [
            ("Tatuagem floral no braco - 15cm", 800.00, OrcamentoStatus.CRIADO),
            ("Retoque de fine line no pulso", 150.00, OrcamentoStatus.FEITO),
        ],
    },
    {
        "cliente": {"nome": "Joao Pereira", "sexo": Sexo.MASCULINO, "telefone": "(21) 3333-4444"},
        "orcamentos": [
            ("Fechamento de braco em blackwork", 4500.00, OrcamentoStatus.CRIADO),
        ],
    },
    {
        "cliente": {"nome": "Alex Costa", "sexo": Sexo.OUTRO, "observacoes": "Pele sensivel"},
        "orcamentos": [
            ("Mandala nas costas - 30cm", 1800.00, OrcamentoStatus.CANCELADO),
        ],
    },
]


def seed_demo_data():
    """Seed the database with a demo user, clientes and quotes."""
    engine = create_engine(DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        existing_user = session.query(User).filter_by(email=DEMO_EMAIL).first()
        if existing_user:
            print("Demo user already exists, skipping user creation.")
        else:
            print("Creating demo user...")
            session.add(
                User(
                    email=DEMO_EMAIL,
                    password_hash=get_password_hash(DEMO_PASSWORD),
                    name="Demo User",
                )
            )
            session.commit()

        for entry in DEMO_CLIENTES:
            fields = dict(entry["cliente"])
            fields["sexo"] = fields["sexo"].value
            if session.query(Cliente).filter_by(nome=fields["nome"]).first():
                print(f"Cliente {fields['nome']} already exists, skipping.")
                continue

            cliente = Cliente(**fields)
            session.add(cliente)
            session.flush()

            session.add_all(
                Orcamento(
                    cliente_id=cliente.id,
                    descricao=descricao,
                    valor_total=valor_total,
                    status=status.value,
                )
                for descricao, valor_total, status in entry["orcamentos"]
            )
            session.commit()
            print(f"Created cliente {cliente.nome} with {len(entry['orcamentos'])} orcamento(s)")

        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
