"""Orcamento API tests."""

import pytest


@pytest.fixture
def cliente(client, auth_headers):
    response = client.post(
        "/api/v1/clientes",
        headers=auth_headers,
        json={"nome": "Maria Silva", "sexo": "F", "telefone": "(11) 99999-9999"},
    )
    assert response.status_code == 201
    return response.json()["data"]


def create_orcamento(client, headers, cliente_id, **overrides):
    payload = {
        "cliente_id": cliente_id,
        "descricao": "Tatuagem floral no braco - 15cm",
        "valor_total": 800.0,
    }
    payload.update(overrides)
    response = client.post("/api/v1/orcamentos", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_orcamento(client, auth_headers, cliente):
    """Test creating a quote with the default status."""
    data = create_orcamento(client, auth_headers, cliente["id"], observacoes="Sessao unica")
    assert data["cliente_id"] == cliente["id"]
    assert data["descricao"] == "Tatuagem floral no braco - 15cm"
    assert data["valor_total"] == 800.0
    assert data["status"] == "criado"
    assert data["observacoes"] == "Sessao unica"
    assert data["data_criacao"] is not None
    assert data["data_atualizacao"] is not None


def test_create_orcamento_with_status(client, auth_headers, cliente):
    """Test creating a quote with an explicit status."""
    data = create_orcamento(client, auth_headers, cliente["id"], status="feito")
    assert data["status"] == "feito"


def test_create_orcamento_for_missing_cliente(client, auth_headers):
    """Test that a quote needs an existing cliente."""
    response = client.post(
        "/api/v1/orcamentos",
        headers=auth_headers,
        json={"cliente_id": 9999, "descricao": "Sem cliente", "valor_total": 100},
    )
    assert response.status_code == 404
    assert response.json()["error"] == "Cliente not found"


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"descricao": "Curt"}, "descricao"),
        ({"valor_total": 0}, "valor_total"),
        ({"valor_total": -10}, "valor_total"),
        ({"status": "aprovado"}, "status"),
        ({"cliente_id": 0}, "cliente_id"),
        ({"observacoes": "x" * 501}, "observacoes"),
    ],
)
def test_create_orcamento_validation(client, auth_headers, cliente, overrides, field):
    """Test the quote validation rules."""
    payload = {"cliente_id": cliente["id"], "descricao": "Tribal na perna", "valor_total": 500}
    payload.update(overrides)
    response = client.post("/api/v1/orcamentos", headers=auth_headers, json=payload)
    assert response.status_code == 422
    assert field in {detail["field"] for detail in response.json()["details"]}


def test_list_orcamentos_include_cliente(client, auth_headers, cliente):
    """Test listing quotes newest first with a cliente summary."""
    first = create_orcamento(client, auth_headers, cliente["id"], descricao="Primeiro desenho")
    second = create_orcamento(client, auth_headers, cliente["id"], descricao="Segundo desenho")

    response = client.get("/api/v1/orcamentos", headers=auth_headers)
    assert response.status_code == 200
    orcamentos = response.json()["data"]
    assert [o["id"] for o in orcamentos] == [second["id"], first["id"]]
    assert orcamentos[0]["cliente"] == {
        "id": cliente["id"],
        "nome": "Maria Silva",
        "telefone": "(11) 99999-9999",
    }


def test_get_orcamento(client, auth_headers, cliente):
    """Test getting a quote with its cliente."""
    orcamento = create_orcamento(client, auth_headers, cliente["id"])

    response = client.get(f"/api/v1/orcamentos/{orcamento['id']}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == orcamento["id"]
    assert data["cliente"]["nome"] == "Maria Silva"


def test_get_missing_orcamento(client, auth_headers):
    """Test that an unknown quote is a 404."""
    response = client.get("/api/v1/orcamentos/9999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Orcamento not found"


def test_orcamentos_by_status(client, auth_headers, cliente):
    """Test filtering quotes by status."""
    done = create_orcamento(client, auth_headers, cliente["id"], descricao="Ja tatuado")
    create_orcamento(client, auth_headers, cliente["id"], descricao="Ainda pendente")
    client.patch(
        f"/api/v1/orcamentos/{done['id']}/status", headers=auth_headers, json={"status": "feito"}
    )

    response = client.get("/api/v1/orcamentos/status/feito", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert [o["id"] for o in data] == [done["id"]]
    assert data[0]["cliente"]["id"] == cliente["id"]

    response = client.get("/api/v1/orcamentos/status/cancelado", headers=auth_headers)
    assert response.json()["data"] == []


def test_orcamentos_by_unknown_status(client, auth_headers):
    """Test that unknown statuses fail validation."""
    response = client.get("/api/v1/orcamentos/status/aprovado", headers=auth_headers)
    assert response.status_code == 422


def test_update_orcamento_partial(client, auth_headers, cliente):
    """Test that only supplied fields are updated."""
    orcamento = create_orcamento(client, auth_headers, cliente["id"])

    response = client.put(
        f"/api/v1/orcamentos/{orcamento['id']}",
        headers=auth_headers,
        json={"valor_total": 950.5, "observacoes": "Inclui retoque"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["valor_total"] == 950.5
    assert data["observacoes"] == "Inclui retoque"
    assert data["descricao"] == orcamento["descricao"]
    assert data["status"] == "criado"


def test_update_orcamento_status_via_put(client, auth_headers, cliente):
    """Test that the full update also accepts a status."""
    orcamento = create_orcamento(client, auth_headers, cliente["id"])

    response = client.put(
        f"/api/v1/orcamentos/{orcamento['id']}", headers=auth_headers, json={"status": "cancelado"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "cancelado"


def test_update_missing_orcamento(client, auth_headers):
    """Test updating an unknown quote."""
    response = client.put(
        "/api/v1/orcamentos/9999", headers=auth_headers, json={"valor_total": 10}
    )
    assert response.status_code == 404


def test_patch_orcamento_status(client, auth_headers, cliente):
    """Test changing only the status."""
    orcamento = create_orcamento(client, auth_headers, cliente["id"])

    response = client.patch(
        f"/api/v1/orcamentos/{orcamento['id']}/status",
        headers=auth_headers,
        json={"status": "feito"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "feito"
    assert data["valor_total"] == orcamento["valor_total"]


def test_patch_orcamento_status_validation(client, auth_headers, cliente):
    """Test that the status body is validated."""
    orcamento = create_orcamento(client, auth_headers, cliente["id"])

    response = client.patch(
        f"/api/v1/orcamentos/{orcamento['id']}/status", headers=auth_headers, json={}
    )
    assert response.status_code == 422

    response = client.patch(
        "/api/v1/orcamentos/9999/status", headers=auth_headers, json={"status": "feito"}
    )
    assert response.status_code == 404


def test_delete_orcamento(client, auth_headers, cliente):
    """Test deleting a quote."""
    orcamento = create_orcamento(client, auth_headers, cliente["id"])

    response = client.delete(f"/api/v1/orcamentos/{orcamento['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"/api/v1/orcamentos/{orcamento['id']}", headers=auth_headers)
    assert response.status_code == 404

    # Cliente is untouched
    response = client.get(f"/api/v1/clientes/{cliente['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["orcamentos"] == []
