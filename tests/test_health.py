# tests/test_health.py

import logging


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["environment"] == "testing"
    assert data["uptime"] >= 0


async def test_health_db(client):
    response = await client.get("/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected"}


async def test_root_lists_endpoints(client):
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["endpoints"]["disciplina"] == "/api/disciplina"


async def test_unknown_route(client):
    response = await client.get("/api/naoExiste")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


async def test_malformed_json_body(client, auth_headers):
    response = await client.post(
        "/api/disciplina",
        content="{nao é json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Requisição inválida"


async def test_response_log_names_authenticated_user(client, auth_headers, usuario, caplog):
    caplog.set_level(logging.INFO, logger="studium.shared.middleware.logging_middleware")

    await client.get("/api/disciplina", headers=auth_headers)
    await client.get("/api/generoUsuario")

    responses = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Response:")]
    assert f"User: {usuario.id} |" in responses[0]
    assert "User: anon |" in responses[1]
