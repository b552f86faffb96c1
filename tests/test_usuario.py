# tests/test_usuario.py

from tests.conftest import PASSWORD, USERNAME


def novo_usuario(reference_data, **overrides):
    payload = {
        "username": "joao.souza",
        "password": "senha456",
        "email": "Joao@Example.com",
        "nome": "João",
        "sobrenome": "Souza",
        "dataNascimento": "1990-05-17",
        "generoUsuarioId": reference_data["genero_usuario_id"],
        "cidadeId": str(reference_data["cidade_id"]),
        "situacaoUsuarioId": reference_data["situacao_usuario_id"],
        "grupoUsuarioId": reference_data["grupo_usuario_id"],
    }
    payload.update(overrides)
    return payload


async def test_public_registration_hides_password(client, reference_data):
    response = await client.post("/api/usuario", json=novo_usuario(reference_data))

    assert response.status_code == 201, response.text
    data = response.json()
    assert "password" not in data
    assert data["email"] == "joao@example.com"
    assert data["cidadeId"] == reference_data["cidade_id"]
    assert data["dataNascimento"] == "1990-05-17"
    assert data["situacaoUsuario"]["descricao"] == "Ativo"

    login = await client.post("/api/login", json={"username": "joao.souza", "password": "senha456"})
    assert login.status_code == 200


async def test_registration_validates_email_and_password(client, reference_data):
    bad_email = await client.post("/api/usuario", json=novo_usuario(reference_data, email="sem-arroba"))
    assert bad_email.status_code == 400
    assert bad_email.json() == {"error": "Email inválido"}

    short_password = await client.post("/api/usuario", json=novo_usuario(reference_data, password="123"))
    assert short_password.status_code == 400
    assert "senha" in short_password.json()["error"]


async def test_registration_missing_fields(client, reference_data):
    payload = novo_usuario(reference_data)
    del payload["sobrenome"]
    payload["cidadeId"] = ""

    response = await client.post("/api/usuario", json=payload)

    assert response.status_code == 400
    assert response.json()["missingFields"] == ["sobrenome", "cidadeId"]


async def test_registration_with_unknown_reference(client, reference_data):
    response = await client.post("/api/usuario", json=novo_usuario(reference_data, cidadeId=9999))

    assert response.status_code == 400
    assert response.json() == {"error": "Gênero, cidade, situação ou grupo de usuário não encontrado"}


async def test_duplicate_username(client, usuario, reference_data):
    response = await client.post("/api/usuario", json=novo_usuario(reference_data, username=USERNAME))

    assert response.status_code == 409
    assert response.json() == {"error": "Já existe um usuário com este username"}


async def test_update_conflict_is_bad_request(client, auth_headers, usuario, reference_data):
    created = await client.post("/api/usuario", json=novo_usuario(reference_data))
    other_id = created.json()["id"]

    response = await client.put(f"/api/usuario/{other_id}", json={"email": "maria@example.com"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Já existe um usuário com este email"}


async def test_update_password_is_hashed(client, auth_headers, usuario):
    response = await client.put(f"/api/usuario/{usuario.id}", json={"password": "novaSenha1"}, headers=auth_headers)
    assert response.status_code == 200
    assert "password" not in response.json()

    old = await client.post("/api/login", json={"username": USERNAME, "password": PASSWORD})
    new = await client.post("/api/login", json={"username": USERNAME, "password": "novaSenha1"})
    assert old.status_code == 401
    assert new.status_code == 200


async def test_reads_require_token_and_hide_password(client, auth_headers, usuario):
    assert (await client.get("/api/usuario")).status_code == 401

    listing = await client.get("/api/usuario", headers=auth_headers)
    assert listing.status_code == 200
    assert all("password" not in u for u in listing.json())

    by_username = await client.get(f"/api/usuario/username/{USERNAME}", headers=auth_headers)
    assert by_username.json()["id"] == usuario.id

    by_email = await client.get("/api/usuario/email/MARIA@example.com", headers=auth_headers)
    assert by_email.json()["id"] == usuario.id

    by_nome = await client.get("/api/usuario/nome/ari", headers=auth_headers)
    assert [u["id"] for u in by_nome.json()] == [usuario.id]

    missing = await client.get("/api/usuario/nome/Zzz", headers=auth_headers)
    assert missing.status_code == 404


async def test_availability(client, usuario):
    response = await client.get(
        "/api/usuario/availability", params={"username": USERNAME, "email": "livre@example.com"}
    )

    assert response.status_code == 200
    assert response.json() == {"username": False, "email": True}

    assert (await client.get("/api/usuario/availability")).status_code == 400
