# tests/test_plano_estudo.py


async def test_create_plano_includes_relations(client, auth_headers, plano, usuario):
    assert plano["usuarioId"] == usuario.id
    assert plano["concluido"] is False
    assert plano["situacao"]["descricao"] == "Novo"
    assert "password" not in plano["usuario"]


async def test_duplicate_title_for_same_user(client, auth_headers, plano):
    response = await client.post(
        "/api/planoEstudo",
        json={"titulo": plano["titulo"], "usuarioId": plano["usuarioId"], "situacaoId": plano["situacaoId"]},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert response.json() == {
        "error": f'Já existe um plano de estudo com o título "{plano["titulo"]}" para este usuário'
    }


async def test_unknown_situacao(client, auth_headers, usuario):
    response = await client.post(
        "/api/planoEstudo",
        json={"titulo": "Outro plano", "usuarioId": usuario.id, "situacaoId": 999},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Situação não encontrada"}


async def test_data_prova_is_parsed(client, auth_headers, usuario, reference_data):
    response = await client.post(
        "/api/planoEstudo",
        json={
            "titulo": "Concurso INSS",
            "dataProva": "2026-08-20T09:00:00-03:00",
            "usuarioId": usuario.id,
            "situacaoId": reference_data["situacao_plano_id"],
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["dataProva"] == "2026-08-20T12:00:00"


async def test_list_with_pagination(client, auth_headers, plano, usuario, reference_data):
    for titulo in ("B plano", "C plano"):
        await client.post(
            "/api/planoEstudo",
            json={"titulo": titulo, "usuarioId": usuario.id, "situacaoId": reference_data["situacao_plano_id"]},
            headers=auth_headers,
        )

    response = await client.get(
        "/api/planoEstudo", params={"limit": 2, "orderBy": "titulo", "orderDirection": "desc"}, headers=auth_headers
    )

    assert response.status_code == 200
    assert [p["titulo"] for p in response.json()] == ["Preparação TRF 2026", "C plano"]
    assert response.headers["x-total-count"] == "3"


async def test_finders(client, auth_headers, plano, usuario):
    by_usuario = await client.get(f"/api/planoEstudo/usuario/{usuario.id}", headers=auth_headers)
    assert [p["id"] for p in by_usuario.json()] == [plano["id"]]

    search = await client.get("/api/planoEstudo/titulo/search/trf", headers=auth_headers)
    assert [p["id"] for p in search.json()] == [plano["id"]]

    missing = await client.get("/api/planoEstudo/titulo/exact/Inexistente", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json() == {"error": "Plano de estudo não encontrado"}

    invalid = await client.get("/api/planoEstudo/usuario/abc", headers=auth_headers)
    assert invalid.status_code == 400


async def test_user_with_plans_cannot_be_deleted(client, auth_headers, plano, usuario):
    response = await client.delete(f"/api/usuario/{usuario.id}", headers=auth_headers)

    assert response.status_code == 400
