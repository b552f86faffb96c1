# tests/test_topico.py


async def test_create_topico(topico, disciplina):
    assert topico["disciplinaId"] == disciplina["id"]
    assert topico["concluido"] is False
    assert topico["disciplina"]["titulo"] == disciplina["titulo"]


async def test_duplicate_title_in_disciplina(client, auth_headers, topico):
    response = await client.post(
        "/api/topico",
        json={"titulo": topico["titulo"], "ordem": 2, "disciplinaId": topico["disciplinaId"]},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert "já existe" in response.json()["error"].lower()


async def test_ordem_must_be_positive(client, auth_headers, disciplina):
    response = await client.post(
        "/api/topico",
        json={"titulo": "Licitações", "ordem": 0, "disciplinaId": disciplina["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 400


async def test_topicos_by_disciplina_are_ordered(client, auth_headers, topico, disciplina):
    await client.post(
        "/api/topico",
        json={"titulo": "Licitações", "ordem": "3", "disciplinaId": disciplina["id"]},
        headers=auth_headers,
    )

    response = await client.get(f"/api/topico/disciplina/{disciplina['id']}", headers=auth_headers)

    assert [t["titulo"] for t in response.json()] == ["Atos Administrativos", "Licitações"]


async def test_topicos_by_plano(client, auth_headers, topico, disciplina):
    response = await client.get(f"/api/topico/planoEstudo/{disciplina['planoId']}", headers=auth_headers)
    assert [t["id"] for t in response.json()] == [topico["id"]]

    empty = await client.get("/api/topico/planoEstudo/999", headers=auth_headers)
    assert empty.status_code == 404
    assert empty.json() == {"error": "Nenhum tópico encontrado para este plano de estudo"}


async def test_disciplina_lists_its_topicos(client, auth_headers, topico, disciplina):
    response = await client.get(f"/api/disciplina/{disciplina['id']}", headers=auth_headers)

    assert [t["id"] for t in response.json()["topicos"]] == [topico["id"]]
