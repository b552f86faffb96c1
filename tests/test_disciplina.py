# tests/test_disciplina.py


async def test_create_disciplina(client, auth_headers, plano):
    response = await client.post(
        "/api/disciplina",
        json={"titulo": "Português", "planoId": str(plano["id"]), "horasSemanais": "2.5"},
        headers=auth_headers,
    )

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["titulo"] == "Português"
    assert data["planoId"] == plano["id"]
    assert data["horasSemanais"] == 2.5
    assert data["plano"]["id"] == plano["id"]
    assert data["topicos"] == []


async def test_duplicate_title_in_same_plan(client, auth_headers, disciplina):
    response = await client.post(
        "/api/disciplina",
        json={"titulo": disciplina["titulo"], "planoId": disciplina["planoId"]},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert "já existe" in response.json()["error"].lower()


async def test_missing_required_fields(client, auth_headers):
    response = await client.post("/api/disciplina", json={"titulo": "Sem plano"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Campos obrigatórios ausentes", "missingFields": ["planoId"]}


async def test_unknown_plan(client, auth_headers, usuario):
    response = await client.post(
        "/api/disciplina", json={"titulo": "Órfã", "planoId": 999}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Plano de estudo não encontrado"}


async def test_out_of_range_importance(client, auth_headers, plano):
    response = await client.post(
        "/api/disciplina",
        json={"titulo": "Raciocínio Lógico", "planoId": plano["id"], "importancia": 9},
        headers=auth_headers,
    )

    assert response.status_code == 400


async def test_invalid_number(client, auth_headers, plano):
    response = await client.post(
        "/api/disciplina",
        json={"titulo": "Raciocínio Lógico", "planoId": plano["id"], "horasSemanais": "duas"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Valor inválido para o campo horasSemanais"}


async def test_partial_update_keeps_other_fields(client, auth_headers, disciplina):
    response = await client.put(
        f"/api/disciplina/{disciplina['id']}", json={"concluido": True}, headers=auth_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["concluido"] is True
    assert data["titulo"] == disciplina["titulo"]
    assert data["importancia"] == disciplina["importancia"]


async def test_update_missing_disciplina(client, auth_headers, usuario):
    response = await client.put("/api/disciplina/999", json={"titulo": "X"}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Disciplina não encontrada"}


async def test_find_by_id_and_invalid_id(client, auth_headers, disciplina):
    found = await client.get(f"/api/disciplina/{disciplina['id']}", headers=auth_headers)
    assert found.status_code == 200
    assert found.json()["id"] == disciplina["id"]

    invalid = await client.get("/api/disciplina/abc", headers=auth_headers)
    assert invalid.status_code == 400
    assert invalid.json() == {"error": "ID inválido"}


async def test_finders(client, auth_headers, disciplina):
    by_plano = await client.get(f"/api/disciplina/plano/{disciplina['planoId']}", headers=auth_headers)
    assert [d["id"] for d in by_plano.json()] == [disciplina["id"]]

    empty = await client.get("/api/disciplina/plano/999", headers=auth_headers)
    assert empty.status_code == 404

    search = await client.get("/api/disciplina/titulo/search/administrativo", headers=auth_headers)
    assert [d["id"] for d in search.json()] == [disciplina["id"]]

    exact = await client.get("/api/disciplina/titulo/exact/Direito%20Administrativo", headers=auth_headers)
    assert exact.json()["id"] == disciplina["id"]


async def test_delete_is_final(client, auth_headers, disciplina):
    url = f"/api/disciplina/{disciplina['id']}"

    deleted = await client.delete(url, headers=auth_headers)
    assert deleted.status_code == 204

    assert (await client.get(url, headers=auth_headers)).status_code == 404
    assert (await client.delete(url, headers=auth_headers)).status_code == 404


async def test_delete_plan_cascades_to_disciplinas(client, auth_headers, disciplina):
    deleted = await client.delete(f"/api/planoEstudo/{disciplina['planoId']}", headers=auth_headers)
    assert deleted.status_code == 204

    response = await client.get(f"/api/disciplina/{disciplina['id']}", headers=auth_headers)
    assert response.status_code == 404


HUGE_ID = "99999999999999999999"


async def test_id_beyond_bigint_is_invalid(client, auth_headers, usuario):
    url = f"/api/disciplina/{HUGE_ID}"

    for response in (
        await client.get(url, headers=auth_headers),
        await client.put(url, json={"titulo": "X"}, headers=auth_headers),
        await client.delete(url, headers=auth_headers),
    ):
        assert response.status_code == 400
        assert response.json() == {"error": "ID inválido"}

    by_plano = await client.get(f"/api/disciplina/plano/{HUGE_ID}", headers=auth_headers)
    assert by_plano.status_code == 400


async def test_reference_beyond_bigint_is_invalid(client, auth_headers, usuario):
    response = await client.post(
        "/api/disciplina",
        json={"titulo": "Informática", "planoId": int(HUGE_ID)},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert "planoId" in response.json()["error"]


async def test_null_for_required_column_on_update(client, auth_headers, disciplina):
    url = f"/api/disciplina/{disciplina['id']}"

    response = await client.put(url, json={"concluido": None}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "O campo concluido não pode ser nulo"}
    assert (await client.get(url, headers=auth_headers)).json()["concluido"] is False
