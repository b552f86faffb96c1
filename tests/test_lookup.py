# tests/test_lookup.py

import pytest


async def test_public_lookup_reads(client, reference_data):
    response = await client.get("/api/generoUsuario")

    assert response.status_code == 200
    assert [g["descricao"] for g in response.json()] == [
        "Feminino", "Masculino", "Outro", "Prefiro não informar",
    ]


async def test_protected_lookup_reads(client, reference_data):
    assert (await client.get("/api/situacaoPlano")).status_code == 401


async def test_public_lookup_writes_require_token(client, reference_data):
    response = await client.post("/api/generoUsuario", json={"descricao": "Não binário"})

    assert response.status_code == 401


async def test_descricao_exact_and_search(client, auth_headers):
    exact = await client.get("/api/situacaoPlano/descricao/exact/Em%20andamento", headers=auth_headers)
    assert exact.status_code == 200
    assert exact.json()["descricao"] == "Em andamento"

    search = await client.get("/api/situacaoPlano/descricao/search/do", headers=auth_headers)
    assert [s["descricao"] for s in search.json()] == ["Cancelado", "Concluído", "Pausado"]

    missing = await client.get("/api/situacaoPlano/descricao/exact/Arquivado", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json() == {"error": "Situação de plano não encontrado(a) com a descrição 'Arquivado'"}

    none_found = await client.get("/api/situacaoPlano/descricao/search/xyz", headers=auth_headers)
    assert none_found.status_code == 404


async def test_create_duplicate_lookup(client, auth_headers):
    response = await client.post("/api/categoriaSessao", json={"descricao": "Estudo"}, headers=auth_headers)

    assert response.status_code == 409
    assert response.json() == {"error": 'Já existe categoria de sessão com a descrição "Estudo"'}


async def test_update_requires_descricao(client, auth_headers):
    created = await client.post("/api/categoriaRevisao", json={"descricao": "90 dias"}, headers=auth_headers)
    assert created.status_code == 201

    response = await client.put(f"/api/categoriaRevisao/{created.json()['id']}", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["missingFields"] == ["descricao"]


async def test_delete_referenced_lookup_is_blocked(client, auth_headers, plano):
    response = await client.delete(f"/api/situacaoPlano/{plano['situacaoId']}", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {
        "error": "Não é possível excluir este(a) Situação de plano: existem registros associados"
    }


async def test_delete_unreferenced_lookup(client, auth_headers):
    created = await client.post("/api/situacaoRevisao", json={"descricao": "Adiada"}, headers=auth_headers)
    url = f"/api/situacaoRevisao/{created.json()['id']}"

    assert (await client.delete(url, headers=auth_headers)).status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404


@pytest.mark.parametrize("prefix", [
    "/generoUsuario",
    "/grupoUsuario",
    "/situacaoUsuario",
    "/situacaoPlano",
    "/categoriaSessao",
    "/situacaoSessao",
    "/categoriaRevisao",
    "/situacaoRevisao",
])
async def test_every_lookup_is_seeded(client, auth_headers, prefix):
    response = await client.get(f"/api{prefix}", headers=auth_headers)

    assert response.status_code == 200
    assert len(response.json()) > 0


async def test_unidade_federativa_and_cidade(client, auth_headers, reference_data):
    ufs = await client.get("/api/unidadeFederativa")
    assert len(ufs.json()) == 27

    sp = await client.get("/api/unidadeFederativa/sigla/sp")
    assert sp.json()["descricao"] == "São Paulo"

    cidades = await client.get(f"/api/cidade/uf/{reference_data['unidade_federativa_id']}")
    assert [c["descricao"] for c in cidades.json()] == ["São Paulo"]

    duplicated = await client.post(
        "/api/cidade",
        json={"descricao": "São Paulo", "unidadeFederativaId": reference_data["unidade_federativa_id"]},
        headers=auth_headers,
    )
    assert duplicated.status_code == 409


@pytest.mark.parametrize("termo", ["_", "%25", "o_t"])
async def test_search_treats_wildcards_literally(client, reference_data, termo):
    response = await client.get(f"/api/generoUsuario/descricao/search/{termo}")

    assert response.status_code == 404


async def test_percent_encoded_descricao_is_decoded_once(client, auth_headers):
    created = await client.post("/api/generoUsuario", json={"descricao": "A%25B"}, headers=auth_headers)
    assert created.status_code == 201

    exact = await client.get("/api/generoUsuario/descricao/exact/A%2525B")
    assert exact.status_code == 200
    assert exact.json()["id"] == created.json()["id"]

    search = await client.get("/api/generoUsuario/descricao/search/%2525")
    assert [g["descricao"] for g in search.json()] == ["A%25B"]
