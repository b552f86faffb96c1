# tests/conftest.py

import os

# bcrypt barato nos testes; precisa valer antes de importar o pacote
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from studium.adapters.configuration.config import Settings
from studium.adapters.outbound.persistence.database import Database
from studium.adapters.outbound.persistence.repositories import (
    CategoriaRevisaoRepository,
    CategoriaSessaoRepository,
    CidadeRepository,
    GeneroUsuarioRepository,
    GrupoUsuarioRepository,
    SituacaoPlanoRepository,
    SituacaoRevisaoRepository,
    SituacaoSessaoRepository,
    SituacaoUsuarioRepository,
    UnidadeFederativaRepository,
    UsuarioRepository,
)
from studium.adapters.outbound.persistence.seeds import run_all_seeds
from studium.adapters.outbound.security.auth_user_manager import UserAuthManager
from studium.main import create_app

USERNAME = "maria.silva"
PASSWORD = "segredo123"


@pytest.fixture
async def database():
    db = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database):
    async with database.session() as db:
        yield db


@pytest.fixture
async def reference_data(database):
    """Seeds de referência mais uma cidade; devolve os IDs usados nos cadastros."""
    async with database.session() as db:
        await run_all_seeds(db)
        sp = await UnidadeFederativaRepository(db).find_by_sigla("SP")
        cidade = await CidadeRepository(db).create({"descricao": "São Paulo", "unidade_federativa_id": sp.id})
        ids = {
            "unidade_federativa_id": sp.id,
            "cidade_id": cidade.id,
            "genero_usuario_id": (await GeneroUsuarioRepository(db).find_by_descricao("Feminino")).id,
            "grupo_usuario_id": (await GrupoUsuarioRepository(db).find_by_descricao("Usuário")).id,
            "situacao_usuario_id": (await SituacaoUsuarioRepository(db).find_by_descricao("Ativo")).id,
            "situacao_usuario_inativo_id": (await SituacaoUsuarioRepository(db).find_by_descricao("Inativo")).id,
            "situacao_plano_id": (await SituacaoPlanoRepository(db).find_by_descricao("Novo")).id,
            "categoria_sessao_id": (await CategoriaSessaoRepository(db).find_by_descricao("Estudo")).id,
            "situacao_sessao_id": (await SituacaoSessaoRepository(db).find_by_descricao("Agendada")).id,
            "categoria_revisao_id": (await CategoriaRevisaoRepository(db).find_by_descricao("24 horas")).id,
            "situacao_revisao_id": (await SituacaoRevisaoRepository(db).find_by_descricao("Pendente")).id,
        }
    return ids


async def create_usuario(database, reference_data, **overrides):
    data = {
        "username": USERNAME,
        "password": await UserAuthManager.hash_password(PASSWORD),
        "email": "maria@example.com",
        "nome": "Maria",
        "sobrenome": "Silva",
        "genero_usuario_id": reference_data["genero_usuario_id"],
        "cidade_id": reference_data["cidade_id"],
        "situacao_usuario_id": reference_data["situacao_usuario_id"],
        "grupo_usuario_id": reference_data["grupo_usuario_id"],
    }
    data.update(overrides)
    async with database.session() as db:
        return await UsuarioRepository(db).create(data)


@pytest.fixture
async def usuario(database, reference_data):
    return await create_usuario(database, reference_data)


@pytest.fixture
async def app(database):
    return create_app(Settings(ENVIRONMENT="testing", CORS_ORIGINS=["http://test"]), database=database)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def auth_headers(client, usuario):
    response = await client.post("/api/login", json={"username": USERNAME, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
async def plano(client, auth_headers, usuario, reference_data):
    response = await client.post(
        "/api/planoEstudo",
        json={
            "titulo": "Preparação TRF 2026",
            "concurso": "Tribunal Regional Federal",
            "usuarioId": usuario.id,
            "situacaoId": reference_data["situacao_plano_id"],
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def disciplina(client, auth_headers, plano):
    response = await client.post(
        "/api/disciplina",
        json={"titulo": "Direito Administrativo", "planoId": plano["id"], "importancia": 5, "conhecimento": 2},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def topico(client, auth_headers, disciplina):
    response = await client.post(
        "/api/topico",
        json={"titulo": "Atos Administrativos", "ordem": 1, "disciplinaId": disciplina["id"]},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
