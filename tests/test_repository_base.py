# tests/test_repository_base.py

import pytest

from studium.adapters.outbound.persistence.models import GeneroUsuario
from studium.adapters.outbound.persistence.repositories import (
    BaseRepository,
    CidadeRepository,
    GeneroUsuarioRepository,
    UnidadeFederativaRepository,
)
from studium.application.dtos.lookup_dto import CidadeOutput
from studium.domain.exceptions import (
    ForeignKeyConstraintError,
    InvalidInputError,
    RecordNotFoundError,
    ReferentialIntegrityError,
    UniqueConstraintError,
)


class NotMappedRepository(BaseRepository):
    model = dict


async def test_base_repository_cannot_be_instantiated(session):
    with pytest.raises(TypeError):
        BaseRepository(session)


async def test_repository_rejects_unmapped_model(session):
    with pytest.raises(TypeError):
        NotMappedRepository(session)


async def test_create_and_find_by_id(session):
    repository = GeneroUsuarioRepository(session)

    created = await repository.create({"descricao": "Feminino", "id": 999, "created_at": None})

    assert created.id != 999
    assert created.created_at is not None
    found = await repository.find_by_id(created.id)
    assert found.descricao == "Feminino"
    assert await repository.find_by_id(12345) is None


async def test_find_all_orders_by_default_column_and_paginates(session):
    repository = GeneroUsuarioRepository(session)
    for descricao in ("Outro", "Feminino", "Masculino"):
        await repository.create({"descricao": descricao})

    todos = await repository.find_all()
    assert [g.descricao for g in todos] == ["Feminino", "Masculino", "Outro"]

    pagina = await repository.find_all(limit=2, offset=1)
    assert [g.descricao for g in pagina] == ["Masculino", "Outro"]

    # limit 0 devolve tudo
    assert len(await repository.find_all(limit=0, offset=2)) == 3


async def test_find_many_with_substring_criteria_and_ordering(session):
    repository = GeneroUsuarioRepository(session)
    for descricao in ("Masculino", "Feminino", "Outro"):
        await repository.create({"descricao": descricao})

    ino = repository.contains("descricao", "INO")
    encontrados = await repository.find_many(criteria=[ino], order_direction="desc")

    assert [g.descricao for g in encontrados] == ["Masculino", "Feminino"]
    assert await repository.count(criteria=[repository.contains("descricao", "ino")]) == 2
    assert await repository.count({"descricao": "Outro"}) == 1


async def test_substring_criteria_treats_wildcards_literally(session):
    repository = GeneroUsuarioRepository(session)
    for descricao in ("Não_binário", "Outro", "100% remoto"):
        await repository.create({"descricao": descricao})

    assert [g.descricao for g in await repository.find_many(criteria=[repository.contains("descricao", "%")])] == [
        "100% remoto"
    ]
    assert [g.descricao for g in await repository.find_many(criteria=[repository.contains("descricao", "_")])] == [
        "Não_binário"
    ]
    assert await repository.find_many(criteria=[repository.contains("descricao", "o_t")]) == []
    assert await repository.count(criteria=[repository.contains("descricao", "0%")]) == 1


async def test_not_null_columns_skip_generated_columns(session):
    columns = CidadeRepository(session).not_null_columns()

    assert {"descricao", "unidade_federativa_id"} <= columns
    assert "id" not in columns
    assert "created_at" not in columns


async def test_unknown_filter_column_is_invalid_input(session):
    with pytest.raises(InvalidInputError):
        await GeneroUsuarioRepository(session).find_many({"inexistente": 1})


async def test_create_duplicate_raises_unique_constraint_error(session):
    repository = GeneroUsuarioRepository(session)
    await repository.create({"descricao": "Feminino"})

    with pytest.raises(UniqueConstraintError) as excinfo:
        await repository.create({"descricao": "Feminino"})

    assert excinfo.value.fields == ["descricao"]
    assert excinfo.value.model_name == GeneroUsuario.__name__
    # a sessão continua utilizável depois do rollback
    assert await repository.count() == 1


async def test_create_with_missing_parent_names_the_column(session):
    with pytest.raises(ForeignKeyConstraintError) as excinfo:
        await CidadeRepository(session).create({"descricao": "Campinas", "unidade_federativa_id": 404})

    assert excinfo.value.field == "unidade_federativa_id"


async def test_update_is_partial(session):
    repository = UnidadeFederativaRepository(session)
    uf = await repository.create({"sigla": "SP", "descricao": "Sao Paulo"})

    updated = await repository.update(uf.id, {"descricao": "São Paulo"})

    assert updated.descricao == "São Paulo"
    assert updated.sigla == "SP"


async def test_update_with_no_columns_returns_current_record(session):
    repository = UnidadeFederativaRepository(session)
    uf = await repository.create({"sigla": "RJ", "descricao": "Rio de Janeiro"})

    same = await repository.update(uf.id, {"naoExiste": 1})

    assert same.id == uf.id


async def test_update_and_delete_missing_record(session):
    repository = GeneroUsuarioRepository(session)

    with pytest.raises(RecordNotFoundError):
        await repository.update(777, {"descricao": "X"})
    with pytest.raises(RecordNotFoundError):
        await repository.update(777, {})
    with pytest.raises(RecordNotFoundError):
        await repository.delete(777)


async def test_update_to_duplicate_value(session):
    repository = GeneroUsuarioRepository(session)
    await repository.create({"descricao": "Feminino"})
    outro = await repository.create({"descricao": "Outro"})

    with pytest.raises(UniqueConstraintError):
        await repository.update(outro.id, {"descricao": "Feminino"})


async def test_delete_is_final(session):
    repository = GeneroUsuarioRepository(session)
    genero = await repository.create({"descricao": "Outro"})

    await repository.delete(genero.id)

    assert await repository.find_by_id(genero.id) is None
    with pytest.raises(RecordNotFoundError):
        await repository.delete(genero.id)


async def test_delete_blocked_by_dependents(session):
    uf = await UnidadeFederativaRepository(session).create({"sigla": "MG", "descricao": "Minas Gerais"})
    await CidadeRepository(session).create({"descricao": "Belo Horizonte", "unidade_federativa_id": uf.id})

    with pytest.raises(ReferentialIntegrityError):
        await UnidadeFederativaRepository(session).delete(uf.id)


async def test_reads_load_configured_relations(session):
    uf = await UnidadeFederativaRepository(session).create({"sigla": "PR", "descricao": "Paraná"})
    cidade = await CidadeRepository(session).create({"descricao": "Curitiba", "unidade_federativa_id": uf.id})

    data = CidadeOutput.model_validate(cidade).to_response()

    assert data["unidadeFederativaId"] == uf.id
    assert data["unidadeFederativa"]["sigla"] == "PR"
