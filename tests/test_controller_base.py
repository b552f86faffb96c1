# tests/test_controller_base.py

import json

import pytest
from pydantic import ValidationError

from studium.adapters.outbound.persistence.repositories import (
    DisciplinaRepository,
    GeneroUsuarioRepository,
)
from studium.application.controllers import DisciplinaController, GeneroUsuarioController
from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.base_dto import validation_message
from studium.application.dtos.estudo_dto import DisciplinaInput
from studium.domain.constants import MAX_ID
from studium.domain.exceptions import InvalidInputError


def body(response):
    return json.loads(response.body)


class UnnamedController(BaseController):
    pass


async def test_controller_requires_entity_name(session):
    with pytest.raises(TypeError):
        UnnamedController(GeneroUsuarioRepository(session))


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    (" 42 ", 42),
    ("0", None),
    ("-3", None),
    ("abc", None),
    ("1.5", None),
    (None, None),
    ("99999999999999999999", None),
    (str(MAX_ID), MAX_ID),
    (str(MAX_ID + 1), None),
])
def test_parse_id(raw, expected):
    assert BaseController.parse_id(raw) == expected


def test_validation_message_reports_range():
    with pytest.raises(ValidationError) as excinfo:
        DisciplinaInput.model_validate({"importancia": 6})

    assert validation_message(DisciplinaInput, excinfo.value) == "O campo importancia deve estar entre 1 e 5"


def test_validation_message_reports_type_and_length():
    with pytest.raises(ValidationError) as excinfo:
        DisciplinaInput.model_validate({"horasSemanais": "muitas"})
    assert validation_message(DisciplinaInput, excinfo.value) == "Valor inválido para o campo horasSemanais"

    with pytest.raises(ValidationError) as excinfo:
        DisciplinaInput.model_validate({"titulo": "x" * 201})
    assert validation_message(DisciplinaInput, excinfo.value) == "O campo titulo deve ter no máximo 200 caracteres"


def test_input_keeps_only_sent_fields_with_column_names():
    data = DisciplinaInput.model_validate({"titulo": "  Português ", "horasSemanais": "2.5", "extra": 1}).to_data()

    assert data == {"titulo": "Português", "horas_semanais": 2.5}


async def test_prepare_rejects_null_for_required_column(session):
    controller = DisciplinaController(DisciplinaRepository(session))

    with pytest.raises(InvalidInputError) as excinfo:
        await controller.prepare({"concluido": None}, partial=True)

    assert excinfo.value.detail == "O campo concluido não pode ser nulo"


async def test_create_reports_missing_fields(session):
    controller = GeneroUsuarioController(GeneroUsuarioRepository(session))

    response = await controller.create({"descricao": ""})

    assert response.status_code == 400
    assert body(response) == {"error": "Campos obrigatórios ausentes", "missingFields": ["descricao"]}


async def test_create_then_conflict(session):
    controller = GeneroUsuarioController(GeneroUsuarioRepository(session))

    created = await controller.create({"descricao": "  Feminino "})
    assert created.status_code == 201
    assert body(created)["descricao"] == "Feminino"

    duplicated = await controller.create({"descricao": "Feminino"})
    assert duplicated.status_code == 409
    assert "já existe" in body(duplicated)["error"].lower()


async def test_find_all_with_limit_sets_total_header(session):
    repository = GeneroUsuarioRepository(session)
    for descricao in ("A", "B", "C"):
        await repository.create({"descricao": descricao})
    controller = GeneroUsuarioController(repository)

    everything = await controller.find_all()
    assert [g["descricao"] for g in body(everything)] == ["A", "B", "C"]
    assert "x-total-count" not in everything.headers

    page = await controller.find_all(limit=2, offset=2)
    assert [g["descricao"] for g in body(page)] == ["C"]
    assert page.headers["x-total-count"] == "3"

    invalid = await controller.find_all(order_by="naoExiste")
    assert invalid.status_code == 400


async def test_find_by_id_invalid_and_missing(session):
    controller = GeneroUsuarioController(GeneroUsuarioRepository(session))

    assert (await controller.find_by_id("abc")).status_code == 400
    missing = await controller.find_by_id("99")
    assert missing.status_code == 404
    assert body(missing) == {"error": "Gênero de usuário não encontrado(a)"}


async def test_descricao_lookup_requires_capability(session):
    controller = DisciplinaController(DisciplinaRepository(session))

    response = await controller.find_by_descricao("qualquer")

    assert response.status_code == 501
    assert body(response) == {"error": "Busca por descrição não implementada"}


async def test_descricao_lookup_requires_value(session):
    controller = GeneroUsuarioController(GeneroUsuarioRepository(session))

    response = await controller.find_many_by_descricao("   ")

    assert response.status_code == 400
    assert body(response) == {"error": "Descrição é obrigatória para busca"}


async def test_update_rejects_blank_required_field(session):
    repository = GeneroUsuarioRepository(session)
    genero = await repository.create({"descricao": "Outro"})
    controller = GeneroUsuarioController(repository)

    response = await controller.update(str(genero.id), {"descricao": ""})

    assert response.status_code == 400


async def test_delete_missing_and_existing(session):
    repository = GeneroUsuarioRepository(session)
    genero = await repository.create({"descricao": "Outro"})
    controller = GeneroUsuarioController(repository)

    assert (await controller.delete(str(genero.id))).status_code == 204
    assert (await controller.delete(str(genero.id))).status_code == 404
    assert (await controller.delete("x")).status_code == 400
