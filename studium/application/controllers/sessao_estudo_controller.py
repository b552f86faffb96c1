# studium/application/controllers/sessao_estudo_controller.py

from typing import Any, Dict

from fastapi import Response

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.estudo_dto import SessaoEstudoInput, SessaoEstudoOutput
from studium.domain.exceptions import InvalidInputError


class SessaoEstudoController(BaseController):
    entity_name = "Sessão de estudo"
    entity_name_plural = "sessões de estudo"
    not_found_message = "Sessão de estudo não encontrada"
    required_fields = ("dataInicio", "planoEstudoId", "disciplinaId", "topicoId")
    input_schema = SessaoEstudoInput
    output_schema = SessaoEstudoOutput
    reference_messages = {
        "plano_estudo_id": "Plano de estudo não encontrado",
        "disciplina_id": "Disciplina não encontrada",
        "topico_id": "Tópico não encontrado",
        "bloco_estudo_id": "Bloco de estudo não encontrado",
        "categoria_sessao_id": "Categoria de sessão não encontrada",
        "situacao_sessao_id": "Situação de sessão não encontrada",
    }

    def validate(self, data: Dict[str, Any], partial: bool) -> None:
        inicio, termino = data.get("data_inicio"), data.get("data_termino")
        if inicio is not None and termino is not None and termino < inicio:
            raise InvalidInputError("A data de término deve ser posterior à data de início")

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: Any) -> Response:
        return await self.find_by_reference(
            plano_estudo_id,
            self.repository.find_many_by_plano_estudo_id,
            "Nenhuma sessão de estudo encontrada para este plano de estudo",
        )

    async def find_many_by_disciplina_id(self, disciplina_id: Any) -> Response:
        return await self.find_by_reference(
            disciplina_id,
            self.repository.find_many_by_disciplina_id,
            "Nenhuma sessão de estudo encontrada para esta disciplina",
        )

    async def find_many_by_topico_id(self, topico_id: Any) -> Response:
        return await self.find_by_reference(
            topico_id,
            self.repository.find_many_by_topico_id,
            "Nenhuma sessão de estudo encontrada para este tópico",
        )

    async def find_many_by_bloco_estudo_id(self, bloco_estudo_id: Any) -> Response:
        return await self.find_by_reference(
            bloco_estudo_id,
            self.repository.find_many_by_bloco_estudo_id,
            "Nenhuma sessão de estudo encontrada para este bloco de estudo",
        )

    async def find_many_by_categoria_sessao_id(self, categoria_sessao_id: Any) -> Response:
        return await self.find_by_reference(
            categoria_sessao_id,
            self.repository.find_many_by_categoria_sessao_id,
            "Nenhuma sessão de estudo encontrada para esta categoria",
        )

    async def find_many_by_situacao_sessao_id(self, situacao_sessao_id: Any) -> Response:
        return await self.find_by_reference(
            situacao_sessao_id,
            self.repository.find_many_by_situacao_sessao_id,
            "Nenhuma sessão de estudo encontrada para esta situação",
        )
