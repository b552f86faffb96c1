# studium/application/controllers/revisao_controller.py

from typing import Any, Dict

from fastapi import Response

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.estudo_dto import RevisaoInput, RevisaoOutput
from studium.domain.exceptions import UniqueConstraintError


class RevisaoController(BaseController):
    entity_name = "Revisão"
    entity_name_plural = "revisões"
    not_found_message = "Revisão não encontrada"
    required_fields = (
        "numero",
        "dataProgramada",
        "desempenho",
        "categoriaRevisaoId",
        "situacaoRevisaoId",
        "planoEstudoId",
        "disciplinaId",
        "topicoId",
    )
    input_schema = RevisaoInput
    output_schema = RevisaoOutput
    reference_messages = {
        "categoria_revisao_id": "Categoria de revisão não encontrada",
        "situacao_revisao_id": "Situação de revisão não encontrada",
        "plano_estudo_id": "Plano de estudo não encontrado",
        "disciplina_id": "Disciplina não encontrada",
        "topico_id": "Tópico não encontrado",
    }

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        return f"Já existe uma revisão número {data.get('numero', '?')} para este tópico"

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: Any) -> Response:
        return await self.find_by_reference(
            plano_estudo_id,
            self.repository.find_many_by_plano_estudo_id,
            "Nenhuma revisão encontrada para este plano de estudo",
        )

    async def find_many_by_disciplina_id(self, disciplina_id: Any) -> Response:
        return await self.find_by_reference(
            disciplina_id,
            self.repository.find_many_by_disciplina_id,
            "Nenhuma revisão encontrada para esta disciplina",
        )

    async def find_many_by_topico_id(self, topico_id: Any) -> Response:
        return await self.find_by_reference(
            topico_id,
            self.repository.find_many_by_topico_id,
            "Nenhuma revisão encontrada para este tópico",
        )

    async def find_many_by_categoria_revisao_id(self, categoria_revisao_id: Any) -> Response:
        return await self.find_by_reference(
            categoria_revisao_id,
            self.repository.find_many_by_categoria_revisao_id,
            "Nenhuma revisão encontrada para esta categoria",
        )

    async def find_many_by_situacao_revisao_id(self, situacao_revisao_id: Any) -> Response:
        return await self.find_by_reference(
            situacao_revisao_id,
            self.repository.find_many_by_situacao_revisao_id,
            "Nenhuma revisão encontrada para esta situação",
        )
