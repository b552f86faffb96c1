# studium/application/controllers/topico_controller.py

from typing import Any, Dict

from fastapi import Response

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.estudo_dto import TopicoInput, TopicoOutput
from studium.domain.exceptions import UniqueConstraintError


class TopicoController(BaseController):
    entity_name = "Tópico"
    entity_name_plural = "tópicos"
    required_fields = ("titulo", "ordem", "disciplinaId")
    input_schema = TopicoInput
    output_schema = TopicoOutput
    reference_messages = {"disciplina_id": "Disciplina não encontrada"}

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        return f'Já existe um tópico com o título "{data.get("titulo")}" nesta disciplina'

    async def find_unique_by_titulo(self, titulo: str) -> Response:
        return await self.find_by_text(
            titulo,
            self.repository.find_unique_by_titulo,
            "Título é obrigatório para busca",
            "Tópico não encontrado",
        )

    async def find_many_by_titulo(self, titulo: str) -> Response:
        return await self.find_by_text(
            titulo,
            self.repository.find_many_by_titulo,
            "Título é obrigatório para busca",
            "Nenhum tópico encontrado com este título",
        )

    async def find_many_by_disciplina_id(self, disciplina_id: Any) -> Response:
        return await self.find_by_reference(
            disciplina_id,
            self.repository.find_many_by_disciplina_id,
            "Nenhum tópico encontrado para esta disciplina",
        )

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: Any) -> Response:
        return await self.find_by_reference(
            plano_estudo_id,
            self.repository.find_many_by_plano_estudo_id,
            "Nenhum tópico encontrado para este plano de estudo",
        )
