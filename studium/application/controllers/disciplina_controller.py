# studium/application/controllers/disciplina_controller.py

from typing import Any, Dict

from fastapi import Response

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.estudo_dto import DisciplinaInput, DisciplinaOutput
from studium.domain.exceptions import UniqueConstraintError


class DisciplinaController(BaseController):
    entity_name = "Disciplina"
    entity_name_plural = "disciplinas"
    not_found_message = "Disciplina não encontrada"
    required_fields = ("titulo", "planoId")
    input_schema = DisciplinaInput
    output_schema = DisciplinaOutput
    reference_messages = {"plano_id": "Plano de estudo não encontrado"}

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        return f'Já existe uma disciplina com o título "{data.get("titulo")}" neste plano de estudo'

    async def find_unique_by_titulo(self, titulo: str) -> Response:
        return await self.find_by_text(
            titulo,
            self.repository.find_unique_by_titulo,
            "Título é obrigatório para busca",
            "Disciplina não encontrada",
        )

    async def find_many_by_titulo(self, titulo: str) -> Response:
        return await self.find_by_text(
            titulo,
            self.repository.find_many_by_titulo,
            "Título é obrigatório para busca",
            "Nenhuma disciplina encontrada com este título",
        )

    async def find_many_by_plano_id(self, plano_id: Any) -> Response:
        return await self.find_by_reference(
            plano_id,
            self.repository.find_many_by_plano_id,
            "Nenhuma disciplina encontrada para este plano de estudo",
        )
