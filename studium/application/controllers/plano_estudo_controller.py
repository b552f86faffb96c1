# studium/application/controllers/plano_estudo_controller.py

from typing import Any, Dict

from fastapi import Response

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.estudo_dto import PlanoEstudoInput, PlanoEstudoOutput
from studium.domain.exceptions import UniqueConstraintError


class PlanoEstudoController(BaseController):
    entity_name = "Plano de estudo"
    entity_name_plural = "planos de estudo"
    required_fields = ("titulo", "usuarioId", "situacaoId")
    input_schema = PlanoEstudoInput
    output_schema = PlanoEstudoOutput
    reference_messages = {
        "usuario_id": "Usuário não encontrado",
        "situacao_id": "Situação não encontrada",
    }

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        return f'Já existe um plano de estudo com o título "{data.get("titulo")}" para este usuário'

    async def find_unique_by_titulo(self, titulo: str) -> Response:
        return await self.find_by_text(
            titulo,
            self.repository.find_unique_by_titulo,
            "Título é obrigatório para busca",
            "Plano de estudo não encontrado",
        )

    async def find_many_by_titulo(self, titulo: str) -> Response:
        return await self.find_by_text(
            titulo,
            self.repository.find_many_by_titulo,
            "Título é obrigatório para busca",
            "Nenhum plano de estudo encontrado com este título",
        )

    async def find_many_by_usuario_id(self, usuario_id: Any) -> Response:
        return await self.find_by_reference(
            usuario_id,
            self.repository.find_many_by_usuario_id,
            "Nenhum plano de estudo encontrado para este usuário",
        )
