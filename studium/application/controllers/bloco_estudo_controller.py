# studium/application/controllers/bloco_estudo_controller.py

from typing import Any, Dict

from fastapi import Response, status

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.estudo_dto import BlocoEstudoInput, BlocoEstudoOutput
from studium.domain.constants import nome_dia_semana
from studium.domain.exceptions import ForeignKeyConstraintError, UniqueConstraintError


class BlocoEstudoController(BaseController):
    entity_name = "Bloco de estudo"
    entity_name_plural = "blocos de estudo"
    required_fields = ("diaSemana", "ordem", "totalHorasPlanejadas", "planoEstudoId", "disciplinaId")
    input_schema = BlocoEstudoInput
    output_schema = BlocoEstudoOutput
    reference_messages = {
        "plano_estudo_id": "Plano de estudo não encontrado",
        "disciplina_id": "Disciplina não encontrada",
    }

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        dia = data.get("dia_semana")
        dia_nome = nome_dia_semana(dia) if isinstance(dia, int) else "este dia"
        return (
            f"Já existe um bloco de estudo na {dia_nome} com a ordem "
            f"{data.get('ordem', '?')} neste plano de estudo"
        )

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: Any) -> Response:
        return await self.find_by_reference(
            plano_estudo_id,
            self.repository.find_many_by_plano_estudo_id,
            "Nenhum bloco de estudo encontrado para este plano de estudo",
        )

    async def find_many_by_plano_and_disciplina(self, plano_estudo_id: Any, disciplina_id: Any) -> Response:
        plano_id = self.parse_id(plano_estudo_id)
        if plano_id is None:
            return self.error(status.HTTP_400_BAD_REQUEST, "ID do plano de estudo inválido")

        async def finder(disciplina: int):
            return await self.repository.find_many_by_plano_and_disciplina(plano_id, disciplina)

        return await self.find_by_reference(
            disciplina_id,
            finder,
            "Nenhum bloco de estudo encontrado para esta disciplina neste plano de estudo",
            label="ID da disciplina",
        )

    async def find_many_by_dia_semana(self, dia_semana: Any) -> Response:
        try:
            dia = int(str(dia_semana).strip())
        except ValueError:
            dia = -1
        if not 0 <= dia <= 6:
            return self.error(status.HTTP_400_BAD_REQUEST, "Dia da semana deve estar entre 0 e 6")

        records = await self.repository.find_many_by_dia_semana(dia)
        return self.respond_found_many(
            records, f"Nenhum bloco de estudo encontrado para {nome_dia_semana(dia)}"
        )
