# studium/application/controllers/localidade_controller.py

from typing import Any, Dict

from fastapi import Response, status

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.lookup_dto import CidadeInput, CidadeOutput, UnidadeFederativaInput, UnidadeFederativaOutput
from studium.domain.exceptions import UniqueConstraintError


class UnidadeFederativaController(BaseController):
    entity_name = "Unidade federativa"
    entity_name_plural = "unidades federativas"
    not_found_message = "Unidade federativa não encontrada"
    required_fields = ("descricao", "sigla")
    input_schema = UnidadeFederativaInput
    output_schema = UnidadeFederativaOutput

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        if "sigla" in exc.fields:
            return f'Já existe uma unidade federativa com a sigla "{data.get("sigla")}"'
        return f'Já existe uma unidade federativa com a descrição "{data.get("descricao")}"'

    async def find_by_sigla(self, sigla: str) -> Response:
        return await self.find_by_text(
            sigla,
            self.repository.find_by_sigla,
            "Sigla é obrigatória para busca",
            self.get_not_found_message(),
        )


class CidadeController(BaseController):
    entity_name = "Cidade"
    entity_name_plural = "cidades"
    not_found_message = "Cidade não encontrada"
    required_fields = ("descricao", "unidadeFederativaId")
    input_schema = CidadeInput
    output_schema = CidadeOutput
    reference_messages = {"unidade_federativa_id": "Unidade federativa não encontrada"}

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        return f'Já existe uma cidade com o nome "{data.get("descricao")}" nesta unidade federativa'

    async def find_by_unidade_federativa(self, unidade_federativa_id: Any) -> Response:
        return await self.find_by_reference(
            unidade_federativa_id,
            self.repository.find_many_by_unidade_federativa_id,
            "Nenhuma cidade encontrada para esta unidade federativa",
        )

    async def find_by_descricao_and_unidade_federativa(self, descricao: str, unidade_federativa_id: Any) -> Response:
        uf_id = self.parse_id(unidade_federativa_id)
        if uf_id is None:
            return self.error(status.HTTP_400_BAD_REQUEST, "ID inválido")

        async def finder(value: str):
            return await self.repository.find_by_descricao_and_unidade_federativa(value, uf_id)

        return await self.find_by_text(
            descricao,
            finder,
            "Descrição é obrigatória para busca",
            "Cidade não encontrada nesta unidade federativa",
        )
