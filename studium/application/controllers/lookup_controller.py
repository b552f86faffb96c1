# studium/application/controllers/lookup_controller.py

"""
Controllers das tabelas de referência.

Todas compartilham o mesmo contrato: ``descricao`` obrigatória e única,
com busca exata e parcial pela descrição.
"""

from typing import Any, Dict

from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.lookup_dto import LookupInput, LookupOutput
from studium.domain.exceptions import UniqueConstraintError


class LookupController(BaseController):
    required_fields = ("descricao",)
    update_required_fields = ("descricao",)
    input_schema = LookupInput
    output_schema = LookupOutput

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        return f'Já existe {self.entity_name.lower()} com a descrição "{data.get("descricao")}"'


class GeneroUsuarioController(LookupController):
    entity_name = "Gênero de usuário"
    entity_name_plural = "gêneros de usuário"


class GrupoUsuarioController(LookupController):
    entity_name = "Grupo de usuário"
    entity_name_plural = "grupos de usuário"


class SituacaoUsuarioController(LookupController):
    entity_name = "Situação de usuário"
    entity_name_plural = "situações de usuário"
    not_found_message = "Situação de usuário não encontrada"


class SituacaoPlanoController(LookupController):
    entity_name = "Situação de plano"
    entity_name_plural = "situações de plano"
    not_found_message = "Situação de plano não encontrada"


class CategoriaSessaoController(LookupController):
    entity_name = "Categoria de sessão"
    entity_name_plural = "categorias de sessão"
    not_found_message = "Categoria de sessão não encontrada"


class SituacaoSessaoController(LookupController):
    entity_name = "Situação de sessão"
    entity_name_plural = "situações de sessão"
    not_found_message = "Situação de sessão não encontrada"


class CategoriaRevisaoController(LookupController):
    entity_name = "Categoria de revisão"
    entity_name_plural = "categorias de revisão"
    not_found_message = "Categoria de revisão não encontrada"


class SituacaoRevisaoController(LookupController):
    entity_name = "Situação de revisão"
    entity_name_plural = "situações de revisão"
    not_found_message = "Situação de revisão não encontrada"
