# studium/adapters/outbound/persistence/repositories/lookup_repository.py (async version)

"""
Repositories for the reference tables.

Every reference table is ordered by ``descricao`` and supports lookup
by description through ``DescricaoLookupMixin``.
"""

from typing import List

from studium.adapters.outbound.persistence.models import (
    CategoriaRevisao,
    CategoriaSessao,
    GeneroUsuario,
    GrupoUsuario,
    SituacaoPlano,
    SituacaoRevisao,
    SituacaoSessao,
    SituacaoUsuario,
)
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class DescricaoLookupMixin:
    """Implements ``SupportsDescricaoLookup`` over a ``descricao`` column."""

    async def find_by_descricao(self, descricao: str):
        return await self.find_by_unique_field("descricao", descricao)

    async def find_many_by_descricao(self, descricao: str) -> List:
        return await self.find_many(criteria=[self.contains("descricao", descricao)])


class LookupRepository(DescricaoLookupMixin, BaseRepository):
    default_order_by = "descricao"


class GeneroUsuarioRepository(LookupRepository):
    model = GeneroUsuario


class GrupoUsuarioRepository(LookupRepository):
    model = GrupoUsuario


class SituacaoUsuarioRepository(LookupRepository):
    model = SituacaoUsuario


class SituacaoPlanoRepository(LookupRepository):
    model = SituacaoPlano


class CategoriaSessaoRepository(LookupRepository):
    model = CategoriaSessao


class SituacaoSessaoRepository(LookupRepository):
    model = SituacaoSessao


class CategoriaRevisaoRepository(LookupRepository):
    model = CategoriaRevisao


class SituacaoRevisaoRepository(LookupRepository):
    model = SituacaoRevisao
