# studium/adapters/outbound/persistence/repositories/localidade_repository.py (async version)

from typing import List, Optional

from studium.adapters.outbound.persistence.models import Cidade, UnidadeFederativa
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository
from studium.adapters.outbound.persistence.repositories.lookup_repository import DescricaoLookupMixin


class UnidadeFederativaRepository(DescricaoLookupMixin, BaseRepository[UnidadeFederativa]):
    model = UnidadeFederativa
    default_order_by = "sigla"

    async def find_by_sigla(self, sigla: str) -> Optional[UnidadeFederativa]:
        return await self.find_by_unique_field("sigla", sigla.upper())


class CidadeRepository(DescricaoLookupMixin, BaseRepository[Cidade]):
    model = Cidade
    default_order_by = "descricao"
    include_relations = ("unidade_federativa",)

    async def find_many_by_unidade_federativa_id(self, unidade_federativa_id: int) -> List[Cidade]:
        return await self.find_many({"unidade_federativa_id": unidade_federativa_id})

    async def find_by_descricao_and_unidade_federativa(
            self, descricao: str, unidade_federativa_id: int
    ) -> Optional[Cidade]:
        cidades = await self.find_many(
            {"descricao": descricao, "unidade_federativa_id": unidade_federativa_id}, take=1
        )
        return cidades[0] if cidades else None
