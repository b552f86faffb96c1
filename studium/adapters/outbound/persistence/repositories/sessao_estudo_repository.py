# studium/adapters/outbound/persistence/repositories/sessao_estudo_repository.py (async version)

from typing import List

from studium.adapters.outbound.persistence.models import SessaoEstudo
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class SessaoEstudoRepository(BaseRepository[SessaoEstudo]):
    model = SessaoEstudo
    default_order_by = "data_inicio"
    order_direction = "desc"
    include_relations = ("categoria_sessao", "situacao_sessao", "disciplina", "topico")

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: int) -> List[SessaoEstudo]:
        return await self.find_many({"plano_estudo_id": plano_estudo_id})

    async def find_many_by_disciplina_id(self, disciplina_id: int) -> List[SessaoEstudo]:
        return await self.find_many({"disciplina_id": disciplina_id})

    async def find_many_by_topico_id(self, topico_id: int) -> List[SessaoEstudo]:
        return await self.find_many({"topico_id": topico_id})

    async def find_many_by_bloco_estudo_id(self, bloco_estudo_id: int) -> List[SessaoEstudo]:
        return await self.find_many({"bloco_estudo_id": bloco_estudo_id})

    async def find_many_by_categoria_sessao_id(self, categoria_sessao_id: int) -> List[SessaoEstudo]:
        return await self.find_many({"categoria_sessao_id": categoria_sessao_id})

    async def find_many_by_situacao_sessao_id(self, situacao_sessao_id: int) -> List[SessaoEstudo]:
        return await self.find_many({"situacao_sessao_id": situacao_sessao_id})
