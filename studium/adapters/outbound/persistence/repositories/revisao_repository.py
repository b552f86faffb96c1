# studium/adapters/outbound/persistence/repositories/revisao_repository.py (async version)

from typing import List

from studium.adapters.outbound.persistence.models import Revisao
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class RevisaoRepository(BaseRepository[Revisao]):
    model = Revisao
    default_order_by = "data_programada"
    order_direction = "desc"
    include_relations = ("categoria_revisao", "situacao_revisao", "disciplina", "topico")

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: int) -> List[Revisao]:
        return await self.find_many({"plano_estudo_id": plano_estudo_id})

    async def find_many_by_disciplina_id(self, disciplina_id: int) -> List[Revisao]:
        return await self.find_many({"disciplina_id": disciplina_id})

    async def find_many_by_topico_id(self, topico_id: int) -> List[Revisao]:
        return await self.find_many({"topico_id": topico_id}, order_by="numero", order_direction="asc")

    async def find_many_by_categoria_revisao_id(self, categoria_revisao_id: int) -> List[Revisao]:
        return await self.find_many({"categoria_revisao_id": categoria_revisao_id})

    async def find_many_by_situacao_revisao_id(self, situacao_revisao_id: int) -> List[Revisao]:
        return await self.find_many({"situacao_revisao_id": situacao_revisao_id})
