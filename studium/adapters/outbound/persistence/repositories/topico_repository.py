# studium/adapters/outbound/persistence/repositories/topico_repository.py (async version)

from typing import List, Optional

from studium.adapters.outbound.persistence.models import Disciplina, Topico
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class TopicoRepository(BaseRepository[Topico]):
    model = Topico
    default_order_by = "ordem"
    include_relations = ("disciplina",)

    async def find_unique_by_titulo(self, titulo: str) -> Optional[Topico]:
        return await self.find_by_unique_field("titulo", titulo)

    async def find_many_by_titulo(self, titulo: str) -> List[Topico]:
        return await self.find_many(criteria=[self.contains("titulo", titulo)])

    async def find_many_by_disciplina_id(self, disciplina_id: int) -> List[Topico]:
        return await self.find_many({"disciplina_id": disciplina_id})

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: int) -> List[Topico]:
        # tópico só conhece o plano através da disciplina
        return await self.find_many(
            criteria=[Topico.disciplina.has(Disciplina.plano_id == plano_estudo_id)],
        )
