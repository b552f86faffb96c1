# studium/adapters/outbound/persistence/repositories/disciplina_repository.py (async version)

from typing import List, Optional

from studium.adapters.outbound.persistence.models import Disciplina
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class DisciplinaRepository(BaseRepository[Disciplina]):
    model = Disciplina
    default_order_by = "titulo"
    include_relations = ("plano", "topicos")

    async def find_unique_by_titulo(self, titulo: str) -> Optional[Disciplina]:
        return await self.find_by_unique_field("titulo", titulo)

    async def find_many_by_titulo(self, titulo: str) -> List[Disciplina]:
        return await self.find_many(criteria=[self.contains("titulo", titulo)])

    async def find_many_by_plano_id(self, plano_id: int) -> List[Disciplina]:
        return await self.find_many({"plano_id": plano_id})
