# studium/adapters/outbound/persistence/repositories/plano_estudo_repository.py (async version)

from typing import List, Optional

from studium.adapters.outbound.persistence.models import PlanoEstudo
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class PlanoEstudoRepository(BaseRepository[PlanoEstudo]):
    model = PlanoEstudo
    default_order_by = "titulo"
    include_relations = ("usuario", "situacao", "disciplinas")

    async def find_unique_by_titulo(self, titulo: str) -> Optional[PlanoEstudo]:
        return await self.find_by_unique_field("titulo", titulo)

    async def find_many_by_titulo(self, titulo: str) -> List[PlanoEstudo]:
        return await self.find_many(criteria=[self.contains("titulo", titulo)])

    async def find_many_by_usuario_id(self, usuario_id: int) -> List[PlanoEstudo]:
        return await self.find_many({"usuario_id": usuario_id})
