# studium/adapters/outbound/persistence/repositories/bloco_estudo_repository.py (async version)

from typing import List

from studium.adapters.outbound.persistence.models import BlocoEstudo
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class BlocoEstudoRepository(BaseRepository[BlocoEstudo]):
    model = BlocoEstudo
    default_order_by = "dia_semana"
    include_relations = ("disciplina",)

    async def find_many_by_plano_estudo_id(self, plano_estudo_id: int) -> List[BlocoEstudo]:
        return await self.find_many({"plano_estudo_id": plano_estudo_id})

    async def find_many_by_plano_and_disciplina(self, plano_estudo_id: int, disciplina_id: int) -> List[BlocoEstudo]:
        return await self.find_many({"plano_estudo_id": plano_estudo_id, "disciplina_id": disciplina_id})

    async def find_many_by_dia_semana(self, dia_semana: int) -> List[BlocoEstudo]:
        return await self.find_many({"dia_semana": dia_semana}, order_by="ordem")
