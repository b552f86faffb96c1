# studium/adapters/outbound/persistence/repositories/usuario_repository.py (async version)

"""
Repository for user operations.

Reads load the user's reference data (gender, city, situation, group);
the password hash is loaded with the row but never serialized.
"""

from typing import List, Optional

from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError

from studium.adapters.outbound.persistence.models import Usuario
from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository


class UsuarioRepository(BaseRepository[Usuario]):
    model = Usuario
    default_order_by = "nome"
    include_relations = ("genero_usuario", "cidade", "situacao_usuario", "grupo_usuario")

    async def find_by_username(self, username: str) -> Optional[Usuario]:
        return await self.find_by_unique_field("username", username)

    async def find_by_email(self, email: str) -> Optional[Usuario]:
        return await self.find_by_unique_field("email", email)

    async def find_many_by_nome(self, nome: str) -> List[Usuario]:
        return await self.find_many(criteria=[self.contains("nome", nome)])

    async def touch_ultimo_acesso(self, usuario_id: int) -> None:
        """
        Record a successful login.

        Does not go through ``update`` so ``updated_at`` reflects
        profile changes only.
        """
        try:
            await self.db.execute(
                update(Usuario)
                .where(Usuario.id == usuario_id)
                .values(ultimo_acesso=func.now(), updated_at=Usuario.updated_at)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self._log_failure("touch_ultimo_acesso", usuario_id, e)
            raise
