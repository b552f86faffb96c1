# studium/application/controllers/usuario_controller.py

"""
Controller de usuários.

Além do CRUD, guarda a senha apenas como hash. E-mail e tamanho de
senha são validados por ``UsuarioInput``; ``UsuarioOutput`` não tem
o campo ``password``.
"""

from typing import Any, Dict, Optional

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from studium.adapters.outbound.security.auth_user_manager import UserAuthManager
from studium.application.controllers.base_controller import BaseController
from studium.application.dtos.usuario_dto import UsuarioInput, UsuarioOutput
from studium.domain.exceptions import UniqueConstraintError
from studium.shared.utils.email_validation import normalize_email

REFERENCIA_INVALIDA = "Gênero, cidade, situação ou grupo de usuário não encontrado"


class UsuarioController(BaseController):
    entity_name = "Usuário"
    entity_name_plural = "usuários"
    required_fields = (
        "username",
        "password",
        "email",
        "nome",
        "sobrenome",
        "generoUsuarioId",
        "cidadeId",
        "situacaoUsuarioId",
        "grupoUsuarioId",
    )
    input_schema = UsuarioInput
    output_schema = UsuarioOutput
    reference_messages = {
        "genero_usuario_id": REFERENCIA_INVALIDA,
        "cidade_id": REFERENCIA_INVALIDA,
        "situacao_usuario_id": REFERENCIA_INVALIDA,
        "grupo_usuario_id": REFERENCIA_INVALIDA,
    }
    # contrato herdado do cadastro: duplicidade na alteração é 400
    update_conflict_status = status.HTTP_400_BAD_REQUEST

    async def before_save(self, data: Dict[str, Any], partial: bool) -> Dict[str, Any]:
        if data.get("password"):
            data["password"] = await UserAuthManager.hash_password(data["password"])
        return data

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        field = to_camel(exc.fields[0]) if exc.fields else "valor"
        return f"Já existe um usuário com este {field}"

    async def find_by_username(self, username: str) -> Response:
        return await self.find_by_text(
            username,
            self.repository.find_by_username,
            "Username é obrigatório para busca",
            "Usuário não encontrado",
        )

    async def find_by_email(self, email: str) -> Response:
        async def finder(value: str):
            return await self.repository.find_by_email(normalize_email(value))

        return await self.find_by_text(email, finder, "Email é obrigatório para busca", "Usuário não encontrado")

    async def find_many_by_nome(self, nome: str) -> Response:
        return await self.find_by_text(
            nome,
            self.repository.find_many_by_nome,
            "Nome é obrigatório para busca",
            "Nenhum usuário encontrado com este nome",
        )

    async def check_availability(self, username: Optional[str], email: Optional[str]) -> Response:
        """Informa se username e/ou email ainda estão livres para cadastro."""
        username = (username or "").strip()
        email = (email or "").strip()
        if not username and not email:
            return self.error(status.HTTP_400_BAD_REQUEST, "Informe username ou email")

        content: Dict[str, bool] = {}
        if username:
            content["username"] = await self.repository.find_by_username(username) is None
        if email:
            content["email"] = await self.repository.find_by_email(normalize_email(email)) is None
        return JSONResponse(status_code=status.HTTP_200_OK, content=content)
