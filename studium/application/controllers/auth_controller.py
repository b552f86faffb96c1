# studium/application/controllers/auth_controller.py

import logging
from typing import Any, Mapping

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from studium.adapters.outbound.persistence.repositories.usuario_repository import UsuarioRepository
from studium.adapters.outbound.security.auth_user_manager import UserAuthManager
from studium.application.dtos.usuario_dto import LoginInput, UsuarioOutput

# Configurar logger
logger = logging.getLogger(__name__)

SITUACAO_ATIVA = "ativo"


class AuthController:
    """
    Login por username e senha.

    Responde sempre "Credenciais inválidas" quando o usuário não existe
    ou a senha não confere, sem revelar qual dos dois falhou.
    """

    def __init__(self, repository: UsuarioRepository):
        self.repository = repository

    @staticmethod
    def error(status_code: int, message: str) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"error": message})

    async def login(self, payload: Mapping[str, Any]) -> Response:
        try:
            credentials = LoginInput.model_validate(payload)
        except ValidationError:
            credentials = LoginInput()
        username, password = credentials.username, credentials.password
        if not username or not password:
            return self.error(status.HTTP_400_BAD_REQUEST, "Nome de usuário e senha são obrigatórios")

        usuario = await self.repository.find_by_username(username.strip())
        if usuario is None or not await UserAuthManager.verify_password(password, usuario.password):
            logger.warning(f"Falha de login para o usuário '{username}'")
            return self.error(status.HTTP_401_UNAUTHORIZED, "Credenciais inválidas")

        situacao = usuario.situacao_usuario
        if situacao is not None and situacao.descricao.strip().lower() != SITUACAO_ATIVA:
            logger.warning(f"Login negado para usuário inativo: ID {usuario.id}")
            return self.error(status.HTTP_403_FORBIDDEN, "Usuário inativo")

        await self.repository.touch_ultimo_acesso(usuario.id)
        usuario = await self.repository.find_by_id(usuario.id)
        token = await UserAuthManager.create_access_token(usuario.id, usuario.username)

        logger.info(f"Login realizado: usuário ID {usuario.id}")
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={
                "ok": True,
                "usuario": UsuarioOutput.model_validate(usuario).to_response(),
                "token": token,
            },
        )

    async def logout(self, claims: Mapping[str, Any]) -> Response:
        # JWT sem estado: o cliente descarta o token
        logger.info(f"Logout: usuário ID {claims.get('sub')}")
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"ok": True, "message": "Logout realizado com sucesso"},
        )
