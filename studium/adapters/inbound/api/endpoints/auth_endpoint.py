# studium/adapters/inbound/api/endpoints/auth_endpoint.py

"""
Endpoints de autenticação (login e logout).
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response

from studium.adapters.inbound.api.deps import controller_provider, get_current_user, get_json_body
from studium.adapters.inbound.api.endpoints.crud_routes import json_body
from studium.adapters.outbound.persistence.repositories import UsuarioRepository
from studium.application.controllers import AuthController
from studium.application.dtos.usuario_dto import LoginInput

router = APIRouter()
get_controller = controller_provider(AuthController, UsuarioRepository)


@router.post(
    "/login",
    summary="Autenticar usuário",
    description="Recebe `username` e `password`; devolve o usuário (sem senha) e um token JWT.",
    responses={
        400: {"description": "Username ou senha ausentes"},
        401: {"description": "Credenciais inválidas"},
        403: {"description": "Usuário inativo"},
    },
    openapi_extra=json_body(LoginInput),
)
async def login(
        payload: Dict[str, Any] = Depends(get_json_body),
        controller: AuthController = Depends(get_controller),
) -> Response:
    return await controller.login(payload)


@router.post("/logout", summary="Encerrar sessão")
async def logout(
        claims: Dict[str, Any] = Depends(get_current_user),
        controller: AuthController = Depends(get_controller),
) -> Response:
    return await controller.logout(claims)
