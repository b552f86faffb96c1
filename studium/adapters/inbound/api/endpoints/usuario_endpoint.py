# studium/adapters/inbound/api/endpoints/usuario_endpoint.py

"""
Endpoints de usuários.

O cadastro (``POST``) e a verificação de disponibilidade são públicos;
as demais rotas exigem token. Nenhuma resposta contém a senha.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import AUTH, register_crud_routes
from studium.adapters.outbound.persistence.repositories import UsuarioRepository
from studium.application.controllers import UsuarioController

# Configurar logging
logger = logging.getLogger(__name__)

router = APIRouter()
get_controller = controller_provider(UsuarioController, UsuarioRepository)


@router.get(
    "/availability",
    summary="Verificar disponibilidade de username/email",
    description="Retorna `true` para cada valor ainda livre.",
)
async def check_availability(
        username: Optional[str] = Query(None),
        email: Optional[str] = Query(None),
        controller: UsuarioController = Depends(get_controller),
) -> Response:
    return await controller.check_availability(username, email)


@router.get("/username/{username}", dependencies=AUTH, summary="Buscar usuário pelo username")
async def find_by_username(username: str, controller: UsuarioController = Depends(get_controller)) -> Response:
    return await controller.find_by_username(username)


@router.get("/email/{email}", dependencies=AUTH, summary="Buscar usuário pelo email")
async def find_by_email(email: str, controller: UsuarioController = Depends(get_controller)) -> Response:
    return await controller.find_by_email(email)


@router.get("/nome/{nome}", dependencies=AUTH, summary="Buscar usuários por parte do nome")
async def find_many_by_nome(nome: str, controller: UsuarioController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_nome(nome)


register_crud_routes(router, get_controller, "usuário", public_create=True)
