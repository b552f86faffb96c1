# studium/adapters/inbound/api/endpoints/plano_estudo_endpoint.py

from fastapi import APIRouter, Depends, Path, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import AUTH, register_crud_routes
from studium.adapters.outbound.persistence.repositories import PlanoEstudoRepository
from studium.application.controllers import PlanoEstudoController

router = APIRouter(dependencies=AUTH)
get_controller = controller_provider(PlanoEstudoController, PlanoEstudoRepository)


@router.get("/titulo/exact/{titulo}", summary="Buscar plano de estudo pelo título exato")
async def find_unique_by_titulo(titulo: str, controller: PlanoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_unique_by_titulo(titulo)


@router.get("/titulo/search/{titulo}", summary="Buscar planos de estudo por parte do título")
async def find_many_by_titulo(titulo: str, controller: PlanoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_titulo(titulo)


@router.get("/usuario/{usuario_id}", summary="Listar planos de estudo de um usuário")
async def find_many_by_usuario(
        usuario_id: str = Path(...),
        controller: PlanoEstudoController = Depends(get_controller),
) -> Response:
    return await controller.find_many_by_usuario_id(usuario_id)


register_crud_routes(router, get_controller, "plano de estudo")
