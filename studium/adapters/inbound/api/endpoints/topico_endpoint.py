# studium/adapters/inbound/api/endpoints/topico_endpoint.py

from fastapi import APIRouter, Depends, Path, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import AUTH, register_crud_routes
from studium.adapters.outbound.persistence.repositories import TopicoRepository
from studium.application.controllers import TopicoController

router = APIRouter(dependencies=AUTH)
get_controller = controller_provider(TopicoController, TopicoRepository)


@router.get("/titulo/exact/{titulo}", summary="Buscar tópico pelo título exato")
async def find_unique_by_titulo(titulo: str, controller: TopicoController = Depends(get_controller)) -> Response:
    return await controller.find_unique_by_titulo(titulo)


@router.get("/titulo/search/{titulo}", summary="Buscar tópicos por parte do título")
async def find_many_by_titulo(titulo: str, controller: TopicoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_titulo(titulo)


@router.get("/disciplina/{disciplina_id}", summary="Listar tópicos de uma disciplina")
async def find_many_by_disciplina(
        disciplina_id: str = Path(...),
        controller: TopicoController = Depends(get_controller),
) -> Response:
    return await controller.find_many_by_disciplina_id(disciplina_id)


@router.get("/planoEstudo/{plano_estudo_id}", summary="Listar tópicos de um plano de estudo")
async def find_many_by_plano_estudo(
        plano_estudo_id: str = Path(...),
        controller: TopicoController = Depends(get_controller),
) -> Response:
    return await controller.find_many_by_plano_estudo_id(plano_estudo_id)


register_crud_routes(router, get_controller, "tópico")
