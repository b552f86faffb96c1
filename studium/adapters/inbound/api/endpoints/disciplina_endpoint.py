# studium/adapters/inbound/api/endpoints/disciplina_endpoint.py

from fastapi import APIRouter, Depends, Path, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import AUTH, register_crud_routes
from studium.adapters.outbound.persistence.repositories import DisciplinaRepository
from studium.application.controllers import DisciplinaController

router = APIRouter(dependencies=AUTH)
get_controller = controller_provider(DisciplinaController, DisciplinaRepository)


@router.get("/titulo/exact/{titulo}", summary="Buscar disciplina pelo título exato")
async def find_unique_by_titulo(titulo: str, controller: DisciplinaController = Depends(get_controller)) -> Response:
    return await controller.find_unique_by_titulo(titulo)


@router.get("/titulo/search/{titulo}", summary="Buscar disciplinas por parte do título")
async def find_many_by_titulo(titulo: str, controller: DisciplinaController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_titulo(titulo)


@router.get("/plano/{plano_id}", summary="Listar disciplinas de um plano de estudo")
async def find_many_by_plano(
        plano_id: str = Path(...),
        controller: DisciplinaController = Depends(get_controller),
) -> Response:
    return await controller.find_many_by_plano_id(plano_id)


register_crud_routes(router, get_controller, "disciplina")
