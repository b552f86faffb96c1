# studium/adapters/inbound/api/endpoints/bloco_estudo_endpoint.py

from fastapi import APIRouter, Depends, Path, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import AUTH, register_crud_routes
from studium.adapters.outbound.persistence.repositories import BlocoEstudoRepository
from studium.application.controllers import BlocoEstudoController

router = APIRouter(dependencies=AUTH)
get_controller = controller_provider(BlocoEstudoController, BlocoEstudoRepository)


@router.get("/plano/{plano_estudo_id}", summary="Listar blocos de um plano de estudo")
async def find_many_by_plano(
        plano_estudo_id: str = Path(...),
        controller: BlocoEstudoController = Depends(get_controller),
) -> Response:
    return await controller.find_many_by_plano_estudo_id(plano_estudo_id)


@router.get(
    "/plano/{plano_estudo_id}/disciplina/{disciplina_id}",
    summary="Listar blocos de uma disciplina dentro de um plano de estudo",
)
async def find_many_by_plano_and_disciplina(
        plano_estudo_id: str = Path(...),
        disciplina_id: str = Path(...),
        controller: BlocoEstudoController = Depends(get_controller),
) -> Response:
    return await controller.find_many_by_plano_and_disciplina(plano_estudo_id, disciplina_id)


@router.get(
    "/diaSemana/{dia_semana}",
    summary="Listar blocos de um dia da semana",
    description="0 = domingo, 6 = sábado.",
)
async def find_many_by_dia_semana(
        dia_semana: str = Path(...),
        controller: BlocoEstudoController = Depends(get_controller),
) -> Response:
    return await controller.find_many_by_dia_semana(dia_semana)


register_crud_routes(router, get_controller, "bloco de estudo")
