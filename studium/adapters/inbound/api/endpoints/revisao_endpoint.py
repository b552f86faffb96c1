# studium/adapters/inbound/api/endpoints/revisao_endpoint.py

from fastapi import APIRouter, Depends, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import AUTH, register_crud_routes
from studium.adapters.outbound.persistence.repositories import RevisaoRepository
from studium.application.controllers import RevisaoController

router = APIRouter(dependencies=AUTH)
get_controller = controller_provider(RevisaoController, RevisaoRepository)


@router.get("/planoEstudo/{id}", summary="Listar revisões de um plano de estudo")
async def find_many_by_plano_estudo(id: str, controller: RevisaoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_plano_estudo_id(id)


@router.get("/disciplina/{id}", summary="Listar revisões de uma disciplina")
async def find_many_by_disciplina(id: str, controller: RevisaoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_disciplina_id(id)


@router.get("/topico/{id}", summary="Listar revisões de um tópico")
async def find_many_by_topico(id: str, controller: RevisaoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_topico_id(id)


@router.get("/categoria/{id}", summary="Listar revisões de uma categoria")
async def find_many_by_categoria(id: str, controller: RevisaoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_categoria_revisao_id(id)


@router.get("/situacao/{id}", summary="Listar revisões de uma situação")
async def find_many_by_situacao(id: str, controller: RevisaoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_situacao_revisao_id(id)


register_crud_routes(router, get_controller, "revisão")
