# studium/adapters/inbound/api/endpoints/sessao_estudo_endpoint.py

from fastapi import APIRouter, Depends, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import AUTH, register_crud_routes
from studium.adapters.outbound.persistence.repositories import SessaoEstudoRepository
from studium.application.controllers import SessaoEstudoController

router = APIRouter(dependencies=AUTH)
get_controller = controller_provider(SessaoEstudoController, SessaoEstudoRepository)


@router.get("/planoEstudo/{id}", summary="Listar sessões de um plano de estudo")
async def find_many_by_plano_estudo(id: str, controller: SessaoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_plano_estudo_id(id)


@router.get("/disciplina/{id}", summary="Listar sessões de uma disciplina")
async def find_many_by_disciplina(id: str, controller: SessaoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_disciplina_id(id)


@router.get("/topico/{id}", summary="Listar sessões de um tópico")
async def find_many_by_topico(id: str, controller: SessaoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_topico_id(id)


@router.get("/blocoEstudo/{id}", summary="Listar sessões de um bloco de estudo")
async def find_many_by_bloco_estudo(id: str, controller: SessaoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_bloco_estudo_id(id)


@router.get("/categoria/{id}", summary="Listar sessões de uma categoria")
async def find_many_by_categoria(id: str, controller: SessaoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_categoria_sessao_id(id)


@router.get("/situacao/{id}", summary="Listar sessões de uma situação")
async def find_many_by_situacao(id: str, controller: SessaoEstudoController = Depends(get_controller)) -> Response:
    return await controller.find_many_by_situacao_sessao_id(id)


register_crud_routes(router, get_controller, "sessão de estudo")
