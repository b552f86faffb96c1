# studium/adapters/inbound/api/endpoints/crud_routes.py

"""
Registro das rotas CRUD padrão de um recurso.

Cada recurso registra primeiro as suas rotas específicas e depois
chama ``register_crud_routes``; assim caminhos fixos de um segmento
(``/availability``) têm prioridade sobre ``/{id}``.
"""

from typing import Any, Callable, Dict, Optional, Type

from fastapi import APIRouter, Depends, Path, Query, Response
from pydantic import BaseModel

from studium.adapters.inbound.api.deps import get_current_user, get_json_body
from studium.domain.constants import MAX_ID

AUTH = [Depends(get_current_user)]

ERROR_RESPONSES = {
    400: {"description": "Dados inválidos"},
    401: {"description": "Token ausente, mal formatado ou inválido"},
    404: {"description": "Registro não encontrado"},
    409: {"description": "Registro duplicado"},
}


def json_body(schema: Type[BaseModel]) -> Dict[str, Any]:
    """``openapi_extra`` documenting a JSON body read by ``get_json_body``."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema(by_alias=True)}},
        }
    }


def register_crud_routes(
        router: APIRouter,
        get_controller: Callable,
        entity: str,
        public_create: bool = False,
        public_reads: bool = False,
) -> APIRouter:
    """
    Adds ``POST`` and ``GET`` on the collection plus ``GET /{id}``, ``PUT /{id}`` and
    ``DELETE /{id}`` to ``router``, all delegating to the controller
    returned by ``get_controller``.
    """
    read_deps = [] if public_reads else AUTH
    create_deps = [] if public_create else AUTH
    body_docs = json_body(get_controller.controller_class.input_schema)

    @router.post(
        "",
        status_code=201,
        dependencies=create_deps,
        summary=f"Criar {entity}",
        responses=ERROR_RESPONSES,
        openapi_extra=body_docs,
    )
    async def create(payload: Dict[str, Any] = Depends(get_json_body), controller=Depends(get_controller)) -> Response:
        return await controller.create(payload)

    @router.get(
        "",
        dependencies=read_deps,
        summary=f"Listar {entity}",
        description="Sem parâmetros devolve todos os registros; com `limit` o total vem em `X-Total-Count`.",
    )
    async def find_all(
            limit: Optional[int] = Query(None, ge=0, le=MAX_ID, description="Quantidade máxima de registros"),
            offset: Optional[int] = Query(None, ge=0, le=MAX_ID, description="Registros a pular"),
            order_by: Optional[str] = Query(None, alias="orderBy", description="Campo de ordenação (camelCase)"),
            order_direction: Optional[str] = Query(None, alias="orderDirection", description="asc ou desc"),
            controller=Depends(get_controller),
    ) -> Response:
        return await controller.find_all(limit, offset, order_by, order_direction)

    @router.get(
        "/{id}",
        dependencies=read_deps,
        summary=f"Buscar {entity} por ID",
        responses=ERROR_RESPONSES,
    )
    async def find_by_id(id: str = Path(..., description="ID numérico"), controller=Depends(get_controller)) -> Response:
        return await controller.find_by_id(id)

    @router.put(
        "/{id}",
        dependencies=AUTH,
        summary=f"Atualizar {entity}",
        description="Atualização parcial: campos ausentes permanecem inalterados.",
        responses=ERROR_RESPONSES,
        openapi_extra=body_docs,
    )
    async def update(
            id: str = Path(..., description="ID numérico"),
            payload: Dict[str, Any] = Depends(get_json_body),
            controller=Depends(get_controller),
    ) -> Response:
        return await controller.update(id, payload)

    @router.delete(
        "/{id}",
        status_code=204,
        dependencies=AUTH,
        summary=f"Excluir {entity}",
        responses=ERROR_RESPONSES,
    )
    async def delete(id: str = Path(..., description="ID numérico"), controller=Depends(get_controller)) -> Response:
        return await controller.delete(id)

    return router


def register_descricao_routes(router: APIRouter, get_controller: Callable, public: bool = False) -> APIRouter:
    """Adds the exact and partial ``descricao`` lookups."""
    deps = [] if public else AUTH

    @router.get("/descricao/exact/{descricao}", dependencies=deps, summary="Buscar pela descrição exata")
    async def find_by_descricao(descricao: str, controller=Depends(get_controller)) -> Response:
        return await controller.find_by_descricao(descricao)

    @router.get("/descricao/search/{descricao}", dependencies=deps, summary="Buscar por parte da descrição")
    async def find_many_by_descricao(descricao: str, controller=Depends(get_controller)) -> Response:
        return await controller.find_many_by_descricao(descricao)

    return router
