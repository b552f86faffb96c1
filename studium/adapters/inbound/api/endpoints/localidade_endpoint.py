# studium/adapters/inbound/api/endpoints/localidade_endpoint.py

"""
Endpoints de unidades federativas e cidades (leitura pública).
"""

from fastapi import APIRouter, Depends, Path, Response

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import register_crud_routes, register_descricao_routes
from studium.adapters.outbound.persistence.repositories import CidadeRepository, UnidadeFederativaRepository
from studium.application.controllers import CidadeController, UnidadeFederativaController

unidade_federativa_router = APIRouter()
cidade_router = APIRouter()

get_unidade_federativa_controller = controller_provider(UnidadeFederativaController, UnidadeFederativaRepository)
get_cidade_controller = controller_provider(CidadeController, CidadeRepository)


@unidade_federativa_router.get("/sigla/{sigla}", summary="Buscar unidade federativa pela sigla")
async def find_unidade_federativa_by_sigla(
        sigla: str = Path(..., description="Sigla com duas letras"),
        controller: UnidadeFederativaController = Depends(get_unidade_federativa_controller),
) -> Response:
    return await controller.find_by_sigla(sigla)


register_descricao_routes(unidade_federativa_router, get_unidade_federativa_controller, public=True)
register_crud_routes(unidade_federativa_router, get_unidade_federativa_controller, "unidade federativa",
                     public_reads=True)


@cidade_router.get("/uf/{unidade_federativa_id}", summary="Listar cidades de uma unidade federativa")
async def find_cidades_by_unidade_federativa(
        unidade_federativa_id: str = Path(...),
        controller: CidadeController = Depends(get_cidade_controller),
) -> Response:
    return await controller.find_by_unidade_federativa(unidade_federativa_id)


@cidade_router.get(
    "/descricao/{descricao}/uf/{unidade_federativa_id}",
    summary="Buscar cidade pelo nome dentro de uma unidade federativa",
)
async def find_cidade_by_descricao_and_unidade_federativa(
        descricao: str,
        unidade_federativa_id: str = Path(...),
        controller: CidadeController = Depends(get_cidade_controller),
) -> Response:
    return await controller.find_by_descricao_and_unidade_federativa(descricao, unidade_federativa_id)


register_descricao_routes(cidade_router, get_cidade_controller, public=True)
register_crud_routes(cidade_router, get_cidade_controller, "cidade", public_reads=True)
