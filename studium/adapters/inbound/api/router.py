# studium/adapters/inbound/api/router.py

from fastapi import APIRouter

from studium.adapters.inbound.api.endpoints import (
    auth_endpoint,
    bloco_estudo_endpoint,
    disciplina_endpoint,
    localidade_endpoint,
    lookup_endpoint,
    plano_estudo_endpoint,
    revisao_endpoint,
    sessao_estudo_endpoint,
    topico_endpoint,
    usuario_endpoint,
)

api_router = APIRouter()

# Incluir os routers dos endpoints
api_router.include_router(auth_endpoint.router, tags=["Autenticação"])
api_router.include_router(usuario_endpoint.router, prefix="/usuario", tags=["Usuário"])
api_router.include_router(plano_estudo_endpoint.router, prefix="/planoEstudo", tags=["Plano de estudo"])
api_router.include_router(disciplina_endpoint.router, prefix="/disciplina", tags=["Disciplina"])
api_router.include_router(topico_endpoint.router, prefix="/topico", tags=["Tópico"])
api_router.include_router(bloco_estudo_endpoint.router, prefix="/blocoEstudo", tags=["Bloco de estudo"])
api_router.include_router(sessao_estudo_endpoint.router, prefix="/sessaoEstudo", tags=["Sessão de estudo"])
api_router.include_router(revisao_endpoint.router, prefix="/revisao", tags=["Revisão"])
api_router.include_router(
    localidade_endpoint.unidade_federativa_router, prefix="/unidadeFederativa", tags=["Unidade federativa"]
)
api_router.include_router(localidade_endpoint.cidade_router, prefix="/cidade", tags=["Cidade"])

# Tabelas de referência
for prefix, tag, lookup_router in lookup_endpoint.LOOKUP_ROUTERS:
    api_router.include_router(lookup_router, prefix=prefix, tags=[tag])

# Caminhos expostos na rota raiz
ENDPOINTS = {
    "auth": "/api/login",
    "usuario": "/api/usuario",
    "planoEstudo": "/api/planoEstudo",
    "disciplina": "/api/disciplina",
    "topico": "/api/topico",
    "blocoEstudo": "/api/blocoEstudo",
    "sessaoEstudo": "/api/sessaoEstudo",
    "revisao": "/api/revisao",
    "unidadeFederativa": "/api/unidadeFederativa",
    "cidade": "/api/cidade",
    **{prefix.strip("/"): f"/api{prefix}" for prefix, _, _ in lookup_endpoint.LOOKUP_ROUTERS},
    "health": "/health",
    "docs": "/api-docs",
}
