# studium/adapters/inbound/api/endpoints/lookup_endpoint.py

"""
Endpoints das tabelas de referência.

Gênero, grupo e situação de usuário alimentam o formulário de cadastro
e por isso têm leitura pública; as demais exigem token.
"""

import logging

from fastapi import APIRouter

from studium.adapters.inbound.api.deps import controller_provider
from studium.adapters.inbound.api.endpoints.crud_routes import register_crud_routes, register_descricao_routes
from studium.adapters.outbound.persistence.repositories import (
    CategoriaRevisaoRepository,
    CategoriaSessaoRepository,
    GeneroUsuarioRepository,
    GrupoUsuarioRepository,
    SituacaoPlanoRepository,
    SituacaoRevisaoRepository,
    SituacaoSessaoRepository,
    SituacaoUsuarioRepository,
)
from studium.application.controllers import (
    CategoriaRevisaoController,
    CategoriaSessaoController,
    GeneroUsuarioController,
    GrupoUsuarioController,
    SituacaoPlanoController,
    SituacaoRevisaoController,
    SituacaoSessaoController,
    SituacaoUsuarioController,
)

# Configurar logging
logger = logging.getLogger(__name__)


def build_lookup_router(controller_class, repository_class, entity: str, public_reads: bool = False) -> APIRouter:
    router = APIRouter()
    get_controller = controller_provider(controller_class, repository_class)
    register_descricao_routes(router, get_controller, public=public_reads)
    register_crud_routes(router, get_controller, entity, public_reads=public_reads)
    return router


# (prefixo, tag, router)
LOOKUP_ROUTERS = [
    ("/generoUsuario", "Gênero de usuário",
     build_lookup_router(GeneroUsuarioController, GeneroUsuarioRepository, "gênero de usuário", public_reads=True)),
    ("/grupoUsuario", "Grupo de usuário",
     build_lookup_router(GrupoUsuarioController, GrupoUsuarioRepository, "grupo de usuário", public_reads=True)),
    ("/situacaoUsuario", "Situação de usuário",
     build_lookup_router(SituacaoUsuarioController, SituacaoUsuarioRepository, "situação de usuário",
                         public_reads=True)),
    ("/situacaoPlano", "Situação de plano",
     build_lookup_router(SituacaoPlanoController, SituacaoPlanoRepository, "situação de plano")),
    ("/categoriaSessao", "Categoria de sessão",
     build_lookup_router(CategoriaSessaoController, CategoriaSessaoRepository, "categoria de sessão")),
    ("/situacaoSessao", "Situação de sessão",
     build_lookup_router(SituacaoSessaoController, SituacaoSessaoRepository, "situação de sessão")),
    ("/categoriaRevisao", "Categoria de revisão",
     build_lookup_router(CategoriaRevisaoController, CategoriaRevisaoRepository, "categoria de revisão")),
    ("/situacaoRevisao", "Situação de revisão",
     build_lookup_router(SituacaoRevisaoController, SituacaoRevisaoRepository, "situação de revisão")),
]
