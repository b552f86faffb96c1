# studium/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repository module.

Repositories are classes, not singletons: each request builds the ones
it needs around its own ``AsyncSession``.
"""

from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository
from studium.adapters.outbound.persistence.repositories.lookup_repository import (
    DescricaoLookupMixin,
    LookupRepository,
    GeneroUsuarioRepository,
    GrupoUsuarioRepository,
    SituacaoUsuarioRepository,
    SituacaoPlanoRepository,
    CategoriaSessaoRepository,
    SituacaoSessaoRepository,
    CategoriaRevisaoRepository,
    SituacaoRevisaoRepository,
)
from studium.adapters.outbound.persistence.repositories.localidade_repository import (
    UnidadeFederativaRepository,
    CidadeRepository,
)
from studium.adapters.outbound.persistence.repositories.usuario_repository import UsuarioRepository
from studium.adapters.outbound.persistence.repositories.plano_estudo_repository import PlanoEstudoRepository
from studium.adapters.outbound.persistence.repositories.disciplina_repository import DisciplinaRepository
from studium.adapters.outbound.persistence.repositories.topico_repository import TopicoRepository
from studium.adapters.outbound.persistence.repositories.bloco_estudo_repository import BlocoEstudoRepository
from studium.adapters.outbound.persistence.repositories.sessao_estudo_repository import SessaoEstudoRepository
from studium.adapters.outbound.persistence.repositories.revisao_repository import RevisaoRepository

__all__ = [
    "BaseRepository",
    "DescricaoLookupMixin",
    "LookupRepository",
    "GeneroUsuarioRepository",
    "GrupoUsuarioRepository",
    "SituacaoUsuarioRepository",
    "SituacaoPlanoRepository",
    "CategoriaSessaoRepository",
    "SituacaoSessaoRepository",
    "CategoriaRevisaoRepository",
    "SituacaoRevisaoRepository",
    "UnidadeFederativaRepository",
    "CidadeRepository",
    "UsuarioRepository",
    "PlanoEstudoRepository",
    "DisciplinaRepository",
    "TopicoRepository",
    "BlocoEstudoRepository",
    "SessaoEstudoRepository",
    "RevisaoRepository",
]
