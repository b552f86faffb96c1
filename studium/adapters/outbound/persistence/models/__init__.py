# studium/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema; importá-lo
garante que ``Base.metadata`` conhece todas as tabelas.
"""

# Importar Base
from studium.adapters.outbound.persistence.models.base_model import Base

# Tabelas de referência
from studium.adapters.outbound.persistence.models.lookup_models import (
    GeneroUsuario,
    GrupoUsuario,
    SituacaoUsuario,
    SituacaoPlano,
    CategoriaSessao,
    SituacaoSessao,
    CategoriaRevisao,
    SituacaoRevisao,
)
from studium.adapters.outbound.persistence.models.localidade_model import UnidadeFederativa, Cidade

# Modelos principais
from studium.adapters.outbound.persistence.models.usuario_model import Usuario
from studium.adapters.outbound.persistence.models.plano_estudo_model import PlanoEstudo
from studium.adapters.outbound.persistence.models.disciplina_model import Disciplina
from studium.adapters.outbound.persistence.models.topico_model import Topico
from studium.adapters.outbound.persistence.models.bloco_estudo_model import BlocoEstudo
from studium.adapters.outbound.persistence.models.sessao_estudo_model import SessaoEstudo
from studium.adapters.outbound.persistence.models.revisao_model import Revisao

# Exportar todos os modelos
__all__ = [
    # Base
    "Base",

    # Tabelas de referência
    "GeneroUsuario",
    "GrupoUsuario",
    "SituacaoUsuario",
    "SituacaoPlano",
    "CategoriaSessao",
    "SituacaoSessao",
    "CategoriaRevisao",
    "SituacaoRevisao",
    "UnidadeFederativa",
    "Cidade",

    # Modelos principais
    "Usuario",
    "PlanoEstudo",
    "Disciplina",
    "Topico",
    "BlocoEstudo",
    "SessaoEstudo",
    "Revisao",
]
