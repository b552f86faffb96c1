# studium/application/controllers/__init__.py

from studium.application.controllers.base_controller import BaseController
from studium.application.controllers.lookup_controller import (
    LookupController,
    GeneroUsuarioController,
    GrupoUsuarioController,
    SituacaoUsuarioController,
    SituacaoPlanoController,
    CategoriaSessaoController,
    SituacaoSessaoController,
    CategoriaRevisaoController,
    SituacaoRevisaoController,
)
from studium.application.controllers.localidade_controller import UnidadeFederativaController, CidadeController
from studium.application.controllers.usuario_controller import UsuarioController
from studium.application.controllers.auth_controller import AuthController
from studium.application.controllers.plano_estudo_controller import PlanoEstudoController
from studium.application.controllers.disciplina_controller import DisciplinaController
from studium.application.controllers.topico_controller import TopicoController
from studium.application.controllers.bloco_estudo_controller import BlocoEstudoController
from studium.application.controllers.sessao_estudo_controller import SessaoEstudoController
from studium.application.controllers.revisao_controller import RevisaoController

__all__ = [
    "BaseController",
    "LookupController",
    "GeneroUsuarioController",
    "GrupoUsuarioController",
    "SituacaoUsuarioController",
    "SituacaoPlanoController",
    "CategoriaSessaoController",
    "SituacaoSessaoController",
    "CategoriaRevisaoController",
    "SituacaoRevisaoController",
    "UnidadeFederativaController",
    "CidadeController",
    "UsuarioController",
    "AuthController",
    "PlanoEstudoController",
    "DisciplinaController",
    "TopicoController",
    "BlocoEstudoController",
    "SessaoEstudoController",
    "RevisaoController",
]
