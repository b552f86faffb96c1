# studium/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta as exceções e as constantes do domínio.
"""

# Exportar todas as exceções para facilitar a importação
from studium.domain.exceptions import (
    StudiumException,              # Exceção base da aplicação
    RecordNotFoundError,
    UniqueConstraintError,
    ForeignKeyConstraintError,
    ReferentialIntegrityError,
    InvalidInputError,
)
from studium.domain.constants import DIAS_SEMANA, MAX_ID, nome_dia_semana
