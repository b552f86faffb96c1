# studium/adapters/outbound/persistence/seeds/__init__.py

"""
Módulo de seeds para inicialização do banco de dados.

Este módulo contém funções para popular o banco de dados
com dados iniciais necessários para o funcionamento do sistema.
Pode ser executado repetidas vezes: só insere o que falta.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from studium.adapters.outbound.persistence.seeds.reference_data import (
    run_lookup_seed,
    run_unidade_federativa_seed,
)

# Configurar logger
logger = logging.getLogger(__name__)


async def run_all_seeds(db: AsyncSession) -> int:
    """
    Executa todos os scripts de seed em ordem.

    Args:
        db: Sessão do banco de dados

    Returns:
        Quantidade de registros criados
    """
    logger.info("Iniciando execução de todos os seeds")

    created = await run_lookup_seed(db)
    created += await run_unidade_federativa_seed(db)

    logger.info(f"Todos os seeds foram executados com sucesso ({created} registros criados)")
    return created
