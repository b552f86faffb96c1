# studium/adapters/outbound/persistence/seeds/reference_data.py

"""
Script de seed para as tabelas de referência e unidades federativas.
"""

import logging
from typing import Dict, Iterable, Type

from sqlalchemy.ext.asyncio import AsyncSession

from studium.adapters.outbound.persistence.repositories import (
    CategoriaRevisaoRepository,
    CategoriaSessaoRepository,
    GeneroUsuarioRepository,
    GrupoUsuarioRepository,
    SituacaoPlanoRepository,
    SituacaoRevisaoRepository,
    SituacaoSessaoRepository,
    SituacaoUsuarioRepository,
    UnidadeFederativaRepository,
)
from studium.adapters.outbound.persistence.repositories.lookup_repository import LookupRepository

logger = logging.getLogger(__name__)

# Descrições por tabela de referência
LOOKUPS: Dict[Type[LookupRepository], tuple] = {
    GeneroUsuarioRepository: ("Masculino", "Feminino", "Outro", "Prefiro não informar"),
    GrupoUsuarioRepository: ("Administrador", "Usuário"),
    SituacaoUsuarioRepository: ("Ativo", "Inativo", "Bloqueado"),
    SituacaoPlanoRepository: ("Novo", "Em andamento", "Pausado", "Concluído", "Cancelado"),
    CategoriaSessaoRepository: ("Estudo", "Revisão", "Exercícios", "Simulado", "Leitura"),
    SituacaoSessaoRepository: ("Agendada", "Em andamento", "Concluída", "Cancelada"),
    CategoriaRevisaoRepository: ("24 horas", "7 dias", "30 dias", "Personalizada"),
    SituacaoRevisaoRepository: ("Pendente", "Concluída", "Atrasada", "Cancelada"),
}

UNIDADES_FEDERATIVAS = (
    ("AC", "Acre"),
    ("AL", "Alagoas"),
    ("AP", "Amapá"),
    ("AM", "Amazonas"),
    ("BA", "Bahia"),
    ("CE", "Ceará"),
    ("DF", "Distrito Federal"),
    ("ES", "Espírito Santo"),
    ("GO", "Goiás"),
    ("MA", "Maranhão"),
    ("MT", "Mato Grosso"),
    ("MS", "Mato Grosso do Sul"),
    ("MG", "Minas Gerais"),
    ("PA", "Pará"),
    ("PB", "Paraíba"),
    ("PR", "Paraná"),
    ("PE", "Pernambuco"),
    ("PI", "Piauí"),
    ("RJ", "Rio de Janeiro"),
    ("RN", "Rio Grande do Norte"),
    ("RS", "Rio Grande do Sul"),
    ("RO", "Rondônia"),
    ("RR", "Roraima"),
    ("SC", "Santa Catarina"),
    ("SP", "São Paulo"),
    ("SE", "Sergipe"),
    ("TO", "Tocantins"),
)


async def _seed_descricoes(repository: LookupRepository, descricoes: Iterable[str]) -> int:
    created = 0
    for descricao in descricoes:
        if await repository.find_by_descricao(descricao) is None:
            await repository.create({"descricao": descricao})
            logger.info(f"🟢 {repository.model.__name__} '{descricao}' criado.")
            created += 1
        else:
            logger.info(f"🟡 {repository.model.__name__} '{descricao}' já existe.")
    return created


async def run_lookup_seed(db: AsyncSession) -> int:
    """Insere as descrições ausentes de cada tabela de referência."""
    created = 0
    for repository_class, descricoes in LOOKUPS.items():
        created += await _seed_descricoes(repository_class(db), descricoes)
    return created


async def run_unidade_federativa_seed(db: AsyncSession) -> int:
    """Insere as 27 unidades federativas que ainda não existem."""
    repository = UnidadeFederativaRepository(db)
    created = 0
    for sigla, descricao in UNIDADES_FEDERATIVAS:
        if await repository.find_by_sigla(sigla) is None:
            await repository.create({"sigla": sigla, "descricao": descricao})
            created += 1
    logger.info(f"Unidades federativas: {created} criadas, {len(UNIDADES_FEDERATIVAS) - created} já existiam")
    return created
