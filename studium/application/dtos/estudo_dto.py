# studium/application/dtos/estudo_dto.py

"""
Dtos do planejamento de estudo: plano, disciplina, tópico, bloco da
grade semanal, sessão de estudo e revisão.

Cada entidade tem um dto de entrada (``...Input``), um resumo só com as
colunas (``...Summary``, usado quando a entidade aparece aninhada em
outra) e a saída completa (``...Output``) com os relacionamentos que o
repositório carrega.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from studium.application.dtos.base_dto import EntityId, InputModel, OutputModel, Titulo, UtcDateTime, texto
from studium.application.dtos.lookup_dto import LookupOutput
from studium.application.dtos.usuario_dto import UsuarioSummary


# ─── Entradas ────────────────────────────────────────────────────────────────

class PlanoEstudoInput(InputModel):
    titulo: Optional[Titulo] = None
    concurso: Optional[str] = Field(None, max_length=200)
    cargo: Optional[str] = Field(None, max_length=200)
    banca: Optional[str] = Field(None, max_length=100)
    data_prova: Optional[UtcDateTime] = Field(None, description="Data da prova (ISO 8601).")
    concluido: Optional[bool] = None
    usuario_id: Optional[EntityId] = None
    situacao_id: Optional[EntityId] = None


class DisciplinaInput(InputModel):
    titulo: Optional[Titulo] = None
    concluido: Optional[bool] = None
    importancia: Optional[int] = Field(None, ge=1, le=5, description="Peso de 1 a 5.")
    conhecimento: Optional[int] = Field(None, ge=0, le=5, description="Autoavaliação de 0 a 5.")
    horas_semanais: Optional[float] = Field(None, ge=0, le=168)
    plano_id: Optional[EntityId] = None


class TopicoInput(InputModel):
    titulo: Optional[texto(300)] = None
    ordem: Optional[int] = Field(None, ge=1)
    concluido: Optional[bool] = None
    edital: Optional[str] = Field(None, max_length=500)
    estabilidade: Optional[float] = Field(None, ge=0, le=5)
    dificuldade: Optional[float] = Field(None, ge=0, le=5)
    disciplina_id: Optional[EntityId] = None


class BlocoEstudoInput(InputModel):
    dia_semana: Optional[int] = Field(None, ge=0, le=6, description="0 = domingo, 6 = sábado.")
    ordem: Optional[int] = Field(None, ge=1)
    total_horas_planejadas: Optional[float] = Field(None, ge=0, le=24)
    plano_estudo_id: Optional[EntityId] = None
    disciplina_id: Optional[EntityId] = None


class SessaoEstudoInput(InputModel):
    data_inicio: Optional[UtcDateTime] = None
    data_termino: Optional[UtcDateTime] = None
    questoes_acertos: Optional[int] = Field(None, ge=0)
    questoes_erros: Optional[int] = Field(None, ge=0)
    tempo_estudo: Optional[int] = Field(None, ge=0, description="Minutos estudados.")
    paginas_lidas: Optional[int] = Field(None, ge=0)
    topico_finalizado: Optional[bool] = None
    observacoes: Optional[str] = None
    plano_estudo_id: Optional[EntityId] = None
    disciplina_id: Optional[EntityId] = None
    topico_id: Optional[EntityId] = None
    bloco_estudo_id: Optional[EntityId] = None
    categoria_sessao_id: Optional[EntityId] = None
    situacao_sessao_id: Optional[EntityId] = None


class RevisaoInput(InputModel):
    numero: Optional[int] = Field(None, ge=1, description="Sequência da revisão dentro do tópico.")
    data_programada: Optional[UtcDateTime] = None
    data_realizada: Optional[UtcDateTime] = None
    desempenho: Optional[float] = Field(None, ge=0, le=100)
    tempo_estudo: Optional[int] = Field(None, ge=0)
    questoes_acertos: Optional[int] = Field(None, ge=0)
    questoes_erros: Optional[int] = Field(None, ge=0)
    categoria_revisao_id: Optional[EntityId] = None
    situacao_revisao_id: Optional[EntityId] = None
    plano_estudo_id: Optional[EntityId] = None
    disciplina_id: Optional[EntityId] = None
    topico_id: Optional[EntityId] = None


# ─── Resumos ─────────────────────────────────────────────────────────────────

class PlanoEstudoSummary(OutputModel):
    id: int
    titulo: str
    concurso: Optional[str] = None
    cargo: Optional[str] = None
    banca: Optional[str] = None
    data_prova: Optional[datetime] = None
    concluido: bool
    usuario_id: int
    situacao_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DisciplinaSummary(OutputModel):
    id: int
    titulo: str
    concluido: bool
    importancia: int
    conhecimento: int
    horas_semanais: float
    plano_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TopicoSummary(OutputModel):
    id: int
    titulo: str
    ordem: int
    concluido: bool
    edital: Optional[str] = None
    estabilidade: Optional[float] = None
    dificuldade: Optional[float] = None
    disciplina_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BlocoEstudoSummary(OutputModel):
    id: int
    dia_semana: int
    ordem: int
    total_horas_planejadas: float
    plano_estudo_id: int
    disciplina_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SessaoEstudoSummary(OutputModel):
    id: int
    data_inicio: datetime
    data_termino: Optional[datetime] = None
    questoes_acertos: int
    questoes_erros: int
    tempo_estudo: int
    paginas_lidas: int
    topico_finalizado: bool
    observacoes: Optional[str] = None
    plano_estudo_id: int
    disciplina_id: int
    topico_id: int
    bloco_estudo_id: Optional[int] = None
    categoria_sessao_id: Optional[int] = None
    situacao_sessao_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RevisaoSummary(OutputModel):
    id: int
    numero: int
    data_programada: datetime
    data_realizada: Optional[datetime] = None
    desempenho: float
    tempo_estudo: int
    questoes_acertos: int
    questoes_erros: int
    categoria_revisao_id: int
    situacao_revisao_id: int
    plano_estudo_id: int
    disciplina_id: int
    topico_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ─── Saídas ──────────────────────────────────────────────────────────────────

class PlanoEstudoOutput(PlanoEstudoSummary):
    usuario: Optional[UsuarioSummary] = None
    situacao: Optional[LookupOutput] = None
    disciplinas: Optional[List[DisciplinaSummary]] = None


class DisciplinaOutput(DisciplinaSummary):
    plano: Optional[PlanoEstudoSummary] = None
    topicos: Optional[List[TopicoSummary]] = None


class TopicoOutput(TopicoSummary):
    disciplina: Optional[DisciplinaSummary] = None


class BlocoEstudoOutput(BlocoEstudoSummary):
    disciplina: Optional[DisciplinaSummary] = None


class SessaoEstudoOutput(SessaoEstudoSummary):
    categoria_sessao: Optional[LookupOutput] = None
    situacao_sessao: Optional[LookupOutput] = None
    disciplina: Optional[DisciplinaSummary] = None
    topico: Optional[TopicoSummary] = None


class RevisaoOutput(RevisaoSummary):
    categoria_revisao: Optional[LookupOutput] = None
    situacao_revisao: Optional[LookupOutput] = None
    disciplina: Optional[DisciplinaSummary] = None
    topico: Optional[TopicoSummary] = None
