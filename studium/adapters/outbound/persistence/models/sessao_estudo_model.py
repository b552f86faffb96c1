# studium/adapters/outbound/persistence/models/sessao_estudo_model.py

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class SessaoEstudo(TimestampMixin, Base):
    """
    Registro de uma sessão de estudo realizada (ou agendada).

    Attributes:
        tempo_estudo: Minutos efetivamente estudados
        topico_finalizado: Indica se a sessão encerrou o tópico
    """
    __tablename__ = "sessao_estudo"

    id = Column(IdType, primary_key=True, autoincrement=True)
    data_inicio = Column(DateTime, nullable=False, index=True)
    data_termino = Column(DateTime, nullable=True)
    questoes_acertos = Column(Integer, nullable=False, default=0)
    questoes_erros = Column(Integer, nullable=False, default=0)
    tempo_estudo = Column(Integer, nullable=False, default=0)
    paginas_lidas = Column(Integer, nullable=False, default=0)
    topico_finalizado = Column(Boolean, nullable=False, default=False)
    observacoes = Column(Text, nullable=True)

    categoria_sessao_id = Column(IdType, ForeignKey("categoria_sessao.id", ondelete="RESTRICT"), nullable=True)
    situacao_sessao_id = Column(IdType, ForeignKey("situacao_sessao.id", ondelete="RESTRICT"), nullable=True)
    plano_estudo_id = Column(IdType, ForeignKey("plano_estudo.id", ondelete="CASCADE"), nullable=False, index=True)
    disciplina_id = Column(IdType, ForeignKey("disciplina.id", ondelete="CASCADE"), nullable=False, index=True)
    topico_id = Column(IdType, ForeignKey("topico.id", ondelete="CASCADE"), nullable=False, index=True)
    bloco_estudo_id = Column(IdType, ForeignKey("bloco_estudo.id", ondelete="SET NULL"), nullable=True, index=True)

    categoria_sessao = relationship("CategoriaSessao")
    situacao_sessao = relationship("SituacaoSessao")
    plano_estudo = relationship("PlanoEstudo")
    disciplina = relationship("Disciplina")
    topico = relationship("Topico")
    bloco_estudo = relationship("BlocoEstudo")

    def __repr__(self) -> str:
        return f"<SessaoEstudo(id={self.id}, data_inicio={self.data_inicio})>"
