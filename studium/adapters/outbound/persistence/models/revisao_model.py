# studium/adapters/outbound/persistence/models/revisao_model.py

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class Revisao(TimestampMixin, Base):
    """
    Revisão programada de um tópico.

    ``numero`` é a sequência da revisão dentro do tópico (1ª, 2ª, ...)
    e não se repete para o mesmo tópico.
    """
    __tablename__ = "revisao"
    __table_args__ = (
        UniqueConstraint("topico_id", "numero", name="uq_revisao_topico_numero"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    numero = Column(Integer, nullable=False)
    data_programada = Column(DateTime, nullable=False, index=True)
    data_realizada = Column(DateTime, nullable=True)
    desempenho = Column(Float, nullable=False, default=0.0)
    tempo_estudo = Column(Integer, nullable=False, default=0)
    questoes_acertos = Column(Integer, nullable=False, default=0)
    questoes_erros = Column(Integer, nullable=False, default=0)

    categoria_revisao_id = Column(IdType, ForeignKey("categoria_revisao.id", ondelete="RESTRICT"), nullable=False)
    situacao_revisao_id = Column(IdType, ForeignKey("situacao_revisao.id", ondelete="RESTRICT"), nullable=False)
    plano_estudo_id = Column(IdType, ForeignKey("plano_estudo.id", ondelete="CASCADE"), nullable=False, index=True)
    disciplina_id = Column(IdType, ForeignKey("disciplina.id", ondelete="CASCADE"), nullable=False, index=True)
    topico_id = Column(IdType, ForeignKey("topico.id", ondelete="CASCADE"), nullable=False, index=True)

    categoria_revisao = relationship("CategoriaRevisao")
    situacao_revisao = relationship("SituacaoRevisao")
    plano_estudo = relationship("PlanoEstudo")
    disciplina = relationship("Disciplina")
    topico = relationship("Topico")

    def __repr__(self) -> str:
        return f"<Revisao(id={self.id}, numero={self.numero}, topico_id={self.topico_id})>"
