# studium/adapters/outbound/persistence/models/bloco_estudo_model.py

from sqlalchemy import Column, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class BlocoEstudo(TimestampMixin, Base):
    """
    Bloco da grade semanal: uma disciplina num dia da semana, numa posição.

    ``dia_semana`` vai de 0 (domingo) a 6 (sábado). Cada plano tem no
    máximo um bloco por (dia, ordem).
    """
    __tablename__ = "bloco_estudo"
    __table_args__ = (
        UniqueConstraint("plano_estudo_id", "dia_semana", "ordem", name="uq_bloco_estudo_plano_dia_ordem"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    dia_semana = Column(Integer, nullable=False, index=True)
    ordem = Column(Integer, nullable=False)
    total_horas_planejadas = Column(Float, nullable=False)

    plano_estudo_id = Column(IdType, ForeignKey("plano_estudo.id", ondelete="CASCADE"), nullable=False, index=True)
    disciplina_id = Column(IdType, ForeignKey("disciplina.id", ondelete="CASCADE"), nullable=False, index=True)

    plano_estudo = relationship("PlanoEstudo", back_populates="blocos_estudo")
    disciplina = relationship("Disciplina")

    def __repr__(self) -> str:
        return f"<BlocoEstudo(id={self.id}, dia_semana={self.dia_semana}, ordem={self.ordem})>"
