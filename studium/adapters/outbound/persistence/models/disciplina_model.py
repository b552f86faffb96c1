# studium/adapters/outbound/persistence/models/disciplina_model.py

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class Disciplina(TimestampMixin, Base):
    """
    Disciplina dentro de um plano de estudo.

    Attributes:
        importancia: Peso de 1 a 5
        conhecimento: Autoavaliação de 0 a 5
        horas_semanais: Carga semanal planejada
    """
    __tablename__ = "disciplina"
    __table_args__ = (
        UniqueConstraint("plano_id", "titulo", name="uq_disciplina_plano_titulo"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    titulo = Column(String(200), nullable=False, index=True)
    concluido = Column(Boolean, nullable=False, default=False)
    importancia = Column(Integer, nullable=False, default=1)
    conhecimento = Column(Integer, nullable=False, default=0)
    horas_semanais = Column(Float, nullable=False, default=0.0)

    plano_id = Column(IdType, ForeignKey("plano_estudo.id", ondelete="CASCADE"), nullable=False, index=True)

    plano = relationship("PlanoEstudo", back_populates="disciplinas")
    topicos = relationship(
        "Topico", back_populates="disciplina", passive_deletes=True, order_by="Topico.ordem"
    )

    def __repr__(self) -> str:
        return f"<Disciplina(id={self.id}, titulo={self.titulo!r})>"
