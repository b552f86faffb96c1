# studium/adapters/outbound/persistence/models/topico_model.py

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class Topico(TimestampMixin, Base):
    __tablename__ = "topico"
    __table_args__ = (
        UniqueConstraint("disciplina_id", "titulo", name="uq_topico_disciplina_titulo"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    titulo = Column(String(300), nullable=False, index=True)
    ordem = Column(Integer, nullable=False)
    concluido = Column(Boolean, nullable=False, default=False)
    edital = Column(String(500), nullable=True)
    estabilidade = Column(Float, nullable=True)
    dificuldade = Column(Float, nullable=True)

    disciplina_id = Column(IdType, ForeignKey("disciplina.id", ondelete="CASCADE"), nullable=False, index=True)

    disciplina = relationship("Disciplina", back_populates="topicos")

    def __repr__(self) -> str:
        return f"<Topico(id={self.id}, ordem={self.ordem}, titulo={self.titulo!r})>"
