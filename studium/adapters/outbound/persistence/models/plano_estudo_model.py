# studium/adapters/outbound/persistence/models/plano_estudo_model.py

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class PlanoEstudo(TimestampMixin, Base):
    """
    Plano de estudo de um usuário para um concurso.

    Remover o plano remove em cascata (no banco) disciplinas, blocos,
    sessões e revisões.
    """
    __tablename__ = "plano_estudo"
    __table_args__ = (
        UniqueConstraint("usuario_id", "titulo", name="uq_plano_estudo_usuario_titulo"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    titulo = Column(String(200), nullable=False, index=True)
    concurso = Column(String(200), nullable=True)
    cargo = Column(String(200), nullable=True)
    banca = Column(String(100), nullable=True)
    data_prova = Column(DateTime, nullable=True)
    concluido = Column(Boolean, nullable=False, default=False)

    usuario_id = Column(IdType, ForeignKey("usuario.id", ondelete="RESTRICT"), nullable=False, index=True)
    situacao_id = Column(IdType, ForeignKey("situacao_plano.id", ondelete="RESTRICT"), nullable=False)

    usuario = relationship("Usuario", back_populates="planos_estudo")
    situacao = relationship("SituacaoPlano")
    disciplinas = relationship("Disciplina", back_populates="plano", passive_deletes=True)
    blocos_estudo = relationship("BlocoEstudo", back_populates="plano_estudo", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<PlanoEstudo(id={self.id}, titulo={self.titulo!r})>"
