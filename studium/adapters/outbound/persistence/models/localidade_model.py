# studium/adapters/outbound/persistence/models/localidade_model.py

"""
Modelos de localidade: unidades federativas e cidades.
"""

from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class UnidadeFederativa(TimestampMixin, Base):
    __tablename__ = "unidade_federativa"

    id = Column(IdType, primary_key=True, autoincrement=True)
    descricao = Column(String(100), unique=True, nullable=False)
    sigla = Column(String(2), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<UnidadeFederativa(id={self.id}, sigla={self.sigla!r})>"


class Cidade(TimestampMixin, Base):
    """
    Cidade de uma unidade federativa.

    O nome só é único dentro da mesma UF.
    """
    __tablename__ = "cidade"
    __table_args__ = (
        UniqueConstraint("descricao", "unidade_federativa_id", name="uq_cidade_descricao_uf"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    descricao = Column(String(150), nullable=False, index=True)
    unidade_federativa_id = Column(
        IdType, ForeignKey("unidade_federativa.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    unidade_federativa = relationship("UnidadeFederativa")

    def __repr__(self) -> str:
        return f"<Cidade(id={self.id}, descricao={self.descricao!r})>"
