# studium/adapters/outbound/persistence/models/lookup_models.py

"""
Tabelas de referência (domínios) usadas pelos cadastros.

Todas têm a mesma forma: uma ``descricao`` única, referenciada por
chave estrangeira a partir das entidades principais.
"""

from sqlalchemy import Column, String

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class DescricaoMixin(TimestampMixin):
    id = Column(IdType, primary_key=True, autoincrement=True)
    descricao = Column(String(100), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, descricao={self.descricao!r})>"


class GeneroUsuario(DescricaoMixin, Base):
    __tablename__ = "genero_usuario"


class GrupoUsuario(DescricaoMixin, Base):
    __tablename__ = "grupo_usuario"


class SituacaoUsuario(DescricaoMixin, Base):
    __tablename__ = "situacao_usuario"


class SituacaoPlano(DescricaoMixin, Base):
    __tablename__ = "situacao_plano"


class CategoriaSessao(DescricaoMixin, Base):
    __tablename__ = "categoria_sessao"


class SituacaoSessao(DescricaoMixin, Base):
    __tablename__ = "situacao_sessao"


class CategoriaRevisao(DescricaoMixin, Base):
    __tablename__ = "categoria_revisao"


class SituacaoRevisao(DescricaoMixin, Base):
    __tablename__ = "situacao_revisao"
