# studium/adapters/outbound/persistence/models/usuario_model.py

"""
Modelo de usuário do sistema.

A senha é armazenada apenas como hash bcrypt e nunca é serializada.
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from studium.adapters.outbound.persistence.models.base_model import Base, IdType, TimestampMixin


class Usuario(TimestampMixin, Base):
    """
    Usuário dono dos planos de estudo.

    Attributes:
        username: Login único
        password: Hash bcrypt da senha
        email: E-mail único
        ultimo_acesso: Data/hora do último login bem-sucedido
    """
    __tablename__ = "usuario"

    id = Column(IdType, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    nome = Column(String(100), nullable=False)
    sobrenome = Column(String(150), nullable=False)
    data_nascimento = Column(Date, nullable=True)
    foto_url = Column(String(500), nullable=True)
    ultimo_acesso = Column(DateTime, nullable=True)

    genero_usuario_id = Column(IdType, ForeignKey("genero_usuario.id", ondelete="RESTRICT"), nullable=False)
    cidade_id = Column(IdType, ForeignKey("cidade.id", ondelete="RESTRICT"), nullable=False)
    situacao_usuario_id = Column(IdType, ForeignKey("situacao_usuario.id", ondelete="RESTRICT"), nullable=False)
    grupo_usuario_id = Column(IdType, ForeignKey("grupo_usuario.id", ondelete="RESTRICT"), nullable=False)

    genero_usuario = relationship("GeneroUsuario")
    cidade = relationship("Cidade")
    situacao_usuario = relationship("SituacaoUsuario")
    grupo_usuario = relationship("GrupoUsuario")
    planos_estudo = relationship("PlanoEstudo", back_populates="usuario", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Usuario(id={self.id}, username={self.username!r})>"
