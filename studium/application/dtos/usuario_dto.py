# studium/application/dtos/usuario_dto.py

"""
Dtos de usuário e de login.

A senha só aparece nos dtos de entrada; ``UsuarioOutput`` não declara
o campo ``password`` e por isso nenhuma resposta o contém.
"""

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator

from studium.adapters.configuration.config import settings
from studium.application.dtos.base_dto import EntityId, InputModel, OutputModel, texto
from studium.application.dtos.lookup_dto import CidadeSummary, LookupOutput
from studium.shared.utils.email_validation import normalize_email, validate_email


class UsuarioInput(InputModel):
    """
    Schema para cadastro e alteração de usuário.

    ``ultimoAcesso`` não é aceito: só o login altera esse campo.
    """
    username: Optional[texto(50)] = Field(None, description="Login único.")
    password: Optional[str] = Field(None, description="Senha em texto puro; gravada apenas como hash.")
    email: Optional[str] = Field(None, description="Email único; gravado em minúsculas.")
    nome: Optional[texto(100)] = None
    sobrenome: Optional[texto(150)] = None
    data_nascimento: Optional[date] = None
    foto_url: Optional[Annotated[str, StringConstraints(max_length=500)]] = None
    genero_usuario_id: Optional[EntityId] = None
    cidade_id: Optional[EntityId] = None
    situacao_usuario_id: Optional[EntityId] = None
    grupo_usuario_id: Optional[EntityId] = None

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: Optional[str]) -> Optional[str]:
        """
        Valida e normaliza o email.

        Raises:
            ValueError: Se o email for inválido
        """
        if v is None:
            return v
        is_valid, error_msg = validate_email(v)
        if not is_valid:
            raise ValueError(error_msg)
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(f"A senha deve ter no mínimo {settings.PASSWORD_MIN_LENGTH} caracteres")
        return v


class UsuarioSummary(OutputModel):
    id: int
    username: str
    email: str
    nome: str
    sobrenome: str
    data_nascimento: Optional[date] = None
    foto_url: Optional[str] = None
    ultimo_acesso: Optional[datetime] = None
    genero_usuario_id: int
    cidade_id: int
    situacao_usuario_id: int
    grupo_usuario_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UsuarioOutput(UsuarioSummary):
    genero_usuario: Optional[LookupOutput] = None
    cidade: Optional[CidadeSummary] = None
    situacao_usuario: Optional[LookupOutput] = None
    grupo_usuario: Optional[LookupOutput] = None


class LoginInput(InputModel):
    username: Optional[str] = None
    password: Optional[str] = None
