# studium/application/dtos/lookup_dto.py

"""
Dtos das tabelas de referência e de localidade.

As oito tabelas de referência compartilham ``LookupInput`` e
``LookupOutput``; unidade federativa e cidade têm dtos próprios.
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from studium.application.dtos.base_dto import Descricao, EntityId, InputModel, OutputModel, texto

SIGLA_REGEX = re.compile(r"^[A-Za-z]{2}$")

NomeCidade = texto(150)


class LookupInput(InputModel):
    descricao: Optional[Descricao] = Field(None, description="Descrição única do item.")


class LookupOutput(OutputModel):
    id: int
    descricao: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UnidadeFederativaInput(InputModel):
    descricao: Optional[Descricao] = Field(None, description="Nome da unidade federativa.")
    sigla: Optional[str] = Field(None, description="Sigla com duas letras, ex.: SP.")

    @field_validator("sigla")
    @classmethod
    def validate_sigla(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not SIGLA_REGEX.match(v):
            raise ValueError("A sigla deve ter exatamente duas letras")
        return v.upper()


class UnidadeFederativaOutput(OutputModel):
    id: int
    descricao: str
    sigla: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CidadeInput(InputModel):
    descricao: Optional[NomeCidade] = Field(None, description="Nome da cidade.")
    unidade_federativa_id: Optional[EntityId] = None


class CidadeSummary(OutputModel):
    id: int
    descricao: str
    unidade_federativa_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CidadeOutput(CidadeSummary):
    unidade_federativa: Optional[UnidadeFederativaOutput] = None
