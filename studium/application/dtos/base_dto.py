# studium/application/dtos/base_dto.py

"""
Classes base para os dtos da aplicação.

A API fala camelCase e os modelos usam snake_case; o ``alias_generator``
faz a tradução nos dois sentidos. Dtos de entrada são validados no modo
leniente do pydantic ("2.5" vira 2.5, "true" vira True, datas ISO viram
datetime); dtos de saída são lidos direto dos modelos SQLAlchemy.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Optional, Tuple, Type

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, ValidationError, model_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect
from sqlalchemy.orm import InstanceState

from studium.domain.constants import MAX_ID

# Chave estrangeira informada pelo cliente
EntityId = Annotated[int, Field(ge=1, le=MAX_ID)]


def texto(max_length: int):
    """Texto obrigatório: sem espaços nas pontas e nunca vazio depois disso."""
    return Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=max_length)]


Descricao = texto(100)
Titulo = texto(200)


def _utc_naive(value: datetime) -> datetime:
    # colunas DateTime sem fuso: normaliza para UTC ingênuo
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UtcDateTime = Annotated[datetime, AfterValidator(_utc_naive)]


class CustomBaseModel(BaseModel):
    """
    Modelo base personalizado para todos os dtos da aplicação.

    Aceita tanto o nome camelCase (alias) quanto o nome da coluna e pode
    ser construído a partir de atributos de um objeto.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class InputModel(CustomBaseModel):
    """
    Corpo de criação e de alteração parcial.

    Todos os campos são opcionais: a obrigatoriedade é verificada pelo
    controller, que responde com a lista ``missingFields``. Campos
    desconhecidos são ignorados.
    """

    def to_data(self) -> Dict[str, Any]:
        """Somente os campos enviados, com os nomes das colunas."""
        return self.model_dump(exclude_unset=True)


class OutputModel(CustomBaseModel):
    """
    Resposta lida de um modelo SQLAlchemy.

    Só atributos já carregados entram na resposta: um relacionamento
    que o repositório não incluiu é omitido, nunca carregado sob demanda.
    """

    @model_validator(mode="before")
    @classmethod
    def _loaded_attributes(cls, value: Any) -> Any:
        state = inspect(value, raiseerr=False)
        if not isinstance(state, InstanceState):
            return value
        unloaded = state.unloaded
        return {
            name: getattr(value, name)
            for name in cls.model_fields
            if name not in unloaded and hasattr(value, name)
        }

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _bounds(schema: Type[BaseModel], field: str) -> Tuple[Optional[Any], Optional[Any]]:
    for name, info in schema.model_fields.items():
        if field in (name, info.alias):
            minimum = maximum = None
            for constraint in info.metadata:
                minimum = getattr(constraint, "ge", minimum)
                maximum = getattr(constraint, "le", maximum)
            return minimum, maximum
    return None, None


def validation_message(schema: Type[BaseModel], exc: ValidationError) -> str:
    """
    Mensagem em português para o primeiro erro de validação.

    Args:
        schema: Dto validado
        exc: Erro levantado pelo pydantic

    Returns:
        Texto para o campo ``error`` da resposta 400
    """
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "corpo"
    ctx = error.get("ctx") or {}
    kind = error["type"]

    if kind in ("greater_than_equal", "less_than_equal"):
        minimum, maximum = _bounds(schema, field)
        if minimum is not None and maximum is not None:
            return f"O campo {field} deve estar entre {minimum} e {maximum}"
        if kind == "greater_than_equal":
            return f"O campo {field} deve ser maior ou igual a {ctx['ge']}"
        return f"O campo {field} deve ser menor ou igual a {ctx['le']}"
    if kind == "string_too_short":
        return f"O campo {field} não pode ser vazio"
    if kind == "string_too_long":
        return f"O campo {field} deve ter no máximo {ctx['max_length']} caracteres"
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return f"Valor inválido para o campo {field}"
