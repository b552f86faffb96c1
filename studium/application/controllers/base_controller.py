# studium/application/controllers/base_controller.py

"""
Classe base para todos os controllers da aplicação.

Um controller recebe os dados já extraídos da requisição (id de rota,
corpo JSON, parâmetros de consulta), valida, chama exatamente uma
operação do repositório e devolve a resposta HTTP. Falhas de
validação e violações de integridade conhecidas viram respostas
``{"error": ...}``; qualquer outra exceção segue adiante até o
middleware de exceções.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Type

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pydantic.alias_generators import to_camel, to_snake

from studium.adapters.outbound.persistence.repositories.base_repository import BaseRepository
from studium.application.dtos.base_dto import InputModel, OutputModel, validation_message
from studium.application.ports.outbound import SupportsDescricaoLookup
from studium.domain.constants import MAX_ID
from studium.domain.exceptions import (
    ForeignKeyConstraintError,
    InvalidInputError,
    RecordNotFoundError,
    ReferentialIntegrityError,
    UniqueConstraintError,
)

# Configurar logger
logger = logging.getLogger(__name__)

class BaseController(ABC):
    """
    Controller genérico de CRUD sobre um repositório.

    As subclasses informam o nome da entidade e configuram, por
    atributos de classe, os dtos de entrada e de saída, os campos
    obrigatórios e as mensagens de referência inválida. Tipos e faixas
    numéricas são validados pelo dto de entrada.

    Attributes:
        entity_name: Nome legível da entidade, usado nas mensagens
        entity_name_plural: Plural usado nas buscas sem resultado
        required_fields: Campos (camelCase) exigidos na criação
        update_required_fields: Campos (camelCase) exigidos na alteração
        input_schema: Dto que valida o corpo de criação e de alteração
        output_schema: Dto que serializa os registros devolvidos
        reference_messages: Mensagem por coluna de chave estrangeira
        update_conflict_status: Status para duplicidade na alteração
    """

    entity_name_plural: Optional[str] = None
    not_found_message: Optional[str] = None
    required_fields: Sequence[str] = ()
    update_required_fields: Sequence[str] = ()
    input_schema: Type[InputModel]
    output_schema: Type[OutputModel]
    reference_messages: Mapping[str, str] = {}
    update_conflict_status: int = status.HTTP_409_CONFLICT

    @property
    @abstractmethod
    def entity_name(self) -> str:
        """Nome legível da entidade."""

    def __init__(self, repository: BaseRepository):
        self.repository = repository
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    # ─── Respostas ───────────────────────────────────────────────────────────

    @staticmethod
    def error(status_code: int, message: str, **extra: Any) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"error": message, **extra})

    def serialize(self, record: Any) -> Dict[str, Any]:
        return self.output_schema.model_validate(record).to_response()

    def respond(self, record: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=self.serialize(record))

    def respond_many(self, records: List[Any]) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=[self.serialize(record) for record in records],
        )

    def respond_found(self, record: Optional[Any], not_found: Optional[str] = None) -> JSONResponse:
        if record is None:
            return self.error(status.HTTP_404_NOT_FOUND, not_found or self.get_not_found_message())
        return self.respond(record)

    def respond_found_many(self, records: List[Any], not_found: Optional[str] = None) -> JSONResponse:
        if not records:
            plural = self.entity_name_plural or self.entity_name
            return self.error(status.HTTP_404_NOT_FOUND, not_found or f"Nenhum(a) {plural} encontrado(a)")
        return self.respond_many(records)

    def get_not_found_message(self) -> str:
        return self.not_found_message or f"{self.entity_name} não encontrado(a)"

    # ─── Validação ───────────────────────────────────────────────────────────

    @staticmethod
    def is_missing(value: Any) -> bool:
        return value is None or value == ""

    def missing_fields(self, payload: Mapping[str, Any], fields: Sequence[str]) -> List[str]:
        return [field for field in fields if self.is_missing(payload.get(field))]

    @staticmethod
    def parse_id(raw: Any) -> Optional[int]:
        """Parses a path id; None unless it is a positive integer that fits a BIGINT."""
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            return None
        return value if 0 < value <= MAX_ID else None

    def validate(self, data: Dict[str, Any], partial: bool) -> None:
        """Validação entre campos, já com os nomes das colunas; levanta InvalidInputError."""

    async def before_save(self, data: Dict[str, Any], partial: bool) -> Dict[str, Any]:
        """Último ajuste dos dados antes do repositório."""
        return data

    async def prepare(self, payload: Mapping[str, Any], partial: bool) -> Dict[str, Any]:
        """
        Valida o corpo com ``input_schema`` e devolve só os campos enviados.

        Raises:
            InvalidInputError: Tipo ou faixa inválidos, ou null numa coluna obrigatória
        """
        try:
            data = self.input_schema.model_validate(payload).to_data()
        except ValidationError as e:
            raise InvalidInputError(validation_message(self.input_schema, e))

        # null explícito numa coluna NOT NULL é erro do cliente, não do banco
        not_null = self.repository.not_null_columns()
        nulls = [to_camel(key) for key, value in data.items() if value is None and key in not_null]
        if nulls:
            raise InvalidInputError(f"O campo {nulls[0]} não pode ser nulo")

        self.validate(data, partial)
        return await self.before_save(data, partial)

    # ─── Mensagens de integridade ────────────────────────────────────────────

    def conflict_message(self, data: Dict[str, Any], exc: UniqueConstraintError) -> str:
        label = to_camel(exc.fields[0]) if exc.fields else "valor"
        return f"Já existe {self.entity_name} com este(a) {label}"

    def reference_message(self, exc: ForeignKeyConstraintError) -> str:
        if exc.field and exc.field in self.reference_messages:
            return self.reference_messages[exc.field]
        return "Registro relacionado não encontrado"

    # ─── Operações ───────────────────────────────────────────────────────────

    async def create(self, payload: Mapping[str, Any]) -> Response:
        missing = self.missing_fields(payload, self.required_fields)
        if missing:
            return self.error(
                status.HTTP_400_BAD_REQUEST, "Campos obrigatórios ausentes", missingFields=missing
            )

        try:
            data = await self.prepare(payload, partial=False)
        except InvalidInputError as e:
            return self.error(status.HTTP_400_BAD_REQUEST, e.detail)

        try:
            record = await self.repository.create(data)
        except UniqueConstraintError as e:
            return self.error(status.HTTP_409_CONFLICT, self.conflict_message(data, e))
        except ForeignKeyConstraintError as e:
            return self.error(status.HTTP_400_BAD_REQUEST, self.reference_message(e))

        self.logger.info(f"{self.entity_name} criado(a) com sucesso: ID {record.id}")
        return self.respond(record, status.HTTP_201_CREATED)

    async def find_all(
            self,
            limit: Optional[int] = None,
            offset: Optional[int] = None,
            order_by: Optional[str] = None,
            order_direction: Optional[str] = None,
    ) -> Response:
        if limit is None and offset is None and order_by is None and order_direction is None:
            return self.respond_many(await self.repository.find_all())

        if order_direction is not None and order_direction.lower() not in ("asc", "desc"):
            return self.error(status.HTTP_400_BAD_REQUEST, "Direção de ordenação inválida")

        try:
            records = await self.repository.find_many(
                {},
                order_by=to_snake(order_by) if order_by else None,
                order_direction=order_direction,
                take=limit or None,
                skip=offset or None,
            )
        except InvalidInputError:
            return self.error(status.HTTP_400_BAD_REQUEST, f"Campo de ordenação inválido: {order_by}")

        response = self.respond_many(records)
        if limit:
            response.headers["X-Total-Count"] = str(await self.repository.count())
        return response

    async def find_by_id(self, raw_id: Any) -> Response:
        record_id = self.parse_id(raw_id)
        if record_id is None:
            return self.error(status.HTTP_400_BAD_REQUEST, "ID inválido")
        return self.respond_found(await self.repository.find_by_id(record_id))

    @staticmethod
    def _descricao(raw: Optional[str]) -> str:
        # o Starlette já decodifica os parâmetros de rota
        return (raw or "").strip()

    async def find_by_descricao(self, raw_descricao: Optional[str]) -> Response:
        descricao = self._descricao(raw_descricao)
        if not descricao:
            return self.error(status.HTTP_400_BAD_REQUEST, "Descrição é obrigatória para busca")
        if not isinstance(self.repository, SupportsDescricaoLookup):
            return self.error(status.HTTP_501_NOT_IMPLEMENTED, "Busca por descrição não implementada")

        record = await self.repository.find_by_descricao(descricao)
        return self.respond_found(record, f"{self.entity_name} não encontrado(a) com a descrição '{descricao}'")

    async def find_many_by_descricao(self, raw_descricao: Optional[str]) -> Response:
        descricao = self._descricao(raw_descricao)
        if not descricao:
            return self.error(status.HTTP_400_BAD_REQUEST, "Descrição é obrigatória para busca")
        if not isinstance(self.repository, SupportsDescricaoLookup):
            return self.error(status.HTTP_501_NOT_IMPLEMENTED, "Busca por descrição não implementada")

        records = await self.repository.find_many_by_descricao(descricao)
        plural = self.entity_name_plural or self.entity_name
        return self.respond_found_many(records, f"Nenhum(a) {plural} encontrado(a) com a descrição '{descricao}'")

    async def find_by_reference(
            self,
            raw_id: Any,
            finder: Callable[[int], Awaitable[List[Any]]],
            not_found: str,
            label: str = "ID",
    ) -> Response:
        """Lista registros por uma chave estrangeira informada na rota."""
        reference_id = self.parse_id(raw_id)
        if reference_id is None:
            return self.error(status.HTTP_400_BAD_REQUEST, f"{label} inválido")
        return self.respond_found_many(await finder(reference_id), not_found)

    async def find_by_text(
            self,
            raw_value: Optional[str],
            finder: Callable[[str], Awaitable[Any]],
            required: str,
            not_found: str,
    ) -> Response:
        """Busca por um campo texto; ``finder`` devolve um registro ou uma lista."""
        value = (raw_value or "").strip()
        if not value:
            return self.error(status.HTTP_400_BAD_REQUEST, required)
        result = await finder(value)
        if isinstance(result, list):
            return self.respond_found_many(result, not_found)
        return self.respond_found(result, not_found)

    async def update(self, raw_id: Any, payload: Mapping[str, Any]) -> Response:
        record_id = self.parse_id(raw_id)
        if record_id is None:
            return self.error(status.HTTP_400_BAD_REQUEST, "ID inválido")

        if self.update_required_fields:
            missing = self.missing_fields(payload, self.update_required_fields)
            if missing:
                return self.error(
                    status.HTTP_400_BAD_REQUEST, "Campos obrigatórios ausentes", missingFields=missing
                )

        # obrigatório pode ser omitido na alteração, mas não esvaziado
        blank = [field for field in self.required_fields if field in payload and self.is_missing(payload[field])]
        if blank:
            return self.error(
                status.HTTP_400_BAD_REQUEST, "Campos obrigatórios não podem ser vazios", missingFields=blank
            )

        try:
            data = await self.prepare(payload, partial=True)
        except InvalidInputError as e:
            return self.error(status.HTTP_400_BAD_REQUEST, e.detail)

        try:
            record = await self.repository.update(record_id, data)
        except RecordNotFoundError:
            return self.error(status.HTTP_404_NOT_FOUND, self.get_not_found_message())
        except UniqueConstraintError as e:
            return self.error(self.update_conflict_status, self.conflict_message(data, e))
        except ForeignKeyConstraintError as e:
            return self.error(status.HTTP_400_BAD_REQUEST, self.reference_message(e))

        self.logger.info(f"{self.entity_name} atualizado(a) com sucesso: ID {record_id}")
        return self.respond(record)

    async def delete(self, raw_id: Any) -> Response:
        record_id = self.parse_id(raw_id)
        if record_id is None:
            return self.error(status.HTTP_400_BAD_REQUEST, "ID inválido")

        try:
            await self.repository.delete(record_id)
        except RecordNotFoundError:
            return self.error(status.HTTP_404_NOT_FOUND, self.get_not_found_message())
        except ReferentialIntegrityError:
            return self.error(
                status.HTTP_400_BAD_REQUEST,
                f"Não é possível excluir este(a) {self.entity_name}: existem registros associados",
            )

        self.logger.info(f"{self.entity_name} removido(a) com sucesso: ID {record_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
