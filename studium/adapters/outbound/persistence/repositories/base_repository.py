# studium/adapters/outbound/persistence/repositories/base_repository.py (async version)

from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Generic, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar, Union
import logging

from sqlalchemy import delete, func, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import ColumnElement, Select

from studium.adapters.outbound.persistence.models.base_model import Base
from studium.domain.exceptions import (
    ForeignKeyConstraintError,
    InvalidInputError,
    RecordNotFoundError,
    ReferentialIntegrityError,
    UniqueConstraintError,
)
from studium.shared.utils.integrity import (
    FOREIGN_KEY_VIOLATION,
    UNIQUE_VIOLATION,
    classify_integrity_error,
    extract_violation_fields,
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

# Colunas que nunca vêm do payload
PROTECTED_COLUMNS = frozenset({"id", "created_at", "updated_at"})
# Campos mascarados nos logs
SENSITIVE_FIELDS = frozenset({"password"})

# Configure logger
logger = logging.getLogger(__name__)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Async base class for implementing the Repository pattern.

    Each subclass binds one model through the ``model`` class attribute
    and may tune the default ordering and the relations loaded eagerly
    on every read. A repository is built per request around the
    request's ``AsyncSession``.

    Constraint violations surface as typed exceptions:

    - ``UniqueConstraintError`` (with the offending columns)
    - ``ForeignKeyConstraintError`` (with the dangling column)
    - ``RecordNotFoundError`` on update/delete of a missing id
    - ``ReferentialIntegrityError`` when dependents block a delete

    Anything else is logged with operation, model and input, then
    re-raised untouched.

    Attributes:
        model: SQLAlchemy model class
        default_order_by: Column used when no ordering is requested
        order_direction: ``"asc"`` or ``"desc"``
        include_relations: Relation paths (``"disciplinas.topicos"``) loaded on read
    """

    default_order_by: str = "id"
    order_direction: str = "asc"
    include_relations: Sequence[str] = ()

    @property
    @abstractmethod
    def model(self) -> Type[ModelType]:
        """SQLAlchemy model handled by this repository."""

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with an async session.

        Args:
            db: Async database session shared by the current request

        Raises:
            TypeError: If the subclass does not point to a mapped model
        """
        model = self.model
        if not isinstance(model, type) or inspect(model, raiseerr=False) is None:
            raise TypeError(f"Modelo '{model!r}' não encontrado para {type(self).__name__}")

        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    @property
    def name(self) -> str:
        return type(self).__name__

    # ─── Query building ──────────────────────────────────────────────────────

    def _column(self, field: str):
        mapper = inspect(self.model)
        if field not in mapper.columns:
            raise InvalidInputError(f"Campo inválido para {self.model.__name__}: {field}")
        return getattr(self.model, field)

    def _load_options(self, include: Optional[Iterable[str]] = None) -> list:
        paths = self.include_relations if include is None else include
        options = []
        for path in paths:
            current = self.model
            loader = None
            for name in path.split("."):
                attr = getattr(current, name)
                loader = selectinload(attr) if loader is None else loader.selectinload(attr)
                current = attr.property.mapper.class_
            options.append(loader)
        return options

    def _order_clause(self, order_by: Optional[str] = None, direction: Optional[str] = None) -> list:
        column = self._column(order_by or self.default_order_by)
        direction = (direction or self.order_direction).lower()
        clauses = [column.desc() if direction == "desc" else column.asc()]
        if column.key != "id":
            clauses.append(self.model.id.asc())
        return clauses

    def _apply_filters(
            self,
            query: Select,
            where: Optional[Dict[str, Any]] = None,
            criteria: Sequence[ColumnElement] = (),
    ) -> Select:
        for field, value in (where or {}).items():
            column = self._column(field)
            if value is None:
                query = query.where(column.is_(None))
            else:
                query = query.where(column == value)
        for criterion in criteria:
            query = query.where(criterion)
        return query

    def contains(self, field: str, value: str) -> ColumnElement:
        """Case-insensitive substring criterion; ``%`` and ``_`` in ``value`` are literal."""
        return self._column(field).icontains(value, autoescape=True)

    def not_null_columns(self) -> FrozenSet[str]:
        """Columns the client may omit but never set to null."""
        return frozenset(
            column.key
            for column in self.model.__table__.columns
            if not column.nullable and column.key not in PROTECTED_COLUMNS
        )

    def _column_values(self, data: Dict[str, Any]) -> Dict[str, Any]:
        mapper = inspect(self.model)
        return {
            key: value
            for key, value in data.items()
            if key in mapper.columns and key not in PROTECTED_COLUMNS
        }

    @staticmethod
    def _safe(data: Dict[str, Any]) -> Dict[str, Any]:
        return {key: ("***" if key in SENSITIVE_FIELDS else value) for key, value in data.items()}

    # ─── Error translation ───────────────────────────────────────────────────

    async def _find_missing_reference(self, values: Dict[str, Any]) -> Optional[str]:
        """
        Returns the first foreign-key column whose value points to no
        row. Used when the driver does not name the column (SQLite).
        """
        for foreign_key in self.model.__table__.foreign_keys:
            column = foreign_key.parent
            value = values.get(column.key)
            if value is None:
                continue
            target = foreign_key.column
            found = await self.db.scalar(select(target).where(target == value).limit(1))
            if found is None:
                return column.key
        return None

    async def _constraint_error(
            self, exc: IntegrityError, values: Dict[str, Any], record_id: Any = None, deleting: bool = False
    ) -> Optional[Exception]:
        kind = classify_integrity_error(exc)
        model_name = self.model.__name__

        if kind == UNIQUE_VIOLATION:
            fields = extract_violation_fields(exc)
            self.logger.warning(f"Violação de unicidade em {model_name}: {fields or 'N/A'}")
            return UniqueConstraintError(model_name, fields)

        if kind == FOREIGN_KEY_VIOLATION:
            if deleting:
                self.logger.warning(f"Exclusão de {model_name} ID {record_id} bloqueada por registros associados")
                return ReferentialIntegrityError(model_name, record_id)
            fields = [field for field in extract_violation_fields(exc) if field in values]
            field = fields[0] if fields else await self._find_missing_reference(values)
            self.logger.warning(f"Referência inválida em {model_name}: {field or 'N/A'}")
            return ForeignKeyConstraintError(model_name, field)

        return None

    def _log_failure(self, operation: str, payload: Any, exc: Exception) -> None:
        if isinstance(payload, dict):
            payload = self._safe(payload)
        self.logger.error(
            f"Erro em {self.name}.{operation} | Modelo: {self.model.__name__} | "
            f"Entrada: {payload!r} | Erro: {str(exc)}"
        )

    # ─── CRUD ────────────────────────────────────────────────────────────────

    async def create(self, data: Dict[str, Any]) -> ModelType:
        """
        Create a new record.

        Args:
            data: Column values; unknown keys and protected columns are ignored

        Returns:
            The created record with the configured relations loaded

        Raises:
            UniqueConstraintError: If a unique constraint would be violated
            ForeignKeyConstraintError: If a referenced parent does not exist
        """
        values = self._column_values(data)
        try:
            db_obj = self.model(**values)
            self.db.add(db_obj)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            error = await self._constraint_error(e, values)
            if error is None:
                self._log_failure("create", values, e)
                raise
            raise error from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            self._log_failure("create", values, e)
            raise

        self.logger.info(f"{self.model.__name__} criado(a) com ID: {db_obj.id}")
        return await self._reload(db_obj.id)

    async def find_all(
            self, limit: int = 0, offset: int = 0, extra_filter: Optional[Dict[str, Any]] = None
    ) -> List[ModelType]:
        """
        List records in the default order.

        Args:
            limit: Maximum number of records; 0 returns every match
            offset: Records to skip, only applied together with ``limit``
            extra_filter: Column equality filters
        """
        try:
            query = select(self.model).options(*self._load_options()).order_by(*self._order_clause())
            query = self._apply_filters(query, extra_filter)
            if limit and limit > 0:
                query = query.limit(limit).offset(max(offset or 0, 0))
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self._log_failure("find_all", {"limit": limit, "offset": offset, "filter": extra_filter}, e)
            raise

    async def find_by_id(self, id: Union[int, str]) -> Optional[ModelType]:
        """
        Get a record by ID, with relations.

        Returns:
            The record, or None if it doesn't exist
        """
        record_id = int(id)
        try:
            query = (
                select(self.model)
                .options(*self._load_options())
                .where(self.model.id == record_id)
            )
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self._log_failure("find_by_id", record_id, e)
            raise

    async def _reload(self, record_id: int) -> ModelType:
        query = (
            select(self.model)
            .options(*self._load_options())
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return result.scalar_one()

    async def find_by_unique_field(self, field: str, value: Any) -> Optional[ModelType]:
        """Get at most one record by the value of a specific field."""
        column = self._column(field)
        try:
            query = (
                select(self.model)
                .options(*self._load_options())
                .where(column == value)
                .order_by(*self._order_clause())
                .limit(1)
            )
            result = await self.db.execute(query)
            return result.scalars().first()
        except SQLAlchemyError as e:
            self._log_failure("find_by_unique_field", {field: value}, e)
            raise

    async def find_many(
            self,
            where: Optional[Dict[str, Any]] = None,
            *,
            criteria: Sequence[ColumnElement] = (),
            order_by: Optional[str] = None,
            order_direction: Optional[str] = None,
            include: Optional[Iterable[str]] = None,
            take: Optional[int] = None,
            skip: Optional[int] = None,
    ) -> List[ModelType]:
        """
        General filtered listing.

        Args:
            where: Column equality filters, as in ``find_all``
            criteria: Extra SQLAlchemy expressions (substring matches, joins through relations)
            order_by: Column overriding ``default_order_by``
            order_direction: Direction overriding ``order_direction``
            include: Relation paths overriding ``include_relations``
            take: Page size
            skip: Offset
        """
        try:
            query = (
                select(self.model)
                .options(*self._load_options(include))
                .order_by(*self._order_clause(order_by, order_direction))
            )
            query = self._apply_filters(query, where, criteria)
            if take:
                query = query.limit(take)
            if skip:
                query = query.offset(skip)
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self._log_failure("find_many", {"where": where, "take": take, "skip": skip}, e)
            raise

    async def update(self, id: Union[int, str], data: Dict[str, Any]) -> ModelType:
        """
        Partial update: only the columns present in ``data`` change.

        Raises:
            RecordNotFoundError: If no record has this ID
            UniqueConstraintError: If a unique constraint would be violated
            ForeignKeyConstraintError: If a referenced parent does not exist
        """
        record_id = int(id)
        values = self._column_values(data)
        if not values:
            record = await self.find_by_id(record_id)
            if record is None:
                raise RecordNotFoundError(self.model.__name__, record_id)
            return record

        try:
            result = await self.db.execute(
                update(self.model).where(self.model.id == record_id).values(**values)
            )
            matched = result.rowcount
            if matched:
                await self.db.commit()
            else:
                await self.db.rollback()
        except IntegrityError as e:
            await self.db.rollback()
            error = await self._constraint_error(e, values, record_id)
            if error is None:
                self._log_failure("update", {"id": record_id, **values}, e)
                raise
            raise error from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            self._log_failure("update", {"id": record_id, **values}, e)
            raise

        if not matched:
            raise RecordNotFoundError(self.model.__name__, record_id)

        self.logger.info(f"{self.model.__name__} atualizado(a): ID {record_id}")
        return await self._reload(record_id)

    async def delete(self, id: Union[int, str]) -> None:
        """
        Remove a record by ID.

        Raises:
            RecordNotFoundError: If no record has this ID
            ReferentialIntegrityError: If dependent records block the delete
        """
        record_id = int(id)
        try:
            result = await self.db.execute(delete(self.model).where(self.model.id == record_id))
            matched = result.rowcount
            if matched:
                await self.db.commit()
            else:
                await self.db.rollback()
        except IntegrityError as e:
            await self.db.rollback()
            error = await self._constraint_error(e, {}, record_id, deleting=True)
            if error is None:
                self._log_failure("delete", record_id, e)
                raise
            raise error from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            self._log_failure("delete", record_id, e)
            raise

        if not matched:
            raise RecordNotFoundError(self.model.__name__, record_id)
        self.logger.info(f"{self.model.__name__} removido(a): ID {record_id}")

    async def count(self, where: Optional[Dict[str, Any]] = None, criteria: Sequence[ColumnElement] = ()) -> int:
        """Number of records matching the filters."""
        try:
            query = self._apply_filters(select(func.count()).select_from(self.model), where, criteria)
            result = await self.db.execute(query)
            return result.scalar_one()
        except SQLAlchemyError as e:
            self._log_failure("count", where, e)
            raise
