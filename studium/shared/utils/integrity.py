# studium/shared/utils/integrity.py

"""
Inspeção de erros de integridade do banco.

Classifica um ``IntegrityError`` do SQLAlchemy como violação de
unicidade ou de chave estrangeira e extrai as colunas envolvidas,
entendendo os formatos do PostgreSQL (asyncpg/psycopg) e do SQLite.
"""

import re
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "unique"
FOREIGN_KEY_VIOLATION = "foreign_key"

_SQLSTATES = {
    "23505": UNIQUE_VIOLATION,
    "23503": FOREIGN_KEY_VIOLATION,
}

# PostgreSQL: DETAIL:  Key (plano_id, titulo)=(1, X) already exists.
_PG_KEY_PATTERN = re.compile(r"Key \(([^)]*)\)=")
# SQLite: UNIQUE constraint failed: disciplina.plano_id, disciplina.titulo
_SQLITE_UNIQUE_PATTERN = re.compile(r"UNIQUE constraint failed: ([^\n\[]+)")


def _driver_message(exc: IntegrityError) -> str:
    return str(exc.orig) if exc.orig is not None else str(exc)


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if isinstance(code, str):
            return code
    return None


def classify_integrity_error(exc: IntegrityError) -> Optional[str]:
    """
    Returns ``UNIQUE_VIOLATION``, ``FOREIGN_KEY_VIOLATION`` or None for
    any other integrity failure (NOT NULL, CHECK, ...).
    """
    kind = _SQLSTATES.get(_sqlstate(exc) or "")
    if kind:
        return kind

    message = _driver_message(exc).lower()
    if "unique" in message or "duplicate" in message:
        return UNIQUE_VIOLATION
    if "foreign key" in message:
        return FOREIGN_KEY_VIOLATION
    return None


def extract_violation_fields(exc: IntegrityError) -> List[str]:
    """
    Column names named by the driver for the violation, in constraint
    order. Empty when the driver does not report them (SQLite foreign
    keys, for instance).
    """
    message = _driver_message(exc)

    match = _PG_KEY_PATTERN.search(message)
    if match:
        return [column.strip().strip('"') for column in match.group(1).split(",") if column.strip()]

    match = _SQLITE_UNIQUE_PATTERN.search(message)
    if match:
        return [column.strip().split(".")[-1] for column in match.group(1).split(",") if column.strip()]

    return []
