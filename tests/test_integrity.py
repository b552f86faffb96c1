# tests/test_integrity.py

from sqlalchemy.exc import IntegrityError

from studium.shared.utils.integrity import (
    FOREIGN_KEY_VIOLATION,
    UNIQUE_VIOLATION,
    classify_integrity_error,
    extract_violation_fields,
)


class FakePgError(Exception):
    def __init__(self, message, sqlstate):
        super().__init__(message)
        self.sqlstate = sqlstate


def integrity_error(orig):
    return IntegrityError("INSERT ...", {}, orig)


def test_postgres_unique_violation_by_sqlstate():
    exc = integrity_error(FakePgError(
        'duplicate key value violates unique constraint "uq_disciplina_plano_titulo"\n'
        "DETAIL:  Key (plano_id, titulo)=(1, Português) already exists.",
        "23505",
    ))

    assert classify_integrity_error(exc) == UNIQUE_VIOLATION
    assert extract_violation_fields(exc) == ["plano_id", "titulo"]


def test_postgres_foreign_key_violation_by_sqlstate():
    exc = integrity_error(FakePgError(
        'insert or update on table "disciplina" violates foreign key constraint "disciplina_plano_id_fkey"\n'
        'DETAIL:  Key (plano_id)=(99) is not present in table "plano_estudo".',
        "23503",
    ))

    assert classify_integrity_error(exc) == FOREIGN_KEY_VIOLATION
    assert extract_violation_fields(exc) == ["plano_id"]


def test_sqlite_unique_violation_by_message():
    exc = integrity_error(Exception("UNIQUE constraint failed: bloco_estudo.plano_estudo_id, bloco_estudo.dia_semana, bloco_estudo.ordem"))

    assert classify_integrity_error(exc) == UNIQUE_VIOLATION
    assert extract_violation_fields(exc) == ["plano_estudo_id", "dia_semana", "ordem"]


def test_sqlite_foreign_key_violation_has_no_columns():
    exc = integrity_error(Exception("FOREIGN KEY constraint failed"))

    assert classify_integrity_error(exc) == FOREIGN_KEY_VIOLATION
    assert extract_violation_fields(exc) == []


def test_other_integrity_failures_are_not_classified():
    exc = integrity_error(Exception("NOT NULL constraint failed: disciplina.titulo"))

    assert classify_integrity_error(exc) is None
    assert extract_violation_fields(exc) == []
