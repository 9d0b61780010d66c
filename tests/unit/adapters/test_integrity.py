import sqlite3

from sqlalchemy.exc import IntegrityError

from src.adapter.repositories.integrity import is_unique_violation


class PgError(Exception):
    def __init__(self, sqlstate):
        super().__init__(f"sqlstate {sqlstate}")
        self.sqlstate = sqlstate


def wrap(orig):
    return IntegrityError("INSERT ...", {}, orig)


def test_postgres_unique_key():
    assert is_unique_violation(wrap(PgError("23505")))


def test_postgres_foreign_key_is_not_unique():
    assert not is_unique_violation(wrap(PgError("23503")))


def test_postgres_not_null_is_not_unique():
    assert not is_unique_violation(wrap(PgError("23502")))


def test_sqlite_unique_key():
    orig = sqlite3.IntegrityError(
        "UNIQUE constraint failed: project_members.project_id, project_members.user_id"
    )
    assert is_unique_violation(wrap(orig))


def test_sqlite_foreign_key_is_not_unique():
    orig = sqlite3.IntegrityError("FOREIGN KEY constraint failed")
    assert not is_unique_violation(wrap(orig))
