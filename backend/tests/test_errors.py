import pytest
from sqlalchemy.exc import DataError, IntegrityError

from liftlog.errors import (
    DomainError,
    DuplicateRecord,
    InvalidValue,
    ReferencedRecordMissing,
    classify_integrity_error,
)
from liftlog.db import SessionLocal
from liftlog.repositories.base import BaseRepository

class PgError(Exception):
    def __init__(self, sqlstate, msg="boom"):
        super().__init__(msg)
        self.sqlstate = sqlstate

def integrity(orig):
    return IntegrityError("INSERT ...", {}, orig)

def test_postgres_sqlstate_codes():
    assert isinstance(classify_integrity_error(integrity(PgError("23505"))), DuplicateRecord)
    assert isinstance(classify_integrity_error(integrity(PgError("23503"))), ReferencedRecordMissing)

def test_sqlite_messages():
    unique = integrity(Exception("UNIQUE constraint failed: exercises.name"))
    fk = integrity(Exception("FOREIGN KEY constraint failed"))
    assert isinstance(classify_integrity_error(unique), DuplicateRecord)
    assert isinstance(classify_integrity_error(fk), ReferencedRecordMissing)

def test_unknown_violation_is_generic():
    err = classify_integrity_error(integrity(PgError("23514", "check violated")))
    assert type(err) is DomainError
    assert err.message.startswith("Database error:")

def test_messages():
    assert DuplicateRecord().message == "A record with this data already exists."
    assert ReferencedRecordMissing().message == "Referenced record does not exist."

def test_data_error_becomes_invalid_value():
    db = SessionLocal()
    repo = BaseRepository(db)

    def overflow():
        raise DataError("INSERT ...", {}, Exception("numeric field overflow"))

    with pytest.raises(InvalidValue) as info:
        repo._guarded(overflow)
    assert info.value.message == "A value is out of range for this field."
    assert isinstance(info.value.__cause__, DataError)
    db.close()
