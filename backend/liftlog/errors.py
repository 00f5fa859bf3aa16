"""Domain errors surfaced to clients as HTTP 400."""
from __future__ import annotations

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class DomainError(Exception):
    """Base for domain failures reported back to the client as 400."""
    message = "Database error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateRecord(DomainError):
    message = "A record with this data already exists."


class ReferencedRecordMissing(DomainError):
    message = "Referenced record does not exist."


class NoValidSets(DomainError):
    message = "Please add at least one set with valid weight and reps"


class InvalidValue(DomainError):
    message = "A value is out of range for this field."


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    # psycopg 3 exposes .sqlstate, psycopg2 .pgcode
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_integrity_error(exc: IntegrityError) -> DomainError:
    code = _sqlstate(exc)
    if code == UNIQUE_VIOLATION:
        return DuplicateRecord()
    if code == FOREIGN_KEY_VIOLATION:
        return ReferencedRecordMissing()

    # sqlite has no SQLSTATE, only the message
    text = str(exc.orig).lower()
    if "unique" in text or "duplicate" in text:
        return DuplicateRecord()
    if "foreign key" in text:
        return ReferencedRecordMissing()
    return DomainError(f"Database error: {exc.orig}")
