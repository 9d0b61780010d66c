from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"

# Drivers without SQLSTATE on their exceptions (sqlite3, MySQL)
_UNIQUE_MESSAGES = ("UNIQUE constraint failed", "Duplicate entry")


def is_unique_violation(exc: IntegrityError) -> bool:
    """True only when the IntegrityError comes from a unique key or primary key"""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    message = str(orig)
    return any(marker in message for marker in _UNIQUE_MESSAGES)
