# seeding/sql_utils.py
from typing import Any, Dict, List, Sequence

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

# dialects whose INSERT supports ON CONFLICT ... DO NOTHING
_INSERT_CONSTRUCTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UnsupportedDialectError(RuntimeError):
    """Raised when the bound database cannot skip conflicting inserts."""

    def __init__(self, dialect: str):
        super().__init__(f"ON CONFLICT DO NOTHING is not supported for dialect '{dialect}'")
        self.dialect = dialect


def ensure_table(session: Session, table: Table) -> None:
    """CREATE TABLE IF NOT EXISTS, inside the session's transaction."""
    table.create(bind=session.connection(), checkfirst=True)


def insert_ignore_conflicts(
    session: Session,
    table: Table,
    rows: List[Dict[str, Any]],
    conflict_columns: Sequence[str],
) -> int:
    """
    Insert `rows` as one multi-row statement, skipping any row whose
    `conflict_columns` already exist. Returns the number of rows inserted.
    """
    if not rows:
        return 0

    dialect = session.get_bind().dialect.name
    insert = _INSERT_CONSTRUCTS.get(dialect)
    if insert is None:
        raise UnsupportedDialectError(dialect)

    stmt = insert(table).values(rows).on_conflict_do_nothing(index_elements=list(conflict_columns))
    result = session.execute(stmt)
    return result.rowcount
