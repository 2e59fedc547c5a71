# seeding/seeder.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from database.models import Customer, Invoice, Revenue, User
from seeding.fixtures import FixtureSource
from seeding.sql_utils import ensure_table, insert_ignore_conflicts

logger = logging.getLogger("seeding.seeder")


class DatabaseSeeder:
    """
    Creates the dashboard tables and loads fixture rows into them.

    Every group follows the same two steps: create the table if it does not
    exist, then insert all fixture rows in one statement, skipping rows whose
    key is already present. `run` wraps the four groups in a single
    transaction on the session it is given.
    """

    def __init__(self, fixtures: FixtureSource, pwd_context: CryptContext, hash_workers: int = 4):
        self.fixtures = fixtures
        self.pwd_context = pwd_context
        self.hash_workers = max(1, hash_workers)

    def _log_group(self, group: str, total: int, inserted: int) -> None:
        logger.info("Seeded %s: %d inserted, %d skipped", group, inserted, total - inserted)

    def hash_passwords(self, passwords):
        with ThreadPoolExecutor(max_workers=self.hash_workers) as pool:
            return list(pool.map(self.pwd_context.hash, passwords))

    def seed_users(self, session: Session) -> int:
        ensure_table(session, User.__table__)

        users = self.fixtures.users()
        hashed = self.hash_passwords([u.password for u in users])
        rows = [
            {"id": u.id, "name": u.name, "email": u.email, "password": h}
            for u, h in zip(users, hashed)
        ]
        inserted = insert_ignore_conflicts(session, User.__table__, rows, ["id"])
        self._log_group("users", len(rows), inserted)
        return inserted

    def seed_customers(self, session: Session) -> int:
        ensure_table(session, Customer.__table__)

        rows = [c.model_dump() for c in self.fixtures.customers()]
        inserted = insert_ignore_conflicts(session, Customer.__table__, rows, ["id"])
        self._log_group("customers", len(rows), inserted)
        return inserted

    def seed_invoices(self, session: Session) -> int:
        ensure_table(session, Invoice.__table__)

        rows = [i.model_dump() for i in self.fixtures.invoices()]
        inserted = insert_ignore_conflicts(session, Invoice.__table__, rows, ["id"])
        self._log_group("invoices", len(rows), inserted)
        return inserted

    def seed_revenue(self, session: Session) -> int:
        ensure_table(session, Revenue.__table__)

        rows = [r.model_dump() for r in self.fixtures.revenue()]
        inserted = insert_ignore_conflicts(session, Revenue.__table__, rows, ["month"])
        self._log_group("revenue", len(rows), inserted)
        return inserted

    def run(self, session: Session) -> Dict[str, int]:
        """
        Seed all groups in order inside one transaction.

        Commits when every group succeeds; any exception rolls the whole
        transaction back and is re-raised. Returns rows inserted per group.
        """
        with session.begin():
            return {
                "users": self.seed_users(session),
                "customers": self.seed_customers(session),
                "invoices": self.seed_invoices(session),
                "revenue": self.seed_revenue(session),
            }
