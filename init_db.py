# init_db.py
import logging
import sys

from api.auth import pwd_context
from database.db_session import SessionLocal
from seeding.fixtures import PlaceholderFixtures
from seeding.seeder import DatabaseSeeder
from settings import HASH_WORKERS, LOG_LEVEL

logger = logging.getLogger("init_db")


def main(session_factory=SessionLocal) -> int:
    seeder = DatabaseSeeder(PlaceholderFixtures(), pwd_context, hash_workers=HASH_WORKERS)
    db = session_factory()
    try:
        counts = seeder.run(db)
    except Exception:
        logger.exception("Seeding failed, transaction rolled back")
        return 1
    finally:
        db.close()

    print("DB seeded:", ", ".join(f"{name}={n}" for name, n in counts.items()))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    sys.exit(main())
