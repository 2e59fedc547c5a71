# api/seed.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from api.auth import get_password_context
from database.db_session import get_db
from seeding.fixtures import FixtureSource, PlaceholderFixtures
from seeding.seeder import DatabaseSeeder
from settings import HASH_WORKERS

logger = logging.getLogger("api.seed")
router = APIRouter(tags=["seed"])


def get_fixtures() -> FixtureSource:
    """Dependency that provides the records to seed."""
    return PlaceholderFixtures()


def error_payload(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


@router.get("/seed", summary="Create tables and load placeholder data")
def seed_database(
    db: Session = Depends(get_db),
    fixtures: FixtureSource = Depends(get_fixtures),
    pwd_context: CryptContext = Depends(get_password_context),
):
    seeder = DatabaseSeeder(fixtures, pwd_context, hash_workers=HASH_WORKERS)
    try:
        counts = seeder.run(db)
    except Exception as e:
        logger.exception("Seeding failed, transaction rolled back")
        return JSONResponse({"error": error_payload(e)}, status_code=500)

    logger.info("Database seeded: %s", counts)
    return {"message": "Database seeded successfully"}
