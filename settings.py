# settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()  # reads .env if present

PROJECT_ROOT = Path(__file__).parent.resolve()
DATA_DIR = Path(os.getenv("DATA_DIR", PROJECT_ROOT / "data"))
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'dashboard.db'}")

# bcrypt cost factor applied to seeded user passwords
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
HASH_WORKERS = int(os.getenv("HASH_WORKERS", "4"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [x.strip() for x in os.getenv("CORS_ORIGINS", "*").split(",") if x.strip()]

# ensure dirs exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
