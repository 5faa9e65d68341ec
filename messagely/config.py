"""Data-access configuration values."""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'messagely.db'}")
BCRYPT_WORK_FACTOR = int(os.getenv("BCRYPT_WORK_FACTOR", "12"))
LOG_FILE = Path(os.getenv("LOG_FILE", str(BASE_DIR / "messagely.log")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
