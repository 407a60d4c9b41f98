"""Create database tables in the configured database.

Reads DATABASE_URL from .env / environment and creates the rounds, tickets
and draws tables with their indexes.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import pathlib
import sys

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from loto.models.base import Base  # noqa: E402
from loto.config import resolve_database_url  # noqa: E402
from loto.db import create_app_engine  # noqa: E402

# Import models so they register with Base.metadata
from loto import models  # noqa: E402,F401


def main() -> int:
    """Create all ORM tables in the target database."""

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)

    print("Tables created (or already exist).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
