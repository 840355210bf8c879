"""Run Alembic migrations for the snapshot database."""
import os
import sys
from alembic import command
from alembic.config import Config

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from app.config import get_settings  # noqa: E402


def _upgrade(url: str) -> None:
    cfg = Config()
    cfg.set_main_option("script_location", os.path.join(BASE_DIR, "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")


def main() -> None:
    settings = get_settings()
    _upgrade(os.getenv("DATABASE_URL") or settings.database_url)


if __name__ == "__main__":
    main()
