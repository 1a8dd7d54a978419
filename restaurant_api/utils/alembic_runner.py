import os
import logging
from alembic.config import Config
from alembic import command

from ..config import settings

logger = logging.getLogger("alembic_runner")

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def run_migrations_if_needed(alembic_ini_path: str = None) -> bool:
    """Run `alembic upgrade head` against settings.DATABASE_URL.

    Failures are logged and reported through the return value; startup then
    falls back to `Base.metadata.create_all`.
    """
    if alembic_ini_path is None:
        alembic_ini_path = os.path.join(PROJECT_ROOT, "alembic.ini")

    if not os.path.exists(alembic_ini_path):
        logger.info("alembic.ini not found at %s; skipping automatic migrations", alembic_ini_path)
        return False

    cfg = Config(alembic_ini_path)
    cfg.set_main_option("script_location", os.path.join(PROJECT_ROOT, "alembic"))
    cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    try:
        logger.info("Running alembic upgrade head...")
        command.upgrade(cfg, "head")
    except Exception:
        logger.exception("Failed to run alembic migrations automatically")
        return False
    logger.info("Alembic upgrade head finished")
    return True
