"""Run Alembic migrations programmatically — invoked via MigrateFunction Lambda."""

import io
import logging
import os

from alembic.config import Config

from alembic import command
from core.config import get_config

logger = logging.getLogger(__name__)


def run_migrations() -> dict[str, str]:
    ini_path = get_config().alembic_config
    cfg = Config(ini_path)
    cfg.set_main_option("script_location", os.path.join(os.path.dirname(ini_path), "alembic"))

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, "head")
        output = stderr_buf.getvalue()
        logger.info("Migration complete: %s", output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
