import logging
import sys

from backend.config.settings import settings
from backend.shared.context import run_id_var


class RunIdFilter(logging.Filter):
    """Attach the current request's run_id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = run_id_var.get()
        return True


def setup_logging(level: str | None = None):
    """
    Configures the application's logging settings.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RunIdFilter())
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - [%(run_id)s] %(message)s",
        handlers=[handler],
    )
