import logging
import sys

from taskflow.api.middleware.request_id import request_id_var

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamps every record with the id of the request being served"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure application logging.

    Installs one console handler on the ``taskflow`` logger; safe to call
    more than once.
    """
    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger("taskflow")
    logger.setLevel(numeric_level)

    for handler in logger.handlers:
        if getattr(handler, "_taskflow_handler", False):
            handler.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(RequestIdFilter())
    handler._taskflow_handler = True
    logger.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
