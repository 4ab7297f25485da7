import logging

from .settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
	level_name = (level or settings.log_level or "INFO").upper()
	root_logger = logging.getLogger()
	if not root_logger.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
		root_logger.addHandler(handler)
	root_logger.setLevel(level_name)
	# httpx logs every request URL at INFO, which includes the AI Studio key
	logging.getLogger("httpx").setLevel(logging.WARNING)
