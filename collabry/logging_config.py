
import logging

from config import settings


def setup_logging(level: str | None = None) -> None:
    level = (level or settings.log_level).upper()
    if level == "DEBUG":
        log_format = "%(asctime)s %(levelname)s %(name)s: %(message)s [in %(pathname)s:%(lineno)d]"
    else:
        log_format = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=log_format)
