import logging
import sys
from datetime import datetime, tzinfo
import pytz

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

class TimezoneFormatter(logging.Formatter):
    """Formats ``asctime`` in a fixed zone, as ISO-8601 with milliseconds unless ``datefmt`` is given."""

    def __init__(self, timezone, fmt=LOG_FORMAT, datefmt=None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.tz = timezone if isinstance(timezone, tzinfo) else pytz.timezone(timezone)

    def formatTime(self, record, datefmt=None):
        stamp = datetime.fromtimestamp(record.created, self.tz)
        return stamp.strftime(datefmt) if datefmt else stamp.isoformat(timespec="milliseconds")

def setup_logging(settings) -> logging.Logger:
    """Route the ``uvicorn`` logger family to stderr, stamped in ``LOG_TIMEZONE``.

    Calling it again updates level and zone in place instead of stacking handlers.
    """
    logger = logging.getLogger("uvicorn")
    logger.setLevel(settings.LOG_LEVEL.upper())
    formatter = TimezoneFormatter(settings.LOG_TIMEZONE)

    for handler in logger.handlers:
        if isinstance(handler.formatter, TimezoneFormatter):
            handler.setFormatter(formatter)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
