import logging
import sys

from quickbill.settings import settings

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Transport loggers; the gateway's event hooks already log each request.
QUIET_LOGGERS = ("httpx", "httpcore")


def _level(name: str) -> int:
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _formatter(json_output: bool) -> logging.Formatter:
    if not json_output:
        return logging.Formatter(TEXT_FORMAT)

    from pythonjsonlogger.json import JsonFormatter

    return JsonFormatter(JSON_FORMAT, rename_fields={"asctime": "timestamp", "levelname": "level"})


def configure_logging() -> None:
    """Send every record to stderr, as text or JSON depending on ``settings.log_json``.

    Replaces any handlers already on the root logger, so calling it twice is harmless.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(settings.log_json))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(_level(settings.log_level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
