import os
import json
import datetime as dt
import logging
from logging.handlers import TimedRotatingFileHandler

# ---------- Time helpers ----------

def now_utc():
    return dt.datetime.now(dt.timezone.utc)

# ---------- Logging ----------

_LOGGER_INITIALIZED = False

class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": dt.datetime.fromtimestamp(record.created, dt.timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def _build_logger():
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    # WARNING by default: the validator's own report goes to stdout/stderr and
    # hook output should stay readable.
    level = os.getenv("LOG_LEVEL", "WARNING").upper()
    log_dir = os.getenv("LOG_DIR")
    json_mode = os.getenv("LOG_JSON", "false").lower() == "true"

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.WARNING))

    if json_mode:
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    ch = logging.StreamHandler()
    ch.setLevel(logging.NOTSET)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        fh = TimedRotatingFileHandler(os.path.join(log_dir, "gitinfo-validate.log"), when="D", backupCount=7, encoding="utf-8")
        fh.setLevel(logging.NOTSET)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    _LOGGER_INITIALIZED = True

def get_logger(name: str = None) -> logging.Logger:
    _build_logger()
    return logging.getLogger(name if name else __name__)

def set_log_level(level: int) -> None:
    """Raise or lower verbosity after initialization (used by ``--verbose``)."""
    _build_logger()
    logging.getLogger().setLevel(level)
