from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Logger(ABC):
    """Structured logger: an event name plus keyword fields.

    Subclasses only decide where a record goes by implementing `_log`.
    """

    def __init__(self, log_type: str = "booster"):
        self.log_type = log_type

    @staticmethod
    def _timestamp() -> str:
        return datetime.now(timezone.utc).isoformat()

    @abstractmethod
    def _log(self, level: str, msg: str, data: dict): ...

    def info(self, msg: str, **data):
        self._log("INFO", msg, data)

    def debug(self, msg: str, **data):
        self._log("DEBUG", msg, data)

    def warning(self, msg: str, **data):
        self._log("WARN", msg, data)

    def error(self, msg: str, **data):
        self._log("ERROR", msg, data)
