from booster_logs.base import Logger
from pathlib import Path
import json


class FileLogger(Logger):
    """Appends one JSON object per line to logs/<log_type>.log."""

    def __init__(self, log_type="booster", base_path="logs"):
        super().__init__(log_type)
        self.path = Path(base_path) / f"{log_type}.log"

        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, level, msg, data):
        with open(self.path, "a") as f:
            f.write(json.dumps({
                "ts": self._timestamp(),
                "log_type": self.log_type,
                "level": level,
                "event": msg,
                **data
            }, default=str) + "\n")
