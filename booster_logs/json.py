from booster_logs.base import Logger
import json


class JSONLogger(Logger):
    """Same record shape as FileLogger, written to stdout for log collectors."""

    def _log(self, level, msg, data):
        print(json.dumps({
            "ts": self._timestamp(),
            "log_type": self.log_type,
            "level": level,
            "event": msg,
            "data": data
        }, default=str))
