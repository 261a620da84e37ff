from booster_logs.base import Logger


class StdoutLogger(Logger):
    """Human readable one-liners for local play."""

    def _log(self, level, msg, data):
        print(f"[{self._timestamp()}] [{self.log_type}] {level} {msg} {data}")
