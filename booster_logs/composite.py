from booster_logs.base import Logger


class CompositeLogger(Logger):
    def __init__(self, *loggers: Logger):
        super().__init__(loggers[0].log_type if loggers else "booster")
        self.loggers = loggers

    def _log(self, level, msg, data):
        for l in self.loggers:
            l._log(level, msg, data)
