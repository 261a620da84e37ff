from booster_logs.stdout import StdoutLogger
from booster_logs.file import FileLogger
from booster_logs.json import JSONLogger
from booster_logs.composite import CompositeLogger


def get_logger(mode="dev", log_type="booster", base_path="logs"):
    """stdout while developing, JSON lines to file and stdout in prod."""
    if mode == "prod":
        return CompositeLogger(
            FileLogger(log_type=log_type, base_path=base_path),
            JSONLogger(log_type=log_type)
        )
    return StdoutLogger(log_type=log_type)
