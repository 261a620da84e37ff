from booster_logs.chooseLogType import get_logger
from booster_components.config import ENV

booster_logger = get_logger(mode=ENV, log_type="booster")
storage_logger = get_logger(mode=ENV, log_type="storage")
