# runtime settings for the booster simulator.
# everything here is a plain module constant so callers can import what they need.
import os
from pathlib import Path

ENV = os.getenv("BOOSTER_ENV", "dev")

# sqlite file holding the persisted session record
DB_PATH = Path(os.getenv("BOOSTER_DB_PATH", "db/booster.db"))

# key of the single session record inside the SessionStore table
STORAGE_KEY = os.getenv("BOOSTER_STORAGE_KEY", "booster-storage")

# optional JSON file with custom names/descriptions, see card_utils/pack_utils.py
CARD_POOL_PATH = os.getenv("BOOSTER_CARD_POOL")

PACK_SIZE = 6
OPENING_DELAY_SECONDS = 1.5
CARD_ID_RANGE = (1000, 9999)
