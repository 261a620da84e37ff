from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from booster_components.card_utils.card import Card


class Stage(str, Enum):
    CLOSED = "closed"
    OPENING = "opening"
    REVEALING = "revealing"
    COLLECTION = "collection"


class SortKey(str, Enum):
    RARITY = "rarity"
    DRAWN_DATE = "drawnDate"
    NAME = "name"
    TYPE = "type"


class SessionState(BaseModel):
    """Everything the booster session persists.

    Instances are frozen; the store swaps in a new one for every change.
    Field aliases are the keys used in the persisted JSON record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stage: Stage = Stage.CLOSED
    current_pack: Tuple[Card, ...] = Field(default=(), alias="currentPack")
    current_index: int = Field(default=0, alias="currentCardIndex")
    revealed: bool = Field(default=False, alias="isFlipped")
    collection: Tuple[Card, ...] = ()
    sort_key: SortKey = Field(default=SortKey.DRAWN_DATE, alias="sortBy")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> "SessionState":
        return cls.model_validate_json(raw)
