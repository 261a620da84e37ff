# card data class.
# Immutable value object for a collectible card. Cards are generated once and
# then only moved between the current pack and the collection, never edited.
from datetime import datetime, timezone
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Rarity(IntEnum):
    COMMON = 1
    UNCOMMON = 2
    RARE = 3
    EXTREMELY_RARE = 4

    @property
    def label(self) -> str:
        return RARITY_LABELS[self]


RARITY_LABELS = {
    Rarity.COMMON: "Common",
    Rarity.UNCOMMON: "Uncommon",
    Rarity.RARE: "Rare",
    Rarity.EXTREMELY_RARE: "Extremely Rare",
}


class CardType(str, Enum):
    MONSTER = "Monster"
    SPELL = "Spell"
    TRAP = "Trap"


class Card(BaseModel):
    """A single generated card.

    `id` is a display number only, two cards may share one. `drawn_date` is
    stamped at generation and serialized as `drawnDate`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    description: str
    rarity: Rarity
    type: CardType
    drawn_date: datetime = Field(alias="drawnDate")

    @field_validator('drawn_date')
    def assume_utc(cls, v):
        # naive timestamps are read as UTC so every drawn_date compares
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
