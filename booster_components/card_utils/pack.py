# booster pack generation.
# every card is drawn independently and with replacement, uniformly over each
# attribute. the same timestamp is stamped on the whole pack.
import random
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol, Sequence, TypeVar

from booster_components.card_utils.card import Card, CardType, Rarity
from booster_components.card_utils.pack_utils import DEFAULT_POOL, CardPool
from booster_components.config import CARD_ID_RANGE, PACK_SIZE

T = TypeVar("T")

RARITIES = tuple(Rarity)
CARD_TYPES = tuple(CardType)


class RandomSource(Protocol):
    """The slice of `random.Random` the generator needs."""

    def choice(self, seq: Sequence[T]) -> T: ...

    def randint(self, a: int, b: int) -> int: ...


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_pack(
    count: int,
    rng: Optional[RandomSource] = None,
    now: Optional[Clock] = None,
    pool: CardPool = DEFAULT_POOL,
) -> List[Card]:
    """Generate `count` random cards in generation order.

    :param count: number of cards, must be positive
    :param rng: random source, defaults to the module-level `random`
    :param now: clock used for `drawn_date`, defaults to UTC now
    :param pool: names and descriptions to draw from
    """
    if count <= 0:
        raise ValueError(f"Pack size must be positive, got {count}.")

    rng = rng or random
    drawn_date = (now or utc_now)()
    low, high = CARD_ID_RANGE

    cards = []
    for _ in range(count):
        cards.append(Card(
            id=rng.randint(low, high),
            name=rng.choice(pool.names),
            description=rng.choice(pool.descriptions),
            rarity=rng.choice(RARITIES),
            type=rng.choice(CARD_TYPES),
            drawn_date=drawn_date,
        ))
    return cards


class CardGenerator:
    """Binds a pool, random source and clock so callers only ask for packs."""

    def __init__(
        self,
        pool: CardPool = DEFAULT_POOL,
        rng: Optional[RandomSource] = None,
        now: Optional[Clock] = None,
        pack_size: int = PACK_SIZE,
    ):
        self.pool = pool
        self.rng = rng or random.Random()
        self.now = now or utc_now
        self.pack_size = pack_size

    def open_pack(self, count: Optional[int] = None) -> List[Card]:
        """Return a fresh pack, `pack_size` cards unless `count` says otherwise."""
        return generate_pack(
            self.pack_size if count is None else count,
            rng=self.rng,
            now=self.now,
            pool=self.pool,
        )
