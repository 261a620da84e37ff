# read-time ordering of the collection.
# sorted() is stable, including with reverse=True, so equal keys keep their
# collection order.
import unicodedata
from typing import Iterable, List, Tuple, Union

from booster_components.card_utils.card import Card
from booster_components.session_classes import SortKey


def collation_key(name: str) -> Tuple[str, str]:
    """Accent- and case-insensitive first, accents break ties: Elan < Élan < Eve."""
    folded = name.casefold()
    base = "".join(ch for ch in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(ch))
    return base, folded


def sorted_view(collection: Iterable[Card], sort_key: Union[SortKey, str]) -> List[Card]:
    """Return a new list of `collection` ordered by `sort_key`.

    rarity and drawnDate sort newest/rarest first, name and type ascending.
    The input is never touched.
    """
    key = SortKey(sort_key)
    cards = list(collection)

    match key:
        case SortKey.RARITY:
            return sorted(cards, key=lambda c: c.rarity, reverse=True)
        case SortKey.DRAWN_DATE:
            return sorted(cards, key=lambda c: c.drawn_date, reverse=True)
        case SortKey.NAME:
            return sorted(cards, key=lambda c: collation_key(c.name))
        case SortKey.TYPE:
            return sorted(cards, key=lambda c: c.type.value)
