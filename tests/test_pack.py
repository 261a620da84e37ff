import random
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from booster_components.card_utils.card import Card, CardType, Rarity
from booster_components.card_utils.pack import CardGenerator, generate_pack
from booster_components.card_utils.pack_utils import DEFAULT_POOL, CardPool
from booster_components.config import PACK_SIZE

FIXED = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class LastChoiceRng:
    """Always picks the last element and the top of any range."""

    def choice(self, seq):
        return seq[-1]

    def randint(self, a, b):
        return b


@pytest.mark.parametrize("count", [1, 6, 50])
def test_generate_pack_returns_count_cards(count):
    cards = generate_pack(count, rng=random.Random(count))

    assert len(cards) == count
    for card in cards:
        assert isinstance(card, Card)
        assert card.rarity in set(Rarity)
        assert card.type in set(CardType)
        assert 1000 <= card.id <= 9999
        assert card.name in DEFAULT_POOL.names
        assert card.description in DEFAULT_POOL.descriptions


@pytest.mark.parametrize("count", [0, -3])
def test_generate_pack_rejects_non_positive_count(count):
    with pytest.raises(ValueError):
        generate_pack(count)


def test_generate_pack_uses_injected_sources():
    cards = generate_pack(2, rng=LastChoiceRng(), now=lambda: FIXED)

    assert cards[0].name == "Azura"
    assert cards[0].description == DEFAULT_POOL.descriptions[-1]
    assert cards[0].rarity == Rarity.EXTREMELY_RARE
    assert cards[0].type == CardType.TRAP
    assert cards[0].id == 9999
    assert cards[0].drawn_date == FIXED


def test_whole_pack_shares_one_drawn_date():
    calls = []

    def clock():
        calls.append(1)
        return FIXED

    cards = generate_pack(6, rng=random.Random(1), now=clock)

    assert len(calls) == 1
    assert {c.drawn_date for c in cards} == {FIXED}


def test_same_seed_same_pack():
    first = generate_pack(6, rng=random.Random(42), now=lambda: FIXED)
    second = generate_pack(6, rng=random.Random(42), now=lambda: FIXED)

    assert first == second


def test_custom_pool_is_used():
    pool = CardPool(names=("Solo",), descriptions=("Only one.",))
    cards = generate_pack(4, rng=random.Random(7), pool=pool)

    assert {c.name for c in cards} == {"Solo"}
    assert {c.description for c in cards} == {"Only one."}


def test_generator_defaults_to_pack_size():
    generator = CardGenerator(rng=random.Random(3), now=lambda: FIXED)

    assert len(generator.open_pack()) == PACK_SIZE
    assert len(generator.open_pack(2)) == 2


def test_cards_are_frozen():
    card = generate_pack(1, rng=random.Random(5))[0]

    with pytest.raises(ValidationError):
        card.rarity = Rarity.RARE
