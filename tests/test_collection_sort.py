import random
from datetime import datetime, timedelta, timezone

import pytest

from booster_components.card_utils.card import CardType
from booster_components.card_utils.pack import generate_pack
from booster_components.collection_sort import sorted_view
from booster_components.session_classes import SortKey

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_rarity_sort_is_descending_and_stable(card_factory):
    collection = [
        card_factory(rarity=2, id=1),
        card_factory(rarity=4, id=2),
        card_factory(rarity=1, id=3),
        card_factory(rarity=4, id=4),
    ]

    result = sorted_view(collection, SortKey.RARITY)

    assert [c.id for c in result] == [2, 4, 1, 3]


def test_drawn_date_sort_puts_newest_first(card_factory):
    collection = [
        card_factory(id=1, drawn_date=BASE_TIME),
        card_factory(id=2, drawn_date=BASE_TIME + timedelta(days=2)),
        card_factory(id=3, drawn_date=BASE_TIME + timedelta(days=1)),
        card_factory(id=4, drawn_date=BASE_TIME + timedelta(days=2)),
    ]

    result = sorted_view(collection, "drawnDate")

    assert [c.id for c in result] == [2, 4, 3, 1]


def test_name_sort_ignores_case(card_factory):
    collection = [
        card_factory(name="thorne", id=1),
        card_factory(name="Azura", id=2),
        card_factory(name="eldrin", id=3),
        card_factory(name="Azura", id=4),
    ]

    result = sorted_view(collection, SortKey.NAME)

    assert [c.id for c in result] == [2, 4, 3, 1]


def test_type_sort_ascending(card_factory):
    collection = [
        card_factory(type=CardType.TRAP, id=1),
        card_factory(type=CardType.MONSTER, id=2),
        card_factory(type=CardType.SPELL, id=3),
        card_factory(type=CardType.MONSTER, id=4),
    ]

    result = sorted_view(collection, SortKey.TYPE)

    assert [c.id for c in result] == [2, 4, 3, 1]


@pytest.mark.parametrize("key", list(SortKey))
def test_sort_is_idempotent_and_non_mutating(key):
    collection = generate_pack(30, rng=random.Random(11))
    snapshot = list(collection)

    once = sorted_view(collection, key)
    twice = sorted_view(once, key)

    assert once == twice
    assert collection == snapshot
    assert once is not collection


def test_empty_collection():
    assert sorted_view([], SortKey.RARITY) == []


def test_unknown_key_rejected(card_factory):
    with pytest.raises(ValueError):
        sorted_view([card_factory()], "colour")


def test_naive_drawn_date_is_read_as_utc(card_factory):
    naive = card_factory(id=1, drawn_date=datetime(2024, 5, 3, 12, 0))
    aware = card_factory(id=2, drawn_date=BASE_TIME)

    assert naive.drawn_date.tzinfo is not None
    assert [c.id for c in sorted_view([aware, naive], SortKey.DRAWN_DATE)] == [1, 2]


def test_naive_clock_still_sorts_against_aware_cards(card_factory):
    naive_pack = generate_pack(3, rng=random.Random(2), now=lambda: datetime(2024, 6, 1))
    older = card_factory(id=1, drawn_date=BASE_TIME)

    result = sorted_view([older] + naive_pack, SortKey.DRAWN_DATE)

    assert result[-1] is older


def test_name_sort_folds_accents(card_factory):
    collection = [
        card_factory(name="Zed", id=1),
        card_factory(name="Élan", id=2),
        card_factory(name="Eve", id=3),
        card_factory(name="Elan", id=4),
        card_factory(name="Élan", id=5),
    ]

    result = sorted_view(collection, SortKey.NAME)

    assert [c.id for c in result] == [4, 2, 5, 3, 1]
