import random
from datetime import datetime, timedelta, timezone

import pytest

from booster_components.booster_store import BoosterSessionStore
from booster_components.card_utils.card import Card, CardType, Rarity
from booster_components.card_utils.pack import CardGenerator
from booster_components.scheduling import ManualScheduler
from booster_components.utils.db_access import InMemorySessionPersistence
from booster_logs.base import Logger

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class RecordingLogger(Logger):
    """Keeps every record so tests can assert on events."""

    def __init__(self):
        super().__init__("test")
        self.records = []

    def _log(self, level, msg, data):
        self.records.append((level, msg, data))

    def events(self, level=None):
        return [msg for lvl, msg, _ in self.records if level is None or lvl == level]


class SteppingClock:
    """Each call returns a time one minute later than the previous."""

    def __init__(self, start=BASE_TIME):
        self.current = start

    def __call__(self):
        value = self.current
        self.current += timedelta(minutes=1)
        return value


def make_card(rarity=1, name="Lumina", type=CardType.MONSTER, id=1000, drawn_date=BASE_TIME):
    return Card(
        id=id,
        name=name,
        description="A test card.",
        rarity=Rarity(rarity),
        type=type,
        drawn_date=drawn_date,
    )


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def persistence(logger) -> InMemorySessionPersistence:
    return InMemorySessionPersistence(logger=logger)


@pytest.fixture
def generator() -> CardGenerator:
    return CardGenerator(rng=random.Random(389), now=SteppingClock())


@pytest.fixture
def make_store(persistence, generator, scheduler, logger):
    def _make(**overrides):
        kwargs = dict(
            persistence=persistence,
            generator=generator,
            scheduler=scheduler,
            logger=logger,
            opening_delay=1.5,
        )
        kwargs.update(overrides)
        return BoosterSessionStore(**kwargs)
    return _make


@pytest.fixture
def store(make_store) -> BoosterSessionStore:
    return make_store()


@pytest.fixture
def card_factory():
    return make_card
