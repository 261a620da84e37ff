# booster session store.
# owns the persisted session and the stage machine:
#   closed -> opening -> (timer) -> revealing -> collection -> closed
# every mutation replaces the frozen SessionState and saves it.
import itertools
import threading
from typing import List, Optional, Union

from booster_components.card_utils.card import Card
from booster_components.card_utils.pack import CardGenerator
from booster_components.collection_sort import sorted_view
from booster_components.config import OPENING_DELAY_SECONDS
from booster_components.scheduling import Scheduler, ThreadingScheduler
from booster_components.session_classes import SessionState, SortKey, Stage
from booster_components.utils.db_access import SessionPersistence, SqliteSessionPersistence
from booster_logs.base import Logger
from booster_logs.loggers import booster_logger

IN_FLIGHT = (Stage.OPENING, Stage.REVEALING)
OPENABLE = (Stage.CLOSED, Stage.COLLECTION)


class BoosterSessionStore:
    """Single-user booster session.

    Operations called in the wrong stage are ignored rather than raising,
    the presentation layer only offers them where they make sense. All
    operations and the opening timer share one lock so a timer firing never
    lands in the middle of a user action.
    """

    def __init__(
        self,
        persistence: Optional[SessionPersistence] = None,
        generator: Optional[CardGenerator] = None,
        scheduler: Optional[Scheduler] = None,
        logger: Logger = booster_logger,
        opening_delay: float = OPENING_DELAY_SECONDS,
    ):
        self.persistence = persistence or SqliteSessionPersistence()
        self.generator = generator or CardGenerator()
        self.scheduler = scheduler or ThreadingScheduler()
        self.logger = logger
        self.opening_delay = opening_delay

        self._lock = threading.RLock()
        self._pack_counter = itertools.count(1)
        self._opening_pack = None

        loaded = self.persistence.load()
        self._state = loaded or SessionState()
        recovered = self._recover(self._state)
        if recovered is not self._state:
            self._commit(recovered)

        self.logger.info(
            "session_loaded",
            restored=loaded is not None,
            stage=self._state.stage.value,
            collection_size=len(self._state.collection)
        )

    # ---- reads ----------------------------------------------------------

    @property
    def pack_size(self) -> int:
        return self.generator.pack_size

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def stage(self) -> Stage:
        return self._state.stage

    @property
    def revealed(self) -> bool:
        return self._state.revealed

    @property
    def current_card(self) -> Optional[Card]:
        state = self._state
        if state.stage != Stage.REVEALING:
            return None
        return state.current_pack[state.current_index]

    @property
    def position(self) -> int:
        """1-based position of the card being revealed."""
        return self._state.current_index + 1

    @property
    def collection(self) -> List[Card]:
        return list(self._state.collection)

    @property
    def collection_size(self) -> int:
        return len(self._state.collection)

    @property
    def sort_key(self) -> SortKey:
        return self._state.sort_key

    @property
    def prompt(self) -> Optional[str]:
        state = self._state
        if state.stage != Stage.REVEALING:
            return None
        if not state.revealed:
            return "Click to reveal card"
        if state.current_index < self.pack_size - 1:
            return "Click to see next card"
        return "Click to finish"

    def sorted_collection(self) -> List[Card]:
        state = self._state
        return sorted_view(state.collection, state.sort_key)

    # ---- writes ---------------------------------------------------------

    def open_pack(self):
        with self._lock:
            state = self._state
            if state.stage not in OPENABLE:
                self._ignored("open_pack")
                return

            cards = self.generator.open_pack()
            pack_no = next(self._pack_counter)
            self._opening_pack = pack_no
            self._commit(state.model_copy(update={
                "stage": Stage.OPENING,
                "current_pack": tuple(cards),
                "current_index": 0,
                "revealed": False,
            }))
            self.logger.info(
                "pack_opened",
                pack_size=len(cards),
                rarities=[int(c.rarity) for c in cards]
            )
            self.scheduler.call_later(self.opening_delay, lambda: self._finish_opening(pack_no))

    def _finish_opening(self, pack_no: int):
        with self._lock:
            if self._state.stage != Stage.OPENING or pack_no != self._opening_pack:
                self.logger.debug("opening_timer_stale", pack_no=pack_no)
                return
            self._opening_pack = None
            self._commit(self._state.model_copy(update={
                "stage": Stage.REVEALING,
                "current_index": 0,
                "revealed": False,
            }))
            self.logger.info("pack_ready", pack_size=len(self._state.current_pack))

    def reveal_or_advance(self):
        with self._lock:
            state = self._state
            if state.stage != Stage.REVEALING:
                self._ignored("reveal_or_advance")
                return

            if not state.revealed:
                self._commit(state.model_copy(update={"revealed": True}))
                card = self.current_card
                self.logger.info(
                    "card_revealed",
                    position=self.position,
                    name=card.name,
                    rarity=card.rarity.label
                )
            elif state.current_index < self.pack_size - 1:
                self._commit(state.model_copy(update={
                    "current_index": state.current_index + 1,
                    "revealed": False,
                }))
                self.logger.debug("card_advanced", position=self.position)
            else:
                self._commit(state.model_copy(update={
                    "stage": Stage.COLLECTION,
                    "collection": state.collection + state.current_pack,
                    "current_pack": (),
                    "current_index": 0,
                    "revealed": False,
                }))
                self.logger.info(
                    "pack_completed",
                    cards_added=len(state.current_pack),
                    collection_size=self.collection_size
                )

    def close_collection(self):
        with self._lock:
            if self._state.stage != Stage.COLLECTION:
                self._ignored("close_collection")
                return
            self._commit(self._state.model_copy(update={"stage": Stage.CLOSED}))
            self.logger.info("collection_closed", collection_size=self.collection_size)

    def set_sort_key(self, key: Union[SortKey, str]):
        sort_key = SortKey(key)
        with self._lock:
            self._commit(self._state.model_copy(update={"sort_key": sort_key}))
            self.logger.info("sort_key_changed", sort_key=sort_key.value)

    # ---- internals ------------------------------------------------------

    def _commit(self, new_state: SessionState):
        self._state = new_state
        self.persistence.save(new_state)

    def _ignored(self, operation: str):
        self.logger.debug("operation_ignored", operation=operation, stage=self._state.stage.value)

    def _recover(self, state: SessionState) -> SessionState:
        """Bring a freshly loaded state back inside the stage invariants.

        A saved `opening` means the timer died with the previous process, so
        the pack goes straight to revealing. In-flight packs that do not fit
        the current pack size are dropped; the collection is always kept.
        """
        if state.stage in IN_FLIGHT:
            pack_ok = len(state.current_pack) == self.pack_size
            index_ok = 0 <= state.current_index < self.pack_size
            if not (pack_ok and index_ok):
                self.logger.warning(
                    "in_flight_pack_discarded",
                    stage=state.stage.value,
                    pack_length=len(state.current_pack),
                    current_index=state.current_index
                )
                return state.model_copy(update={
                    "stage": Stage.CLOSED,
                    "current_pack": (),
                    "current_index": 0,
                    "revealed": False,
                })
            if state.stage == Stage.OPENING:
                self.logger.info("opening_resumed", pack_size=len(state.current_pack))
                return state.model_copy(update={
                    "stage": Stage.REVEALING,
                    "current_index": 0,
                    "revealed": False,
                })
            return state

        if state.current_pack or state.current_index or state.revealed:
            return state.model_copy(update={
                "current_pack": (),
                "current_index": 0,
                "revealed": False,
            })
        return state
