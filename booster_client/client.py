from booster_client.utils.animations import (
    animate_flip,
    animate_opening,
    print_lines,
    rarity_tag,
    render_card_back,
)
from booster_client.utils.pretty_display import print_border, print_info, print_startup_message
from booster_components.booster_store import BoosterSessionStore
from booster_components.card_utils.pack import CardGenerator
from booster_components.card_utils.pack_utils import DEFAULT_POOL, pool_from_path
from booster_components.config import CARD_POOL_PATH
from booster_components.scheduling import ThreadingScheduler
from booster_components.session_classes import SortKey, Stage
from booster_components.utils.db_access import SqliteSessionPersistence
from booster_logs.file import FileLogger

SORT_CHOICES = {
    '1': SortKey.RARITY,
    '2': SortKey.DRAWN_DATE,
    '3': SortKey.NAME,
    '4': SortKey.TYPE,
}

SORT_LABELS = {
    SortKey.RARITY: 'Rarity',
    SortKey.DRAWN_DATE: 'Date Drawn',
    SortKey.NAME: 'Name',
    SortKey.TYPE: 'Type',
}


def build_store() -> BoosterSessionStore:
    # file loggers keep the terminal free for the game itself
    pool = pool_from_path(CARD_POOL_PATH) if CARD_POOL_PATH else DEFAULT_POOL
    return BoosterSessionStore(
        persistence=SqliteSessionPersistence(logger=FileLogger(log_type="storage")),
        generator=CardGenerator(pool=pool),
        scheduler=ThreadingScheduler(),
        logger=FileLogger(log_type="booster"),
    )


def reveal_pack(store: BoosterSessionStore):
    """Walk the current pack one click (Enter) at a time."""
    while store.stage == Stage.REVEALING:
        print(f"Card {store.position} of {store.pack_size}")
        if not store.revealed:
            print_lines(render_card_back())
        input(f"{store.prompt} [Enter] ")

        was_revealed = store.revealed
        store.reveal_or_advance()
        if not was_revealed and store.revealed:
            animate_flip(store.current_card)


def show_collection(store: BoosterSessionStore):
    cards = store.sorted_collection()
    print_border()
    print(f"Your Collection - sorted by {SORT_LABELS[store.sort_key]} "
          f"(Total Cards: {store.collection_size})")
    print_border()
    if not cards:
        print("  You don't have any cards yet. Open some packs!")
    for card in cards:
        print(f"  {rarity_tag(card)} {card.name} ({card.type.value}) #{card.id} "
              f"- {card.drawn_date:%Y-%m-%d}")
    print_border()


def choose_sort(store: BoosterSessionStore):
    for key, sort_key in SORT_CHOICES.items():
        print(f"{key}. {SORT_LABELS[sort_key]}")
    choice = input(f"Sort by (1-{len(SORT_CHOICES)}): ")
    if choice in SORT_CHOICES:
        store.set_sort_key(SORT_CHOICES[choice])
    else:
        print("Invalid selection.")


def collection_menu(store: BoosterSessionStore):
    """Collection screen shown after a pack completes."""
    while store.stage == Stage.COLLECTION:
        show_collection(store)
        choice = input("Enter 's' to change sort, or 'o' to open another pack: ")
        match choice.lower():
            case 's':
                choose_sort(store)
            case 'o':
                store.close_collection()
            case _:
                print("Invalid input.")


def open_pack(store: BoosterSessionStore):
    store.open_pack()
    if store.stage == Stage.OPENING:
        animate_opening(lambda: store.stage == Stage.OPENING)
    reveal_pack(store)
    collection_menu(store)


def main():
    print_startup_message()
    store = build_store()

    # pick up wherever the last session stopped
    if store.stage == Stage.REVEALING:
        print_info("Resuming your unopened cards.")
        reveal_pack(store)
    if store.stage == Stage.COLLECTION:
        collection_menu(store)

    while True:
        switch_case = {
            '1': 'Open Booster',
            '2': 'View Collection',
            '3': 'Change Sort',
            '4': 'Exit'
        }
        print("\nOptions:")
        for key, value in switch_case.items():
            print(f"{key}. {value}")
        choice = input(f"Enter choice (1-{len(switch_case)}): ")

        match choice:
            case '1':
                open_pack(store)
            case '2':
                show_collection(store)
            case '3':
                choose_sort(store)
            case '4':
                print("Goodbye!")
                return
            case _:
                print("Invalid input.")


if __name__ == "__main__":
    main()
