import json
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

DEFAULT_NAMES = (
    "Aethoria", "Zephyria", "Lumina", "Drakonir", "Sylvanna",
    "Mystral", "Eldrin", "Faewyn", "Thorne", "Celestia",
    "Roran", "Nymira", "Kaelor", "Elowen", "Azura",
)

DEFAULT_DESCRIPTIONS = (
    "A guardian of the enchanted forest, wielding nature's magic.",
    "A celestial being, bringing light to the darkest corners of the realm.",
    "A shapeshifter, master of illusions and trickery.",
    "A wise sage, keeper of ancient knowledge and forgotten spells.",
    "A brave knight, defender of the weak and protector of the realm.",
    "A mischievous fairy, spreading joy and chaos in equal measure.",
    "A powerful sorcerer, harnessing the elements to their will.",
    "A mystical beast, last of its kind, with untold magical abilities.",
    "A time-bending wizard, able to glimpse both past and future.",
    "A nature spirit, embodiment of the seasons and guardian of balance.",
)


@dataclass(frozen=True)
class CardPool:
    """Names and descriptions a pack draws from.

    The two lists are sampled independently, a description says nothing
    about the name it ends up next to.
    """

    names: Sequence[str]
    descriptions: Sequence[str]

    def __post_init__(self):
        if not self.names:
            raise ValueError("Card pool must contain at least one name.")
        if not self.descriptions:
            raise ValueError("Card pool must contain at least one description.")


DEFAULT_POOL = CardPool(DEFAULT_NAMES, DEFAULT_DESCRIPTIONS)


def pool_from_path(path: str) -> CardPool:
    """
    Load a CardPool from a JSON file.

    Relative paths are resolved against the pool_json directory next to this
    module, so "/fantasy.json" and "fantasy.json" point at the same file.
    Missing keys fall back to the default lists.

    :param path: Path string like "/fantasy.json" or an absolute filesystem path
    """
    candidate = Path(path)
    if candidate.is_absolute() and candidate.exists():
        full_path = candidate
    else:
        pool_json_dir = Path(__file__).parent.resolve() / "pool_json"
        full_path = pool_json_dir / path.lstrip("/\\")

    with open(full_path, 'r') as f:
        data = json.load(f)

    names = tuple(data.get('names') or DEFAULT_NAMES)
    descriptions = tuple(data.get('descriptions') or DEFAULT_DESCRIPTIONS)

    return CardPool(names, descriptions)
