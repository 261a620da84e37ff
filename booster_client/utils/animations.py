import sys
from time import sleep
from typing import Callable, List

from booster_components.card_utils.card import Card, Rarity

GREEN = '\033[32m'
CYAN = '\033[36m'
MAGENTA = '\033[35m'
YELLOW = '\033[33m'
WHITE = '\033[37m'
BOLD = '\033[1m'
RESET = '\033[0m'
CLEAR_LINE = '\033[2K'
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'

RARITY_COLORS = {
    Rarity.COMMON: WHITE,
    Rarity.UNCOMMON: GREEN,
    Rarity.RARE: CYAN,
    Rarity.EXTREMELY_RARE: MAGENTA,
}

SPINNER_FRAMES = ['|', '/', '-', '\\']
CARD_WIDTH = 44


def rarity_tag(card: Card) -> str:
    color = RARITY_COLORS.get(card.rarity, WHITE)
    return f"{color}[{card.rarity.label.upper()}]{RESET}"


def _wrap(text: str, width: int) -> List[str]:
    lines, current = [], ""
    for word in text.split():
        if current and len(current) + 1 + len(word) > width:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}".strip()
    if current:
        lines.append(current)
    return lines


def render_card_back(width: int = CARD_WIDTH) -> List[str]:
    inner = width - 2
    middle = ["|" + " " * inner + "|"] * 2
    return (
        ["+" + "-" * inner + "+"]
        + middle
        + ["|" + f"{BOLD}?{RESET}".center(inner + len(BOLD) + len(RESET)) + "|"]
        + middle
        + ["+" + "-" * inner + "+"]
    )


def render_card_face(card: Card, width: int = CARD_WIDTH) -> List[str]:
    """Plain-text card face. Colour only on the rarity line."""
    inner = width - 4
    color = RARITY_COLORS.get(card.rarity, WHITE)
    body = [
        f"{card.name} - {card.type.value}",
        "",
        *_wrap(card.description, inner),
        "",
    ]
    lines = ["+" + "-" * (width - 2) + "+"]
    lines += [f"| {line.ljust(inner)} |" for line in body]
    rarity = card.rarity.label.ljust(inner - 6)
    lines.append(f"| {color}{rarity}{RESET}{('#' + str(card.id)).rjust(6)} |")
    lines.append("+" + "-" * (width - 2) + "+")
    return lines


def print_lines(lines: List[str]):
    for line in lines:
        print(line)


def animate_opening(is_opening: Callable[[], bool], frame_delay: float = 0.1):
    """Spin until the store leaves the opening stage."""
    print(HIDE_CURSOR, end='')
    try:
        frame = 0
        while is_opening():
            spinner = SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]
            sys.stdout.write(f"\r{CLEAR_LINE}{YELLOW}{spinner} Opening...{RESET}")
            sys.stdout.flush()
            frame += 1
            sleep(frame_delay)
        sys.stdout.write(f"\r{CLEAR_LINE}")
        sys.stdout.flush()
    finally:
        print(SHOW_CURSOR, end='')


def animate_flip(card: Card, frame_delay: float = 0.05):
    """Squeeze the card back shut and open it again on the face."""
    print(HIDE_CURSOR, end='')
    try:
        for width in (CARD_WIDTH, CARD_WIDTH * 2 // 3, CARD_WIDTH // 3):
            sys.stdout.write(f"\r{CLEAR_LINE}{'=' * width}")
            sys.stdout.flush()
            sleep(frame_delay)
        sys.stdout.write(f"\r{CLEAR_LINE}")
        sys.stdout.flush()
    finally:
        print(SHOW_CURSOR, end='')
    print_lines(render_card_face(card))
