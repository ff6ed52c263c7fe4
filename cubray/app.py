"""Command-line entry point: load a scene and run the game window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from cubray.mapfile import MapError, check_file_name, load_map
from cubray.player import Action, Player
from cubray.render import draw_frame

WINDOW_TITLE = "Cub3D"
FRAME_RATE = 60

_KEY_ACTIONS = (
    (pygame.K_ESCAPE, Action.QUIT),
    (pygame.K_UP, Action.FORWARD),
    (pygame.K_w, Action.FORWARD),
    (pygame.K_DOWN, Action.BACK),
    (pygame.K_s, Action.BACK),
    (pygame.K_a, Action.STRAFE_LEFT),
    (pygame.K_d, Action.STRAFE_RIGHT),
    (pygame.K_LEFT, Action.TURN_LEFT),
    (pygame.K_RIGHT, Action.TURN_RIGHT),
)


def _actions_for(pressed) -> set[Action]:
    """Actions for the keys currently held, given an indexable key state."""
    return {action for key, action in _KEY_ACTIONS if pressed[key]}


def parse_args(argv: Sequence[str]) -> str:
    """Return the single ``.cub`` path in ``argv``, or raise ValueError."""
    if len(argv) != 1 or not check_file_name(argv[0]):
        raise ValueError("Bad arguments. Enter a .cub file")
    return argv[0]


def run(path: str | Path) -> int:
    """Load the scene at ``path`` and run the game until it is closed."""
    try:
        cub_map = load_map(path)
    except MapError as exc:
        print(f"Error\n {exc}", file=sys.stderr)
        return 1
    player = Player.spawn(cub_map)

    pygame.init()
    try:
        screen = pygame.display.set_mode((player.width_win, player.height_win))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            running = player.apply_input(_actions_for(pygame.key.get_pressed()))
            draw_frame(screen, player)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    except pygame.error as exc:
        print(f"Error\n {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = parse_args(list(argv))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return run(path)


if __name__ == "__main__":
    sys.exit(main())