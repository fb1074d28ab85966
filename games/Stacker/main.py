#!/usr/bin/env python3
"""Stacker - Standalone Entry Point.

Usage:
    python main.py
    python main.py --preset skyscraper
    python main.py --max-level 8
"""

import argparse
import os
import sys

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from games.Stacker.config import PRESETS, SCREEN_HEIGHT, SCREEN_WIDTH
from games.Stacker.game_mode import StackerMode
from models import NotificationKind
from rectsim.games.input.sources.pygame_events import PygameInputSource


def main():
    """Run Stacker standalone."""
    parser = argparse.ArgumentParser(description="Stacker - Standalone")

    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')

    parser.add_argument('--preset', type=str, default='classic',
                        choices=list(PRESETS.keys()),
                        help='Tower and speed preset')
    parser.add_argument('--config-file', type=str, default=None,
                        help='YAML file overriding the configuration')
    parser.add_argument('--max-level', type=int, default=None,
                        help='Blocks needed to complete the tower')

    args = parser.parse_args()

    game = StackerMode(
        preset=args.preset,
        config_file=args.config_file,
        max_level=args.max_level,
    )

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Game1: Stacker")

    input_source = PygameInputSource(args.width, args.height)
    clock = pygame.time.Clock()

    print("\n" + "=" * 50)
    print("STACKER")
    print("=" * 50)
    print("Controls:")
    print("  - Click to start, then click to drop the block")
    print("  - R to restart after the round ends")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    while True:
        dt = clock.tick(60) / 1000.0

        input_source.update(dt)
        events = input_source.poll_events()
        if any(event.is_quit for event in events):
            break

        game.handle_input(events)
        game.update(dt)

        for notification in game.pop_notifications():
            if notification.kind == NotificationKind.LEVEL:
                pygame.display.set_caption(f"Game1: Stacker - {notification}")
            print(notification)

        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
