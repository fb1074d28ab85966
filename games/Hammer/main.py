#!/usr/bin/env python3
"""Hammer - Standalone Entry Point.

Run this to play with mouse input.

Usage:
    python main.py
    python main.py --preset frantic
    python main.py --seed 42 --restart-policy carry
"""

import argparse
import os
import sys

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from games.Hammer.config import PRESETS, REFERENCE_HEIGHT, REFERENCE_WIDTH
from games.Hammer.game_mode import HammerMode
from rectsim.games.input.sources.pygame_events import PygameInputSource


def main():
    """Run Hammer standalone."""
    parser = argparse.ArgumentParser(description="Hammer - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=REFERENCE_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=REFERENCE_HEIGHT, help='Screen height')

    # Game options
    parser.add_argument('--preset', type=str, default='classic',
                        choices=list(PRESETS.keys()),
                        help='Difficulty curve preset')
    parser.add_argument('--config-file', type=str, default=None,
                        help='YAML file overriding the difficulty configuration')
    parser.add_argument('--restart-policy', type=str, default=None,
                        choices=['reset', 'carry'],
                        help='Difficulty after restart')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')

    args = parser.parse_args()

    game = HammerMode(
        preset=args.preset,
        config_file=args.config_file,
        restart_policy=args.restart_policy,
        seed=args.seed,
    )

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Game0: Hammer")

    input_source = PygameInputSource(args.width, args.height)
    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print("HAMMER")
    print("=" * 50)
    print("Controls:")
    print("  - Click to start")
    print("  - Move the mouse to slide the hammer")
    print("  - R to restart after game over")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    while running:
        dt = clock.tick(60) / 1000.0

        input_source.update(dt)
        events = input_source.poll_events()
        if any(event.is_quit for event in events):
            break

        game.handle_input(events)
        game.update(dt)

        for notification in game.pop_notifications():
            print(notification)

        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
