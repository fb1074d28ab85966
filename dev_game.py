#!/usr/bin/env python3
"""
Development Mode Game Launcher

Launcher for playing any registered game with the mouse.

Uses the game registry for auto-discovery. Game-specific arguments are
loaded from each game class's ARGUMENTS list.

Usage:
    # List available games
    python dev_game.py --list

    # Play a game
    python dev_game.py hammer
    python dev_game.py hammer --preset frantic --seed 42
    python dev_game.py stacker --max-level 8

    # See game-specific options
    python dev_game.py stacker --help

    # With custom resolution
    python dev_game.py hammer --resolution 1280x960
"""

import argparse
import os
import sys

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from games.registry import get_registry
from models import NotificationKind
from rectsim.games.game_state import GameState, RoundOutcome
from rectsim.games.input.sources.pygame_events import PygameInputSource


def _add_game_arguments(parser: argparse.ArgumentParser, game_arguments) -> None:
    """Add a game's ARGUMENTS definitions to the parser."""
    added = set()
    for arg_def in game_arguments:
        arg_name = arg_def['name']
        if arg_name in added:
            continue
        added.add(arg_name)

        kwargs = {}
        if 'type' in arg_def:
            type_val = arg_def['type']
            # Handle type as string or actual type
            if isinstance(type_val, str):
                kwargs['type'] = {'str': str, 'int': int, 'float': float}.get(type_val, str)
            else:
                kwargs['type'] = type_val
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
            kwargs.pop('type', None)  # action and type are mutually exclusive
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']

        parser.add_argument(arg_name, **kwargs)


def main():
    """Main entry point for development game launcher."""
    registry = get_registry()
    available_games = registry.list_games()

    # Phase 1: Parse just enough to identify the game
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('game', nargs='?', choices=available_games)
    pre_parser.add_argument('--list', '-l', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()

    # Phase 2: Build full parser with game-specific arguments
    parser = argparse.ArgumentParser(
        description='Development Mode Game Launcher - play games with the mouse',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available games: {', '.join(available_games)}

Examples:
  python dev_game.py --list
  python dev_game.py hammer --preset relaxed
  python dev_game.py <game> --help       # See game-specific options
        """
    )
    parser.add_argument('game', nargs='?', choices=available_games, help='Game to play')
    parser.add_argument('--list', '-l', action='store_true',
                        help='List all available games and exit')
    parser.add_argument('--resolution', '-r', type=str, default='640x480',
                        help='Window resolution as WIDTHxHEIGHT (default: 640x480)')

    if pre_args.game:
        _add_game_arguments(parser, registry.get_game_arguments(pre_args.game))

    args = parser.parse_args()

    if args.list:
        print("\nAvailable Games (Development Mode)")
        print("=" * 50)
        for slug in available_games:
            info = registry.get_game_info(slug)
            print(f"\n  {slug}")
            print(f"    Name: {info.name}")
            print(f"    Description: {info.description}")
            print(f"    Version: {info.version}")
            if info.arguments:
                print(f"    Options: {', '.join(a['name'] for a in info.arguments)}")
        print()
        return 0

    if args.game is None:
        parser.print_help()
        return 1

    try:
        width, height = (int(v) for v in args.resolution.split('x'))
    except ValueError:
        print(f"Invalid resolution format: {args.resolution}")
        print("Expected format: WIDTHxHEIGHT (e.g., 640x480)")
        return 1

    skip_args = {'game', 'list', 'resolution'}
    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in skip_args and v is not None
    }

    try:
        game = registry.create_game(args.game, **game_kwargs)
    except (ValueError, OSError) as e:
        print(f"ERROR: Failed to create game: {e}")
        return 1

    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(f"{game.NAME} - Development Mode")

    print("=" * 60)
    print(f"Development Mode: {game.NAME}")
    print("=" * 60)
    print(f"Resolution: {width}x{height}")
    if game_kwargs:
        print("Game options:")
        for k, v in game_kwargs.items():
            print(f"  --{k.replace('_', '-')}: {v}")
    print()
    print("Controls:")
    print("  - Click to start / interact")
    print("  - R to restart after the round ends")
    print("  - ESC to quit")
    print("=" * 60)

    input_source = PygameInputSource(width, height)
    clock = pygame.time.Clock()
    announced = False

    while True:
        dt = clock.tick(60) / 1000.0

        input_source.update(dt)
        events = input_source.poll_events()
        if any(event.is_quit for event in events):
            break

        game.handle_input(events)
        game.update(dt)

        for notification in game.pop_notifications():
            if notification.kind != NotificationKind.OUTCOME:
                print(notification)

        if game.state == GameState.TERMINAL and not announced:
            print("\n" + "=" * 60)
            print("YOU WIN!" if game.outcome == RoundOutcome.WIN else "GAME OVER!")
            print(f"Final Score: {game.get_score()}")
            print("=" * 60)
            print("\nPress R to restart or ESC to quit")
            announced = True
        elif game.state != GameState.TERMINAL:
            announced = False

        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
