"""
Game Registry - Auto-discovery and management of rectsim games.

Games are discovered by scanning the games/ directory for subdirectories
containing a game_mode.py with a class inheriting from BaseGame.

Game metadata and CLI arguments are read from the game class itself (via
BaseGame class attributes). Games whose game_mode.py cannot be imported
fall back to module-level variables in game_info.py.

Usage:
    from games.registry import get_registry

    registry = get_registry()
    available = registry.list_games()  # ['hammer', 'stacker']

    args = registry.get_game_arguments('hammer')
    game = registry.create_game('hammer', preset='frantic', seed=7)
"""

import importlib
import inspect
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Type

from rectsim.games.base_game import BaseGame
from rectsim.logging import get_logger

log = get_logger('registry')

GAMES_DIR = Path(__file__).parent


@dataclass
class GameInfo:
    """Information about a registered game."""
    name: str
    slug: str  # lowercase identifier (directory name)
    description: str
    version: str
    author: str
    module_path: str  # e.g., 'games.Hammer'

    # CLI arguments (from game class or module)
    arguments: List[Dict[str, Any]] = field(default_factory=list)

    # Optional features
    has_config: bool = False
    config_file: Optional[str] = None


class GameRegistry:
    """
    Registry for auto-discovering and creating games.

    Discovery works by:
    1. Looking for game_mode.py in each game directory
    2. Finding classes that inherit from BaseGame
    3. Reading metadata from class attributes (NAME, DESCRIPTION, etc.)
    4. Falling back to game_info.py module variables if no BaseGame found
    """

    def __init__(self, games_dir: Optional[Path] = None):
        """
        Initialize the game registry.

        Args:
            games_dir: Directory holding one package per game. Defaults to
                       the directory of this module; game packages are
                       imported as games.<DirName>.
        """
        self._games_dir = Path(games_dir) if games_dir is not None else GAMES_DIR
        self._games: Dict[str, GameInfo] = {}
        self._game_classes: Dict[str, Type[BaseGame]] = {}
        self._discover_games()

    def _discover_games(self) -> None:
        """Register every game package under the games directory."""
        skip_dirs = {'__pycache__'}

        if not self._games_dir.exists():
            log.warning("games directory %s does not exist", self._games_dir)
            return

        for game_dir in sorted(self._games_dir.iterdir()):
            if not game_dir.is_dir():
                continue
            if game_dir.name.startswith('_') or game_dir.name.startswith('.'):
                continue
            if game_dir.name.lower() in skip_dirs:
                continue

            if (game_dir / 'game_mode.py').exists() or (game_dir / 'game_info.py').exists():
                self._register_game(game_dir)

    def _register_game(self, game_dir: Path) -> None:
        """
        Register a game from its directory.

        Attempts to find a BaseGame subclass in game_mode.py first,
        falling back to game_info.py module variables.

        Args:
            game_dir: Path to game directory
        """
        slug = game_dir.name.lower()
        module_path = f"games.{game_dir.name}"

        game_class = self._find_game_class(module_path)
        if game_class is not None:
            source: Any = game_class
            arguments = game_class.get_arguments()
            self._game_classes[slug] = game_class
        else:
            source = self._load_game_info(module_path)
            if source is None:
                log.warning("skipping %s: neither game_mode nor game_info could be loaded", game_dir)
                return
            arguments = getattr(source, 'ARGUMENTS', [])

        has_env = (game_dir / '.env').exists()
        self._games[slug] = GameInfo(
            name=getattr(source, 'NAME', game_dir.name),
            slug=slug,
            description=getattr(source, 'DESCRIPTION', ''),
            version=getattr(source, 'VERSION', '1.0.0'),
            author=getattr(source, 'AUTHOR', 'Unknown'),
            module_path=module_path,
            arguments=list(arguments),
            has_config=has_env or (game_dir / 'config.py').exists(),
            config_file='.env' if has_env else None,
        )
        log.debug("registered game %s (%s)", slug, module_path)

    def _find_game_class(self, module_path: str) -> Optional[Type[BaseGame]]:
        """
        Find a BaseGame subclass in the game's game_mode module.

        Args:
            module_path: Package path (e.g., 'games.Hammer')

        Returns:
            The game class, or None if not found
        """
        try:
            module = importlib.import_module(f"{module_path}.game_mode")
        except ImportError as e:
            log.warning("could not import %s.game_mode: %s", module_path, e)
            return None

        for _, obj in inspect.getmembers(module, inspect.isclass):
            # Only classes defined in this module
            if obj.__module__ != module.__name__:
                continue
            if issubclass(obj, BaseGame) and obj is not BaseGame:
                return obj
        return None

    def _load_game_info(self, module_path: str) -> Optional[ModuleType]:
        """Import the game_info module for a game, or None if it has none."""
        try:
            return importlib.import_module(f"{module_path}.game_info")
        except ImportError:
            return None

    def list_games(self) -> List[str]:
        """
        Get list of available game slugs.

        Returns:
            List of game slug identifiers
        """
        return sorted(self._games.keys())

    def get_game_info(self, slug: str) -> Optional[GameInfo]:
        """Get information about a specific game, or None if unknown."""
        return self._games.get(slug.lower())

    def get_game_arguments(self, slug: str) -> List[Dict[str, Any]]:
        """
        Get CLI arguments for a specific game.

        Args:
            slug: Game identifier

        Returns:
            List of argument definitions for argparse
        """
        info = self._games.get(slug.lower())
        if info is None:
            return []
        return info.arguments

    def get_game_class(self, slug: str) -> Optional[Type[BaseGame]]:
        return self._game_classes.get(slug.lower())

    def create_game(self, slug: str, **kwargs) -> BaseGame:
        """
        Create a game mode instance.

        Uses the discovered game class if available, otherwise falls back
        to game_info.py's get_game_mode() function.

        Args:
            slug: Game identifier
            **kwargs: Game-specific arguments

        Returns:
            Game mode instance

        Raises:
            ValueError: If game not found
        """
        info = self._games.get(slug.lower())
        if info is None:
            available = ', '.join(self.list_games())
            raise ValueError(f"Unknown game: {slug}. Available: {available}")

        game_class = self._game_classes.get(slug.lower())
        if game_class is not None:
            return game_class(**kwargs)

        game_info_module = importlib.import_module(f"{info.module_path}.game_info")
        get_game_mode = getattr(game_info_module, 'get_game_mode', None)
        if get_game_mode is None:
            raise ValueError(f"Game {slug} does not define get_game_mode()")
        return get_game_mode(**kwargs)


# Singleton instance for convenience
_registry: Optional[GameRegistry] = None


def get_registry() -> GameRegistry:
    """Get the global game registry instance, discovering games on first use."""
    global _registry
    if _registry is None:
        _registry = GameRegistry()
    return _registry
