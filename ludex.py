#!/usr/bin/env python3
"""
Ludex - personal game library categories
Create, order and fill the categories shown in the library sidebar.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional, Union

from colorama import init, Fore, Style

from catalog import CatalogError, generate_id
from catalog.categories import open_service
from catalog.config import load_config
from catalog.services import CategoryService

# Initialize colorama for cross-platform colored terminal output
init(autoreset=True)

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

def _level_number(level: Union[str, int]) -> int:
    """Resolve a level name, numeric string or number; unknown names give WARNING."""
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    numeric = logging.getLevelName(text.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING


def setup_logging(level: Union[str, int] = 'WARNING') -> logging.Logger:
    """Configure the ``ludex`` logger that repositories and services log under.

    Args:
        level: Level name (``"DEBUG"``, ``"info"``), numeric string or
               number as accepted by :mod:`logging`.  Defaults to WARNING
               so normal use only shows duplicate adds, unknown ids and
               I/O failures.

    Returns:
        Configured logger instance.
    """
    numeric = _level_number(level)
    logger = logging.getLogger('ludex')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def print_categories(categories: List[Dict]) -> None:
    if not categories:
        print(f"{Fore.YELLOW}No categories yet.")
        return
    for i, category in enumerate(categories, 1):
        if not isinstance(category, dict):
            continue
        games = category.get('games', [])
        print(f"{Fore.CYAN}{i:>3}. {Style.BRIGHT}{category.get('name', '')}"
              f"{Style.RESET_ALL} {Fore.WHITE}[{category.get('id', '?')}] "
              f"{Fore.GREEN}{len(games)} game(s)")
        for game_id in games:
            print(f"       {Fore.WHITE}- {game_id}")


def _report(ok: bool, success: str, failure: str) -> int:
    if ok:
        print(f"{Fore.GREEN}{success}")
        return 0
    print(f"{Fore.YELLOW}{failure}")
    return 1


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def run_command(service: CategoryService, args: argparse.Namespace) -> int:
    """Execute the sub-command in *args* and return the exit status."""
    cmd = args.command

    if cmd == 'list':
        print_categories(service.get_all())
        return 0

    if cmd == 'add':
        category = service.create(args.name)
        print(f"{Fore.GREEN}Created category '{category['name']}' ({category['id']})")
        return 0

    if cmd == 'delete':
        return _report(service.delete(args.category_id),
                       f"Deleted category {args.category_id}",
                       f"No category {args.category_id}; nothing deleted")

    if cmd == 'rename':
        return _report(service.rename(args.category_id, args.name),
                       f"Renamed {args.category_id} to '{args.name}'",
                       f"Category {args.category_id} not found")

    if cmd == 'add-game':
        return _report(service.add_game(args.category_id, args.game_id),
                       f"Added {args.game_id} to {args.category_id}",
                       f"{args.game_id} not added to {args.category_id}")

    if cmd == 'remove-game':
        return _report(service.remove_game(args.category_id, args.game_id),
                       f"Removed {args.game_id} from {args.category_id}",
                       f"Category {args.category_id} not found")

    if cmd == 'purge-game':
        count = service.remove_game_everywhere(args.game_id)
        print(f"{Fore.GREEN}Removed {args.game_id} from {count} categor"
              f"{'y' if count == 1 else 'ies'}")
        return 0

    if cmd in ('up', 'down'):
        move = service.move_up if cmd == 'up' else service.move_down
        return _report(move(args.category_id),
                       f"Moved {args.category_id} {cmd}",
                       f"{args.category_id} not moved")

    if cmd in ('game-up', 'game-down'):
        move = service.move_game_up if cmd == 'game-up' else service.move_game_down
        return _report(move(args.category_id, args.game_id),
                       f"Moved {args.game_id} {cmd[5:]}",
                       f"{args.game_id} not moved")

    if cmd == 'which':
        print_categories(service.categories_for_game(args.game_id))
        return 0

    if cmd == 'gen-id':
        print(generate_id(args.name))
        return 0

    raise ValueError(f"Unknown command: {cmd}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Ludex - manage game library categories',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 ludex.py list                         # Show categories in order
  python3 ludex.py add "RPG"                    # Create a category
  python3 ludex.py add-game 123456789 g1        # Put a game in a category
  python3 ludex.py up 123456789                 # Move a category up one place
  python3 ludex.py purge-game g1                # Remove a game from every category
        """
    )

    parser.add_argument(
        '--config', '-c',
        default='config.json',
        help='Path to config file (default: config.json)'
    )
    parser.add_argument(
        '--data', '-d',
        metavar='FILE',
        help='Category document to use (overrides categories_path in config)'
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        help='Log level (DEBUG, INFO, WARNING, ERROR)'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('list', help='List categories and their games')

    p = sub.add_parser('add', help='Create a category')
    p.add_argument('name')

    p = sub.add_parser('delete', help='Delete a category')
    p.add_argument('category_id')

    p = sub.add_parser('rename', help='Rename a category')
    p.add_argument('category_id')
    p.add_argument('name')

    for name, help_text in (('add-game', 'Add a game to a category'),
                            ('remove-game', 'Remove a game from a category'),
                            ('game-up', 'Move a game up within a category'),
                            ('game-down', 'Move a game down within a category')):
        p = sub.add_parser(name, help=help_text)
        p.add_argument('category_id')
        p.add_argument('game_id')

    p = sub.add_parser('purge-game', help='Remove a game from every category')
    p.add_argument('game_id')

    for name in ('up', 'down'):
        p = sub.add_parser(name, help=f'Move a category {name} one place')
        p.add_argument('category_id')

    p = sub.add_parser('which', help='List categories containing a game')
    p.add_argument('game_id')

    p = sub.add_parser('gen-id', help='Print the id a name would get')
    p.add_argument('name')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except CatalogError as e:
        print(f"{Fore.RED}{e}")
        return 1

    logger = setup_logging(args.log_level or config.get('log_level', 'WARNING'))
    data_path = args.data or config['categories_path']
    service = open_service(data_path, logger=logger.getChild('categories'))

    try:
        return run_command(service, args)
    except (OSError, TypeError, ValueError) as e:
        print(f"{Fore.RED}Error: could not update {data_path}: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
