"""Path-first helpers for callers that only hold the document's location.

Each function wires a :class:`~catalog.services.CategoryService` over a
:class:`~catalog.storage.JsonFileStorage` for *data_path* and delegates.
Nothing is shared between calls.
"""
import logging
from typing import Dict, List, Optional

from .repositories import CategoryRepository
from .services import CategoryService
from .storage import JsonFileStorage


def open_service(data_path: str,
                 logger: Optional[logging.Logger] = None) -> CategoryService:
    """Build a service backed by the JSON file at *data_path*."""
    repo = CategoryRepository(JsonFileStorage(data_path), logger=logger)
    return CategoryService(repo, logger=logger)


def get_category_data(data_path: str, logger=None) -> List[Dict]:
    return open_service(data_path, logger).get_all()


def update_category_data(data_path: str, data: List[Dict], logger=None) -> None:
    open_service(data_path, logger).replace_all(data)


def add_new_category(data_path: str, name: str, logger=None) -> Dict:
    return open_service(data_path, logger).create(name)


def delete_category(data_path: str, category_id: str, logger=None) -> bool:
    return open_service(data_path, logger).delete(category_id)


def rename_category(data_path: str, category_id: str, new_name: str,
                    logger=None) -> bool:
    return open_service(data_path, logger).rename(category_id, new_name)


def add_new_game_to_category(data_path: str, category_id: str, game_id: str,
                             logger=None) -> bool:
    return open_service(data_path, logger).add_game(category_id, game_id)


def delete_game_from_category(data_path: str, category_id: str, game_id: str,
                              logger=None) -> bool:
    return open_service(data_path, logger).remove_game(category_id, game_id)


def delete_game_from_all_categories(data_path: str, game_id: str,
                                    logger=None) -> int:
    return open_service(data_path, logger).remove_game_everywhere(game_id)


def move_category_up(data_path: str, category_id: str, logger=None) -> bool:
    return open_service(data_path, logger).move_up(category_id)


def move_category_down(data_path: str, category_id: str, logger=None) -> bool:
    return open_service(data_path, logger).move_down(category_id)


def move_game_up(data_path: str, category_id: str, game_id: str,
                 logger=None) -> bool:
    return open_service(data_path, logger).move_game_up(category_id, game_id)


def move_game_down(data_path: str, category_id: str, game_id: str,
                   logger=None) -> bool:
    return open_service(data_path, logger).move_game_down(category_id, game_id)
