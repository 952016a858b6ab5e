"""Catalog operations used by the web layer.

Every call re-reads the file system; nothing is cached between requests.
"""
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .errors import InvalidRequest, NotFound
from .models import Game, Media
from .scanning import count_all_media, find_all_games, find_all_media, find_game_by_name, find_media_by_name
from .uploads import UploadResult, delete_game_dir, save_game_archive, save_media_batch

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    content: List[T]
    page: int
    size: int
    total_pages: int
    total_elements: int


def paginate(items: Sequence[T], page: int, size: int) -> Page:
    if page < 0 or size <= 0:
        log.warning("Invalid pagination parameters. page=%s; size=%s", page, size)
        raise InvalidRequest("Page must be zero or positive and size must be positive.")
    total = len(items)
    start = page * size
    return Page(
        content=list(items[start:start + size]),
        page=page,
        size=size,
        total_pages=math.ceil(total / size),
        total_elements=total,
    )


# --- games ---

def list_games(games_root: Path) -> List[Game]:
    return list(find_all_games(games_root))


def find_game(games_root: Path, name: str) -> Optional[Game]:
    return find_game_by_name(games_root, name)


def get_game(games_root: Path, name: str) -> Game:
    game = find_game_by_name(games_root, name)
    if game is None:
        log.warning("Game '%s' not found.", name)
        raise NotFound(f"Game '{name}' doesn't exist.")
    return game


def upload_game_archive(games_root: Path, filename: Optional[str], stream: BinaryIO) -> Game:
    return save_game_archive(games_root, filename, stream)


def delete_game(games_root: Path, name: str) -> None:
    delete_game_dir(get_game(games_root, name))


# --- media ---

def list_media(media_root: Path, page: int, size: int) -> Page:
    return paginate(find_all_media(media_root), page, size)


def count_media(media_root: Path) -> int:
    return count_all_media(media_root)


def get_media(media_root: Path, name: str) -> Media:
    media = find_media_by_name(media_root, name)
    if media is None:
        log.warning("Media '%s' not found.", name)
        raise NotFound(f"File '{name}' doesn't exist.")
    return media


def upload_media_batch(media_root: Path, files: Iterable[Tuple[Optional[str], BinaryIO]]) -> List[UploadResult]:
    return save_media_batch(media_root, files)
