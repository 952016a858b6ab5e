import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, TypeVar

from .errors import InvalidRoot, MalformedGame, UnsupportedMediaExtension
from .models import Game, Media, classify, media_sort_key

log = logging.getLogger(__name__)

T = TypeVar("T")

HTML_SUFFIX = ".html"


def scan_dir(root: Path, predicate: Callable[[Path], bool], mapper: Callable[[Path], T]) -> Iterator[T]:
    """Lazily map every direct child of `root` accepted by `predicate`.

    The root is checked up front so a bad root fails at call time rather than
    on first iteration. An empty root yields nothing.
    """
    root = Path(root)
    if not root.exists() or not root.is_dir():
        log.error("Directory '%s' doesn't exist or is not a directory.", root)
        raise InvalidRoot(f"Catalog root doesn't exist or is not a directory: {root}")
    try:
        entries = sorted(root.iterdir())
    except PermissionError as e:
        log.error("Couldn't read directory '%s'.", root)
        raise InvalidRoot(f"Unable to read catalog root: {root}") from e

    if not entries:
        log.warning("Directory '%s' is empty.", root)
    return (mapper(p) for p in entries if predicate(p))


# --- games ---

def html_files(directory: Path) -> List[str]:
    return sorted(p.name for p in directory.iterdir() if p.is_file() and p.name.endswith(HTML_SUFFIX))


def is_game_dir(path: Path) -> bool:
    if not path.is_dir():
        return False
    try:
        children = list(path.iterdir())
    except PermissionError:
        log.warning("Directory '%s' is not readable.", path)
        return False
    if not children:
        log.warning("Directory '%s' is empty.", path)
        return False
    found = html_files(path)
    if len(found) != 1:
        log.warning("Directory '%s' must contain exactly one HTML file. Found: %d.", path, len(found))
        return False
    return True


def game_from_dir(path: Path) -> Game:
    path = Path(path)
    if not is_game_dir(path):
        raise MalformedGame(f"'{path.name}' is not a directory with exactly one {HTML_SUFFIX} file")
    return Game(name=path.name, html_file=html_files(path)[0], folder=path)


def find_all_games(games_root: Path) -> Iterator[Game]:
    return scan_dir(games_root, is_game_dir, game_from_dir)


def find_game_by_name(games_root: Path, name: str) -> Optional[Game]:
    wanted = name.lower()
    return next((g for g in find_all_games(games_root) if g.name.lower() == wanted), None)


# --- media ---

def is_media_file(path: Path) -> bool:
    if not path.is_file():
        return False
    try:
        classify(path.name)
    except UnsupportedMediaExtension:
        log.warning("Skipping '%s': unsupported media extension.", path.name)
        return False
    return True


def media_from_file(path: Path) -> Media:
    return Media.of(Path(path))


def find_all_media(media_root: Path) -> List[Media]:
    return sorted(scan_dir(media_root, is_media_file, media_from_file), key=media_sort_key)


def find_media_by_name(media_root: Path, name: str) -> Optional[Media]:
    return next((m for m in scan_dir(media_root, is_media_file, media_from_file) if m.file_name == name), None)


def count_all_media(media_root: Path) -> int:
    return sum(1 for _ in scan_dir(media_root, is_media_file, lambda p: p))
