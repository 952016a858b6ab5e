import os
import zipfile
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


def new_id() -> str:
    return os.urandom(6).hex()


def new_token() -> str:
    return os.urandom(4).hex()


def safe_filename(name: Optional[str]) -> str:
    """Keep only the last path component of an uploaded name ("" when nothing usable is left).

    Unicode is kept as is; only directory parts and "." / ".." are dropped.
    """
    if not name:
        return ""
    base = name.replace("\\", "/").rsplit("/", 1)[-1].replace("\x00", "").strip()
    return "" if base in (".", "..") else base


def unzip_archive(archive: Path, destination: Path) -> None:
    """Extract every member of `archive` into the existing `destination` directory."""
    if not destination.is_dir():
        raise ValueError(f"Destination directory does not exist or is not a directory: {destination}")
    if not archive.is_file():
        raise ValueError(f"Archive does not exist or is not a file: {archive}")
    with zipfile.ZipFile(archive) as zf:
        zf.extractall(destination)


def image_size(path: Path) -> Optional[Tuple[int, int]]:
    try:
        with Image.open(path) as im:
            w, h = im.size
    except OSError:  # includes UnidentifiedImageError
        return None
    if w <= 0 or h <= 0:
        return None
    return w, h
