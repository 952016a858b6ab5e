import logging
import shutil
import tempfile
import zipfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Optional, Tuple

from .errors import DuplicateUpload, InvalidUpload, MalformedArchive, UnsupportedMediaExtension
from .models import Game, Media, classify
from .scanning import game_from_dir, is_game_dir
from .utils import new_token, safe_filename, unzip_archive

log = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".zip"
STAGING_PREFIX = ".upload-"


@dataclass
class UploadResult:
    original_name: str
    stored_name: Optional[str] = None
    media: Optional[Media] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _write_stream(stream: BinaryIO, dest: Path) -> None:
    with open(dest, "wb") as f:
        shutil.copyfileobj(stream, f)


@contextmanager
def staging(root: Path, archive_name: str) -> Iterator[Tuple[Path, Path]]:
    """Yield (archive copy path, fresh extraction dir), both under one temp dir in `root`.

    The temp dir is removed on exit, whatever happened inside the block.
    """
    stage = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=root))
    workdir = stage / "content"
    workdir.mkdir()
    try:
        yield stage / archive_name, workdir
    finally:
        shutil.rmtree(stage, ignore_errors=True)


# --- games ---

def save_game_archive(games_root: Path, filename: Optional[str], stream: BinaryIO) -> Game:
    """Ingest a zipped game: one top-level directory holding exactly one .html file.

    The game is named after that directory, not after the archive.
    """
    games_root = Path(games_root)
    archive_name = safe_filename(filename)
    if not archive_name:
        raise InvalidUpload("Uploaded archive has no file name.")
    if not archive_name.lower().endswith(ARCHIVE_SUFFIX):
        raise InvalidUpload(f"Games must be uploaded as {ARCHIVE_SUFFIX} archives: '{archive_name}'")
    if (games_root / archive_name).exists():
        raise DuplicateUpload(f"File '{archive_name}' already exists.")

    with staging(games_root, archive_name) as (archive, workdir):
        _write_stream(stream, archive)
        try:
            unzip_archive(archive, workdir)
        except zipfile.BadZipFile as e:
            raise MalformedArchive(f"'{archive_name}' is not a valid zip archive.") from e
        archive.unlink()

        entries = list(workdir.iterdir())
        if len(entries) != 1:
            raise MalformedArchive(
                f"Archive must contain exactly one top-level directory. Found {len(entries)} entries."
            )
        extracted = entries[0]
        if not is_game_dir(extracted):
            raise MalformedArchive(
                f"'{extracted.name}' must be a directory with exactly one .html file."
            )

        target = games_root / extracted.name
        if target.exists():
            raise DuplicateUpload(f"Game '{extracted.name}' already exists.")
        shutil.move(str(extracted), str(target))

    game = game_from_dir(target)
    log.info("Game '%s' uploaded from '%s'.", game.name, archive_name)
    return game


def delete_game_dir(game: Game) -> None:
    """Remove the game's whole directory tree, children before parents."""
    shutil.rmtree(game.folder)
    log.info("Game '%s' deleted.", game.name)


# --- media ---

def unique_filename(directory: Path, name: str) -> str:
    candidate = name
    while (directory / candidate).exists():
        candidate = f"{new_token()}_{name}"
    return candidate


def save_media_file(media_root: Path, filename: str, stream: BinaryIO) -> UploadResult:
    result = UploadResult(original_name=filename)
    try:
        classify(filename)
    except UnsupportedMediaExtension as e:
        log.warning("Rejected upload '%s': %s", filename, e)
        result.error = str(e)
        return result

    stored = unique_filename(media_root, filename)
    dest = media_root / stored
    try:
        _write_stream(stream, dest)
    except OSError as e:
        log.error("Failed to upload file '%s'.", filename, exc_info=True)
        result.error = f"Error uploading file: {e}"
        return result

    result.stored_name = stored
    result.media = Media.of(dest)
    return result


def save_media_batch(media_root: Path, files: Iterable[Tuple[Optional[str], BinaryIO]]) -> List[UploadResult]:
    """Store each uploaded (name, stream) pair; failures are reported per file, not raised."""
    media_root = Path(media_root)
    media_root.mkdir(parents=True, exist_ok=True)

    results: List[UploadResult] = []
    for raw_name, stream in files:
        name = safe_filename(raw_name)
        if not name:
            log.warning("File skipped: no original filename provided.")
            continue
        result = save_media_file(media_root, name, stream)
        result.original_name = raw_name
        results.append(result)

    stored = sum(1 for r in results if r.ok)
    log.info("Uploaded %d of %d media files.", stored, len(results))
    return results
