import io
import zipfile
from pathlib import Path

import pytest

from myhub import create_app


def make_zip(files: dict) -> bytes:
    """Build an in-memory zip from {"Dir/file.html": b"..."}; a trailing "/" makes an empty dir."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, data in files.items():
            zf.writestr(name, data)
    return buf.getvalue()


def make_png(w=32, h=24) -> bytes:
    from PIL import Image
    buf = io.BytesIO()
    Image.new("RGB", (w, h), (12, 34, 56)).save(buf, format="PNG")
    return buf.getvalue()


def touch(p: Path, data: bytes = b"stub") -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return p


@pytest.fixture
def games_root(tmp_path: Path) -> Path:
    root = tmp_path / "games"
    root.mkdir()
    return root


@pytest.fixture
def media_root(tmp_path: Path) -> Path:
    root = tmp_path / "media"
    root.mkdir()
    return root


@pytest.fixture
def app(games_root: Path, media_root: Path):
    app = create_app(str(games_root), str(media_root))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
