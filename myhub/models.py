from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Tuple

from .errors import UnsupportedMediaExtension
from .utils import new_id


class MediaType(str, Enum):
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"


# extension -> (type, mime)
MEDIA_TABLE: Dict[str, Tuple[MediaType, str]] = {
    "jpg": (MediaType.IMAGE, "image/jpeg"),
    "jpeg": (MediaType.IMAGE, "image/jpeg"),
    "png": (MediaType.IMAGE, "image/png"),
    "gif": (MediaType.IMAGE, "image/gif"),
    "bmp": (MediaType.IMAGE, "image/bmp"),
    "webp": (MediaType.IMAGE, "image/webp"),
    "mp4": (MediaType.VIDEO, "video/mp4"),
    "webm": (MediaType.VIDEO, "video/webm"),
    "ogg": (MediaType.VIDEO, "video/ogg"),
    "avi": (MediaType.VIDEO, "video/x-msvideo"),
    "mov": (MediaType.VIDEO, "video/quicktime"),
}


def extension_of(file_name: str) -> str:
    if "." not in file_name:
        return ""
    return file_name.rsplit(".", 1)[1].lower()


def classify(file_name: str) -> Tuple[MediaType, str]:
    ext = extension_of(file_name)
    try:
        return MEDIA_TABLE[ext]
    except KeyError:
        raise UnsupportedMediaExtension(
            f"Unsupported media type for an extension: '{ext}' ({file_name})"
        ) from None


def media_type_for(file_name: str) -> MediaType:
    return classify(file_name)[0]


def mime_type_for(file_name: str) -> str:
    return classify(file_name)[1]


@dataclass
class Game:
    name: str                        # directory name
    html_file: str                   # the single .html entry point
    folder: Path
    id: str = field(default_factory=new_id)


@dataclass
class Media:
    file_name: str
    type: MediaType
    path: str

    @property
    def mime_type(self) -> str:
        return mime_type_for(self.file_name)

    @classmethod
    def of(cls, path: Path) -> "Media":
        return cls(file_name=path.name, type=media_type_for(path.name), path=str(path))


def media_sort_key(m: Media) -> str:
    return m.file_name.lower()
