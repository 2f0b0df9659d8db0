"""Reading and rewriting the leading text frames of an ID3v2 tag."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

HEADER_SIZE = 10
FRAME_LIMIT = 6
TEXT_ENCODING = "utf-8"

# Frame id (4), size (4), two flag bytes and the text-encoding byte.
_ID_SIZE = 4
_SIZE_FIELD = 4
_FLAGS_SIZE = 3
_FRAME_HEAD = _ID_SIZE + _SIZE_FIELD + _FLAGS_SIZE

SEPARATOR = "-------------------------------------------------------------------------------------"
_BANNER = "MP3 TAG READER AND EDITOR FOR ID3V2"
_DONE = "--------------------------DETAILS DISPLAYED SUCCESSFULLY------------------------------"


class TagError(Exception):
    """Raised when a tag cannot be read or rewritten."""


class TagField(Enum):
    """The text frames that can be shown and edited."""

    TITLE = ("TIT2", "-t", "TITLE")
    ARTIST = ("TPE1", "-a", "ARTIST")
    ALBUM = ("TALB", "-A", "ALBUM")
    YEAR = ("TYER", "-y", "YEAR")
    CONTENT = ("TCON", "-m", "CONTENT")
    COMMENT = ("COMM", "-c", "COMMENT")

    def __init__(self, frame_id: str, option: str, label: str) -> None:
        self.frame_id = frame_id
        self.option = option
        self.label = label

    @classmethod
    def from_option(cls, option: str) -> TagField:
        """Return the field selected by a command-line option such as ``-t``."""
        for field in cls:
            if field.option == option:
                return field
        raise TagError(f"unknown tag option {option!r}")

    @classmethod
    def from_frame_id(cls, frame_id: str) -> TagField:
        """Return the field stored under a four-character frame id."""
        for field in cls:
            if field.frame_id == frame_id:
                return field
        raise TagError(f"unknown frame id {frame_id!r}")


@dataclass(frozen=True)
class Frame:
    """One frame: its id, the three bytes after the size, and the payload."""

    frame_id: str
    flags: bytes
    payload: bytes

    @property
    def size(self) -> int:
        """The value stored in the frame's size field."""
        return len(self.payload) + 1

    @property
    def text(self) -> str:
        """The payload up to its first NUL byte, decoded."""
        return self.payload.split(b"\0", 1)[0].decode(TEXT_ENCODING, errors="replace")

    def to_bytes(self) -> bytes:
        return (
            self.frame_id.encode("latin-1")
            + self.size.to_bytes(_SIZE_FIELD, "big")
            + self.flags
            + self.payload
        )


def _scan(data: bytes) -> Iterator[tuple[int, int, Frame]]:
    if len(data) < HEADER_SIZE:
        raise TagError("data is shorter than an ID3v2 header")
    pos = HEADER_SIZE
    for _ in range(FRAME_LIMIT):
        head = data[pos:pos + _FRAME_HEAD]
        if not head or head[0] == 0:
            return
        if len(head) < _FRAME_HEAD:
            raise TagError(f"truncated frame header at offset {pos}")
        frame_id = head[:_ID_SIZE].decode("latin-1")
        size = int.from_bytes(head[_ID_SIZE:_ID_SIZE + _SIZE_FIELD], "big")
        if size < 1:
            raise TagError(f"frame {frame_id} has invalid size {size}")
        start = pos + _FRAME_HEAD
        end = start + size - 1
        if end > len(data):
            raise TagError(f"frame {frame_id} runs past the end of the data")
        yield pos, end, Frame(frame_id, head[_ID_SIZE + _SIZE_FIELD:], data[start:end])
        pos = end


def iter_frames(data: bytes) -> Iterator[Frame]:
    """Yield the first frames of a tag, stopping at padding."""
    for _, _, frame in _scan(bytes(data)):
        yield frame


def read_tags(path: str | os.PathLike[str]) -> dict[TagField, str]:
    """Return the known text fields of a file, in frame order."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise TagError(f"{os.fspath(path)} -> This file is not opened successfully") from exc
    tags: dict[TagField, str] = {}
    for frame in iter_frames(data):
        try:
            field = TagField.from_frame_id(frame.frame_id)
        except TagError:
            continue
        tags[field] = frame.text
    return tags


def format_tags(tags: Mapping[TagField, str]) -> str:
    """Render tags as the table shown by the view command."""
    rows = [f"{field.label:<12}:     {text}" for field, text in tags.items()]
    lines = [SEPARATOR, f"{_BANNER:>59}", SEPARATOR, *rows, SEPARATOR, "", _DONE, ""]
    return "\n".join(lines) + "\n"


def replace_frame(data: bytes, field: TagField, text: str) -> bytes:
    """Return ``data`` with the frame for ``field`` holding ``text``."""
    data = bytes(data)
    for start, end, frame in _scan(data):
        if frame.frame_id == field.frame_id:
            updated = Frame(frame.frame_id, frame.flags, text.encode(TEXT_ENCODING))
            return data[:start] + updated.to_bytes() + data[end:]
    raise TagError(f"no {field.frame_id} frame among the first {FRAME_LIMIT} frames")


def edit_tag(path: str | os.PathLike[str], field: TagField, text: str) -> None:
    """Rewrite one text frame of a file in place."""
    target = Path(path)
    try:
        data = target.read_bytes()
    except OSError as exc:
        raise TagError(f"{target} -> File open failed") from exc
    updated = replace_frame(data, field, text)
    fd, temp_name = tempfile.mkstemp(dir=target.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as out:
            out.write(updated)
        os.replace(temp_name, target)
    except OSError as exc:
        Path(temp_name).unlink(missing_ok=True)
        raise TagError(f"{target} -> File write failed") from exc