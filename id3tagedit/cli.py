"""Command line for viewing and editing ID3v2 text tags."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from id3tagedit.tags import TagError, TagField, edit_tag, format_tags, read_tags

PROG = "id3tagedit"
_RULE = "-" * 103
_VIEW_BANNER = "--------------------------------SELECTED VIEW DETAILS--------------------------------"
_EDIT_BANNER = "-----------------------------SELECTED EDIT DETAILS------------------------------"


class ValidationError(Exception):
    """Raised when a file given on the command line is not a usable MP3."""


def validate_mp3_file(path: str | os.PathLike[str]) -> Path:
    """Check that ``path`` names a non-empty ID3v2 MP3 starting with a TIT2 frame."""
    name = os.fspath(path)
    index = name.find(".mp3")
    if index < 0 or name[index:] != ".mp3":
        raise ValidationError(f"{name} -> This file is not a mp3 file")
    try:
        with open(name, "rb") as handle:
            handle.seek(0, os.SEEK_END)
            size = handle.tell()
            handle.seek(0)
            head = handle.read(14)
    except OSError as exc:
        raise ValidationError(f"{name} -> This file is not present") from exc
    if size == 0:
        raise ValidationError(f"{name} -> This file is Empty")
    if head[:3] != b"ID3" or head[10:14] != b"TIT2":
        raise ValidationError(f"{name} -> This file is not a ID3 version")
    return Path(name)


def usage_text() -> str:
    return (
        f"{_RULE}\n\n"
        f"ERROR : {PROG} : INVALID ARGUMENTS\nUSAGE :\n"
        f"To view please pass like  : {PROG} -v mp3file_name\n"
        f"To Edit please pass like  : {PROG} -e -t/-a/-A/-m/-y/-c  change_text mp3file_name\n"
        f"To get help pass like     : {PROG} --help\n"
        f"{_RULE}\n\n"
    )


def help_text() -> str:
    indent = " " * 11
    descriptions = {
        TagField.TITLE: "Song Title",
        TagField.ARTIST: "Artist Name",
        TagField.ALBUM: "Album Name",
        TagField.YEAR: "Year",
        TagField.CONTENT: "Content",
        TagField.COMMENT: "Comment",
    }
    options = "".join(
        f"{indent}2.{number} {field.option} -> to edit {descriptions[field]}\n"
        for number, field in enumerate(TagField, start=1)
    )
    return (
        "--------------------HELP MENU-------------------\n\n"
        "1. -v -> to view mp3 file contents\n"
        "2. -e -> to edit mp3 file contents\n"
        f"{options}\n"
        "------------------------------------------------\n\n"
    )


def _view(path: str) -> int:
    try:
        validate_mp3_file(path)
    except ValidationError as exc:
        print(f"\nINFO : {exc}")
        return 1
    print(_VIEW_BANNER + "\n")
    try:
        tags = read_tags(path)
    except TagError as exc:
        print(f"INFO : {exc}")
        print("INFO : Displaying not done Successfully")
        return 1
    print(format_tags(tags), end="")
    return 0


def _edit(option: str, text: str, path: str) -> int:
    try:
        validate_mp3_file(path)
    except ValidationError as exc:
        print(f"\nINFO : {exc}")
        return 1
    field = TagField.from_option(option)
    print(_EDIT_BANNER + "\n")
    print(f"----------------CHANGE THE {field.label}-------------------\n")
    try:
        edit_tag(path, field, text)
    except TagError as exc:
        print(f"INFO : {exc}")
        print("INFO : Edit not done Successfully")
        return 1
    print(f"{field.label}    : {text} \n")
    print(f"--------------{field.label} CHANGED SUCCESSFULLY------------\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(usage_text(), end="")
        return 0
    command = args[0]
    if command == "--help":
        print(help_text(), end="")
        return 0
    if command == "-v" and len(args) == 2:
        return _view(args[1])
    options = {field.option for field in TagField}
    if command == "-e" and len(args) >= 4 and args[1] in options:
        return _edit(args[1], args[2], args[3])
    print(usage_text(), end="")
    return 1


if __name__ == "__main__":
    sys.exit(main())