# id3tagedit

A small command-line tool for viewing and editing the basic ID3v2 text frames
of an MP3 file: title, artist, album, year, content (genre) and comment.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

Show the tags of a file:

```
id3tagedit -v song.mp3
```

The tag table looks like this:

```
-------------------------------------------------------------------------------------
                        MP3 TAG READER AND EDITOR FOR ID3V2
-------------------------------------------------------------------------------------
TITLE       :     hello
ARTIST      :     Someone
ALBUM       :     Some_Album
YEAR        :     2025
CONTENT     :     pop
COMMENT     :     sample
-------------------------------------------------------------------------------------
```

Change one tag:

```
id3tagedit -e -t "New Title" song.mp3
```

Edit options:

| Option | Frame | Field   |
|--------|-------|---------|
| `-t`   | TIT2  | Title   |
| `-a`   | TPE1  | Artist  |
| `-A`   | TALB  | Album   |
| `-y`   | TYER  | Year    |
| `-m`   | TCON  | Content |
| `-c`   | COMM  | Comment |

Show the help menu:

```
id3tagedit --help
```

Running `id3tagedit` with no arguments prints the usage summary. Arguments that
do not match one of the forms above print the usage summary as well.

The command exits with status 0 on success and 1 when a file is rejected, a
frame cannot be read or written, or the arguments are wrong.

## Requirements on input files

Before viewing or editing, `validate_mp3_file` checks that:

- the first `.mp3` in the file name is at its very end;
- the file exists and is not empty;
- it starts with an `ID3` header and its first frame is `TIT2`.

A rejected file is reported with an `INFO :` line.

## How frames are read and written

- Up to six frames after the 10-byte header are read; reading stops early at
  padding (a zero byte where a frame id would be).
- A frame's size field is a plain 4-byte big-endian number counting the byte
  after the two flag bytes plus the text.
- Text is shown up to its first NUL byte and decoded as UTF-8. New text is
  written as UTF-8; the flag and encoding bytes of the frame are kept as they
  were.
- An edit replaces the matching frame and keeps every other byte of the file.
  The new contents are written to a temporary file in the same directory,
  which then replaces the original.

## Library use

```python
from id3tagedit.tags import TagField, read_tags, format_tags, edit_tag

tags = read_tags("song.mp3")          # {TagField.TITLE: "hello", ...}
print(format_tags(tags))
edit_tag("song.mp3", TagField.from_option("-a"), "Another Artist")
```

Working on bytes rather than files:

```python
from id3tagedit.tags import TagField, iter_frames, replace_frame

for frame in iter_frames(data):
    print(frame.frame_id, frame.size, frame.text)

new_data = replace_frame(data, TagField.YEAR, "2024")
```

`TagField` members carry `frame_id`, `option` and `label`, and can be looked
up with `TagField.from_option` or `TagField.from_frame_id`.

Problems with a frame or a file raise `TagError` (from `id3tagedit.tags`);
`validate_mp3_file` raises `ValidationError` (from `id3tagedit.cli`).

## What it does not do

- It only knows the six frames in the table above; other frames are skipped
  when viewing and cannot be edited.
- It cannot add a frame that is missing; editing a field whose frame is not
  among the first six fails.
- It does not read or write ID3v1 tags, synchsafe sizes, extended headers or
  any audio data.