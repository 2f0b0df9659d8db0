import pytest

from id3tagedit.tags import (
    SEPARATOR,
    Frame,
    TagError,
    TagField,
    edit_tag,
    format_tags,
    iter_frames,
    read_tags,
    replace_frame,
)

HEADER = b"ID3\x03\x00\x00\x00\x00\x00\x00"
AUDIO = b"\xff\xfb\x90\x00audio-bytes"
SAMPLE = [
    ("TIT2", "hello"),
    ("TPE1", "Aniruth"),
    ("TALB", "Vijay_Thalapathy"),
    ("TYER", "2025"),
    ("TCON", "kollywood"),
    ("COMM", "----sample-download"),
]


def build_tag(frames, audio=AUDIO):
    body = b"".join(
        fid.encode() + (len(text) + 1).to_bytes(4, "big") + b"\x00\x00\x00" + text.encode()
        for fid, text in frames
    )
    return HEADER + body + audio


def test_option_and_frame_id_round_trip():
    for field in TagField:
        assert TagField.from_option(field.option) is field
        assert TagField.from_frame_id(field.frame_id) is field


def test_options_map_to_fields():
    assert TagField.from_option("-t") is TagField.TITLE
    assert TagField.from_option("-A") is TagField.ALBUM
    assert TagField.from_option("-m") is TagField.CONTENT
    assert TagField.TITLE.frame_id == "TIT2"


def test_unknown_option_raises():
    with pytest.raises(TagError):
        TagField.from_option("-x")


def test_unknown_frame_id_raises():
    with pytest.raises(TagError):
        TagField.from_frame_id("APIC")


def test_iter_frames_reads_sample():
    frames = list(iter_frames(build_tag(SAMPLE)))
    assert [(f.frame_id, f.text) for f in frames] == SAMPLE
    assert all(f.size == len(f.payload) + 1 for f in frames)


def test_iter_frames_stops_after_six():
    frames = SAMPLE + [("TPE2", "extra")]
    assert len(list(iter_frames(build_tag(frames)))) == len(SAMPLE)


def test_iter_frames_stops_at_padding():
    frames = list(iter_frames(build_tag(SAMPLE[:2], audio=b"\x00" * 20)))
    assert [f.frame_id for f in frames] == ["TIT2", "TPE1"]


def test_iter_frames_truncated_raises():
    with pytest.raises(TagError):
        list(iter_frames(build_tag(SAMPLE)[:30]))


def test_iter_frames_zero_size_raises():
    data = HEADER + b"TIT2" + b"\x00\x00\x00\x00" + b"\x00\x00\x00"
    with pytest.raises(TagError):
        list(iter_frames(data))


def test_frame_text_stops_at_nul():
    frame = Frame("TIT2", b"\x00\x00\x00", b"hello\x00junk")
    assert frame.text == "hello"
    assert frame.to_bytes().startswith(b"TIT2")


def test_read_tags(tmp_path):
    path = tmp_path / "sample.mp3"
    path.write_bytes(build_tag(SAMPLE))
    tags = read_tags(path)
    assert tags[TagField.ARTIST] == "Aniruth"
    assert list(tags) == [TagField.TITLE, TagField.ARTIST, TagField.ALBUM,
                          TagField.YEAR, TagField.CONTENT, TagField.COMMENT]


def test_read_tags_missing_file(tmp_path):
    with pytest.raises(TagError, match="not opened successfully"):
        read_tags(tmp_path / "missing.mp3")


def test_format_tags_layout():
    text = format_tags({TagField.TITLE: "hello", TagField.YEAR: "2025"})
    lines = text.splitlines()
    assert lines[0] == SEPARATOR
    assert lines[1].strip() == "MP3 TAG READER AND EDITOR FOR ID3V2"
    assert len(lines[1]) == 59
    assert "TITLE       :     hello" in lines
    assert "YEAR        :     2025" in lines
    assert "DETAILS DISPLAYED SUCCESSFULLY" in text


def test_replace_frame_round_trip():
    data = build_tag(SAMPLE)
    updated = replace_frame(data, TagField.ALBUM, "A much longer album name")
    frames = {f.frame_id: f for f in iter_frames(updated)}
    assert frames["TALB"].text == "A much longer album name"
    assert frames["TALB"].size == len("A much longer album name") + 1
    assert frames["TIT2"].text == "hello"
    assert frames["COMM"].text == "----sample-download"
    assert updated.endswith(AUDIO)
    assert updated[:10] == HEADER


def test_replace_frame_missing_frame_raises():
    data = build_tag(SAMPLE[1:])
    with pytest.raises(TagError):
        replace_frame(data, TagField.TITLE, "new")


def test_edit_tag_in_place(tmp_path):
    path = tmp_path / "sample.mp3"
    path.write_bytes(build_tag(SAMPLE))
    edit_tag(path, TagField.TITLE, "hi")
    assert read_tags(path)[TagField.TITLE] == "hi"
    assert path.read_bytes().endswith(AUDIO)
    assert list(tmp_path.iterdir()) == [path]


def test_edit_tag_missing_file(tmp_path):
    with pytest.raises(TagError):
        edit_tag(tmp_path / "missing.mp3", TagField.TITLE, "x")