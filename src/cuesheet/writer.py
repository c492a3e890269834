from collections.abc import Iterator
from typing import TextIO

from .codecs import format_frame, format_number, format_string
from .consts import ATTRIBUTE_INDENT, EOL, TRACK_INDENT
from .fields import quote
from .models import Cuesheet, File, Track, TrackFlag

__all__ = ["cuesheet_lines", "write_cuesheet"]

# Emission order of FLAGS tokens, independent of how the flags were combined
flag_order: tuple[tuple[TrackFlag, str], ...] = (
    (TrackFlag.DCP, "DCP"),
    (TrackFlag.FOUR_CH, "4CH"),
    (TrackFlag.PRE, "PRE"),
    (TrackFlag.SCMS, "SCMS"),
)


def format_flags(flags: TrackFlag) -> str:
    return " ".join(token for flag, token in flag_order if flag in flags)


def track_lines(track: Track) -> Iterator[str]:
    yield f"{TRACK_INDENT}TRACK {format_number(track.number)} {track.data_type}"
    if track.flags != TrackFlag.NONE:
        yield f"{ATTRIBUTE_INDENT}FLAGS {format_flags(track.flags)}"
    if track.isrc:
        yield f"{ATTRIBUTE_INDENT}ISRC {track.isrc}"
    if track.title:
        yield f"{ATTRIBUTE_INDENT}TITLE {format_string(track.title)}"
    if track.performer:
        yield f"{ATTRIBUTE_INDENT}PERFORMER {format_string(track.performer)}"
    if track.songwriter:
        yield f"{ATTRIBUTE_INDENT}SONGWRITER {format_string(track.songwriter)}"
    if track.pregap > 0:
        yield f"{ATTRIBUTE_INDENT}PREGAP {format_frame(track.pregap)}"
    if track.postgap > 0:
        yield f"{ATTRIBUTE_INDENT}POSTGAP {format_frame(track.postgap)}"
    for index in track.indexes:
        yield (
            f"{ATTRIBUTE_INDENT}INDEX {format_number(index.number)} "
            f"{format_frame(index.frame)}"
        )


def file_lines(file: File) -> Iterator[str]:
    # File names are always quoted, whitespace or not
    yield f"FILE {quote(file.filename)} {file.file_type}"
    for track in file.tracks:
        yield from track_lines(track)


def cuesheet_lines(cuesheet: Cuesheet) -> Iterator[str]:
    for rem in cuesheet.rems:
        yield f"REM {rem}"
    if cuesheet.catalog:
        yield f"CATALOG {cuesheet.catalog}"
    if cuesheet.cdtextfile:
        yield f"CDTEXTFILE {format_string(cuesheet.cdtextfile)}"
    if cuesheet.title:
        yield f"TITLE {format_string(cuesheet.title)}"
    if cuesheet.performer:
        yield f"PERFORMER {format_string(cuesheet.performer)}"
    if cuesheet.songwriter:
        yield f"SONGWRITER {format_string(cuesheet.songwriter)}"
    if cuesheet.pregap > 0:
        yield f"PREGAP {format_frame(cuesheet.pregap)}"
    if cuesheet.postgap > 0:
        yield f"POSTGAP {format_frame(cuesheet.postgap)}"
    for file in cuesheet.files:
        yield from file_lines(file)


def write_cuesheet(stream: TextIO, cuesheet: Cuesheet) -> None:
    for line in cuesheet_lines(cuesheet):
        stream.write(f"{line}{EOL}")
    stream.flush()
