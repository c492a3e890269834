import logging
from typing import TextIO

from .codecs import read_frame, read_uint
from .consts import ATTRIBUTE_INDENT, DELIMITERS, TRACK_INDENT
from .fields import FieldCursor, read_field, unquote
from .models import Cuesheet, File, Track, TrackFlag, TrackIndex

__all__ = ["LineReader", "read_cuesheet", "read_tracks", "read_track"]

logger = logging.getLogger("cuesheet")

flag_tokens: dict[str, TrackFlag] = {
    "DCP": TrackFlag.DCP,
    "4CH": TrackFlag.FOUR_CH,
    "PRE": TrackFlag.PRE,
    "SCMS": TrackFlag.SCMS,
}


class LineReader:
    """Reads lines from a text stream, holding back at most one line."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.pending: str | None = None
        self.line_number = 0

    def readline(self) -> str | None:
        if self.pending is not None:
            line, self.pending = self.pending, None
            return line
        line = self.stream.readline()
        if not line:
            return None
        self.line_number += 1
        return line

    def unread(self, line: str) -> None:
        if self.pending is not None:
            raise RuntimeError("Only one line can be pushed back")
        self.pending = line

    def read_block_line(self, indent: str) -> str | None:
        """Next line if it belongs to the block at ``indent``, else pushed back."""
        line = self.readline()
        if line is None:
            return None
        if not line.startswith(indent):
            self.unread(line)
            return None
        return line


def split_command(line: str) -> tuple[str, FieldCursor]:
    cursor = FieldCursor(line.strip(DELIMITERS))
    return read_field(cursor), cursor


def read_flags(cursor: FieldCursor) -> TrackFlag:
    flags = TrackFlag.NONE
    while cursor:
        token = read_field(cursor)
        if token in flag_tokens:
            flags |= flag_tokens[token]
        elif token:
            logger.debug(f"Ignoring unknown flag {token!r}")
    return flags


def read_track(lines: LineReader, track: Track) -> None:
    while (line := lines.read_block_line(ATTRIBUTE_INDENT)) is not None:
        command, cursor = split_command(line)
        if command == "FLAGS":
            track.flags = read_flags(cursor)
        elif command == "ISRC":
            track.isrc = cursor.remainder
        elif command == "TITLE":
            track.title = unquote(cursor.remainder)
        elif command == "PERFORMER":
            track.performer = unquote(cursor.remainder)
        elif command == "SONGWRITER":
            track.songwriter = unquote(cursor.remainder)
        elif command == "PREGAP":
            track.pregap = read_frame(cursor)
        elif command == "POSTGAP":
            track.postgap = read_frame(cursor)
        elif command == "INDEX":
            number = read_uint(cursor)
            track.indexes.append(TrackIndex(number, read_frame(cursor)))
        else:
            # The offending line is consumed along with the block
            logger.debug(
                f"Line {lines.line_number}: {command!r} ends track {track.number:02d}"
            )
            return


def read_tracks(lines: LineReader) -> list[Track]:
    tracks: list[Track] = []
    while (line := lines.read_block_line(TRACK_INDENT)) is not None:
        command, cursor = split_command(line)
        if command != "TRACK":
            logger.debug(f"Line {lines.line_number}: {command!r} ends file block")
            break
        number = read_uint(cursor)
        track = Track(number, read_field(cursor))
        read_track(lines, track)
        tracks.append(track)
    return tracks


def read_cuesheet(lines: LineReader) -> Cuesheet:
    cuesheet = Cuesheet()
    while (line := lines.readline()) is not None:
        command, cursor = split_command(line)
        if command == "REM":
            cuesheet.rems.append(cursor.remainder)
        elif command == "CATALOG":
            cuesheet.catalog = cursor.remainder
        elif command == "CDTEXTFILE":
            cuesheet.cdtextfile = read_field(cursor)
        elif command == "TITLE":
            cuesheet.title = read_field(cursor)
        elif command == "PERFORMER":
            cuesheet.performer = read_field(cursor)
        elif command == "SONGWRITER":
            cuesheet.songwriter = read_field(cursor)
        elif command == "PREGAP":
            cuesheet.pregap = read_frame(cursor)
        elif command == "POSTGAP":
            cuesheet.postgap = read_frame(cursor)
        elif command == "FILE":
            filename = read_field(cursor)
            file_type = read_field(cursor)
            cuesheet.files.append(File(filename, file_type, read_tracks(lines)))
        elif command:
            logger.debug(f"Line {lines.line_number}: skipping {command!r}")
    return cuesheet
