import dataclasses
from enum import Flag, auto
from typing import NewType

from .fields import FieldCursor, read_field, unquote

__all__ = ["Frame", "TrackFlag", "TrackIndex", "Track", "File", "Cuesheet"]

# Disc time in 1/75 second units
Frame = NewType("Frame", int)


class TrackFlag(Flag):
    NONE = 0
    DCP = auto()
    FOUR_CH = auto()
    PRE = auto()
    SCMS = auto()


@dataclasses.dataclass()
class TrackIndex:
    number: int
    frame: Frame


@dataclasses.dataclass()
class Track:
    number: int
    data_type: str
    flags: TrackFlag = TrackFlag.NONE
    isrc: str = ""
    title: str = ""
    performer: str = ""
    songwriter: str = ""
    pregap: Frame = Frame(0)
    postgap: Frame = Frame(0)
    indexes: list[TrackIndex] = dataclasses.field(default_factory=list)

    def index(self, number: int) -> Frame | None:
        for index in self.indexes:
            if index.number == number:
                return index.frame
        return None

    @property
    def start(self) -> Frame | None:
        return self.index(1)

    def get_title(self) -> str:
        if self.title:
            return self.title
        return f"Track {self.number:02d}"


@dataclasses.dataclass()
class File:
    filename: str
    file_type: str
    tracks: list[Track] = dataclasses.field(default_factory=list)


@dataclasses.dataclass()
class Cuesheet:
    rems: list[str] = dataclasses.field(default_factory=list)
    catalog: str = ""
    cdtextfile: str = ""
    title: str = ""
    performer: str = ""
    songwriter: str = ""
    pregap: Frame = Frame(0)
    postgap: Frame = Frame(0)
    files: list[File] = dataclasses.field(default_factory=list)

    def rem_entries(self) -> dict[str, list[str]]:
        """Group REM lines by their first field, e.g. ``REM DATE 2015``."""
        rems: dict[str, list[str]] = {}
        for rem in self.rems:
            cursor = FieldCursor(rem)
            key = read_field(cursor)
            if not key:
                continue
            rems.setdefault(key, []).append(unquote(cursor.remainder))
        return rems

    def tracks(self) -> list[Track]:
        return [track for file in self.files for track in file.tracks]
