import io
from os import PathLike
from typing import TextIO

from .models import Cuesheet
from .reader import LineReader, read_cuesheet
from .writer import write_cuesheet

__all__ = [
    "parse",
    "format",
    "parse_cue_str",
    "format_cue_str",
    "parse_cuefile",
    "write_cuefile",
]


def parse(stream: TextIO) -> Cuesheet:
    """Read a complete cue sheet from ``stream``.

    Malformed content never raises; it leaves fields empty or zero. Errors
    raised by the stream itself propagate. The stream is not closed.
    """
    return read_cuesheet(LineReader(stream))


def format(stream: TextIO, cuesheet: Cuesheet) -> None:  # noqa: A001
    """Write the canonical text of ``cuesheet`` to ``stream`` and flush it."""
    write_cuesheet(stream, cuesheet)


def parse_cue_str(content: str) -> Cuesheet:
    return parse(io.StringIO(content))


def format_cue_str(cuesheet: Cuesheet) -> str:
    out = io.StringIO()
    format(out, cuesheet)
    return out.getvalue()


def parse_cuefile(file_name: PathLike | str, encoding: str = "utf-8-sig") -> Cuesheet:
    with open(file_name, "r", encoding=encoding, newline="") as f:
        return parse(f)


def write_cuefile(
    file_name: PathLike | str, cuesheet: Cuesheet, encoding: str = "utf-8"
) -> None:
    with open(file_name, "w", encoding=encoding, newline="") as f:
        format(f, cuesheet)
