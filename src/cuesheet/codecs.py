import logging
import re

from .consts import DELIMITERS, FRAMES_PER_SECOND
from .fields import QUOTES, FieldCursor, quote, read_field
from .models import Frame

__all__ = [
    "read_int",
    "read_uint",
    "read_frame",
    "parse_int",
    "parse_uint",
    "parse_frame",
    "format_frame",
    "format_number",
    "format_string",
    "frames_to_seconds",
    "seconds_to_frames",
]

logger = logging.getLogger("cuesheet")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1
_signed = re.compile(r"[+-]?[0-9]+")
_unsigned = re.compile(r"[0-9]+")


def parse_int(value: str) -> int:
    if _signed.fullmatch(value):
        number = int(value, 10)
        if _INT32_MIN <= number <= _INT32_MAX:
            return number
    logger.debug(f"Malformed integer {value!r} read as 0")
    return 0


def parse_uint(value: str) -> int:
    if _unsigned.fullmatch(value):
        number = int(value, 10)
        if number <= _UINT32_MAX:
            return number
    logger.debug(f"Malformed unsigned integer {value!r} read as 0")
    return 0


def parse_frame(value: str) -> Frame:
    comps = value.split(":")
    if len(comps) != 3:
        logger.debug(f"Malformed timecode {value!r} read as 00:00:00")
        return Frame(0)
    minutes, seconds, frames = (parse_uint(comp) for comp in comps)
    return Frame((minutes * 60 + seconds) * FRAMES_PER_SECOND + frames)


def read_int(cursor: FieldCursor) -> int:
    return parse_int(read_field(cursor))


def read_uint(cursor: FieldCursor) -> int:
    return parse_uint(read_field(cursor))


def read_frame(cursor: FieldCursor) -> Frame:
    return parse_frame(read_field(cursor))


def format_number(number: int) -> str:
    return f"{number:02d}"


def format_frame(frame: Frame) -> str:
    seconds = frame // FRAMES_PER_SECOND
    return ":".join(
        format_number(part)
        for part in (seconds // 60, seconds % 60, frame % FRAMES_PER_SECOND)
    )


def format_string(value: str) -> str:
    if any(c in DELIMITERS for c in value) or value.startswith(tuple(QUOTES)):
        return quote(value)
    return value


def frames_to_seconds(frame: Frame) -> float:
    return frame / FRAMES_PER_SECOND


def seconds_to_frames(seconds: float) -> Frame:
    return Frame(round(seconds * FRAMES_PER_SECOND))
