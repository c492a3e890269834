from .codecs import format_frame, frames_to_seconds, parse_frame, seconds_to_frames
from .models import Cuesheet, File, Frame, Track, TrackFlag, TrackIndex
from .serialization import (
    format,
    format_cue_str,
    parse,
    parse_cue_str,
    parse_cuefile,
    write_cuefile,
)

__all__ = [
    "Cuesheet",
    "File",
    "Frame",
    "Track",
    "TrackFlag",
    "TrackIndex",
    "parse",
    "format",
    "parse_cue_str",
    "format_cue_str",
    "parse_cuefile",
    "write_cuefile",
    "parse_frame",
    "format_frame",
    "frames_to_seconds",
    "seconds_to_frames",
]
