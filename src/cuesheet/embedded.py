import logging
import pathlib

import mutagen
from mutagen._util import MutagenError
from mutagen._vorbis import VComment

from .models import Cuesheet
from .serialization import format_cue_str, parse_cue_str

__all__ = ["read_embedded", "write_embedded"]

CUESHEET_TAG = "CUESHEET"


def open_audio(audio_file: pathlib.Path) -> mutagen.FileType:
    audio = mutagen.File(str(audio_file))
    if audio is None:
        raise MutagenError(f"Unsupported audio file {audio_file.name}")
    return audio


def read_embedded(
    audio_file: pathlib.Path, logger: logging.Logger | None = None
) -> Cuesheet | None:
    logger = logger or logging.getLogger("cuesheet")
    logger.info(f"Reading embedded cuesheet from {audio_file.name}")
    audio = open_audio(audio_file)
    if audio.tags is None:
        logger.info(f"{audio_file.name} has no tags")
        return None
    # Vorbis comment keys are case-insensitive
    values = audio.tags.get(CUESHEET_TAG) or audio.tags.get(CUESHEET_TAG.lower())
    if not values:
        logger.info(f"{audio_file.name} has no embedded cuesheet")
        return None
    return parse_cue_str(values[0])


def write_embedded(
    audio_file: pathlib.Path, cuesheet: Cuesheet, logger: logging.Logger | None = None
) -> None:
    logger = logger or logging.getLogger("cuesheet")
    logger.info(f"Embedding cuesheet into {audio_file.name}")
    audio = open_audio(audio_file)
    if audio.tags is None:
        audio.add_tags()
    if not isinstance(audio.tags, VComment):
        raise MutagenError(f"{audio_file.name} cannot hold a CUESHEET comment")
    audio.tags[CUESHEET_TAG] = [format_cue_str(cuesheet)]
    audio.save()
