#!/bin/env python
from __future__ import annotations

import argparse
import logging
import logging.config
import pathlib
import sys
from typing import cast

from mutagen._util import MutagenError

from cuesheet.consts import VERSION, audio_files
from cuesheet.embedded import read_embedded, write_embedded
from cuesheet.models import Cuesheet
from cuesheet.serialization import format as format_cuesheet
from cuesheet.serialization import parse_cuefile

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"simple": {"format": "%(message)s"}},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {"root": {"level": "WARNING", "handlers": ["stderr"]}},
    }
)

logger = logging.getLogger("cuesheet")


class CommandParserArgs(argparse.Namespace):
    input: str  # pyright: ignore[reportUninitializedInstanceVariable]
    output: str | None  # pyright: ignore[reportUninitializedInstanceVariable]
    embed: str | None  # pyright: ignore[reportUninitializedInstanceVariable]
    quiet: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    verbose: bool  # pyright: ignore[reportUninitializedInstanceVariable]


def load_cuesheet(input_file: pathlib.Path) -> Cuesheet | None:
    if input_file.suffix[1:].lower() in audio_files:
        return read_embedded(input_file, logger)
    logger.info(f"Parsing {input_file.name}")
    return parse_cuefile(input_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuesheet",
        description="Read a cue sheet and write it back in canonical form",
    )
    _ = parser.add_argument(
        "input",
        help=f"A .cue file, or an audio file ({', '.join(audio_files)}) with an embedded CUESHEET tag",
    )
    _ = parser.add_argument(
        "-o",
        "--output",
        help="Write the canonical cue sheet here instead of stdout",
    )
    _ = parser.add_argument(
        "-e",
        "--embed",
        help="Also store the canonical cue sheet in the CUESHEET tag of this audio file",
        metavar="AUDIO",
    )
    _ = parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    logging_opts = parser.add_mutually_exclusive_group()
    _ = logging_opts.add_argument(
        "-q", "--quiet", help="Only log errors", action="store_true"
    )
    _ = logging_opts.add_argument(
        "-V",
        "--verbose",
        help="Log more information about what is read and written",
        action="store_true",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = cast(CommandParserArgs, build_parser().parse_args(argv))
    logging.getLogger().setLevel(logging.WARNING)
    if args.quiet:
        logging.getLogger().setLevel(logging.ERROR)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
    input_file = pathlib.Path(args.input).expanduser().resolve()
    try:
        cuesheet = load_cuesheet(input_file)
        if cuesheet is None:
            logger.error(f"Error: No cuesheet found in {input_file.name}")
            sys.exit(1)
        if args.output:
            output_file = pathlib.Path(args.output).expanduser().resolve()
            logger.info(f"Writing {output_file.name}")
            with output_file.open("w", encoding="utf-8", newline="") as out:
                format_cuesheet(out, cuesheet)
        else:
            format_cuesheet(sys.stdout, cuesheet)
        if args.embed:
            write_embedded(
                pathlib.Path(args.embed).expanduser().resolve(), cuesheet, logger
            )
    except (OSError, UnicodeDecodeError, MutagenError) as e:
        logger.error(f"Failed to process {input_file.name}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
