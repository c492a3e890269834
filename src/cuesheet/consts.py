import importlib.metadata

VERSION = importlib.metadata.version("cuesheet")
DELIMITERS = "\t\n\r "
EOL = "\n"
FRAMES_PER_SECOND = 75
TRACK_INDENT = "  "
ATTRIBUTE_INDENT = "    "
# Containers whose Vorbis comments may hold a CUESHEET entry
audio_files: tuple[str, str, str, str] = (
    "flac",
    "ogg",
    "oga",
    "opus",
)
