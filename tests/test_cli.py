import pathlib
import wave

import pytest

from cuesheet import cli
from cuesheet.models import Cuesheet

MESSY = (
    "REM DATE 2015\n"
    "TITLE   'Test Album'  \n"
    "FILE test.wav WAVE\n"
    "  TRACK 1 AUDIO\n"
    "    INDEX 1 0:0:0\n"
)
CANONICAL = (
    "REM DATE 2015\n"
    'TITLE "Test Album"\n'
    'FILE "test.wav" WAVE\n'
    "  TRACK 01 AUDIO\n"
    "    INDEX 01 00:00:00\n"
)


@pytest.fixture
def cue(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path.joinpath("album.cue")
    path.write_text(MESSY, encoding="utf-8")
    return path


def test_canonical_to_stdout(cue: pathlib.Path, capsys: pytest.CaptureFixture[str]):
    cli.main([str(cue)])
    assert capsys.readouterr().out == CANONICAL


def test_canonical_to_file(cue: pathlib.Path, tmp_path: pathlib.Path):
    output = tmp_path.joinpath("out.cue")
    cli.main([str(cue), "-o", str(output)])
    assert output.read_text(encoding="utf-8") == CANONICAL


def test_missing_input_exits(tmp_path: pathlib.Path):
    with pytest.raises(SystemExit) as exit_info:
        cli.main([str(tmp_path.joinpath("missing.cue"))])
    assert exit_info.value.code == 1


def test_audio_input_without_sheet_exits(
    monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path
):
    monkeypatch.setattr(cli, "read_embedded", lambda path, logger: None)
    with pytest.raises(SystemExit) as exit_info:
        cli.main([str(tmp_path.joinpath("album.flac"))])
    assert exit_info.value.code == 1


def test_audio_input_and_embed(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
):
    embedded: list[tuple[pathlib.Path, Cuesheet]] = []
    monkeypatch.setattr(
        cli, "read_embedded", lambda path, logger: Cuesheet(title="From Tag")
    )
    monkeypatch.setattr(
        cli,
        "write_embedded",
        lambda path, cuesheet, logger: embedded.append((path, cuesheet)),
    )
    target = tmp_path.joinpath("copy.opus")
    cli.main([str(tmp_path.joinpath("album.FLAC")), "--embed", str(target)])
    assert capsys.readouterr().out == 'TITLE "From Tag"\n'
    assert embedded == [(target.resolve(), Cuesheet(title="From Tag"))]


def test_embed_into_wave_exits(cue: pathlib.Path, tmp_path: pathlib.Path):
    target = tmp_path.joinpath("song.wav")
    with wave.open(str(target), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(8000)
        out.writeframes(b"\x00\x00" * 800)
    with pytest.raises(SystemExit) as exit_info:
        output = tmp_path.joinpath("out.cue")
        cli.main([str(cue), "-o", str(output), "-e", str(target)])
    assert exit_info.value.code == 1
