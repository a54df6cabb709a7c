"""Tests for the command-line front end."""

from pathlib import Path
from typing import Iterable

import pytest

from tilecrawl import cli, load_game
from tilecrawl.config import Config


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("TILECRAWL_NO_COLOR", "1")
    monkeypatch.delenv("TILECRAWL_VERBOSE", raising=False)


def scripted(lines: Iterable[str]):
    """read_line replacement that raises EOFError once the script runs out."""
    remaining = list(lines)
    prompts = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


def test_session_moves_and_quits(capsys):
    game = load_game("@..\n...\n..#", width=3, height=3)
    read_line = scripted(["l", "j", "q"])

    turns = cli.run_session(game, read_line=read_line, show_status=False)

    assert turns == 3
    assert read_line.prompts == [cli.PROMPT] * 3
    out = capsys.readouterr().out
    assert out.split("I fall on my sword.")[0].count("\n") == 9
    assert ".@.\n...\n..#" in out
    assert "...\n.@.\n..#" in out
    assert out.rstrip().endswith("I fall on my sword.")
    assert game.player.position == (1, 1)


def test_session_reports_unknown_command_and_keeps_going(capsys):
    game = load_game("@.", width=2, height=1)
    turns = cli.run_session(game, read_line=scripted(["z", ","]), show_status=True)

    assert turns == 2
    out = capsys.readouterr().out
    assert "I don't know how to z" in out
    assert "HP=42, Damage=7, Gold=0" in out
    assert game.player.position == (0, 0)


def test_session_ends_on_eof(capsys):
    game = load_game("@", width=1, height=1)
    assert cli.run_session(game, read_line=scripted([]), show_status=False) == 0
    assert capsys.readouterr().out.startswith("@\n")


def test_rejected_move_is_silent(capsys):
    game = load_game("@", width=1, height=1)
    cli.run_session(game, read_line=scripted(["h", "k"]), show_status=False)
    out = capsys.readouterr().out
    assert out == "@\n@\n@\n\n"


def test_verbose_traces_turns(capsys, monkeypatch):
    monkeypatch.setenv("TILECRAWL_VERBOSE", "1")
    game = load_game("@.", width=2, height=1)
    cli.run_session(game, read_line=scripted(["l", "l", ","]), show_status=False)
    out = capsys.readouterr().out
    assert "[•] right: (0, 0) -> (1, 0)" in out
    assert "[?] right: (2, 0) is off the map" in out
    assert "[•] pass" in out


def test_main_plays_a_map_file(tmp_path: Path, monkeypatch, capsys):
    mapfile = tmp_path / "room.txt"
    mapfile.write_text("@.\n.#\n")
    monkeypatch.setattr("builtins.input", scripted(["l", "q"]))

    assert cli.main([str(mapfile), "2", "2", "--no-status"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert ".@\n.#" in out
    assert "HP=" not in out


def test_main_named_map(tmp_path: Path, monkeypatch, capsys):
    (tmp_path / "tiny.txt").write_text("@\n")
    monkeypatch.setattr(Config, "MAPS_DIR", tmp_path)
    monkeypatch.setattr("builtins.input", scripted(["q"]))

    assert cli.main(["tiny", "1", "1"]) == cli.EXIT_OK
    assert "I fall on my sword." in capsys.readouterr().out


@pytest.mark.parametrize(
    "contents,fragment",
    [
        ("@@", "More than one player"),
        ("..", "no player"),
        ("@x", "Unknown character"),
    ],
)
def test_main_reports_load_errors(tmp_path: Path, capsys, contents, fragment):
    mapfile = tmp_path / "bad.txt"
    mapfile.write_text(contents)

    assert cli.main([str(mapfile), "2", "1"]) == cli.EXIT_LOAD_FAILED
    out = capsys.readouterr().out
    assert out.startswith("[!] Could not load")
    assert fragment in out


def test_main_missing_file(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr(Config, "MAPS_DIR", tmp_path)
    assert cli.main([str(tmp_path / "absent.txt"), "2", "2"]) == cli.EXIT_LOAD_FAILED
    assert "not found" in capsys.readouterr().out


def test_main_requires_dimensions(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["somewhere.txt"])
    assert excinfo.value.code == 2


def test_main_list_maps(tmp_path: Path, monkeypatch, capsys):
    (tmp_path / "pen.txt").write_text("#####\n#@..#\n#####\n")
    monkeypatch.setattr(Config, "MAPS_DIR", tmp_path)

    assert cli.main(["--list-maps"]) == cli.EXIT_OK
    assert "pen  (5x3)" in capsys.readouterr().out


def test_main_show_config(tmp_path: Path, monkeypatch, capsys):
    (tmp_path / "one.txt").write_text("@")
    monkeypatch.setattr(Config, "MAPS_DIR", tmp_path)
    monkeypatch.setattr("builtins.input", scripted(["q"]))

    cli.main(["one", "1", "1", "--show-config"])
    assert "Tilecrawl Configuration:" in capsys.readouterr().out
