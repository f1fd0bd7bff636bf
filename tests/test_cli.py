from unittest import mock

import pygame
import pytest

from fdfview.cli import main


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _escape_event():
    return pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"]])
def test_wrong_number_of_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.strip() != ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Error : could not open map file" in capsys.readouterr().err


def test_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 1
    assert "Error : empty map file" in capsys.readouterr().err


def test_short_row_is_reported(tmp_path, capsys):
    path = tmp_path / "short.fdf"
    path.write_text("1 2 3\n4\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error")


def test_map_too_large_for_window(tmp_path, capsys):
    path = tmp_path / "wide.fdf"
    path.write_text(" ".join(["0"] * 50) + "\n")
    assert main([str(path)]) == 1
    assert "does not fit" in capsys.readouterr().err


def test_shows_map_and_exits_on_escape(tmp_path, capsys, headless):
    path = tmp_path / "small.fdf"
    path.write_text("0 0\n0 10\n")
    with mock.patch("pygame.event.wait", return_value=_escape_event()) as wait:
        status = main([str(path)])
    assert status == 0
    assert wait.call_count == 1
    assert capsys.readouterr().out == "0  0  \n0  10 \n"


def test_window_close_ends_viewer(tmp_path, headless):
    path = tmp_path / "one.fdf"
    path.write_text("5\n")
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.wait", return_value=quit_event) as wait:
        assert main([str(path)]) == 0
    assert wait.call_count == 1