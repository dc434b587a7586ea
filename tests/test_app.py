import json
from unittest import mock

import pygame
import pytest

from zorbworld import app

EMPTY_META = {"meta": {"frameTags": [], "layers": []}, "frames": []}


@pytest.fixture
def headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def with_sprites(headless):
    obj = headless / "resources" / "obj"
    obj.mkdir(parents=True)
    pygame.image.save(pygame.Surface((4, 4)), str(obj / "zorb.png"))
    (obj / "zorb.json").write_text(json.dumps(EMPTY_META))
    return headless


def test_run_stops_after_max_frames(with_sprites):
    assert app.run(max_frames=2) == 2


def test_run_with_zero_frames(with_sprites):
    assert app.run(max_frames=0) == 0


def test_run_ends_on_quit_event(with_sprites):
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]):
        assert app.run(max_frames=10) == 1


def test_run_without_resources_raises(headless):
    with pytest.raises(FileNotFoundError):
        app.run(max_frames=1)


def test_main_succeeds(with_sprites):
    assert app.main(["--frames", "1"]) == 0


def test_main_reports_missing_resources(headless, capsys):
    assert app.main(["--frames", "1"]) == 1
    assert "error:" in capsys.readouterr().err


def test_main_rejects_negative_frames(headless):
    with pytest.raises(SystemExit):
        app.main(["--frames", "-1"])