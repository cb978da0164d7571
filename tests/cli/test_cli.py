from pathlib import Path

import pygame
from helpers.metrics import MonospaceMetrics
from typer.testing import CliRunner

from talkbox.box.dialogue_box import DialogueBox
from talkbox.cli.commands.demo import _run_frames
from talkbox.loop import app
from talkbox.service import DialogueService

runner = CliRunner()


def test_paginate_prints_each_page(tmp_path: Path) -> None:
    """The paginate command prints one numbered block per page."""
    script = tmp_path / "script.txt"
    script.write_text("Hey.\n\nYeah?", encoding="utf-8")

    result = runner.invoke(app, ["paginate", str(script)])

    assert result.exit_code == 0, result.output
    assert "page 1/2" in result.output
    assert "page 2/2" in result.output
    assert "Hey." in result.output
    assert "Yeah?" in result.output


def test_paginate_rejects_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["paginate", str(tmp_path / "nope.txt")])

    assert result.exit_code != 0


def test_demo_loop_processes_input_and_stops_on_quit() -> None:
    """One pass of the demo loop dispatches key presses, ticks the box and exits on QUIT."""
    screen = pygame.display.set_mode((400, 240))
    service = DialogueService(DialogueBox(None, 390, 48, 8, font=MonospaceMetrics()))
    service.say("Hello there", {"speed": 1.0})
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x))
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    _run_frames(service, screen, 1)

    assert service.box.line_complete
    assert service.box.visible_text == "Hello there"
