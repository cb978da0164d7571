from pathlib import Path
from typing import Annotated, Optional

import pygame
import typer

from talkbox.box.dialogue_box import DialogueBox
from talkbox.box.input import KeyBindings
from talkbox.cli.commands.script import CANYON_SCRIPT
from talkbox.display.color import Color
from talkbox.service import DialogueService
from talkbox.utilities.env import Configuration
from talkbox.utilities.logging import get_logger

logger = get_logger(__name__)


def _run_frames(service: DialogueService, screen: pygame.Surface, scale: int) -> None:
    bindings = KeyBindings()
    clock = pygame.time.Clock()
    frame = pygame.Surface(Configuration.screen_size())
    fps = Configuration.fps()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
                continue
            input_event = bindings.translate(event)
            if input_event is not None:
                service.handle_input(input_event)

        frame.fill(Color.white().tuple())
        service.update(frame)
        if scale == 1:
            screen.blit(frame, (0, 0))
        else:
            screen.blit(pygame.transform.scale_by(frame, scale), (0, 0))
        pygame.display.flip()
        clock.tick(fps)

        if not service.box.enabled:
            running = False


def demo_command(
    text_file: Annotated[
        Optional[Path],
        typer.Option("--text-file", exists=True, dir_okay=False, help="Dialogue text to play"),
    ] = None,
    speed: Annotated[
        Optional[float], typer.Option("--speed", min=0.0, help="Characters per frame")
    ] = None,
    scale: Annotated[int, typer.Option("--scale", min=1, help="Window scale factor")] = 2,
) -> None:
    text = text_file.read_text(encoding="utf-8") if text_file else CANYON_SCRIPT

    pygame.init()
    try:
        width, height = Configuration.screen_size()
        screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption("talkbox")

        service = DialogueService()

        def _closed(box: DialogueBox) -> None:
            logger.info("Dialogue closed after %d pages", len(box.pages))

        config: dict[str, object] = {"on_close": _closed}
        if speed is not None:
            config["speed"] = speed
        service.say(text, config)
        _run_frames(service, screen, scale)
    finally:
        pygame.quit()
