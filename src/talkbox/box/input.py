from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Mapping

import pygame

from talkbox.utilities.logging import get_logger

logger = get_logger(__name__)


class InputEvent(StrEnum):
    CONFIRM_PRESSED = "confirm_pressed"
    CONFIRM_RELEASED = "confirm_released"
    SECONDARY_PRESSED = "secondary_pressed"
    SECONDARY_RELEASED = "secondary_released"


InputHandler = Callable[[], None]
InputHandlers = Mapping[InputEvent, InputHandler]


@dataclass(frozen=True, slots=True)
class _HandlerFrame:
    handlers: InputHandlers
    masks_previous: bool


class InputHandlerStack:
    """Stack of named handler sets; the most recently pushed set sees input first."""

    def __init__(self) -> None:
        self._frames: list[_HandlerFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def push(self, handlers: InputHandlers, masks_previous: bool = False) -> None:
        self._frames.append(_HandlerFrame(dict(handlers), masks_previous))

    def pop(self) -> InputHandlers | None:
        if not self._frames:
            logger.warning("Popped an empty input handler stack")
            return None
        return self._frames.pop().handlers

    def dispatch(self, event: InputEvent) -> bool:
        """Run the handler for ``event``; return whether any handler ran."""

        for frame in reversed(self._frames):
            handler = frame.handlers.get(event)
            if handler is not None:
                handler()
                return True
            if frame.masks_previous:
                break
        return False


@dataclass(slots=True)
class KeyBindings:
    """Map pygame keyboard and joystick events onto dialogue input events."""

    confirm_keys: frozenset[int] = field(
        default_factory=lambda: frozenset({pygame.K_z, pygame.K_RETURN, pygame.K_SPACE})
    )
    secondary_keys: frozenset[int] = field(
        default_factory=lambda: frozenset({pygame.K_x, pygame.K_BACKSPACE})
    )
    confirm_buttons: frozenset[int] = frozenset({0})
    secondary_buttons: frozenset[int] = frozenset({1})

    def translate(self, event: pygame.event.Event) -> InputEvent | None:
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            pressed = event.type == pygame.KEYDOWN
            code = event.key
            confirm, secondary = self.confirm_keys, self.secondary_keys
        elif event.type in (pygame.JOYBUTTONDOWN, pygame.JOYBUTTONUP):
            pressed = event.type == pygame.JOYBUTTONDOWN
            code = event.button
            confirm, secondary = self.confirm_buttons, self.secondary_buttons
        else:
            return None

        if code in confirm:
            return InputEvent.CONFIRM_PRESSED if pressed else InputEvent.CONFIRM_RELEASED
        if code in secondary:
            return (
                InputEvent.SECONDARY_PRESSED if pressed else InputEvent.SECONDARY_RELEASED
            )
        return None
