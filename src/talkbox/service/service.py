from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import pygame

from talkbox.box.dialogue_box import DialogueBox
from talkbox.box.hooks import LifecycleHook
from talkbox.box.input import InputEvent, InputHandlerStack
from talkbox.errors import UnknownOptionError
from talkbox.service.options import OptionAccessor, build_option_table
from talkbox.utilities.env import Configuration, UnknownOptionStrategy
from talkbox.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BOX_WIDTH = 390
DEFAULT_BOX_HEIGHT = 48
DEFAULT_BOX_PADDING = 8
DEFAULT_BOX_X = 5
DEFAULT_BOX_Y = 186


@dataclass(frozen=True, slots=True)
class OverrideFrame:
    """Options changed by one ``say`` call and how to put them back.

    ``prior_values`` holds the values to restore; ``clear_keys`` names the
    options that had no value before and are reset to ``None``.
    """

    applied_keys: tuple[str, ...] = ()
    prior_values: Mapping[str, Any] = field(default_factory=dict)
    clear_keys: tuple[str, ...] = ()


class DialogueService:
    """One shared dialogue box plus temporary per-``say`` option overrides."""

    def __init__(
        self,
        box: DialogueBox | None = None,
        *,
        x: int = DEFAULT_BOX_X,
        y: int = DEFAULT_BOX_Y,
        input_stack: InputHandlerStack | None = None,
        unknown_option_strategy: UnknownOptionStrategy | None = None,
    ) -> None:
        self.input_stack = input_stack or InputHandlerStack()
        self.box = box or DialogueBox(
            None, DEFAULT_BOX_WIDTH, DEFAULT_BOX_HEIGHT, DEFAULT_BOX_PADDING
        )
        self.box.input_stack = self.input_stack
        self.x = x
        self.y = y
        self.unknown_option_strategy = (
            unknown_option_strategy or Configuration.unknown_option_strategy()
        )
        # The box reports closing to us; the user's callback runs after restore.
        self.on_close: LifecycleHook | None = self.box.hooks.on_close
        self.box.hooks.on_close = self._handle_close
        self._overrides: list[OverrideFrame] = []
        self._options: dict[str, OptionAccessor] = build_option_table(self)

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    @property
    def overrides(self) -> tuple[OverrideFrame, ...]:
        return tuple(self._overrides)

    def _accessor(self, key: str) -> OptionAccessor | None:
        accessor = self._options.get(key)
        if accessor is not None:
            return accessor
        if self.unknown_option_strategy == UnknownOptionStrategy.RAISE:
            raise UnknownOptionError(key)
        logger.warning("Ignoring unknown dialogue option '%s'", key)
        return None

    def get(self, key: str) -> Any:
        accessor = self._accessor(key)
        return None if accessor is None else accessor.get()

    def set(self, key: str, value: Any) -> Any:
        """Apply ``value`` to option ``key`` and return the value it replaced."""

        accessor = self._accessor(key)
        if accessor is None:
            return None
        prior = accessor.get()
        accessor.set(value)
        return prior

    def setup(self, config: Mapping[str, Any]) -> OverrideFrame:
        applied: list[str] = []
        prior_values: dict[str, Any] = {}
        clear_keys: list[str] = []
        for key, value in config.items():
            if self._accessor(key) is None:
                continue
            prior = self.set(key, value)
            applied.append(key)
            if prior is None:
                clear_keys.append(key)
            else:
                prior_values[key] = prior
        return OverrideFrame(
            applied_keys=tuple(applied),
            prior_values=prior_values,
            clear_keys=tuple(clear_keys),
        )

    def restore(self, frame: OverrideFrame) -> None:
        for key, value in frame.prior_values.items():
            self._options[key].set(value)
        for key in frame.clear_keys:
            self._options[key].set(None)

    def say(self, text: str, config: Mapping[str, Any] | None = None) -> DialogueBox:
        """Show ``text`` in the shared box, with ``config`` overrides until it closes."""

        if self.box.enabled:
            logger.info("say() called while a dialogue is open; replacing it")
        if config:
            self._overrides.append(self.setup(config))
        self.box.set_text(text)
        self.box.enable()
        return self.box

    def _handle_close(self, box: DialogueBox) -> None:
        callback = self.on_close
        while self._overrides:
            frame = self._overrides.pop()
            logger.debug("Restoring dialogue options %s", ", ".join(frame.applied_keys))
            self.restore(frame)
        if callback is not None:
            callback(box)

    def handle_input(self, event: InputEvent) -> bool:
        return self.input_stack.dispatch(event)

    def update(self, surface: pygame.Surface) -> None:
        if not self.box.enabled:
            return
        self.box.update()
        self.box.draw(surface, self.x, self.y)
