from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import pygame

if TYPE_CHECKING:
    from talkbox.box.dialogue_box import DialogueBox

DrawBackground = Callable[["DialogueBox", pygame.Surface, int, int], None]
DrawText = Callable[["DialogueBox", pygame.Surface, int, int, str], None]
DrawPrompt = Callable[["DialogueBox", pygame.Surface, int, int], None]
LifecycleHook = Callable[["DialogueBox"], None]


@dataclass(slots=True)
class DialogueBoxHooks:
    """Optional drawing and lifecycle overrides for a ``DialogueBox``.

    Drawing hooks left as ``None`` fall back to the built-in pygame drawing;
    lifecycle hooks left as ``None`` do nothing.
    """

    draw_background: DrawBackground | None = None
    draw_text: DrawText | None = None
    draw_prompt: DrawPrompt | None = None
    on_open: LifecycleHook | None = None
    on_page_complete: LifecycleHook | None = None
    on_dialogue_complete: LifecycleHook | None = None
    on_close: LifecycleHook | None = None
