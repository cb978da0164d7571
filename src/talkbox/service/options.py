from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from talkbox.service.service import DialogueService


@dataclass(frozen=True, slots=True)
class OptionAccessor:
    get: Callable[[], Any]
    set: Callable[[Any], None]


def _hook_accessor(service: DialogueService, name: str) -> OptionAccessor:
    return OptionAccessor(
        get=lambda: getattr(service.box.hooks, name),
        set=lambda value: setattr(service.box.hooks, name, value),
    )


def _set_x(service: DialogueService, value: int) -> None:
    service.x = value


def _set_y(service: DialogueService, value: int) -> None:
    service.y = value


def _set_on_close(service: DialogueService, value: Any) -> None:
    service.on_close = value


def build_option_table(service: DialogueService) -> dict[str, OptionAccessor]:
    """Return the ``name -> accessor`` table that ``DialogueService.set`` works through.

    ``on_close`` belongs to the service rather than the box: the service has to
    restore overridden options before the user's callback runs.
    """

    box = service.box
    return {
        "width": OptionAccessor(get=lambda: box.width, set=box.set_width),
        "height": OptionAccessor(get=lambda: box.height, set=box.set_height),
        "x": OptionAccessor(get=lambda: service.x, set=lambda v: _set_x(service, v)),
        "y": OptionAccessor(get=lambda: service.y, set=lambda v: _set_y(service, v)),
        "padding": OptionAccessor(get=lambda: box.padding, set=box.set_padding),
        "font": OptionAccessor(get=lambda: box.font, set=box.set_font),
        "font_family": OptionAccessor(
            get=lambda: box.font_family, set=box.set_font_family
        ),
        "skin": OptionAccessor(get=lambda: box.skin, set=box.set_skin),
        "speed": OptionAccessor(get=lambda: box.default_speed, set=box.set_speed),
        "draw_background": _hook_accessor(service, "draw_background"),
        "draw_text": _hook_accessor(service, "draw_text"),
        "draw_prompt": _hook_accessor(service, "draw_prompt"),
        "on_open": _hook_accessor(service, "on_open"),
        "on_page_complete": _hook_accessor(service, "on_page_complete"),
        "on_dialogue_complete": _hook_accessor(service, "on_dialogue_complete"),
        "on_close": OptionAccessor(
            get=lambda: service.on_close, set=lambda v: _set_on_close(service, v)
        ),
    }
