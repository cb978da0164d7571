from talkbox.box.dialogue_box import DialogueBox as DialogueBox
from talkbox.box.dialogue_box import DialogueEvent as DialogueEvent
from talkbox.box.hooks import DialogueBoxHooks as DialogueBoxHooks
from talkbox.box.input import InputEvent as InputEvent
from talkbox.box.input import InputHandlerStack as InputHandlerStack
from talkbox.box.input import KeyBindings as KeyBindings
