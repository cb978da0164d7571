from talkbox.box import DialogueBox as DialogueBox
from talkbox.box import DialogueBoxHooks as DialogueBoxHooks
from talkbox.box import DialogueEvent as DialogueEvent
from talkbox.box import InputEvent as InputEvent
from talkbox.box import InputHandlerStack as InputHandlerStack
from talkbox.layout import Page as Page
from talkbox.layout import paginate as paginate
from talkbox.layout import process as process
from talkbox.layout import wrap as wrap
from talkbox.service import DialogueService as DialogueService
from talkbox.service import say as say
