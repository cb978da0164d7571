from talkbox.reveal.engine import RevealCursor as RevealCursor
from talkbox.reveal.engine import RevealEngine as RevealEngine
from talkbox.reveal.engine import RevealEvent as RevealEvent
