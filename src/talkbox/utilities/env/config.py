from talkbox.utilities.env.assets import AssetsConfiguration
from talkbox.utilities.env.dialogue import DialogueConfiguration
from talkbox.utilities.env.display import DisplayConfiguration


class Configuration(
    DialogueConfiguration,
    DisplayConfiguration,
    AssetsConfiguration,
):
    """Aggregate environment configuration helpers."""
